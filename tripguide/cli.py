"""tripguide CLI: print a day plan for the Siem Reap catalog."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from tripguide.domain.exceptions import DomainError, InvalidTimeOfDay
from tripguide.parsing.text_fields import format_clock, parse_clock_hhmm
from tripguide.services.contracts import DayPlanRequest
from tripguide.services.itinerary_presenter import render_day_plan_text
from tripguide.services.plan_service import execute_day_plan
from tripguide.shared.exceptions import ToolError


def _clock_minutes(value: str) -> int:
    try:
        return parse_clock_hhmm(value)
    except InvalidTimeOfDay as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        field = ".".join(str(item) for item in err.get("loc", ()))
        parts.append(f"{field}: {err.get('msg', 'invalid value')}")
    return "invalid arguments: " + "; ".join(parts)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tripguide-plan", description="Build a same-day Siem Reap itinerary")
    parser.add_argument("--lat", type=float, default=None, help="start latitude (defaults to town centre)")
    parser.add_argument("--lng", type=float, default=None, help="start longitude (defaults to town centre)")
    parser.add_argument("--time", dest="current_minutes", type=_clock_minutes, default=None, help="24h HH:MM")
    parser.add_argument("--type", dest="location_type", default=None, help="Temple, Nature, Dining, ... or All")
    parser.add_argument("--query", default="", help="free-text search")
    parser.add_argument("--nearby", action="store_true", help="only places within 8 km of the start")
    parser.add_argument("--max-stops", type=int, default=None)
    parser.add_argument("--strict", action="store_true", default=None, help="fail on unparseable catalog text")
    parser.add_argument("--json", action="store_true", help="print the raw plan as JSON")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    try:
        request = DayPlanRequest(
            lat=args.lat,
            lng=args.lng,
            current_minutes=args.current_minutes,
            location_type=args.location_type,
            query=args.query,
            nearby_only=args.nearby,
            max_stops=args.max_stops,
            strict=args.strict,
        )
    except ValidationError as exc:
        print(f"error: {_describe_validation_error(exc)}", file=sys.stderr)
        return 2

    try:
        result = execute_day_plan(request)
    except (DomainError, ToolError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=2))
        return 0

    print(f"Day plan from {format_clock(result.current_minutes)}")
    print("=" * 40)
    print(render_day_plan_text(result.plan))
    return 0


if __name__ == "__main__":
    sys.exit(main())
