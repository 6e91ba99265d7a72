"""Free-text field parsing."""

from tripguide.parsing.text_fields import (
    format_clock,
    parse_best_time_minutes,
    parse_clock_hhmm,
    parse_duration_minutes,
    round_half_up,
)

__all__ = ["format_clock", "parse_best_time_minutes", "parse_clock_hhmm", "parse_duration_minutes", "round_half_up"]
