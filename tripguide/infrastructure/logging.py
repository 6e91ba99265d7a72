"""Structured logging: one JSON object per line."""

from __future__ import annotations

import json
import sys
import time
import uuid
from typing import Any, Optional


def new_trace_id() -> str:
    return str(uuid.uuid4())[:12]


class StructuredLogger:
    """Writes JSON-line events tagged with a trace id."""

    def __init__(self, trace_id: Optional[str] = None, output=None):
        self.trace_id = trace_id or new_trace_id()
        self._output = output
        self._timers: dict[str, float] = {}

    def _stream(self):
        # Resolved per write so pytest's capsys replacement of stderr is honoured.
        return self._output or sys.stderr

    def _emit(self, data: dict[str, Any]) -> None:
        data["trace_id"] = self.trace_id
        data["timestamp"] = time.time()
        stream = self._stream()
        try:
            stream.write(json.dumps(data, ensure_ascii=False, default=str) + "\n")
            stream.flush()
        except (OSError, ValueError, TypeError) as exc:
            fallback = {
                "event": "logger_internal_error",
                "trace_id": self.trace_id,
                "timestamp": time.time(),
                "error": str(exc),
            }
            try:
                sys.stderr.write(json.dumps(fallback, ensure_ascii=False, default=str) + "\n")
                sys.stderr.flush()
            except (OSError, ValueError):
                return

    def event(self, name: str, **extra: Any) -> None:
        self._emit({"event": name, **extra})

    def step_start(self, step: str, **extra: Any) -> None:
        self._timers[step] = time.time()
        self._emit({"event": "step_start", "step": step, **extra})

    def step_end(self, step: str, **extra: Any) -> None:
        start = self._timers.pop(step, time.time())
        duration_ms = round((time.time() - start) * 1000, 1)
        self._emit({"event": "step_end", "step": step, "duration_ms": duration_ms, **extra})

    def warning(self, step: str, message: str, **extra: Any) -> None:
        self._emit({"event": "warning", "step": step, "message": message, **extra})

    def error(self, step: str, error: str, **extra: Any) -> None:
        self._emit({"event": "error", "step": step, "error": error, **extra})



__all__ = ["StructuredLogger", "new_trace_id"]
