"""Infrastructure helpers."""

from tripguide.infrastructure.logging import StructuredLogger, new_trace_id

__all__ = ["StructuredLogger", "new_trace_id"]
