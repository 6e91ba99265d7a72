"""Shared cross-layer types and exceptions."""

from tripguide.shared.exceptions import ToolError

__all__ = ["ToolError"]
