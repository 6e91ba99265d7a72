"""Shared (non-domain) exceptions."""


class ToolError(Exception):
    """Data source or collaborator failed."""

    def __init__(self, tool: str, message: str):
        self.tool = tool
        super().__init__(f"[{tool}] {message}")
