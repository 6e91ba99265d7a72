"""Siem Reap travel-guide planning service."""

__version__ = "0.1.0"
