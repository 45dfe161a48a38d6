"""Database access for Day Tally."""

from .connection import DatabaseManager

__all__ = ["DatabaseManager"]
