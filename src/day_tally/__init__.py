"""Day Tally: task tracking with a daily statistics chart."""

__version__ = "0.1.0"
