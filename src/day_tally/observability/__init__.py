"""Logging and metrics for Day Tally."""
