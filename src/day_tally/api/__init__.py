"""HTTP API for Day Tally."""
