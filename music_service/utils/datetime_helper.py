"""Utility functions for datetime operations."""

from datetime import datetime, UTC


def utc_now():
    """Return the current UTC datetime in a timezone-aware format."""
    return datetime.now(UTC)

