"""Timestamps for the catalogue. Always timezone-aware UTC, like the ordering side."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    return datetime.now(UTC)
