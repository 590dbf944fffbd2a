"""Shared utility helpers used across services."""
from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return timezone-aware UTC now. Replaces deprecated datetime.utcnow()."""
    return datetime.now(timezone.utc)
