"""
Time utility functions.
"""
from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """Current instant as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Return the value as an aware UTC datetime.
    
    Naive datetimes (e.g. from a query string without an offset) are taken
    to already be in UTC.
    
    Args:
        value: Datetime to normalize, or None
        
    Returns:
        Aware UTC datetime, or None if value was None
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
