"""
DateTime utilities shared by validation and the MongoDB repository.

MongoDB stores dates as UTC instants and PyMongo/Motor return them as naive
datetimes representing UTC, so everything here normalizes to timezone-aware
UTC.
"""
from datetime import datetime, timezone as dt_timezone
from typing import Optional


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC (this matches MongoDB/PyMongo behavior)
    - If dt is aware -> convert to UTC

    Raises:
        OverflowError: If the aware value falls outside the datetime range once in UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)
