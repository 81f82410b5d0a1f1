"""Utility modules for the user records backend."""

from .datetime_utils import ensure_utc

__all__ = [
    "ensure_utc",
]
