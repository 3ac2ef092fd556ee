"""Utility functions and helpers."""

from .date_utils import format_timestamp, from_timestamp

__all__ = [
    "format_timestamp",
    "from_timestamp",
]
