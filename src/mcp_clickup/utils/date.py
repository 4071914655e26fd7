"""Utility functions for date operations."""

import logging
from datetime import datetime, timezone

import dateutil.parser

logger = logging.getLogger("mcp-clickup")


def parse_date(date_str: str | int | None) -> datetime | None:
    """
    Parse a ClickUp date value to a datetime object.

    ClickUp sends most timestamps as epoch milliseconds, either as a number or
    as a string of digits. Anything else is handed to `dateutil.parser`.

    Args:
        date_str: Date value

    Returns:
        Parsed datetime or None if date_str is None / empty string
    """
    if date_str is None or date_str == "":
        return None
    if isinstance(date_str, bool):
        return None
    if isinstance(date_str, int | float):
        return datetime.fromtimestamp(date_str / 1000, tz=timezone.utc)
    if date_str.isdigit():
        return datetime.fromtimestamp(int(date_str) / 1000, tz=timezone.utc)
    return dateutil.parser.parse(date_str)
