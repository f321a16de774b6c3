"""
Date helpers

Log and quest dates are calendar dates with no timezone. "Today" is
resolved in the program's timezone and then treated as a plain date.
"""

import logging
from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "UTC"


def parse_iso_date(value: str) -> date:
    """
    Parse YYYY-MM-DD

    Raises:
        ValueError: not a valid calendar date in that format
    """
    return date.fromisoformat(value)


def local_today(timezone_name: Optional[str] = None) -> date:
    """Today's date in the given IANA timezone (UTC if unknown)"""
    try:
        tz = ZoneInfo(timezone_name or DEFAULT_TIMEZONE)
    except ZoneInfoNotFoundError:
        logger.warning(f"Unknown timezone {timezone_name!r}, using {DEFAULT_TIMEZONE}")
        tz = ZoneInfo(DEFAULT_TIMEZONE)
    return datetime.now(tz).date()
