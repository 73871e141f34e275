# File: availability/models/common.py

import re
from datetime import datetime, time
from typing import Optional, Tuple

TIME_PATTERN = re.compile(r"^([0-1]?[0-9]|2[0-3]):([0-5][0-9])$")

# Blue, used for blocks and scheduled intervals without their own colour
DEFAULT_BLOCK_COLOR = "#3b82f6"


def parse_iso_datetime(date_str: Optional[str]) -> Optional[datetime]:
    """Robustly parse ISO date strings with 'Z' or offsets."""
    if not date_str:
        return None
    try:
        # specific fix for Python < 3.11 which doesn't handle 'Z' natively in fromisoformat
        clean_str = date_str.replace('Z', '+00:00')
        return datetime.fromisoformat(clean_str)
    except ValueError:
        # Fallback for simple date strings without time
        try:
            return datetime.strptime(date_str, "%Y-%m-%d")
        except ValueError:
            return None


def parse_hhmm(value: Optional[str]) -> Optional[Tuple[int, int]]:
    """
    Parse a 24h "HH:MM" wall-clock string into (hours, minutes).

    Returns None for anything outside 00:00-23:59.
    """
    if not isinstance(value, str):
        return None
    match = TIME_PATTERN.match(value.strip())
    if not match:
        return None
    return int(match.group(1)), int(match.group(2))


def is_valid_hhmm(value: Optional[str]) -> bool:
    return parse_hhmm(value) is not None


def wall_clock(day, hhmm: Tuple[int, int], tz=None) -> datetime:
    """
    Combine a calendar day and a wall-clock time.

    With a pytz timezone the result is localized (DST-aware); otherwise naive.
    """
    naive = datetime.combine(day, time(hour=hhmm[0], minute=hhmm[1]))
    if tz is None:
        return naive
    return coerce_datetime(naive, tz)


def coerce_datetime(dt: datetime, tz=None) -> datetime:
    """
    Bring a datetime into the reporting timezone of a calculation.

    - tz given, aware input: converted with astimezone
    - tz given, naive input: interpreted as wall-clock time in tz
    - no tz: tzinfo is dropped and the wall-clock value kept
    """
    if tz is None:
        return dt.replace(tzinfo=None) if dt.tzinfo is not None else dt
    if dt.tzinfo is None:
        # pytz zones need localize(); plain tzinfo objects can be attached directly
        if hasattr(tz, 'localize'):
            return tz.localize(dt)
        return dt.replace(tzinfo=tz)
    return dt.astimezone(tz)
