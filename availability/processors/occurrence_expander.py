# File: availability/processors/occurrence_expander.py
"""
Occurrence expansion module.
Turns weekly-recurring schedule blocks into concrete dated intervals.
"""

import datetime
from typing import Iterable, List, Optional

from availability.models import Interval, IntervalKind, ScheduleBlockDef, parse_hhmm
from availability.models.common import wall_clock
from availability.utils.logger import setup_logger

logger = setup_logger(__name__)


def js_weekday(day: datetime.date) -> int:
    """Weekday numbered 0=Sunday .. 6=Saturday."""
    return (day.weekday() + 1) % 7


def iter_days(range_start: datetime.date, range_end: datetime.date):
    """Yield every calendar day in [range_start, range_end] inclusive."""
    current = range_start
    while current <= range_end:
        yield current
        current += datetime.timedelta(days=1)


def occurrence_id(block: ScheduleBlockDef, day: datetime.date) -> str:
    """Deterministic id of a block's occurrence on a given day."""
    return f"{block.id}-{day.strftime('%Y-%m-%d')}"


def expand_occurrence(block: ScheduleBlockDef, day: datetime.date, tz=None) -> Optional[Interval]:
    """
    Build the single occurrence of a block starting on `day`.

    Returns None (and logs) when the block's times do not parse.
    """
    start_hhmm = parse_hhmm(block.start_time)
    end_hhmm = parse_hhmm(block.end_time)

    if start_hhmm is None or end_hhmm is None:
        logger.warning(
            f"Skipping occurrence of block '{block.id}' on {day}: "
            f"invalid time range '{block.start_time}'-'{block.end_time}'"
        )
        return None

    occ_start = wall_clock(day, start_hhmm, tz)

    # Overnight: equal times mean a full 24h span, not an empty one
    end_day = day
    if end_hhmm <= start_hhmm:
        end_day = day + datetime.timedelta(days=1)
    occ_end = wall_clock(end_day, end_hhmm, tz)

    if tz is not None:
        # Wall-clock times inside a DST gap shift forward by the gap length
        occ_start = tz.normalize(occ_start)
        occ_end = tz.normalize(occ_end)

    padded_start = occ_start - datetime.timedelta(minutes=block.buffer_before_minutes)
    padded_end = occ_end + datetime.timedelta(minutes=block.buffer_after_minutes)
    if tz is not None:
        padded_start = tz.normalize(padded_start)
        padded_end = tz.normalize(padded_end)

    if padded_end <= padded_start:
        logger.warning(
            f"Skipping occurrence of block '{block.id}' on {day}: "
            f"'{block.start_time}'-'{block.end_time}' is empty in {tz}"
        )
        return None

    return Interval(
        start=padded_start,
        end=padded_end,
        kind=IntervalKind.SCHEDULED,
        label=block.title,
        priority=block.priority.value,
        color=block.color,
        source_id=occurrence_id(block, day),
    )


def expand_block(
    block: ScheduleBlockDef,
    range_start: datetime.date,
    range_end: datetime.date,
    tz=None
) -> List[Interval]:
    """
    Expand one schedule block over an inclusive date range.

    Args:
        block: Recurring block definition
        range_start: First calendar day considered
        range_end: Last calendar day considered (inclusive)
        tz: Optional pytz timezone used to localize wall-clock times

    Returns:
        One scheduled Interval per matching day, in day order
    """
    if not block.is_active:
        logger.debug(f"Skipping inactive block: {block.title}")
        return []

    invalid_days = [d for d in block.days_of_week if not 0 <= d <= 6]
    if invalid_days:
        logger.warning(f"Block '{block.id}' has weekdays outside 0-6, ignoring: {sorted(invalid_days)}")

    occurrences: List[Interval] = []
    for day in iter_days(range_start, range_end):
        if js_weekday(day) not in block.days_of_week:
            continue
        occurrence = expand_occurrence(block, day, tz)
        if occurrence is not None:
            occurrences.append(occurrence)

    return occurrences


def expand_blocks(
    blocks: Iterable[ScheduleBlockDef],
    range_start: datetime.date,
    range_end: datetime.date,
    tz=None
) -> List[Interval]:
    """Expand many blocks; results are concatenated in input order."""
    intervals: List[Interval] = []
    for block in blocks:
        intervals.extend(expand_block(block, range_start, range_end, tz))
    logger.debug(f"Expanded {len(intervals)} occurrences between {range_start} and {range_end}")
    return intervals
