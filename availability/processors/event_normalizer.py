# File: availability/processors/event_normalizer.py
"""
Converts external busy events into timeline intervals.
"""

import datetime
from typing import Iterable, List

from availability.models import ExternalEvent, Interval, IntervalKind, coerce_datetime
from availability.utils.logger import setup_logger

logger = setup_logger(__name__)


def normalize_events(
    events: Iterable[ExternalEvent],
    window_start: datetime.datetime,
    window_end: datetime.datetime,
    include_lookback: bool = True,
    tz=None
) -> List[Interval]:
    """
    Filter external events to a window and convert them to busy intervals.

    All-day events are ignored. With include_lookback the search starts one
    day earlier so events running overnight into the window are kept.
    Events without a start are dropped; events without an end become
    zero-width intervals (the timeline builder ignores those).
    """
    if tz is None:
        tz = window_start.tzinfo
    search_start = window_start - datetime.timedelta(days=1) if include_lookback else window_start

    busy: List[Interval] = []
    dropped = 0

    for event in events:
        if event.is_all_day:
            continue

        if event.start is None:
            dropped += 1
            logger.debug(f"Dropping event without start: {event.title}")
            continue

        start = coerce_datetime(event.start, tz)
        end = coerce_datetime(event.effective_end, tz)

        if end < start:
            dropped += 1
            logger.debug(f"Dropping event ending before it starts: {event.title}")
            continue

        if not (start < window_end and end > search_start):
            continue

        busy.append(Interval(
            start=start,
            end=end,
            kind=IntervalKind.BUSY,
            label=event.title,
            source_id=event.id or None,
        ))

    if dropped:
        logger.warning(f"Dropped {dropped} malformed external events")

    return busy
