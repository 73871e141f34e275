# File: availability/processors/timeline_builder.py
"""
Timeline building module.
Sweeps sorted busy/scheduled intervals across a window and fills the gaps
with available intervals.
"""

import datetime
from typing import Iterable, List

from availability.models import Interval, IntervalKind
from availability.utils.logger import setup_logger

logger = setup_logger(__name__)


def build_timeline(
    window_start: datetime.datetime,
    window_end: datetime.datetime,
    intervals: Iterable[Interval]
) -> List[Interval]:
    """
    Merge busy and scheduled intervals into a gap-filled timeline.

    Overlapping busy/scheduled intervals are all emitted, in sweep order,
    without priority resolution. Only the cursor keeps available gaps from
    appearing underneath an overlap, so a timeline built here may hold
    overlapping non-available entries (see ScheduleProcessor.detect_conflicts).

    Args:
        window_start: Inclusive start of the window
        window_end: Exclusive end of the window
        intervals: Scheduled occurrences and busy events, any order

    Returns:
        Intervals ascending by start, covering [window_start, window_end)
    """
    if window_end <= window_start:
        return []

    # sorted() is stable: ties keep input order
    ordered = sorted(intervals, key=lambda iv: iv.start)

    timeline: List[Interval] = []
    cursor = window_start
    skipped = 0

    for interval in ordered:
        clipped = interval.clip(window_start, window_end)
        if clipped is None:
            skipped += 1
            continue

        if clipped.start > cursor:
            timeline.append(Interval(start=cursor, end=clipped.start, kind=IntervalKind.AVAILABLE))

        timeline.append(clipped)
        cursor = max(cursor, clipped.end)

    if cursor < window_end:
        timeline.append(Interval(start=cursor, end=window_end, kind=IntervalKind.AVAILABLE))

    logger.debug(
        f"Built timeline of {len(timeline)} intervals "
        f"({skipped} outside window or zero-length)"
    )
    return timeline
