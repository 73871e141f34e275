# File: availability/processors/interval_coalescer.py
"""
Coalesces contiguous same-kind intervals of a timeline.
"""

import datetime
from dataclasses import replace
from typing import Iterable, List, Optional

from availability.core.config_manager import Config
from availability.models import Interval, IntervalKind

MERGE_TOLERANCE = datetime.timedelta(seconds=Config.MERGE_TOLERANCE_SECONDS)


def is_contiguous(a: Interval, b: Interval, tolerance: datetime.timedelta = MERGE_TOLERANCE) -> bool:
    """b starts where a ends, give or take the tolerance."""
    return abs(b.start - a.end) <= tolerance


def merge_intervals(a: Interval, b: Interval) -> Optional[Interval]:
    """
    Decide whether b can be folded into a.

    Returns the merged interval spanning [a.start, b.end], or None when the
    two must stay separate. Scheduled intervals with two different titles
    merge under a combined "A + B" label.
    """
    if a.kind != b.kind:
        return None
    if not is_contiguous(a, b):
        return None

    label = a.label or b.label
    if a.kind == IntervalKind.SCHEDULED and a.label and b.label and a.label != b.label:
        label = f"{a.label} + {b.label}"

    return replace(
        a,
        end=b.end,
        label=label,
        priority=a.priority or b.priority,
        color=a.color or b.color,
    )


def coalesce(timeline: Iterable[Interval]) -> List[Interval]:
    """
    Merge adjacent mergeable intervals, scanning left to right.

    Idempotent: coalesce(coalesce(x)) == coalesce(x).
    """
    merged: List[Interval] = []
    current: Optional[Interval] = None

    for interval in timeline:
        if current is None:
            current = interval
            continue

        combined = merge_intervals(current, interval)
        if combined is not None:
            current = combined
        else:
            merged.append(current)
            current = interval

    if current is not None:
        merged.append(current)

    return merged
