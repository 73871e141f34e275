# File: availability/services/statistics.py
"""
Read-only views over a computed timeline.
"""

from collections import defaultdict
from typing import Dict, Iterable, List, Union

from availability.models import AvailabilityStats, Interval, IntervalKind


def calculate_stats(timeline: List[Interval]) -> AvailabilityStats:
    """
    Count timeline entries per kind.

    availability_percentage is the share of *entries* that are available,
    rounded to two decimals (0 for an empty timeline).
    """
    total = len(timeline)
    available = sum(1 for iv in timeline if iv.kind == IntervalKind.AVAILABLE)
    busy = sum(1 for iv in timeline if iv.kind == IntervalKind.BUSY)
    scheduled = sum(1 for iv in timeline if iv.kind == IntervalKind.SCHEDULED)
    percentage = round(available / total * 100, 2) if total > 0 else 0

    return AvailabilityStats(
        total=total,
        available=available,
        busy=busy,
        scheduled=scheduled,
        availability_percentage=percentage,
    )


def filter_by_kind(timeline: Iterable[Interval], kind: Union[IntervalKind, str]) -> List[Interval]:
    """Keep only the intervals of one kind."""
    if isinstance(kind, str):
        kind = IntervalKind(kind)
    return [iv for iv in timeline if iv.kind == kind]


def get_available_intervals(timeline: Iterable[Interval]) -> List[Interval]:
    return filter_by_kind(timeline, IntervalKind.AVAILABLE)


def get_busy_intervals(timeline: Iterable[Interval]) -> List[Interval]:
    return filter_by_kind(timeline, IntervalKind.BUSY)


def get_scheduled_intervals(timeline: Iterable[Interval]) -> List[Interval]:
    return filter_by_kind(timeline, IntervalKind.SCHEDULED)


def total_minutes_by_kind(timeline: Iterable[Interval]) -> Dict[str, int]:
    """Sum of interval durations per kind (overlapping entries count twice)."""
    totals: Dict[str, int] = defaultdict(int)
    for kind in IntervalKind:
        totals[kind.value] = 0
    for iv in timeline:
        totals[iv.kind.value] += iv.duration_minutes()
    return dict(totals)
