# File: tests/helpers.py
"""Small builders shared by the test modules."""

from datetime import datetime

from availability.models import Interval, IntervalKind


def at(hour: int, minute: int = 0, day: int = 15) -> datetime:
    """Naive datetime in January 2024 (the 15th is a Monday)."""
    return datetime(2024, 1, day, hour, minute)


def make_interval(start, end, kind="available", label=None, **kwargs) -> Interval:
    return Interval(start=start, end=end, kind=IntervalKind(kind), label=label, **kwargs)


def assert_covers_window(timeline, window_start, window_end):
    """No gaps: every entry starts at or before the furthest end seen so far."""
    assert timeline, "timeline is empty"
    assert timeline[0].start == window_start
    reached = timeline[0].end
    for interval in timeline[1:]:
        assert interval.start <= reached, f"gap before {interval}"
        reached = max(reached, interval.end)
    assert reached == window_end


def assert_available_is_exclusive(timeline):
    """Available entries never overlap or abut another available entry."""
    for i, interval in enumerate(timeline):
        if interval.kind != IntervalKind.AVAILABLE:
            continue
        for other in timeline[:i] + timeline[i + 1:]:
            assert not interval.overlaps_with(other), f"{interval} overlaps {other}"
        if i + 1 < len(timeline):
            assert timeline[i + 1].kind != IntervalKind.AVAILABLE
