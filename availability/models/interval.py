# File: availability/models/interval.py

from dataclasses import dataclass, replace
from datetime import datetime
from typing import List, Optional

from .enums import IntervalKind
from .common import parse_iso_datetime

@dataclass(frozen=True)
class Interval:
    """
    Half-open time interval [start, end) tagged with a kind.

    Instances are immutable; clipping and merging return new intervals.
    """
    start: datetime
    end: datetime
    kind: IntervalKind

    # Optional metadata (busy / scheduled only)
    label: Optional[str] = None
    priority: Optional[str] = None
    color: Optional[str] = None
    source_id: Optional[str] = None

    def __post_init__(self):
        """Validate interval data."""
        if isinstance(self.kind, str):
            object.__setattr__(self, 'kind', IntervalKind(self.kind))
        # Zero width is tolerated for freshly normalized events; the timeline drops them
        if self.end < self.start:
            raise ValueError(
                f"Interval end must not be before start: {self.label or self.kind.value}"
            )

    @property
    def is_empty(self) -> bool:
        return self.end <= self.start

    def duration_minutes(self) -> int:
        """Calculate interval duration in whole minutes."""
        return int((self.end - self.start).total_seconds() // 60)

    def overlaps_with(self, other: 'Interval') -> bool:
        """Check if this interval overlaps with another."""
        return self.start < other.end and self.end > other.start

    def clip(self, window_start: datetime, window_end: datetime) -> Optional['Interval']:
        """Restrict the interval to a window. Returns None when nothing is left."""
        start = max(self.start, window_start)
        end = min(self.end, window_end)
        if end <= start:
            return None
        if start == self.start and end == self.end:
            return self
        return replace(self, start=start, end=end)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        data = {
            'start': self.start.isoformat(),
            'end': self.end.isoformat(),
            'kind': self.kind.value,
        }
        for key in ('label', 'priority', 'color', 'source_id'):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data


# A timeline is simply an ordered list of intervals
Timeline = List[Interval]


def interval_from_dict(data: dict) -> Interval:
    """Create Interval from dictionary."""
    start = data['start']
    end = data['end']
    return Interval(
        start=parse_iso_datetime(start) if isinstance(start, str) else start,
        end=parse_iso_datetime(end) if isinstance(end, str) else end,
        kind=IntervalKind(data.get('kind', 'available')),
        label=data.get('label'),
        priority=data.get('priority'),
        color=data.get('color'),
        source_id=data.get('source_id'),
    )
