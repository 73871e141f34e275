# File: availability/models/schedule.py

import json
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional, Union

from .enums import ScheduleBlockType, SchedulePriority
from .common import DEFAULT_BLOCK_COLOR, parse_hhmm

DAY_NAMES = ['Sun', 'Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat']

@dataclass
class ScheduleBlockDef:
    """Represents a recurring weekly commitment (work, sleep, gym...)."""
    id: str
    title: str
    start_time: str  # "HH:MM" format
    end_time: str    # "HH:MM" format
    days_of_week: FrozenSet[int] = field(default_factory=frozenset)  # 0=Sunday
    kind: ScheduleBlockType = ScheduleBlockType.OTHER
    priority: SchedulePriority = SchedulePriority.MEDIUM
    is_active: bool = True
    color: str = DEFAULT_BLOCK_COLOR
    buffer_before_minutes: int = 0
    buffer_after_minutes: int = 0
    description: Optional[str] = None

    def __post_init__(self):
        """Convert loose values to their typed form."""
        if isinstance(self.kind, str):
            self.kind = ScheduleBlockType(self.kind)
        if isinstance(self.priority, str):
            self.priority = SchedulePriority(self.priority)
        if not isinstance(self.days_of_week, frozenset):
            self.days_of_week = frozenset(int(d) for d in self.days_of_week)

        if self.buffer_before_minutes < 0 or self.buffer_after_minutes < 0:
            raise ValueError(f"Buffer minutes cannot be negative: {self.title}")

    @property
    def is_overnight(self) -> bool:
        """True when the block ends on the following calendar day."""
        start = parse_hhmm(self.start_time)
        end = parse_hhmm(self.end_time)
        if start is None or end is None:
            return False
        return end <= start

    def occurs_on(self, weekday: int) -> bool:
        """Check the block's start falls on a weekday (0=Sunday)."""
        return self.is_active and weekday in self.days_of_week

    def days_label(self) -> str:
        """Human readable weekday list, e.g. 'Mon, Wed, Fri'."""
        return ', '.join(DAY_NAMES[d] for d in sorted(self.days_of_week) if 0 <= d <= 6)

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'title': self.title,
            'kind': self.kind.value,
            'startTime': self.start_time,
            'endTime': self.end_time,
            'daysOfWeek': sorted(self.days_of_week),
            'isActive': self.is_active,
            'priority': self.priority.value,
            'color': self.color,
            'bufferBefore': self.buffer_before_minutes,
            'bufferAfter': self.buffer_after_minutes,
            'description': self.description,
        }


def _pick(data: dict, *keys, default=None):
    """Return the first key present in data (records arrive camelCase or snake_case)."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def parse_days_of_week(raw: Union[str, Iterable[int], None]) -> FrozenSet[int]:
    """Decode a weekday set stored as a JSON string or a plain list."""
    if raw is None:
        return frozenset()
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError:
            return frozenset()
    try:
        return frozenset(int(d) for d in raw)
    except (TypeError, ValueError):
        return frozenset()


def _parse_minutes(raw) -> int:
    """Buffer length in whole minutes; unusable or negative values count as 0."""
    try:
        return max(0, int(raw))
    except (TypeError, ValueError, OverflowError):
        return 0


def _parse_bool(raw) -> bool:
    if isinstance(raw, bool):
        return raw
    return str(raw).strip().lower() in ['yes', 'true', '1', 'active', 'on', 'y', 't']


def schedule_block_from_dict(data: dict) -> ScheduleBlockDef:
    """Create ScheduleBlockDef from a stored record with lenient enum/boolean parsing."""
    raw_kind = _pick(data, 'kind', 'type', default='other')
    try:
        kind = ScheduleBlockType(raw_kind)
    except ValueError:
        kind = ScheduleBlockType.OTHER

    raw_priority = _pick(data, 'priority', default='medium')
    try:
        priority = SchedulePriority(raw_priority)
    except ValueError:
        priority = SchedulePriority.MEDIUM

    return ScheduleBlockDef(
        id=str(_pick(data, 'id', default='')),
        title=str(_pick(data, 'title', default='Untitled Block')),
        start_time=str(_pick(data, 'startTime', 'start_time', default='')),
        end_time=str(_pick(data, 'endTime', 'end_time', default='')),
        days_of_week=parse_days_of_week(_pick(data, 'daysOfWeek', 'days_of_week')),
        kind=kind,
        priority=priority,
        is_active=_parse_bool(_pick(data, 'isActive', 'is_active', default=True)),
        color=str(_pick(data, 'color', default=DEFAULT_BLOCK_COLOR)),
        buffer_before_minutes=_parse_minutes(_pick(data, 'bufferBefore', 'buffer_before_minutes', default=0)),
        buffer_after_minutes=_parse_minutes(_pick(data, 'bufferAfter', 'buffer_after_minutes', default=0)),
        description=_pick(data, 'description'),
    )
