# File: availability/models/calendar.py

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .common import parse_iso_datetime

@dataclass
class ExternalEvent:
    """Represents a busy entry coming from an external calendar."""
    id: str
    title: str
    start: Optional[datetime]
    end: Optional[datetime] = None
    is_all_day: bool = False
    description: Optional[str] = None
    location: Optional[str] = None

    @property
    def effective_end(self) -> Optional[datetime]:
        """End time, defaulting to start for events without one."""
        return self.end if self.end is not None else self.start

    def duration_minutes(self) -> int:
        """Calculate event duration in minutes."""
        if self.start is None:
            return 0
        return int((self.effective_end - self.start).total_seconds() / 60)

    def overlaps(self, window_start: datetime, window_end: datetime) -> bool:
        """Check if the event overlaps the half-open window."""
        if self.start is None:
            return False
        return self.start < window_end and self.effective_end > window_start


def external_event_from_dict(data: dict) -> ExternalEvent:
    """Create ExternalEvent from a plain dictionary (ISO timestamps)."""
    start = data.get('start')
    end = data.get('end')
    return ExternalEvent(
        id=str(data.get('id', '')),
        title=str(data.get('title') or 'Untitled Event'),
        start=parse_iso_datetime(start) if isinstance(start, str) else start,
        end=parse_iso_datetime(end) if isinstance(end, str) else end,
        is_all_day=bool(data.get('allDay', data.get('is_all_day', False))),
        description=data.get('description'),
        location=data.get('location'),
    )


def external_event_from_google(item: dict, index: int = 0) -> ExternalEvent:
    """
    Map a Google Calendar API event resource to an ExternalEvent.

    All-day events only carry 'date' on their start; timed ones carry 'dateTime'.
    """
    start_info = item.get('start') or {}
    end_info = item.get('end') or {}

    is_all_day = not start_info.get('dateTime') and bool(start_info.get('date'))
    start_raw = start_info.get('dateTime') or start_info.get('date')
    end_raw = end_info.get('dateTime') or end_info.get('date')

    return ExternalEvent(
        id=item.get('id') or f"event-{index}",
        title=item.get('summary') or 'Untitled Event',
        start=parse_iso_datetime(start_raw),
        end=parse_iso_datetime(end_raw),
        is_all_day=is_all_day,
        description=item.get('description'),
        location=item.get('location'),
    )
