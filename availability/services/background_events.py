# File: availability/services/background_events.py
"""
Maps timeline intervals to calendar "background" display events.

The output carries colour and label only; rendering is left to the UI.
"""

from dataclasses import dataclass, field, asdict, replace
from typing import Any, Dict, List, Optional

from availability.models import BackgroundEventConfig, Interval, IntervalKind
from availability.processors.schedule_processor import darken_color, is_valid_color

DEFAULT_BACKGROUND_EVENT_CONFIG = BackgroundEventConfig()


@dataclass
class BackgroundEvent:
    """A calendar entry drawn behind regular events."""
    id: str
    title: str
    start: str
    end: str
    background_color: str
    class_name: str
    border_color: Optional[str] = None
    all_day: bool = False
    display: str = "background"
    extended_props: Dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> Optional[str]:
        return self.extended_props.get('availability_type')

    def to_dict(self) -> dict:
        return asdict(self)


def get_background_event_title(interval: Interval) -> str:
    if interval.kind == IntervalKind.AVAILABLE:
        return 'Available'
    if interval.kind == IntervalKind.BUSY:
        return 'Busy'
    return interval.label or 'Schedule Block'


def get_background_event_color(interval: Interval, config: BackgroundEventConfig) -> str:
    if interval.kind == IntervalKind.AVAILABLE:
        return config.available_color
    if interval.kind == IntervalKind.BUSY:
        return config.busy_color
    return interval.color or config.scheduled_color


def get_background_event_border_color(interval: Interval, config: BackgroundEventConfig) -> Optional[str]:
    """Scheduled blocks get a darker outline of their own colour."""
    if interval.kind == IntervalKind.SCHEDULED:
        color = interval.color or config.scheduled_color
        if is_valid_color(color):
            return darken_color(color)
    return config.border_color


def get_background_event_class_name(interval: Interval) -> str:
    return f"availability-{interval.kind.value}"


def to_background_events(
    timeline: List[Interval],
    config: BackgroundEventConfig = DEFAULT_BACKGROUND_EVENT_CONFIG
) -> List[BackgroundEvent]:
    """Transform timeline intervals into background display events."""
    events: List[BackgroundEvent] = []
    for interval in timeline:
        start = interval.start.isoformat()
        events.append(BackgroundEvent(
            id=f"availability-{start}",
            title=get_background_event_title(interval),
            start=start,
            end=interval.end.isoformat(),
            background_color=get_background_event_color(interval, config),
            border_color=get_background_event_border_color(interval, config),
            class_name=get_background_event_class_name(interval),
            extended_props={
                'availability_type': interval.kind.value,
                'priority': interval.priority,
                'is_availability_event': True,
                'original_title': interval.label,
            },
        ))
    return events


def filter_background_events_by_kind(events: List[BackgroundEvent], kind) -> List[BackgroundEvent]:
    if isinstance(kind, IntervalKind):
        kind = kind.value
    return [e for e in events if e.kind == kind]


def background_event_stats(events: List[BackgroundEvent]) -> Dict[str, int]:
    return {
        'total_events': len(events),
        'available_events': len(filter_background_events_by_kind(events, IntervalKind.AVAILABLE)),
        'busy_events': len(filter_background_events_by_kind(events, IntervalKind.BUSY)),
        'scheduled_events': len(filter_background_events_by_kind(events, IntervalKind.SCHEDULED)),
    }


def create_background_config(**overrides) -> BackgroundEventConfig:
    """Default styling with selected fields replaced."""
    return replace(DEFAULT_BACKGROUND_EVENT_CONFIG, **overrides)


def validate_background_config(config: BackgroundEventConfig) -> List[str]:
    """Return a list of problems with a styling config (empty when valid)."""
    errors: List[str] = []

    if not is_valid_color(config.available_color):
        errors.append('Invalid available color')
    if not is_valid_color(config.busy_color):
        errors.append('Invalid busy color')
    if not is_valid_color(config.scheduled_color):
        errors.append('Invalid schedule block color')
    if config.opacity < 0 or config.opacity > 1:
        errors.append('Opacity must be between 0 and 1')
    if config.border_width is not None and config.border_width < 0:
        errors.append('Border width must be non-negative')

    return errors
