from .enums import ScheduleBlockType, SchedulePriority, IntervalKind
from .common import parse_iso_datetime, parse_hhmm, is_valid_hhmm, coerce_datetime
from .interval import Interval, Timeline, interval_from_dict
from .schedule import ScheduleBlockDef, schedule_block_from_dict, parse_days_of_week
from .calendar import ExternalEvent, external_event_from_dict, external_event_from_google
from .config import AvailabilityConfig, BackgroundEventConfig
from .api import AvailabilityStats, ValidationError

__all__ = [
    "ScheduleBlockType",
    "SchedulePriority",
    "IntervalKind",
    "parse_iso_datetime",
    "parse_hhmm",
    "is_valid_hhmm",
    "coerce_datetime",
    "Interval",
    "Timeline",
    "interval_from_dict",
    "ScheduleBlockDef",
    "schedule_block_from_dict",
    "parse_days_of_week",
    "ExternalEvent",
    "external_event_from_dict",
    "external_event_from_google",
    "AvailabilityConfig",
    "BackgroundEventConfig",
    "AvailabilityStats",
    "ValidationError"
]
