"""
Weekly availability engine.

Expands recurring schedule blocks, merges them with external busy events and
produces day-by-day availability timelines.
"""

from availability.core.availability_calculator import (
    AvailabilityCalculator,
    compute_availability,
    compute_availability_range,
)
from availability.models import (
    AvailabilityConfig,
    ExternalEvent,
    Interval,
    IntervalKind,
    ScheduleBlockDef,
)

__all__ = [
    "AvailabilityCalculator",
    "compute_availability",
    "compute_availability_range",
    "AvailabilityConfig",
    "ExternalEvent",
    "Interval",
    "IntervalKind",
    "ScheduleBlockDef",
]
