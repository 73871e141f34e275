# File: availability/models/enums.py

from enum import Enum

class ScheduleBlockType(Enum):
    """Categories a recurring schedule block can belong to."""
    WORK = "work"
    SLEEP = "sleep"
    PERSONAL = "personal"  # Personal time, hobbies
    TRAVEL = "travel"      # Commute
    MEAL = "meal"
    EXERCISE = "exercise"
    FAMILY = "family"
    STUDY = "study"
    OTHER = "other"


class SchedulePriority(Enum):
    """Priority of a schedule block."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class IntervalKind(Enum):
    """What a slice of the timeline represents."""
    AVAILABLE = "available"
    BUSY = "busy"            # External calendar event
    SCHEDULED = "scheduled"  # Schedule block occurrence
