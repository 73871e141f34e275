# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable schedule blocks, events and days for all tests.
"""

import pytest
from datetime import date, datetime
from pathlib import Path
import sys

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))
sys.path.insert(0, str(Path(__file__).parent))

from availability.models import (
    ScheduleBlockDef, ScheduleBlockType, SchedulePriority,
    ExternalEvent
)
from helpers import at, make_interval


# ==================== Day Fixtures ====================

@pytest.fixture
def monday():
    """2024-01-15 is a Monday."""
    return date(2024, 1, 15)


@pytest.fixture
def wednesday():
    return date(2024, 1, 17)


# ==================== Schedule Block Fixtures ====================

@pytest.fixture
def work_block():
    """Work 09:00-17:00, Monday to Friday, no buffers."""
    return ScheduleBlockDef(
        id="work-1",
        title="Work",
        start_time="09:00",
        end_time="17:00",
        days_of_week={1, 2, 3, 4, 5},
        kind=ScheduleBlockType.WORK,
        priority=SchedulePriority.HIGH,
        color="#3b82f6",
    )


@pytest.fixture
def sleep_block():
    """Sleep 23:00-07:00 every day."""
    return ScheduleBlockDef(
        id="sleep-1",
        title="Sleep",
        start_time="23:00",
        end_time="07:00",
        days_of_week={0, 1, 2, 3, 4, 5, 6},
        kind=ScheduleBlockType.SLEEP,
        priority=SchedulePriority.HIGH,
        color="#6366f1",
    )


@pytest.fixture
def gym_block():
    """Gym 18:00-19:30 Mon/Wed/Fri with travel and shower buffers."""
    return ScheduleBlockDef(
        id="gym-1",
        title="Gym Session",
        start_time="18:00",
        end_time="19:30",
        days_of_week={1, 3, 5},
        kind=ScheduleBlockType.EXERCISE,
        priority=SchedulePriority.MEDIUM,
        color="#ef4444",
        buffer_before_minutes=10,
        buffer_after_minutes=20,
    )


# ==================== External Event Fixtures ====================

@pytest.fixture
def meeting_event():
    """Team meeting 10:00-11:00 on Monday 2024-01-15."""
    return ExternalEvent(
        id="google-event-1",
        title="Meeting",
        start=datetime(2024, 1, 15, 10, 0),
        end=datetime(2024, 1, 15, 11, 0),
    )


@pytest.fixture
def all_day_event():
    return ExternalEvent(
        id="google-event-2",
        title="Holiday",
        start=datetime(2024, 1, 15),
        end=datetime(2024, 1, 16),
        is_all_day=True,
    )


# ==================== Timeline Fixtures ====================

@pytest.fixture
def hourly_timeline():
    """Four one-hour slots: 2 available, 1 busy, 1 scheduled."""
    return [
        make_interval(at(9), at(10), "available"),
        make_interval(at(10), at(11), "busy", "Meeting"),
        make_interval(at(11), at(12), "scheduled", "Work Hours", color="#3b82f6"),
        make_interval(at(12), at(13), "available"),
    ]
