# File: availability/models/config.py
"""
Data models for availability calculation options.
"""

from dataclasses import dataclass, fields
from typing import Optional

from .common import DEFAULT_BLOCK_COLOR

@dataclass
class AvailabilityConfig:
    """Options recognized by the availability entry points."""
    # Consider previous-day occurrences/events that run into the window
    include_overnight_lookback: bool = True
    # Reporting timezone name (e.g. 'Europe/Amsterdam'); None keeps naive datetimes
    timezone: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> 'AvailabilityConfig':
        """Create AvailabilityConfig from dictionary (e.g., loaded from JSON)."""
        return cls(
            include_overnight_lookback=bool(
                data.get('include_overnight_lookback', data.get('includeOvernightLookback', True))
            ),
            timezone=data.get('timezone'),
        )


@dataclass
class BackgroundEventConfig:
    """Styling used when turning a timeline into calendar background events."""
    available_color: str = "#10b981"  # Green
    busy_color: str = "#ef4444"       # Red
    scheduled_color: str = DEFAULT_BLOCK_COLOR
    opacity: float = 0.3
    border_color: Optional[str] = "#ffffff"
    border_width: Optional[int] = 1

    @classmethod
    def from_dict(cls, data: dict) -> 'BackgroundEventConfig':
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})
