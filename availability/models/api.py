# File: availability/models/api.py
"""
Result and diagnostic records returned by the availability engine.
"""

from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class AvailabilityStats:
    """Counts of timeline entries per kind."""
    total: int
    available: int
    busy: int
    scheduled: int
    availability_percentage: float

    def to_dict(self) -> dict:
        return {
            'total': self.total,
            'available': self.available,
            'busy': self.busy,
            'scheduled': self.scheduled,
            'availability_percentage': self.availability_percentage,
        }


@dataclass
class ValidationError:
    """Represents a validation error."""
    field: str
    message: str
    entry_index: Optional[int] = None

    def __str__(self) -> str:
        """String representation of error."""
        if self.entry_index is not None:
            return f"Entry {self.entry_index} - {self.field}: {self.message}"
        return f"{self.field}: {self.message}"
