# File: availability/processors/schedule_processor.py
"""
Schedule processing module.
Handles schedule-block validation and conflict detection using typed models.
"""

import datetime
import re
from typing import Iterable, List, Optional, Tuple

from availability.utils.logger import setup_logger
from availability.models import Interval, IntervalKind, ScheduleBlockDef, ValidationError, is_valid_hhmm

logger = setup_logger(__name__)

HEX_COLOR_PATTERN = re.compile(r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$")


def is_valid_color(color: Optional[str]) -> bool:
    """Check for #RGB / #RRGGBB hex colors."""
    return bool(color) and bool(HEX_COLOR_PATTERN.match(color))


def darken_color(color: str, amount: int = 30) -> str:
    """Darken a #RRGGBB color per channel, used for borders."""
    hex_value = color.lstrip('#')
    if len(hex_value) == 3:
        hex_value = ''.join(c * 2 for c in hex_value)
    channels = [int(hex_value[i:i + 2], 16) for i in (0, 2, 4)]
    return '#' + ''.join(f"{max(0, c - amount):02x}" for c in channels)


def validate_schedule_block(block: ScheduleBlockDef, index: Optional[int] = None) -> List[ValidationError]:
    """
    Check a block definition before it is expanded.

    Returns a list of ValidationError (empty when the block is valid).
    """
    errors: List[ValidationError] = []

    if not block.title or not block.title.strip():
        errors.append(ValidationError('title', 'Title is required', index))

    if not is_valid_hhmm(block.start_time):
        errors.append(ValidationError('start_time', 'Valid start time is required (format: HH:MM)', index))

    if not is_valid_hhmm(block.end_time):
        errors.append(ValidationError('end_time', 'Valid end time is required (format: HH:MM)', index))

    if not block.days_of_week:
        errors.append(ValidationError('days_of_week', 'At least one day of the week must be selected', index))
    elif any(d < 0 or d > 6 for d in block.days_of_week):
        errors.append(ValidationError('days_of_week', 'Invalid days of week (must be 0-6, where 0=Sunday)', index))

    if block.buffer_before_minutes < 0 or block.buffer_after_minutes < 0:
        errors.append(ValidationError('buffer', 'Buffer minutes must be non-negative', index))

    if not is_valid_color(block.color):
        errors.append(ValidationError('color', f"Invalid color '{block.color}'", index))

    return errors


def find_conflicting_interval(
    slot_start: datetime.datetime,
    slot_end: datetime.datetime,
    intervals: Iterable[Interval]
) -> Optional[Interval]:
    """Return the first busy/scheduled interval overlapping the slot, if any."""
    for interval in intervals:
        if interval.kind == IntervalKind.AVAILABLE:
            continue
        if interval.start < slot_end and interval.end > slot_start:
            return interval
    return None


class ScheduleProcessor:
    """Validates schedule blocks and inspects computed timelines."""

    def __init__(self):
        self.logger = setup_logger(__name__)

    def validate_blocks(
        self,
        blocks: List[ScheduleBlockDef]
    ) -> Tuple[List[ScheduleBlockDef], List[str]]:
        """
        Split blocks into valid ones and error messages for the rest.

        Invalid blocks would only be skipped occurrence by occurrence during
        expansion; this surfaces the problems up front.
        """
        valid_blocks: List[ScheduleBlockDef] = []
        errors: List[str] = []

        self.logger.info(f"Validating {len(blocks)} schedule blocks.")

        for i, block in enumerate(blocks):
            block_errors = validate_schedule_block(block, i)
            if block_errors:
                for error in block_errors:
                    error_msg = f"Skipping invalid block '{block.title}': {error}"
                    errors.append(error_msg)
                    self.logger.warning(error_msg)
            else:
                valid_blocks.append(block)

        self.logger.info(
            f"Validation complete: {len(valid_blocks)} valid blocks "
            f"({len(errors)} errors)"
        )
        return valid_blocks, errors

    def detect_conflicts(self, timeline: List[Interval]) -> List[Tuple[Interval, Interval]]:
        """
        Find overlapping busy/scheduled pairs left in a timeline.

        The timeline builder does not resolve overlaps by priority, so a
        meeting inside working hours shows up here as a (Work, Meeting) pair.
        """
        occupied = [iv for iv in timeline if iv.kind != IntervalKind.AVAILABLE]
        conflicts: List[Tuple[Interval, Interval]] = []

        for i, first in enumerate(occupied):
            for second in occupied[i + 1:]:
                if second.start >= first.end:
                    # occupied is sorted by start, nothing later can overlap first
                    break
                if first.overlaps_with(second):
                    conflicts.append((first, second))

        if conflicts:
            for first, second in conflicts:
                self.logger.debug(
                    f"Conflict: '{first.label}' {first.start.strftime('%H:%M')}-{first.end.strftime('%H:%M')} "
                    f"overlaps '{second.label}' {second.start.strftime('%H:%M')}-{second.end.strftime('%H:%M')}"
                )
            self.logger.info(f"Found {len(conflicts)} overlapping entries")

        return conflicts
