# File: availability/core/availability_calculator.py
"""
Availability calculation entry points.
Coordinates expansion, normalization, timeline building and coalescing.

Everything here is synchronous and pure: schedule blocks and external events
are loaded by the caller beforehand, and no clock is read.
"""

import datetime
from typing import List, Optional, Sequence, Tuple

import pytz

from availability.models import AvailabilityConfig, ExternalEvent, Interval, ScheduleBlockDef
from availability.models.common import wall_clock
from availability.processors.occurrence_expander import expand_blocks, iter_days
from availability.processors.event_normalizer import normalize_events
from availability.processors.timeline_builder import build_timeline
from availability.processors.interval_coalescer import coalesce
from availability.utils.logger import LoggerMixin


def _require_list(value, name: str) -> None:
    if not isinstance(value, (list, tuple)):
        raise TypeError(f"{name} must be a list, got {type(value).__name__}")


class AvailabilityCalculator(LoggerMixin):
    """
    Computes day-by-day availability timelines.

    Holds the calculation options and the resolved reporting timezone.
    """

    def __init__(self, config: Optional[AvailabilityConfig] = None):
        self.config = config or AvailabilityConfig()
        self.tz = pytz.timezone(self.config.timezone) if self.config.timezone else None

    def day_window(self, day: datetime.date) -> Tuple[datetime.datetime, datetime.datetime]:
        """Half-open window [midnight, next midnight) of a calendar day."""
        start = wall_clock(day, (0, 0), self.tz)
        end = wall_clock(day + datetime.timedelta(days=1), (0, 0), self.tz)
        return start, end

    def events_for_day(
        self,
        day: datetime.date,
        schedule_blocks: Sequence[ScheduleBlockDef],
        external_events: Sequence[ExternalEvent]
    ) -> List[Interval]:
        """
        Collect the raw (unbuilt) intervals relevant to one day.

        With overnight lookback the previous day's occurrences are expanded
        too, so a block running past midnight reaches into this day.
        """
        window_start, window_end = self.day_window(day)
        lookback = self.config.include_overnight_lookback

        expand_from = day - datetime.timedelta(days=1) if lookback else day
        scheduled = expand_blocks(schedule_blocks, expand_from, day, self.tz)
        busy = normalize_events(external_events, window_start, window_end, lookback, self.tz)

        return scheduled + busy

    def calculate(
        self,
        day: datetime.date,
        schedule_blocks: Sequence[ScheduleBlockDef],
        external_events: Sequence[ExternalEvent]
    ) -> List[Interval]:
        """
        Coalesced availability timeline for a single day.

        Args:
            day: Calendar day to compute
            schedule_blocks: Recurring block definitions
            external_events: Busy events from the calendar provider

        Returns:
            Timeline covering [start of day, start of next day)
        """
        _require_list(schedule_blocks, 'schedule_blocks')
        _require_list(external_events, 'external_events')

        window_start, window_end = self.day_window(day)
        intervals = self.events_for_day(day, schedule_blocks, external_events)
        timeline = coalesce(build_timeline(window_start, window_end, intervals))

        self.logger.debug(f"{day}: {len(intervals)} raw intervals -> {len(timeline)} timeline entries")
        return timeline

    def calculate_range(
        self,
        range_start: datetime.date,
        range_end: datetime.date,
        schedule_blocks: Sequence[ScheduleBlockDef],
        external_events: Sequence[ExternalEvent]
    ) -> List[Interval]:
        """
        Per-day timelines for an inclusive date range, concatenated in day order.

        An inverted range yields an empty result rather than an error.
        """
        _require_list(schedule_blocks, 'schedule_blocks')
        _require_list(external_events, 'external_events')

        if range_end < range_start:
            self.logger.warning(f"Empty availability range: {range_start} is after {range_end}")
            return []

        self.logger.info(
            f"Calculating availability {range_start} -> {range_end} "
            f"({len(schedule_blocks)} blocks, {len(external_events)} events)"
        )

        all_intervals: List[Interval] = []
        for day in iter_days(range_start, range_end):
            all_intervals.extend(self.calculate(day, schedule_blocks, external_events))

        self.logger.info(f"Availability computed: {len(all_intervals)} intervals")
        return all_intervals


def compute_availability(
    day: datetime.date,
    schedule_blocks: Sequence[ScheduleBlockDef],
    external_events: Sequence[ExternalEvent],
    config: Optional[AvailabilityConfig] = None
) -> List[Interval]:
    """Coalesced timeline for one day."""
    return AvailabilityCalculator(config).calculate(day, schedule_blocks, external_events)


def compute_availability_range(
    range_start: datetime.date,
    range_end: datetime.date,
    schedule_blocks: Sequence[ScheduleBlockDef],
    external_events: Sequence[ExternalEvent],
    config: Optional[AvailabilityConfig] = None
) -> List[Interval]:
    """Concatenated per-day timelines, both endpoints inclusive."""
    return AvailabilityCalculator(config).calculate_range(
        range_start, range_end, schedule_blocks, external_events
    )
