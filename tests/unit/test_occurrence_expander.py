# File: tests/unit/test_occurrence_expander.py
"""
Unit tests for schedule block expansion.
"""

import logging
import pytest
from datetime import date, datetime, timedelta

import pytz

from availability.models import IntervalKind, ScheduleBlockDef
from availability.processors.occurrence_expander import (
    expand_block, expand_blocks, expand_occurrence, js_weekday, iter_days, occurrence_id
)


class TestHelpers:

    def test_js_weekday_sunday_is_zero(self):
        assert js_weekday(date(2024, 1, 14)) == 0  # Sunday
        assert js_weekday(date(2024, 1, 15)) == 1  # Monday
        assert js_weekday(date(2024, 1, 20)) == 6  # Saturday

    def test_iter_days_inclusive(self):
        days = list(iter_days(date(2024, 1, 30), date(2024, 2, 1)))
        assert days == [date(2024, 1, 30), date(2024, 1, 31), date(2024, 2, 1)]

    def test_iter_days_inverted_range(self):
        assert list(iter_days(date(2024, 1, 2), date(2024, 1, 1))) == []

    def test_occurrence_id(self, work_block, monday):
        assert occurrence_id(work_block, monday) == "work-1-2024-01-15"


class TestExpandBlock:
    """Tests for expand_block."""

    def test_regular_block(self, work_block, monday):
        occurrences = expand_block(work_block, monday, monday)

        assert len(occurrences) == 1
        occ = occurrences[0]
        assert occ.start == datetime(2024, 1, 15, 9, 0)
        assert occ.end == datetime(2024, 1, 15, 17, 0)
        assert occ.kind == IntervalKind.SCHEDULED
        assert occ.label == "Work"
        assert occ.priority == "high"
        assert occ.color == "#3b82f6"
        assert occ.source_id == "work-1-2024-01-15"

    def test_overnight_block_ends_next_day(self, monday):
        block = ScheduleBlockDef("sleep", "Sleep", "23:00", "07:00", {1})

        occurrences = expand_block(block, monday, monday)

        assert len(occurrences) == 1
        occ = occurrences[0]
        assert occ.start == datetime(2024, 1, 15, 23, 0)
        assert occ.end == datetime(2024, 1, 16, 7, 0)
        assert occ.end.day == occ.start.day + 1

    def test_overnight_block_with_buffers(self, monday):
        block = ScheduleBlockDef(
            "sleep", "Sleep Time", "23:00", "07:00", {1},
            buffer_before_minutes=30, buffer_after_minutes=30
        )

        occ = expand_block(block, monday, monday)[0]

        assert occ.start == datetime(2024, 1, 15, 22, 30)
        assert occ.end == datetime(2024, 1, 16, 7, 30)

    def test_buffers_are_applied(self, monday):
        block = ScheduleBlockDef(
            "work", "Work Hours", "09:00", "17:00", {1},
            buffer_before_minutes=15, buffer_after_minutes=15
        )

        occ = expand_block(block, monday, monday)[0]

        assert occ.start == datetime(2024, 1, 15, 8, 45)
        assert occ.end == datetime(2024, 1, 15, 17, 15)

    def test_buffer_can_cross_midnight(self, monday):
        block = ScheduleBlockDef("early", "Early", "00:10", "01:00", {1}, buffer_before_minutes=20)

        occ = expand_block(block, monday, monday)[0]

        assert occ.start == datetime(2024, 1, 14, 23, 50)

    def test_equal_times_span_full_day(self, monday):
        block = ScheduleBlockDef("all", "All Day", "00:00", "00:00", {1})

        occ = expand_block(block, monday, monday)[0]

        assert occ.start == datetime(2024, 1, 15, 0, 0)
        assert occ.end == datetime(2024, 1, 16, 0, 0)
        assert occ.duration_minutes() == 24 * 60

    def test_inactive_block_yields_nothing(self, work_block, monday):
        work_block.is_active = False
        assert expand_block(work_block, monday, monday + timedelta(days=6)) == []

    def test_multi_day_expansion(self, work_block, monday, wednesday):
        occurrences = expand_block(work_block, monday, wednesday)

        assert len(occurrences) == 3
        assert [o.start.date() for o in occurrences] == [
            date(2024, 1, 15), date(2024, 1, 16), date(2024, 1, 17)
        ]
        assert {o.start.hour for o in occurrences} == {9}
        assert len({o.source_id for o in occurrences}) == 3

    def test_only_matching_weekdays(self, gym_block, monday):
        sunday_after = monday + timedelta(days=6)

        occurrences = expand_block(gym_block, monday, sunday_after)

        assert [o.start.date() for o in occurrences] == [
            date(2024, 1, 15), date(2024, 1, 17), date(2024, 1, 19)
        ]

    def test_weekend_block_on_sunday(self):
        block = ScheduleBlockDef("brunch", "Brunch", "11:00", "12:00", {0})
        occurrences = expand_block(block, date(2024, 1, 14), date(2024, 1, 20))
        assert len(occurrences) == 1
        assert occurrences[0].start == datetime(2024, 1, 14, 11, 0)

    def test_empty_weekday_set(self, monday):
        block = ScheduleBlockDef("none", "Never", "09:00", "10:00", set())
        assert expand_block(block, monday, monday + timedelta(days=6)) == []

    def test_invalid_time_is_skipped_not_raised(self, monday, caplog):
        block = ScheduleBlockDef("bad", "Broken", "25:00", "10:00", {1})

        with caplog.at_level(logging.WARNING):
            occurrences = expand_block(block, monday, monday)

        assert occurrences == []
        assert "invalid time range" in caplog.text

    def test_out_of_range_weekdays_are_ignored(self, monday, caplog):
        block = ScheduleBlockDef("odd", "Odd", "09:00", "10:00", {1, 9})

        with caplog.at_level(logging.WARNING):
            occurrences = expand_block(block, monday, monday + timedelta(days=6))

        assert len(occurrences) == 1
        assert "outside 0-6" in caplog.text

    def test_expansion_is_deterministic(self, sleep_block, monday):
        first = expand_block(sleep_block, monday, monday + timedelta(days=13))
        second = expand_block(sleep_block, monday, monday + timedelta(days=13))
        assert first == second


class TestTimezoneExpansion:
    """Wall-clock times are localized when a pytz timezone is supplied."""

    def test_localized_occurrence(self, work_block, monday):
        tz = pytz.timezone("Europe/Amsterdam")

        occ = expand_block(work_block, monday, monday, tz)[0]

        assert occ.start.hour == 9
        assert occ.start.utcoffset() == timedelta(hours=1)

    def test_overnight_across_dst_change_keeps_wall_clock(self):
        tz = pytz.timezone("Europe/Amsterdam")
        # Clocks go forward in the night of Sat 30 -> Sun 31 March 2024
        block = ScheduleBlockDef("sleep", "Sleep", "23:00", "07:00", {6})

        occ = expand_occurrence(block, date(2024, 3, 30), tz)

        assert occ.start.hour == 23
        assert occ.end.hour == 7
        assert occ.end.utcoffset() == timedelta(hours=2)
        assert occ.end - occ.start == timedelta(hours=7)

    def test_start_in_dst_gap_is_moved_forward(self):
        tz = pytz.timezone("Europe/Amsterdam")
        # 02:00-03:00 does not exist on Sun 31 March 2024
        block = ScheduleBlockDef("night", "Night job", "02:30", "04:00", {0})

        occ = expand_occurrence(block, date(2024, 3, 31), tz)

        assert occ.start.hour == 3
        assert occ.start.minute == 30
        assert occ.start.utcoffset() == timedelta(hours=2)
        assert occ.end - occ.start == timedelta(minutes=30)

    def test_occurrence_emptied_by_dst_gap_is_skipped(self, caplog):
        tz = pytz.timezone("Europe/Amsterdam")
        block = ScheduleBlockDef("night", "Night job", "02:30", "03:15", {0})

        with caplog.at_level(logging.WARNING):
            occurrences = expand_block(block, date(2024, 3, 31), date(2024, 3, 31), tz)

        assert occurrences == []
        assert "Skipping occurrence of block 'night'" in caplog.text


class TestExpandBlocks:

    def test_concatenates_in_input_order(self, work_block, gym_block, monday):
        intervals = expand_blocks([gym_block, work_block], monday, monday)

        assert [iv.label for iv in intervals] == ["Gym Session", "Work"]

    def test_skips_inactive(self, work_block, sleep_block, monday):
        sleep_block.is_active = False
        intervals = expand_blocks([work_block, sleep_block], monday, monday)
        assert [iv.label for iv in intervals] == ["Work"]
