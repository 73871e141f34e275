# File: availability/cli.py
"""
Command-line availability report.

Reads schedule blocks and external events from a JSON file, computes the
availability timeline and writes it (with statistics) as JSON.

Input format:
    {
      "schedule_blocks": [{"id": "work", "title": "Work", "startTime": "09:00", ...}],
      "events": [{"id": "e1", "title": "Meeting", "start": "2024-01-15T10:00:00", ...}],
      "config": {"include_overnight_lookback": true, "timezone": "Europe/Amsterdam"}
    }
"""

import argparse
import datetime
import json
import sys
import time
from pathlib import Path
from typing import List, Optional

from availability.core.availability_calculator import AvailabilityCalculator
from availability.core.config_manager import Config
from availability.models import (
    AvailabilityConfig,
    external_event_from_dict,
    external_event_from_google,
    schedule_block_from_dict,
)
from availability.processors.schedule_processor import ScheduleProcessor
from availability.services.statistics import calculate_stats, total_minutes_by_kind
from availability.utils.logger import setup_logger

logger = setup_logger(__name__)


def load_input(input_path: Path) -> dict:
    """Load the JSON input document."""
    with open(input_path, 'r', encoding='utf-8') as f:
        return json.load(f)


def build_report(data: dict, start_day: datetime.date, days: int) -> dict:
    """
    Compute availability for `days` consecutive days starting at start_day.

    Returns a JSON-serializable report dictionary.
    """
    config = Config.default_availability_config()
    if 'config' in data:
        overrides = AvailabilityConfig.from_dict(data['config'])
        config = AvailabilityConfig(
            include_overnight_lookback=overrides.include_overnight_lookback,
            timezone=overrides.timezone or config.timezone,
        )

    blocks = [schedule_block_from_dict(b) for b in data.get('schedule_blocks', [])]
    events = [external_event_from_dict(e) for e in data.get('events', [])]
    # Raw Google Calendar API resources are accepted as-is
    events += [external_event_from_google(item, i) for i, item in enumerate(data.get('google_events', []))]

    processor = ScheduleProcessor()
    _, errors = processor.validate_blocks(blocks)

    calculator = AvailabilityCalculator(config)
    end_day = start_day + datetime.timedelta(days=max(days, 1) - 1)
    timeline = calculator.calculate_range(start_day, end_day, blocks, events)
    conflicts = processor.detect_conflicts(timeline)

    return {
        'range': {'start': start_day.isoformat(), 'end': end_day.isoformat()},
        'timezone': config.timezone,
        'timeline': [iv.to_dict() for iv in timeline],
        'stats': calculate_stats(timeline).to_dict(),
        'minutes_by_kind': total_minutes_by_kind(timeline),
        'conflicts': [[a.to_dict(), b.to_dict()] for a, b in conflicts],
        'validation_errors': errors,
    }


def print_summary(report: dict) -> None:
    """Print a short human-readable view of the timeline."""
    print(f"\nAvailability {report['range']['start']} -> {report['range']['end']}")
    for entry in report['timeline']:
        start = entry['start'][11:16]
        end = entry['end'][11:16]
        label = f" {entry['label']}" if entry.get('label') else ''
        print(f"  {entry['start'][:10]} {start}-{end}  {entry['kind']:<9}{label}")
    stats = report['stats']
    print(f"\n{stats['available']}/{stats['total']} slots available ({stats['availability_percentage']}%)")
    if report['conflicts']:
        print(f"{len(report['conflicts'])} overlapping entries")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compute availability from schedule blocks and events.")
    parser.add_argument('input', type=Path, help="JSON file with schedule_blocks and events")
    parser.add_argument('--date', type=datetime.date.fromisoformat, default=None,
                        help="First day (YYYY-MM-DD), defaults to today")
    parser.add_argument('--days', type=int, default=1, help="Number of days to compute")
    parser.add_argument('--output', type=Path, default=Config.AVAILABILITY_OUTPUT_FILE,
                        help="Where to write the JSON report")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main execution function.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    start_time = time.time()
    args = parse_args(argv)

    try:
        if not Config.validate():
            logger.error("Configuration validation failed")
            return 1

        data = load_input(args.input)
        start_day = args.date or datetime.date.today()

        report = build_report(data, start_day, args.days)

        args.output.parent.mkdir(parents=True, exist_ok=True)
        with open(args.output, 'w', encoding='utf-8') as f:
            json.dump(report, f, indent=2, ensure_ascii=False)

        print_summary(report)
        logger.info(f"Report written to {args.output}")
        return 0

    except FileNotFoundError as e:
        logger.error(f"Could not find: {e.filename}")
        return 1

    except json.JSONDecodeError as e:
        logger.error(f"Input is not valid JSON: {e}")
        return 1

    except KeyboardInterrupt:
        logger.warning("Report interrupted by user")
        return 1

    except Exception as e:
        logger.error("Unexpected fatal error", exc_info=True)
        logger.error(f"Error: {e}")
        return 1

    finally:
        elapsed = time.time() - start_time
        logger.info(f"Total execution time: {elapsed:.2f} seconds")


if __name__ == "__main__":
    sys.exit(main())
