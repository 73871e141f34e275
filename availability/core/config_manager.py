# File: availability/core/config_manager.py
"""
Centralized configuration management for the availability engine.
Loads settings from environment variables (.env supported).
"""

import os
from pathlib import Path
from typing import Optional

import pytz
from dotenv import load_dotenv

from availability.models.config import AvailabilityConfig

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ['yes', 'true', '1', 'on']


class Config:
    """Application configuration singleton."""

    # Base directories
    BASE_DIR = Path(__file__).parent.parent.parent  # Go up 3 levels from availability/core/

    OUTPUT_DIR = BASE_DIR / "output"
    AVAILABILITY_OUTPUT_FILE = OUTPUT_DIR / "availability.json"

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_DIR: Optional[str] = os.getenv("LOG_DIR")

    # Calculation defaults
    TARGET_TIMEZONE = os.getenv("TIMEZONE", "UTC")
    INCLUDE_OVERNIGHT_LOOKBACK = _env_flag("INCLUDE_OVERNIGHT_LOOKBACK", True)

    # Two slots closer than this are treated as contiguous when coalescing
    MERGE_TOLERANCE_SECONDS = 60

    @classmethod
    def default_availability_config(cls) -> AvailabilityConfig:
        """Build calculation options from the environment."""
        return AvailabilityConfig(
            include_overnight_lookback=cls.INCLUDE_OVERNIGHT_LOOKBACK,
            timezone=cls.TARGET_TIMEZONE,
        )

    @classmethod
    def validate(cls) -> bool:
        """Validate that the configuration is usable."""
        errors = []

        if cls.TARGET_TIMEZONE not in pytz.all_timezones_set:
            errors.append(f"Unknown TIMEZONE '{cls.TARGET_TIMEZONE}'")

        if cls.LOG_LEVEL not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            errors.append(f"Unknown LOG_LEVEL '{cls.LOG_LEVEL}'")

        if errors:
            for error in errors:
                print(f"Configuration Error: {error}")
            return False

        return True
