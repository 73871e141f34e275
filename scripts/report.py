"""
Availability report entry point.
Run this file with a JSON export of schedule blocks and calendar events.
"""

import sys
from pathlib import Path

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from availability.cli import main


if __name__ == "__main__":
    sys.exit(main())
