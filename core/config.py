"""
Environment configuration for the study app.

Values are read from the process environment (and a local .env file).
"""

from __future__ import annotations

import os
from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo

from dotenv import load_dotenv
from tzlocal import get_localzone

from core.srs.constants import DEFAULT_DAILY_GOAL, MAX_DAILY_GOAL

# Load environment
load_dotenv()

DEFAULT_DATABASE_URL = "sqlite:///data/flashcards.db"
PROD_DB_NAME = "flashcards.db"
TEST_DB_NAME = "test_flashcards.db"


def is_test_mode() -> bool:
    """Check if running in test mode."""
    return os.getenv("TEST_MODE", "false").lower() == "true"


def get_database_url() -> str:
    """
    Get the database URL from environment variables.

    In test mode the production database name is swapped for the test one.

    Returns:
        SQLAlchemy connection string
    """
    url = os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL
    if is_test_mode():
        return url.replace(PROD_DB_NAME, TEST_DB_NAME)
    return url


def get_study_timezone() -> tzinfo:
    """
    Timezone used for "now" and for calendar-day boundaries.

    Returns:
        ZoneInfo for STUDY_TIMEZONE, or the machine's tz database zone
    """
    name = os.getenv("STUDY_TIMEZONE")
    if not name:
        return get_localzone()
    return ZoneInfo(name)


def get_initial_daily_goal() -> int:
    """Daily goal for a ledger created on first use."""
    raw = os.getenv("DAILY_GOAL")
    if not raw:
        return DEFAULT_DAILY_GOAL
    goal = int(raw)
    if not 1 <= goal <= MAX_DAILY_GOAL:
        raise ValueError(f"DAILY_GOAL must be between 1 and {MAX_DAILY_GOAL}, got {raw!r}")
    return goal


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def now() -> datetime:
    """Current time as an aware datetime in the study timezone."""
    return datetime.now(get_study_timezone())
