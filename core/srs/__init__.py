"""
SRS - SM-2 Spaced Repetition Core

Main API for the flashcard study tool.

This package implements:
- SM-2 interval and ease scheduling (pure, no I/O)
- Due-card selection per deck
- The daily progress/streak ledger with calendar-day semantics
- A key-value blob store with atomic review commits

Quick start:
    from core import srs

    store = srs.StudyStore(srs.SqlBlobStore("sqlite:///data/flashcards.db"))
    due = srs.due_cards(store.cards, "world-geography", now)

    # Algorithm only, no storage calls
    update = srs.schedule(card, srs.Grade.GOOD, now)
"""

# Core scheduler API (algorithm logic)
from core.srs.scheduler import schedule

# Card state
from core.srs.card_state import (
    Card,
    CardUpdate,
    apply_update,
    new_card,
    parse_grade,
)

# Due-set selection
from core.srs.due import (
    DeckStats,
    deck_stats,
    due_cards,
    is_due,
    new_cards,
)

# Progress ledger
from core.srs.ledger import (
    Progress,
    cards_left_today,
    effective_today_count,
    goal_percent,
    record_review,
    set_daily_goal,
    study_hours,
)

# Storage
from core.srs.persistence import BlobStore, MemoryBlobStore, SqlBlobStore
from core.srs.store import ReviewStore, StudyStore

# Errors
from core.srs.errors import (
    CardNotFoundError,
    InvalidGradeError,
    PersistenceError,
    SessionStateError,
    StudyError,
)

# Constants and parameters
from core.srs.constants import (
    Grade,
    MIN_EASE_FACTOR,
    DEFAULT_EASE_FACTOR,
    EASE_STEP,
    FIRST_INTERVAL,
    SECOND_INTERVAL,
    DEFAULT_DAILY_GOAL,
    MAX_DAILY_GOAL,
    CARDS_KEY,
    PROGRESS_KEY,
)


__all__ = [
    # Core algorithm
    "schedule",

    # Card state
    "Card",
    "CardUpdate",
    "apply_update",
    "new_card",
    "parse_grade",

    # Due-set selection
    "DeckStats",
    "deck_stats",
    "due_cards",
    "is_due",
    "new_cards",

    # Progress ledger
    "Progress",
    "cards_left_today",
    "effective_today_count",
    "goal_percent",
    "record_review",
    "set_daily_goal",
    "study_hours",

    # Storage
    "BlobStore",
    "MemoryBlobStore",
    "SqlBlobStore",
    "ReviewStore",
    "StudyStore",

    # Errors
    "CardNotFoundError",
    "InvalidGradeError",
    "PersistenceError",
    "SessionStateError",
    "StudyError",

    # Enums
    "Grade",

    # Parameters
    "MIN_EASE_FACTOR",
    "DEFAULT_EASE_FACTOR",
    "EASE_STEP",
    "FIRST_INTERVAL",
    "SECOND_INTERVAL",
    "DEFAULT_DAILY_GOAL",
    "MAX_DAILY_GOAL",
    "CARDS_KEY",
    "PROGRESS_KEY",
]
