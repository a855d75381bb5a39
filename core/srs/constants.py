"""
SRS Constants and Parameters

All tunable values for the SM-2 scheduler and the progress ledger in one place.
"""

from enum import Enum


# ---- Grades ----

class Grade(str, Enum):
    """Self-reported recall quality for a card."""
    AGAIN = "again"  # Not recalled, card starts over
    HARD = "hard"    # Recalled with high effort
    GOOD = "good"    # Recalled normally
    EASY = "easy"    # Recalled fluently


# ---- Ease Factor ----

MIN_EASE_FACTOR = 1.3      # Floor applied on every non-"again" grade
DEFAULT_EASE_FACTOR = 2.5  # Ease of a freshly seeded card
EASE_STEP = 0.15           # Change applied by HARD (-) and EASY (+)


# ---- Intervals (days) ----

FIRST_INTERVAL = 1   # After the first successful repetition (and after AGAIN)
SECOND_INTERVAL = 6  # After the second consecutive successful repetition


# ---- Progress Ledger ----

DEFAULT_DAILY_GOAL = 20
MAX_DAILY_GOAL = 500  # Upper bound accepted by the goal setting


# ---- Storage Keys ----

CARDS_KEY = "flashcards"
PROGRESS_KEY = "user_progress"
