"""
Scheduler - SM-2 Interval Logic

Pure scheduling of the next review (no storage calls).

Main workflow:
1. Caller validates the grade (see card_state.parse_grade)
2. Compute the new ease factor, repetitions and interval
3. Add the interval to "now" in calendar days
4. Return a CardUpdate; the caller applies and persists it

This module handles ONLY the algorithm logic.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta

from core.srs.card_state import Card, CardUpdate
from core.srs.constants import (
    EASE_STEP,
    FIRST_INTERVAL,
    MIN_EASE_FACTOR,
    SECOND_INTERVAL,
    Grade,
)


def schedule(card: Card, grade: Grade, now: datetime) -> CardUpdate:
    """
    Compute the review state that follows grading a card.

    Args:
        card: Card being reviewed
        grade: Validated grade (AGAIN, HARD, GOOD, EASY)
        now: Review instant (timezone-aware)

    Returns:
        CardUpdate replacing all review fields of the card
    """
    ease_factor = card.ease_factor
    repetitions = card.repetitions

    if grade == Grade.AGAIN:
        repetitions = 0
        interval = FIRST_INTERVAL
    else:
        ease_factor = update_ease_factor(ease_factor, grade)
        repetitions += 1
        interval = next_interval(repetitions, card.interval, ease_factor)

    return CardUpdate(
        ease_factor=ease_factor,
        interval=interval,
        repetitions=repetitions,
        next_review_date=add_days(now, interval),
        last_review_date=now,
    )


def update_ease_factor(ease_factor: float, grade: Grade) -> float:
    """
    Adjust the ease factor for a successful grade.

    HARD lowers ease (floored at 1.3), GOOD only applies the floor,
    EASY raises ease without a ceiling.
    """
    if grade == Grade.HARD:
        return max(MIN_EASE_FACTOR, ease_factor - EASE_STEP)
    if grade == Grade.EASY:
        return ease_factor + EASE_STEP
    return max(MIN_EASE_FACTOR, ease_factor)


def next_interval(repetitions: int, previous_interval: int, ease_factor: float) -> int:
    """
    Interval in days for the given (already incremented) repetition count.

    Uses the interval from before this review for the multiplicative step.
    """
    if repetitions == 1:
        return FIRST_INTERVAL
    if repetitions == 2:
        return SECOND_INTERVAL
    return round_half_up(previous_interval * ease_factor)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero (15.5 -> 16)."""
    return int(math.floor(value + 0.5))


def add_days(moment: datetime, days: int) -> datetime:
    """
    Add whole calendar days, keeping the wall-clock time of day.

    Aware datetime arithmetic in Python operates on local wall time, so a
    DST change in between shifts the UTC offset, not the time of day.
    """
    return moment + timedelta(days=days)
