"""
Card State - Flashcard Review State and Grades

Defines the immutable card record and the review-state update produced by
the scheduler.

Key concepts:
- Ease factor: multiplier controlling how fast intervals grow (>= 1.3)
- Interval: days until the next scheduled review
- Repetitions: consecutive non-AGAIN grades since the last lapse
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional, Union

from core.srs.constants import DEFAULT_EASE_FACTOR, Grade
from core.srs.errors import InvalidGradeError


@dataclass(frozen=True)
class Card:
    """
    A single flashcard with its review state.

    Static content (front/back/deck_id) comes from the content catalogue;
    the review fields are only ever replaced through a CardUpdate.
    """
    id: str
    front: str
    back: str
    deck_id: str

    # Review state
    ease_factor: float = DEFAULT_EASE_FACTOR
    interval: int = 0
    repetitions: int = 0
    next_review_date: Optional[datetime] = None
    last_review_date: Optional[datetime] = None

    @property
    def is_new(self) -> bool:
        """True until the card receives its first successful grade."""
        return self.repetitions == 0


@dataclass(frozen=True)
class CardUpdate:
    """
    Full replacement of a card's mutable review fields.
    """
    ease_factor: float
    interval: int
    repetitions: int
    next_review_date: datetime
    last_review_date: datetime


def apply_update(card: Card, update: CardUpdate) -> Card:
    """Return a copy of the card carrying the updated review fields."""
    return replace(
        card,
        ease_factor=update.ease_factor,
        interval=update.interval,
        repetitions=update.repetitions,
        next_review_date=update.next_review_date,
        last_review_date=update.last_review_date,
    )


def new_card(
    card_id: str,
    front: str,
    back: str,
    deck_id: str,
    created_at: datetime
) -> Card:
    """
    Initialize a card that has never been reviewed.

    The card is due immediately: next_review_date is its creation time.
    """
    return Card(
        id=card_id,
        front=front,
        back=back,
        deck_id=deck_id,
        ease_factor=DEFAULT_EASE_FACTOR,
        interval=0,
        repetitions=0,
        next_review_date=created_at,
        last_review_date=None,
    )


def parse_grade(value: Union[Grade, str]) -> Grade:
    """
    Normalize a grade from the UI into a Grade.

    Raises:
        InvalidGradeError: if the value is not one of again/hard/good/easy
    """
    if isinstance(value, Grade):
        return value
    if isinstance(value, str):
        try:
            return Grade(value.strip().lower())
        except ValueError:
            pass
    raise InvalidGradeError(f"Invalid grade: {value!r}")
