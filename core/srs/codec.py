"""
Pydantic records for the persisted card collection and progress ledger.

The blob schema uses the camelCase field names of the stored JSON documents.
Fields missing from older blobs fall back to safe defaults.

totalStudyTime is stored in seconds, not minutes. A blob that counted
minutes must be multiplied by 60 before import.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from core.srs.card_state import Card
from core.srs.constants import (
    DEFAULT_DAILY_GOAL,
    DEFAULT_EASE_FACTOR,
    MAX_DAILY_GOAL,
    MIN_EASE_FACTOR,
)
from core.srs.errors import PersistenceError
from core.srs.ledger import Progress


def _as_aware(value: Optional[datetime]) -> Optional[datetime]:
    """Timestamps written without an offset are read as UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class CardRecord(BaseModel):
    """Stored form of a Card."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    front: str = ""
    back: str = ""
    deck_id: str = Field(alias="deckId")
    ease_factor: float = Field(default=DEFAULT_EASE_FACTOR, alias="easeFactor", ge=MIN_EASE_FACTOR)
    interval: int = Field(default=0, ge=0)
    repetitions: int = Field(default=0, ge=0)
    next_review_date: Optional[datetime] = Field(default=None, alias="nextReviewDate")
    last_review_date: Optional[datetime] = Field(default=None, alias="lastReviewDate")

    @field_validator("next_review_date", "last_review_date")
    @classmethod
    def _default_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _as_aware(value)

    @classmethod
    def from_card(cls, card: Card) -> "CardRecord":
        return cls(
            id=card.id,
            front=card.front,
            back=card.back,
            deck_id=card.deck_id,
            ease_factor=card.ease_factor,
            interval=card.interval,
            repetitions=card.repetitions,
            next_review_date=card.next_review_date,
            last_review_date=card.last_review_date,
        )

    def to_card(self) -> Card:
        return Card(
            id=self.id,
            front=self.front,
            back=self.back,
            deck_id=self.deck_id,
            ease_factor=self.ease_factor,
            interval=self.interval,
            repetitions=self.repetitions,
            next_review_date=self.next_review_date,
            last_review_date=self.last_review_date,
        )


class ProgressRecord(BaseModel):
    """Stored form of the Progress ledger."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    current_streak: int = Field(default=0, alias="currentStreak", ge=0)
    longest_streak: int = Field(default=0, alias="longestStreak", ge=0)
    total_cards_reviewed: int = Field(default=0, alias="totalCardsReviewed", ge=0)
    total_study_time: int = Field(default=0, alias="totalStudyTime", ge=0)  # seconds
    daily_goal: int = Field(default=DEFAULT_DAILY_GOAL, alias="dailyGoal", ge=1)
    today_cards_reviewed: int = Field(default=0, alias="todayCardsReviewed", ge=0)
    last_study_date: Optional[datetime] = Field(default=None, alias="lastStudyDate")

    @field_validator("last_study_date")
    @classmethod
    def _default_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _as_aware(value)

    @classmethod
    def from_progress(cls, progress: Progress) -> "ProgressRecord":
        return cls(
            current_streak=progress.current_streak,
            longest_streak=progress.longest_streak,
            total_cards_reviewed=progress.total_cards_reviewed,
            total_study_time=progress.total_study_time,
            daily_goal=progress.daily_goal,
            today_cards_reviewed=progress.today_cards_reviewed,
            last_study_date=progress.last_study_date,
        )

    def to_progress(self) -> Progress:
        return Progress(
            current_streak=self.current_streak,
            longest_streak=max(self.longest_streak, self.current_streak),
            total_cards_reviewed=self.total_cards_reviewed,
            total_study_time=self.total_study_time,
            daily_goal=min(self.daily_goal, MAX_DAILY_GOAL),
            today_cards_reviewed=self.today_cards_reviewed,
            last_study_date=self.last_study_date,
        )


_CARD_LIST = TypeAdapter(list[CardRecord])


# ---- Blob Encoding ----

def encode_cards(cards: list[Card]) -> str:
    """Serialize the card collection to a JSON blob."""
    records = [CardRecord.from_card(c) for c in cards]
    return _CARD_LIST.dump_json(records, by_alias=True).decode("utf-8")


def decode_cards(blob: str) -> list[Card]:
    """
    Parse a card collection blob.

    Raises:
        PersistenceError: if the blob is not a valid card list
    """
    try:
        records = _CARD_LIST.validate_json(blob)
    except ValidationError as exc:
        raise PersistenceError(f"Stored card collection is invalid: {exc}") from exc
    return [r.to_card() for r in records]


def encode_progress(progress: Progress) -> str:
    """Serialize the progress ledger to a JSON blob."""
    return ProgressRecord.from_progress(progress).model_dump_json(by_alias=True)


def decode_progress(blob: str) -> Progress:
    """
    Parse a progress ledger blob.

    Raises:
        PersistenceError: if the blob is not a valid progress record
    """
    try:
        record = ProgressRecord.model_validate_json(blob)
    except ValidationError as exc:
        raise PersistenceError(f"Stored progress is invalid: {exc}") from exc
    return record.to_progress()
