"""
Shared pytest fixtures for the study core tests.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest

from core.srs import Card, MemoryBlobStore, PersistenceError, StudyStore


NOW = datetime(2026, 3, 10, 9, 0, tzinfo=timezone.utc)


class FixedClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime = NOW):
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> datetime:
        self.current = self.current + timedelta(**kwargs)
        return self.current


class FlakyBlobStore(MemoryBlobStore):
    """Memory store whose writes can be switched to fail."""

    def __init__(self):
        super().__init__()
        self.fail_writes = False
        self.write_count = 0

    def save_many(self, items):
        if self.fail_writes:
            raise PersistenceError("disk full")
        self.write_count += 1
        super().save_many(items)


def make_card(
    card_id: str = "c1",
    deck_id: str = "deck-a",
    ease_factor: float = 2.5,
    interval: int = 0,
    repetitions: int = 0,
    next_review_date: Optional[datetime] = NOW,
    last_review_date: Optional[datetime] = None,
) -> Card:
    return Card(
        id=card_id,
        front=f"front of {card_id}",
        back=f"back of {card_id}",
        deck_id=deck_id,
        ease_factor=ease_factor,
        interval=interval,
        repetitions=repetitions,
        next_review_date=next_review_date,
        last_review_date=last_review_date,
    )


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def blob_store() -> FlakyBlobStore:
    return FlakyBlobStore()


@pytest.fixture
def study_store(blob_store) -> StudyStore:
    store = StudyStore(blob_store)
    store.initialize_cards([
        make_card("c1"),
        make_card("c2"),
        make_card("c3", next_review_date=NOW + timedelta(days=3), repetitions=2, interval=6),
        make_card("b1", deck_id="deck-b"),
    ])
    return store
