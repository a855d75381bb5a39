"""
Study Store - In-Memory Cards and Progress Backed by a Blob Store

Holds the decoded card collection and progress ledger for the process and
commits review transactions atomically. In-memory state is only replaced
after the storage write succeeded, so a failed write leaves everything at
its pre-transaction values.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Protocol

from core.srs import codec
from core.srs.card_state import Card
from core.srs.constants import CARDS_KEY, DEFAULT_DAILY_GOAL, PROGRESS_KEY
from core.srs.errors import CardNotFoundError
from core.srs.ledger import Progress, set_daily_goal
from core.srs.persistence import BlobStore

logger = logging.getLogger(__name__)


class ReviewStore(Protocol):
    """Read/write capability the session controller depends on."""

    @property
    def progress(self) -> Progress:
        ...

    def get_card(self, card_id: str) -> Card:
        ...

    def commit_review(self, card: Card, progress: Progress) -> None:
        ...


class StudyStore:
    """
    Explicit handle on the card collection and progress ledger.

    Single writer: one process, one logical thread of review events.
    """

    def __init__(self, blob_store: BlobStore, daily_goal: int = DEFAULT_DAILY_GOAL):
        self.blob_store = blob_store
        self._default_daily_goal = daily_goal
        self._cards: list[Card] = []
        self._index: dict[str, int] = {}
        self._progress = Progress(daily_goal=daily_goal)
        self.reload()

    # ---- Reads ----

    def reload(self) -> None:
        """
        Re-read both blobs from storage.

        Raises:
            PersistenceError: if storage fails or a blob cannot be decoded
        """
        cards_blob = self.blob_store.load(CARDS_KEY)
        progress_blob = self.blob_store.load(PROGRESS_KEY)

        cards = codec.decode_cards(cards_blob) if cards_blob else []
        progress = (
            codec.decode_progress(progress_blob)
            if progress_blob
            else Progress(daily_goal=self._default_daily_goal)
        )
        self._set_cards(cards)
        self._progress = progress
        logger.info("Loaded %d cards, streak %d", len(cards), progress.current_streak)

    @property
    def cards(self) -> list[Card]:
        return list(self._cards)

    @property
    def progress(self) -> Progress:
        return self._progress

    def get_card(self, card_id: str) -> Card:
        """
        Raises:
            CardNotFoundError: if no card has this id
        """
        position = self._index.get(card_id)
        if position is None:
            raise CardNotFoundError(card_id)
        return self._cards[position]

    def find_card(self, card_id: str) -> Optional[Card]:
        position = self._index.get(card_id)
        return self._cards[position] if position is not None else None

    # ---- Writes ----

    def initialize_cards(self, seed_cards: Iterable[Card]) -> bool:
        """
        Store the seed catalogue on first run.

        Returns:
            True if cards were written, False if a collection already existed
        """
        if self._cards:
            return False
        cards = list(seed_cards)
        self.blob_store.save(CARDS_KEY, codec.encode_cards(cards))
        self._set_cards(cards)
        logger.info("Initialized %d seed cards", len(cards))
        return True

    def commit_review(self, card: Card, progress: Progress) -> None:
        """
        Persist one graded review: the updated card and the new ledger.

        Both blobs go out in a single save_many call.

        Raises:
            CardNotFoundError: if the card is not part of the collection
            PersistenceError: if the write fails (nothing in memory changes)
        """
        position = self._index.get(card.id)
        if position is None:
            raise CardNotFoundError(card.id)

        cards = list(self._cards)
        cards[position] = card
        try:
            self.blob_store.save_many({
                CARDS_KEY: codec.encode_cards(cards),
                PROGRESS_KEY: codec.encode_progress(progress),
            })
        except Exception:
            logger.warning("Review commit failed for card %s; state unchanged", card.id)
            raise

        self._cards = cards
        self._progress = progress
        logger.debug(
            "Committed card %s (interval %d), today %d/%d",
            card.id, card.interval, progress.today_cards_reviewed, progress.daily_goal
        )

    def update_daily_goal(self, goal: int) -> Progress:
        """
        Change and persist the daily goal.

        Raises:
            ValueError: if goal is not a positive integer
            PersistenceError: if the write fails
        """
        progress = set_daily_goal(self._progress, goal)
        self.blob_store.save(PROGRESS_KEY, codec.encode_progress(progress))
        self._progress = progress
        return progress

    def _set_cards(self, cards: list[Card]) -> None:
        self._cards = cards
        self._index = {c.id: i for i, c in enumerate(cards)}
