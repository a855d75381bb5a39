"""
Study session state machine.

Walks the user through one pass over a deck's due cards:

    AWAITING_REVEAL --reveal--> REVEALED --grade--> AWAITING_REVEAL | COMPLETE

Any non-terminal state can be abandoned. Each grade is one transaction:
scheduler, ledger and the storage write run together, and the cursor only
moves once the write succeeded.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Optional, Sequence, Union

from core import config
from core.srs.card_state import Card, apply_update, parse_grade
from core.srs.constants import Grade
from core.srs.errors import SessionStateError
from core.srs.ledger import Progress, record_review
from core.srs.scheduler import schedule
from core.srs.store import ReviewStore

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    AWAITING_REVEAL = "awaiting_reveal"
    REVEALED = "revealed"
    COMPLETE = "complete"
    ABANDONED = "abandoned"


TERMINAL_STATES = (SessionState.COMPLETE, SessionState.ABANDONED)


@dataclass(frozen=True)
class ReviewOutcome:
    """
    Entities produced by one committed grade, for the caller's view state.
    """
    card: Card
    progress: Progress
    state: SessionState


class StudySession:
    """
    One study pass over an ordered due sequence (not persisted).
    """

    def __init__(
        self,
        store: ReviewStore,
        deck_id: str,
        due_sequence: Sequence[Card],
        clock: Callable[[], datetime] = config.now
    ):
        self.session_id = str(uuid.uuid4())
        self.store = store
        self.deck_id = deck_id
        self.cards: list[Card] = list(due_sequence)
        self.cursor = 0
        self.revealed = False
        self.reviewed_count = 0
        self.correct_count = 0
        self._clock = clock
        self._finished_state: Optional[SessionState] = None
        self._shown_at: Optional[datetime] = None

        if not self.cards:
            self._finished_state = SessionState.COMPLETE
            logger.info("Session %s for deck %s: nothing due", self.session_id, deck_id)
        else:
            self._shown_at = clock()
            logger.info(
                "Session %s started for deck %s with %d due cards",
                self.session_id, deck_id, len(self.cards)
            )

    @classmethod
    def start(
        cls,
        store: ReviewStore,
        deck_id: str,
        due_sequence: Sequence[Card],
        clock: Callable[[], datetime] = config.now
    ) -> "StudySession":
        """Start a session; an empty due sequence yields a COMPLETE session."""
        return cls(store, deck_id, due_sequence, clock=clock)

    # ---- State ----

    @property
    def state(self) -> SessionState:
        if self._finished_state is not None:
            return self._finished_state
        if self.revealed:
            return SessionState.REVEALED
        return SessionState.AWAITING_REVEAL

    @property
    def is_finished(self) -> bool:
        return self.state in TERMINAL_STATES

    @property
    def nothing_due(self) -> bool:
        """True when the session completed at start because nothing was due."""
        return not self.cards

    @property
    def current_card(self) -> Optional[Card]:
        if self.is_finished:
            return None
        return self.cards[self.cursor]

    @property
    def position(self) -> int:
        """1-based position of the current card (total once finished)."""
        return min(self.cursor + 1, self.total)

    @property
    def total(self) -> int:
        return len(self.cards)

    @property
    def accuracy(self) -> Optional[float]:
        if self.reviewed_count == 0:
            return None
        return self.correct_count / self.reviewed_count * 100.0

    # ---- Transitions ----

    def reveal(self) -> SessionState:
        """
        Show the back of the current card. A repeated call is a no-op.

        Raises:
            SessionStateError: if the session is finished
        """
        if self.is_finished:
            raise SessionStateError(f"Cannot reveal in state {self.state.value}")
        self.revealed = True
        return self.state

    def grade(self, grade: Union[Grade, str]) -> ReviewOutcome:
        """
        Grade the revealed card, persist the review and advance.

        Raises:
            InvalidGradeError: grade is not again/hard/good/easy
            SessionStateError: the card has not been revealed or the session is over
            CardNotFoundError: the card is no longer in the store
            PersistenceError: the storage write failed; the session did not move
        """
        grade = parse_grade(grade)
        if self.state != SessionState.REVEALED:
            raise SessionStateError(f"Cannot grade in state {self.state.value}")

        now = self._clock()
        card = self.store.get_card(self.cards[self.cursor].id)
        updated_card = apply_update(card, schedule(card, grade, now))
        study_seconds = _elapsed_seconds(self._shown_at, now)
        updated_progress = record_review(self.store.progress, now, study_seconds)

        self.store.commit_review(updated_card, updated_progress)

        self.reviewed_count += 1
        if grade != Grade.AGAIN:
            self.correct_count += 1
        logger.debug(
            "Session %s graded %s as %s, next in %d days",
            self.session_id, card.id, grade.value, updated_card.interval
        )
        self._advance(now)
        return ReviewOutcome(card=updated_card, progress=updated_progress, state=self.state)

    def abandon(self) -> SessionState:
        """
        End the session early. Reviews already graded stay committed.

        Raises:
            SessionStateError: if the session is already finished
        """
        if self.is_finished:
            raise SessionStateError(f"Cannot abandon in state {self.state.value}")
        self._finished_state = SessionState.ABANDONED
        self.revealed = False
        logger.info(
            "Session %s abandoned after %d/%d cards",
            self.session_id, self.reviewed_count, self.total
        )
        return self.state

    def _advance(self, now: datetime) -> None:
        self.cursor += 1
        self.revealed = False
        if self.cursor >= len(self.cards):
            self._finished_state = SessionState.COMPLETE
            self._shown_at = None
            logger.info(
                "Session %s complete: %d reviewed, %d correct",
                self.session_id, self.reviewed_count, self.correct_count
            )
        else:
            self._shown_at = now


def _elapsed_seconds(start: Optional[datetime], end: datetime) -> int:
    if start is None:
        return 0
    return max(0, int((end - start).total_seconds()))
