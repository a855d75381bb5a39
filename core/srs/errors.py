"""
Error types raised by the study core.
"""

from __future__ import annotations


class StudyError(Exception):
    """Base class for study core errors."""


class CardNotFoundError(StudyError, KeyError):
    """A review referenced a card id that is not in the collection."""

    def __init__(self, card_id: str):
        super().__init__(card_id)
        self.card_id = card_id

    def __str__(self) -> str:
        return f"Card not found: {self.card_id}"


class PersistenceError(StudyError):
    """The storage collaborator failed to read or write a blob."""


class InvalidGradeError(StudyError, ValueError):
    """A grade outside again/hard/good/easy was submitted."""


class SessionStateError(StudyError):
    """A session transition was called from a state that does not allow it."""
