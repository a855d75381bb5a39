"""
Session summary types used by the Streamlit controller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SessionSummary:
    """
    What the intro screen shows after a session ends.
    """
    deck_id: str
    reviewed: int
    correct: int
    total: int
    completed: bool
    nothing_due: bool = False

    @property
    def accuracy(self) -> Optional[float]:
        if self.reviewed == 0:
            return None
        return self.correct / self.reviewed * 100
