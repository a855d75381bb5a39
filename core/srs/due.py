"""
Due-set selection for study sessions.

These helpers read a card snapshot and never mutate it. They are recomputed
on every call; the cost is linear in the collection size.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable

from core.srs.card_state import Card


@dataclass(frozen=True)
class DeckStats:
    """
    Card counts shown next to a deck.
    """
    total: int
    due: int
    new: int


def is_due(card: Card, now: datetime) -> bool:
    """
    True when the card's next review instant is not after now.

    Plain timestamp comparison, no timezone normalization of intent.
    """
    return card.next_review_date is not None and card.next_review_date <= now


def due_cards(all_cards: Iterable[Card], deck_id: str, now: datetime) -> list[Card]:
    """
    Cards of a deck that are due, in collection order.
    """
    return [c for c in all_cards if c.deck_id == deck_id and is_due(c, now)]


def new_cards(all_cards: Iterable[Card], deck_id: str) -> list[Card]:
    """
    Cards of a deck that have no successful repetition yet (display only).
    """
    return [c for c in all_cards if c.deck_id == deck_id and c.repetitions == 0]


def deck_stats(all_cards: Iterable[Card], deck_id: str, now: datetime) -> DeckStats:
    """
    Count total, due and new cards of a deck in one pass.
    """
    total = due = new = 0
    for card in all_cards:
        if card.deck_id != deck_id:
            continue
        total += 1
        if is_due(card, now):
            due += 1
        if card.repetitions == 0:
            new += 1
    return DeckStats(total=total, due=due, new=new)
