"""
Static deck catalogue and seed cards.

Cards are created from SEED_CARDS once, on first run (see
StudyStore.initialize_cards).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from core.srs.card_state import Card, new_card


@dataclass(frozen=True)
class Deck:
    """
    A themed deck shown on the home page.
    """
    id: str
    name: str
    description: str
    icon: str
    color: str
    is_premium: bool
    category: str


DECKS: list[Deck] = [
    Deck(
        id="indian-polity",
        name="Indian Polity",
        description="Constitution, Parliament and the judiciary",
        icon="⚖️",
        color="#6366F1",
        is_premium=False,
        category="Polity",
    ),
    Deck(
        id="world-geography",
        name="World Geography",
        description="Capitals, rivers and mountain ranges",
        icon="🌍",
        color="#10B981",
        is_premium=False,
        category="Geography",
    ),
    Deck(
        id="general-science",
        name="General Science",
        description="Everyday physics, chemistry and biology",
        icon="🔬",
        color="#F59E0B",
        is_premium=False,
        category="Science",
    ),
    Deck(
        id="static-gk",
        name="Static GK",
        description="Firsts, records and national symbols",
        icon="📚",
        color="#EC4899",
        is_premium=True,
        category="General Knowledge",
    ),
    Deck(
        id="current-affairs",
        name="Current Affairs",
        description="Recent events and appointments",
        icon="📰",
        color="#EF4444",
        is_premium=True,
        category="Current Affairs",
    ),
]


# (deck_id, front, back)
SEED_CARDS: list[tuple[str, str, str]] = [
    ("indian-polity", "Which article of the Constitution abolishes untouchability?", "Article 17"),
    ("indian-polity", "Who presides over a joint sitting of Parliament?", "The Speaker of the Lok Sabha"),
    ("indian-polity", "Minimum age to become President of India?", "35 years"),
    ("indian-polity", "Which schedule lists the official languages?", "The Eighth Schedule"),
    ("indian-polity", "Fundamental Duties were added by which amendment?", "The 42nd Amendment (1976)"),
    ("world-geography", "Longest river in the world?", "The Nile"),
    ("world-geography", "Capital of Australia?", "Canberra"),
    ("world-geography", "Highest mountain in Africa?", "Mount Kilimanjaro"),
    ("world-geography", "Largest hot desert in the world?", "The Sahara"),
    ("world-geography", "Strait separating Asia and North America?", "The Bering Strait"),
    ("general-science", "Chemical symbol of sodium?", "Na"),
    ("general-science", "Powerhouse of the cell?", "The mitochondrion"),
    ("general-science", "SI unit of electric resistance?", "The ohm"),
    ("general-science", "Gas most abundant in Earth's atmosphere?", "Nitrogen"),
    ("general-science", "Vitamin produced in skin exposed to sunlight?", "Vitamin D"),
    ("static-gk", "National aquatic animal of India?", "The Gangetic river dolphin"),
    ("static-gk", "First Indian to win a Nobel Prize?", "Rabindranath Tagore (1913)"),
    ("current-affairs", "Which body publishes the World Economic Outlook?", "The International Monetary Fund"),
]


def get_deck(deck_id: str) -> Optional[Deck]:
    return next((d for d in DECKS if d.id == deck_id), None)


def build_seed_cards(now: datetime) -> list[Card]:
    """
    Build fresh, immediately due cards for every seed entry.
    """
    counters: dict[str, int] = {}
    cards: list[Card] = []
    for deck_id, front, back in SEED_CARDS:
        counters[deck_id] = counters.get(deck_id, 0) + 1
        card_id = f"{deck_id}-{counters[deck_id]}"
        cards.append(new_card(card_id, front, back, deck_id, created_at=now))
    return cards
