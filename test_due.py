"""
Tests for due-card selection.
"""

from datetime import timedelta

from conftest import make_card
from core.srs import deck_stats, due_cards, new_cards


def test_due_cards_filters_by_deck_and_date_in_collection_order(now):
    cards = [
        make_card("late", next_review_date=now + timedelta(minutes=1)),
        make_card("c2", next_review_date=now - timedelta(days=2), repetitions=3, interval=4),
        make_card("other", deck_id="deck-b", next_review_date=now - timedelta(days=1)),
        make_card("c1", next_review_date=now - timedelta(days=5), repetitions=1, interval=1),
        make_card("exact", next_review_date=now),
    ]

    due = due_cards(cards, "deck-a", now)

    assert [c.id for c in due] == ["c2", "c1", "exact"]


def test_due_cards_empty_for_unknown_deck(now):
    assert due_cards([make_card()], "missing", now) == []


def test_card_without_review_date_is_not_due(now):
    assert due_cards([make_card(next_review_date=None)], "deck-a", now) == []


def test_new_cards_ignore_dates(now):
    cards = [
        make_card("fresh", next_review_date=now + timedelta(days=10)),
        make_card("seen", repetitions=2, interval=6),
        make_card("lapsed", repetitions=0, interval=1, last_review_date=now - timedelta(days=1)),
        make_card("elsewhere", deck_id="deck-b"),
    ]

    assert [c.id for c in new_cards(cards, "deck-a")] == ["fresh", "lapsed"]


def test_deck_stats_counts(now):
    cards = [
        make_card("a1"),
        make_card("a2", repetitions=2, interval=6, next_review_date=now + timedelta(days=6)),
        make_card("a3", repetitions=1, interval=1, next_review_date=now - timedelta(hours=1)),
        make_card("b1", deck_id="deck-b"),
    ]

    stats = deck_stats(cards, "deck-a", now)

    assert (stats.total, stats.due, stats.new) == (3, 2, 1)
