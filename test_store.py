"""
Tests for the blob stores and the StudyStore transaction boundary.
"""

import json

import pytest
from sqlalchemy import inspect

from conftest import make_card
from core.content import DECKS, SEED_CARDS, build_seed_cards, get_deck
from core.srs import (
    CARDS_KEY,
    PROGRESS_KEY,
    CardNotFoundError,
    MemoryBlobStore,
    PersistenceError,
    Progress,
    SqlBlobStore,
    StudyStore,
    record_review,
)
from core.srs.models import Base


def test_fresh_store_has_default_progress():
    store = StudyStore(MemoryBlobStore(), daily_goal=25)

    assert store.cards == []
    assert store.progress == Progress(daily_goal=25)


def test_initialize_cards_only_on_first_run(blob_store, now):
    store = StudyStore(blob_store)

    assert store.initialize_cards([make_card("c1")]) is True
    assert store.initialize_cards([make_card("other")]) is False

    assert [c.id for c in store.cards] == ["c1"]
    assert [c["id"] for c in json.loads(blob_store.load(CARDS_KEY))] == ["c1"]


def test_store_reloads_saved_state(study_store, blob_store):
    reopened = StudyStore(blob_store)

    assert reopened.cards == study_store.cards
    assert reopened.progress == study_store.progress


def test_get_card_unknown_id_raises(study_store):
    with pytest.raises(CardNotFoundError) as excinfo:
        study_store.get_card("nope")
    assert excinfo.value.card_id == "nope"
    assert study_store.find_card("nope") is None


def test_commit_review_writes_card_and_progress_together(study_store, blob_store, now):
    card = make_card("c2", repetitions=1, interval=1)
    progress = record_review(study_store.progress, now)
    writes_before = blob_store.write_count

    study_store.commit_review(card, progress)

    assert blob_store.write_count == writes_before + 1
    assert study_store.get_card("c2") == card
    assert study_store.progress == progress
    stored_cards = json.loads(blob_store.load(CARDS_KEY))
    assert [c["id"] for c in stored_cards] == ["c1", "c2", "c3", "b1"]
    assert stored_cards[1]["repetitions"] == 1
    assert json.loads(blob_store.load(PROGRESS_KEY))["totalCardsReviewed"] == 1


def test_failed_commit_leaves_state_untouched(study_store, blob_store, now):
    cards_before = study_store.cards
    progress_before = study_store.progress
    blobs_before = dict(blob_store.blobs)
    blob_store.fail_writes = True

    with pytest.raises(PersistenceError):
        study_store.commit_review(make_card("c1", repetitions=1, interval=1), record_review(progress_before, now))

    assert study_store.cards == cards_before
    assert study_store.progress == progress_before
    assert blob_store.blobs == blobs_before


def test_commit_unknown_card_raises(study_store, now):
    with pytest.raises(CardNotFoundError):
        study_store.commit_review(make_card("ghost"), record_review(study_store.progress, now))


def test_update_daily_goal_persists(study_store, blob_store):
    study_store.update_daily_goal(40)

    assert study_store.progress.daily_goal == 40
    assert StudyStore(blob_store).progress.daily_goal == 40
    with pytest.raises(ValueError):
        study_store.update_daily_goal(0)
    assert study_store.progress.daily_goal == 40


def test_sql_blob_store_roundtrip():
    blobs = SqlBlobStore("sqlite://")

    assert blobs.load("missing") is None
    blobs.save("a", "one")
    blobs.save_many({"a": "two", "b": "three"})

    assert blobs.load("a") == "two"
    assert blobs.load("b") == "three"


def test_sql_blob_store_backs_study_store(tmp_path, now):
    url = f"sqlite:///{tmp_path / 'nested' / 'cards.db'}"
    store = StudyStore(SqlBlobStore(url))
    store.initialize_cards([make_card("c1"), make_card("c2")])
    progress = record_review(store.progress, now)
    store.commit_review(make_card("c2", repetitions=1, interval=1), progress)

    reopened = StudyStore(SqlBlobStore(url))

    assert reopened.get_card("c2").repetitions == 1
    assert reopened.progress == progress
    assert "stored_blob" in inspect(reopened.blob_store.engine).get_table_names()


def test_sql_errors_become_persistence_errors():
    blobs = SqlBlobStore("sqlite://")
    Base.metadata.drop_all(blobs.engine)

    with pytest.raises(PersistenceError):
        blobs.save_many({"a": "one"})
    with pytest.raises(PersistenceError):
        blobs.load("a")


def test_seed_catalogue(now):
    cards = build_seed_cards(now)

    assert len(cards) == len(SEED_CARDS)
    assert len({c.id for c in cards}) == len(cards)
    assert all(c.repetitions == 0 and c.next_review_date == now for c in cards)
    assert {c.deck_id for c in cards} <= {d.id for d in DECKS}
    assert get_deck("world-geography").name == "World Geography"
    assert get_deck("missing") is None


def test_reset_script_reseeds_catalogue(tmp_path, now):
    from scripts.maintenance.reset_study_db import reset

    url = f"sqlite:///{tmp_path / 'cards.db'}"
    store = StudyStore(SqlBlobStore(url))
    store.initialize_cards([make_card("c1")])
    store.commit_review(make_card("c1", repetitions=1, interval=1), record_review(store.progress, now))

    fresh = reset(url)

    assert len(fresh.cards) == len(SEED_CARDS)
    assert fresh.find_card("c1") is None
    assert fresh.progress.total_cards_reviewed == 0
