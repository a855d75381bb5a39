"""
Tests for the SM-2 scheduler (pure, no storage).
"""

from datetime import date, datetime, timedelta
from itertools import product
from zoneinfo import ZoneInfo

import pytest

from conftest import make_card
from core.srs import Grade, InvalidGradeError, apply_update, parse_grade, schedule
from core.srs.scheduler import round_half_up


SUCCESS_GRADES = [Grade.HARD, Grade.GOOD, Grade.EASY]


def test_good_after_two_repetitions_multiplies_interval(now):
    card = make_card(ease_factor=2.5, interval=6, repetitions=2)

    update = schedule(card, Grade.GOOD, now)

    assert update.ease_factor == 2.5
    assert update.interval == 15
    assert update.repetitions == 3
    assert update.last_review_date == now
    assert update.next_review_date == now + timedelta(days=15)


def test_again_resets_repetitions_and_keeps_ease(now):
    card = make_card(ease_factor=2.5, interval=15, repetitions=3)

    update = schedule(card, Grade.AGAIN, now)

    assert update.ease_factor == 2.5
    assert update.interval == 1
    assert update.repetitions == 0
    assert update.next_review_date == now + timedelta(days=1)


@pytest.mark.parametrize("ease,interval,repetitions", [
    (2.5, 0, 0),
    (1.3, 1, 1),
    (3.1, 40, 7),
])
def test_again_always_gives_one_day(now, ease, interval, repetitions):
    card = make_card(ease_factor=ease, interval=interval, repetitions=repetitions)

    update = schedule(card, Grade.AGAIN, now)

    assert update.repetitions == 0
    assert update.interval == 1
    assert update.ease_factor == ease


@pytest.mark.parametrize("grade,expected_ease", [
    (Grade.HARD, 2.35),
    (Grade.GOOD, 2.5),
    (Grade.EASY, 2.65),
])
def test_first_success_on_fresh_card(now, grade, expected_ease):
    update = schedule(make_card(), grade, now)

    assert update.repetitions == 1
    assert update.interval == 1
    assert update.ease_factor == pytest.approx(expected_ease)


@pytest.mark.parametrize("grade", SUCCESS_GRADES)
def test_second_success_is_six_days(now, grade):
    card = make_card(interval=1, repetitions=1)

    update = schedule(card, grade, now)

    assert update.repetitions == 2
    assert update.interval == 6


def test_third_success_uses_updated_ease_and_previous_interval(now):
    card = make_card(ease_factor=2.5, interval=6, repetitions=2)

    assert schedule(card, Grade.HARD, now).interval == 14   # round(6 * 2.35)
    assert schedule(card, Grade.EASY, now).interval == 16   # round(6 * 2.65)


def test_interval_rounds_half_up(now):
    card = make_card(ease_factor=2.5, interval=3, repetitions=2)

    assert schedule(card, Grade.GOOD, now).interval == 8  # 7.5 -> 8
    assert round_half_up(37.5) == 38
    assert round_half_up(14.1) == 14


def test_hard_never_drops_ease_below_floor(now):
    card = make_card(ease_factor=1.3, interval=10, repetitions=4)

    update = schedule(card, Grade.HARD, now)

    assert update.ease_factor == 1.3
    assert update.interval == 13


def test_ease_floor_and_date_invariant_for_all_short_grade_sequences(now):
    grades = list(Grade)
    for sequence in product(grades, repeat=5):
        card = make_card()
        moment = now
        for grade in sequence:
            update = schedule(card, grade, moment)
            card = apply_update(card, update)

            assert card.ease_factor >= 1.3
            assert card.interval >= 1
            assert card.next_review_date == card.last_review_date + timedelta(days=card.interval)
            if grade == Grade.AGAIN:
                assert card.repetitions == 0
            moment = card.next_review_date


def test_next_review_keeps_time_of_day_across_dst():
    new_york = ZoneInfo("America/New_York")
    before_switch = datetime(2026, 3, 7, 9, 0, tzinfo=new_york)
    card = make_card(interval=1, repetitions=1)

    update = schedule(card, Grade.GOOD, before_switch)

    assert update.interval == 6
    assert update.next_review_date.date() == date(2026, 3, 13)
    assert (update.next_review_date.hour, update.next_review_date.minute) == (9, 0)
    assert update.next_review_date.utcoffset() != before_switch.utcoffset()


def test_apply_update_keeps_content(now):
    card = make_card("c9", deck_id="deck-z")

    updated = apply_update(card, schedule(card, Grade.GOOD, now))

    assert (updated.id, updated.front, updated.back, updated.deck_id) == (
        "c9", card.front, card.back, "deck-z"
    )
    assert card.repetitions == 0  # original untouched


@pytest.mark.parametrize("raw,expected", [
    ("again", Grade.AGAIN),
    ("Hard", Grade.HARD),
    (" good ", Grade.GOOD),
    (Grade.EASY, Grade.EASY),
])
def test_parse_grade_accepts_known_values(raw, expected):
    assert parse_grade(raw) is expected


@pytest.mark.parametrize("raw", ["medium", "", None, 3])
def test_parse_grade_rejects_unknown_values(raw):
    with pytest.raises(InvalidGradeError):
        parse_grade(raw)
