"""
Progress Ledger - Daily Counters and Streaks

Aggregate study counters keyed by calendar day.

Key concepts:
- Streak: consecutive calendar days with at least one graded review
- Daily goal: number of reviews the user aims for each day
- Calendar days are compared by date in the timezone of "now", never by
  24-hour offsets, so DST transitions do not break or double-count streaks
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta
from typing import Optional

from core.srs.constants import DEFAULT_DAILY_GOAL, MAX_DAILY_GOAL


@dataclass(frozen=True)
class Progress:
    """
    Process-wide study counters (one per installation).
    """
    current_streak: int = 0
    longest_streak: int = 0
    total_cards_reviewed: int = 0
    total_study_time: int = 0  # seconds
    daily_goal: int = DEFAULT_DAILY_GOAL
    today_cards_reviewed: int = 0
    last_study_date: Optional[datetime] = None


def calendar_date(moment: datetime, reference: datetime) -> date:
    """
    Calendar date of a moment as seen from the timezone of reference.
    """
    if moment.tzinfo is not None and reference.tzinfo is not None:
        moment = moment.astimezone(reference.tzinfo)
    return moment.date()


def record_review(
    progress: Progress,
    now: datetime,
    study_seconds: int = 0
) -> Progress:
    """
    Count one graded review and return the new ledger.

    The previous study day is captured before anything is changed; the
    streak transition is evaluated against that captured value, so only the
    first review of a calendar day can move the streak.

    Args:
        progress: Ledger before the review
        now: Review instant (timezone-aware)
        study_seconds: Time spent on the card, added to total_study_time

    Returns:
        New Progress (the input is not modified)
    """
    today = now.date()
    last_study = (
        calendar_date(progress.last_study_date, now)
        if progress.last_study_date is not None
        else None
    )

    today_count = progress.today_cards_reviewed if last_study == today else 0
    today_count += 1

    current_streak = progress.current_streak
    if last_study == today:
        pass
    elif last_study == today - timedelta(days=1):
        current_streak += 1
    else:
        current_streak = 1

    return replace(
        progress,
        current_streak=current_streak,
        longest_streak=max(progress.longest_streak, current_streak),
        total_cards_reviewed=progress.total_cards_reviewed + 1,
        total_study_time=progress.total_study_time + max(0, int(study_seconds)),
        today_cards_reviewed=today_count,
        last_study_date=now,
    )


def set_daily_goal(progress: Progress, goal: int) -> Progress:
    """
    Change the daily goal.

    Raises:
        ValueError: if goal is not an integer between 1 and MAX_DAILY_GOAL
    """
    if isinstance(goal, bool) or not isinstance(goal, int) or not 1 <= goal <= MAX_DAILY_GOAL:
        raise ValueError(f"Daily goal must be an integer between 1 and {MAX_DAILY_GOAL}, got {goal!r}")
    return replace(progress, daily_goal=goal)


# ---- Display Helpers ----

def effective_today_count(progress: Progress, now: datetime) -> int:
    """
    Reviews counted for today, or 0 if the last review was on another day.

    The stored counter is only reset by the next review, so displays use this.
    """
    if progress.last_study_date is None:
        return 0
    if calendar_date(progress.last_study_date, now) != now.date():
        return 0
    return progress.today_cards_reviewed


def goal_percent(progress: Progress, today_count: Optional[int] = None) -> float:
    """Daily goal completion in percent, capped at 100."""
    if progress.daily_goal <= 0:
        return 0.0
    count = progress.today_cards_reviewed if today_count is None else today_count
    return min(count / progress.daily_goal * 100.0, 100.0)


def cards_left_today(progress: Progress, today_count: Optional[int] = None) -> int:
    """Reviews still needed to reach the daily goal (never negative)."""
    count = progress.today_cards_reviewed if today_count is None else today_count
    return max(0, progress.daily_goal - count)


def study_hours(progress: Progress) -> int:
    """Total study time in whole hours."""
    return math.floor(progress.total_study_time / 3600)
