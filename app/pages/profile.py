"""
Profile page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.state import get_store
from core import srs


def render_profile_page() -> None:
    """
    Render lifetime stats and the daily goal setting.
    """
    store = get_store()
    progress = store.progress

    st.subheader("Your Stats")
    col1, col2 = st.columns(2)
    with col1:
        st.metric("Cards Reviewed", progress.total_cards_reviewed)
        st.metric("Longest Streak", f"{progress.longest_streak} days")
    with col2:
        st.metric("Current Streak", f"{progress.current_streak} days")
        st.metric("Study Time", f"{srs.study_hours(progress)}h")

    st.subheader("Settings")
    goal = st.number_input(
        "Daily goal (cards)",
        min_value=1,
        max_value=srs.MAX_DAILY_GOAL,
        value=min(progress.daily_goal, srs.MAX_DAILY_GOAL),
        step=1,
    )
    if int(goal) != progress.daily_goal:
        try:
            store.update_daily_goal(int(goal))
        except srs.PersistenceError as exc:
            st.error(f"Could not save the daily goal: {exc}")
        else:
            st.success(f"Daily goal set to {int(goal)} cards")
