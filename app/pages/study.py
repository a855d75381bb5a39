"""
Study page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.session_controller import (
    end_session,
    process_feedback,
    reveal_answer,
    start_new_session,
)
from app.state import get_store
from app.ui import (
    render_feedback_buttons,
    render_flashcard,
    render_session_complete,
    render_session_stats,
)
from app.ui.flashcard_style import answer_style, question_style
from core import config, srs
from core.content import DECKS, get_deck
from core.study_session import StudySession


def render_study_page() -> None:
    """
    Render the study flow (intro or active session).
    """
    session: StudySession | None = st.session_state.study_session
    if session is None:
        _render_intro_screen()
    else:
        _render_active_session(session)


def _render_intro_screen() -> None:
    store = get_store()
    now = config.now()
    progress = store.progress
    today_count = srs.effective_today_count(progress, now)

    st.title("📚 Exam Flashcards")
    if config.is_test_mode():
        st.warning("⚠️ **TEST MODE** - Using test_flashcards.db (set TEST_MODE=false in .env for production)")
    st.markdown("**Welcome back!** Ready to ace your exams?")

    if st.session_state.last_summary is not None:
        render_session_complete(st.session_state.last_summary)

    col1, col2 = st.columns(2)
    with col1:
        st.metric("Day Streak", progress.current_streak)
    with col2:
        st.metric("Daily Goal", f"{today_count}/{progress.daily_goal}")

    percent = srs.goal_percent(progress, today_count)
    st.markdown(f"**Today's Progress** · {round(percent)}%")
    st.progress(percent / 100)
    left = srs.cards_left_today(progress, today_count)
    if left > 0:
        st.caption(f"{left} cards left to reach your goal")
    else:
        st.caption("You've reached your daily goal! 🎉")

    st.markdown("### Study Decks")
    cards = store.cards
    for deck in DECKS:
        stats = srs.deck_stats(cards, deck.id, now)
        with st.container(border=True):
            info, action = st.columns([3, 1])
            with info:
                premium = " 👑" if deck.is_premium else ""
                st.markdown(f"**{deck.icon} {deck.name}**{premium}")
                st.caption(
                    f"{deck.description} · {stats.total} cards · "
                    f"{stats.due} due · {stats.new} new"
                )
            with action:
                if deck.is_premium:
                    st.button("Locked", key=f"study_{deck.id}", disabled=True, use_container_width=True)
                elif st.button("Study", key=f"study_{deck.id}", type="primary", use_container_width=True):
                    start_new_session(deck.id)
                    st.rerun()


def _render_active_session(session: StudySession) -> None:
    deck = get_deck(session.deck_id)
    deck_name = deck.name if deck else session.deck_id
    accent = deck.color if deck else "#6366F1"

    if render_session_stats(session, deck_name):
        end_session()
        st.rerun()

    card = session.current_card
    if card is None:
        return

    if st.session_state.last_error:
        st.error(st.session_state.last_error)

    if not session.revealed:
        render_flashcard(card.front, label="Question", hint="Reveal to see the answer", style=question_style(accent))
        st.markdown("<br>", unsafe_allow_html=True)
        if st.button("Reveal Answer", use_container_width=True, type="primary"):
            reveal_answer()
            st.rerun()
    else:
        render_flashcard(card.front, label="Question", style=question_style(accent))
        st.markdown("<br>", unsafe_allow_html=True)
        render_flashcard(card.back, label="Answer", style=answer_style(accent))
        st.markdown("<br>", unsafe_allow_html=True)

        feedback = render_feedback_buttons(key_suffix=f"{session.session_id}_{session.cursor}")
        if feedback is not None:
            process_feedback(feedback)
            st.rerun()

    if config.is_test_mode():
        st.caption("TEST MODE - Using test_flashcards.db")
