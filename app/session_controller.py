"""
Session lifecycle helpers for Streamlit app.
"""

from __future__ import annotations

import logging

import streamlit as st

from app.session_types import SessionSummary
from app.state import get_store
from core import config, srs
from core.study_session import SessionState, StudySession

logger = logging.getLogger(__name__)


def start_new_session(deck_id: str) -> None:
    """
    Start a study session over the deck's currently due cards.
    """
    store = get_store()
    due = srs.due_cards(store.cards, deck_id, config.now())
    session = StudySession.start(store, deck_id, due)

    st.session_state.last_error = None
    st.session_state.last_outcome = None
    if session.is_finished:
        st.session_state.study_session = None
        st.session_state.last_summary = _summarize(session)
        return
    st.session_state.last_summary = None
    st.session_state.study_session = session


def reveal_answer() -> None:
    session: StudySession = st.session_state.study_session
    if session is not None and not session.is_finished:
        session.reveal()


def process_feedback(grade: srs.Grade) -> None:
    """
    Grade the current card; on a storage failure the card stays on screen.
    """
    session: StudySession = st.session_state.study_session
    if session is None:
        return

    try:
        outcome = session.grade(grade)
    except srs.PersistenceError as exc:
        logger.error("Could not save review: %s", exc)
        st.session_state.last_error = f"Could not save your answer: {exc}. Please try again."
        return
    except srs.CardNotFoundError as exc:
        logger.error("Graded card missing from collection: %s", exc)
        st.session_state.last_error = str(exc)
        return

    st.session_state.last_error = None
    st.session_state.last_outcome = outcome
    if session.is_finished:
        _finish(session)


def end_session() -> None:
    """
    Quit the current session early.
    """
    session: StudySession = st.session_state.study_session
    if session is None:
        return
    if not session.is_finished:
        session.abandon()
    _finish(session)


def _finish(session: StudySession) -> None:
    st.session_state.last_summary = _summarize(session)
    st.session_state.study_session = None
    st.session_state.last_error = None


def _summarize(session: StudySession) -> SessionSummary:
    return SessionSummary(
        deck_id=session.deck_id,
        reviewed=session.reviewed_count,
        correct=session.correct_count,
        total=session.total,
        completed=session.state == SessionState.COMPLETE,
        nothing_due=session.nothing_due,
    )
