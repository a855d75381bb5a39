"""
Streamlit session state and store initialization helpers.
"""

from __future__ import annotations

import streamlit as st

from core import config
from core.content import build_seed_cards
from core.srs import SqlBlobStore, StudyStore


@st.cache_resource
def _build_store() -> StudyStore:
    store = StudyStore(
        SqlBlobStore(config.get_database_url()),
        daily_goal=config.get_initial_daily_goal(),
    )
    store.initialize_cards(build_seed_cards(config.now()))
    return store


def get_store() -> StudyStore:
    """
    Process-wide study store (cached per Streamlit server).

    Seeds the card catalogue on first run.
    """
    return _build_store()


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with defaults.
    """
    if "study_session" not in st.session_state:
        st.session_state.study_session = None
    if "last_summary" not in st.session_state:
        st.session_state.last_summary = None
    if "last_error" not in st.session_state:
        st.session_state.last_error = None
    if "last_outcome" not in st.session_state:
        st.session_state.last_outcome = None
