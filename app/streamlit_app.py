"""
Exam Flashcards - Main App

Streamlit UI for the SM-2 flashcard study tool.

Run with:
    streamlit run app/streamlit_app.py
"""

import logging

import streamlit as st

from app.router import PAGES
from app.state import ensure_session_state, get_store
from core import config


# ---- Page Setup ----

st.set_page_config(
    page_title="Exam Flashcards",
    page_icon="📚",
    layout="centered"
)

logging.basicConfig(
    level=config.get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


# ---- Store and Session State Initialization ----

get_store()
ensure_session_state()


# ---- Main App ----

def main():
    """Main app entry point."""
    tabs = st.tabs([page.title for page in PAGES])
    for tab, page in zip(tabs, PAGES):
        with tab:
            page.render()


if __name__ == "__main__":
    main()
