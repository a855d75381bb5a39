"""
Session Statistics UI

Renders progress metrics and controls.
"""

import streamlit as st

from app.session_types import SessionSummary
from core.study_session import StudySession


def render_session_stats(session: StudySession, deck_name: str) -> bool:
    """
    Render session progress metrics and exit button.

    Returns:
        True if quit button was clicked, False otherwise
    """
    col1, col2, col3 = st.columns([3, 2, 1])

    with col1:
        st.markdown(f"### {deck_name}")

    with col2:
        st.metric("Card", f"{session.position}/{session.total}")

    with col3:
        st.markdown("<br>", unsafe_allow_html=True)  # Align with metrics
        if st.button("❌", help="Quit session", use_container_width=True):
            return True

    st.divider()
    return False


def render_session_complete(summary: SessionSummary):
    """Render session completion message."""
    if summary.nothing_due:
        st.success("🎉 All Done! No cards due for review right now.")
        st.caption("Come back later or study a different deck.")
        return

    if summary.completed:
        st.success(f"🎉 Session complete! You reviewed {summary.reviewed} cards.")
    else:
        st.info(f"Session ended early: {summary.reviewed} of {summary.total} cards reviewed.")
    if summary.accuracy is not None:
        st.info(f"Accuracy: {summary.accuracy:.1f}%")
