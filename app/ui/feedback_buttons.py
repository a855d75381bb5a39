"""
Feedback Button UI

Renders grading buttons for user feedback.
"""

from __future__ import annotations

from typing import Optional

import streamlit as st
from core import srs


GRADE_BUTTONS = [
    ("❌ Again", srs.Grade.AGAIN),
    ("😰 Hard", srs.Grade.HARD),
    ("👍 Good", srs.Grade.GOOD),
    ("✨ Easy", srs.Grade.EASY),
]


def render_feedback_buttons(key_suffix: str = "") -> Optional[srs.Grade]:
    """
    Render feedback grading buttons.

    Args:
        key_suffix: Makes widget keys unique per card position

    Returns:
        Grade selected by user, or None if no button clicked
    """
    st.markdown("**How well did you remember this?**")

    selected = None
    columns = st.columns(len(GRADE_BUTTONS))
    for column, (label, grade) in zip(columns, GRADE_BUTTONS):
        with column:
            if st.button(label, key=f"grade_{grade.value}_{key_suffix}", use_container_width=True):
                selected = grade
    return selected
