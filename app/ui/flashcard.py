"""
Flashcard UI Component

Renders one side of a flashcard.
"""

from __future__ import annotations

import html

import streamlit as st
from app.ui.flashcard_style import (
    CARD_MIN_HEIGHT,
    CARD_PADDING,
    DEFAULT_FLASHCARD_STYLE,
    FlashcardStyle,
)


def render_flashcard(
    main_text: str,
    label: str = "",
    hint: str = "",
    style: FlashcardStyle | None = None,
) -> None:
    """
    Render a flashcard side.

    Args:
        main_text: Card text (center)
        label: Small caption above the text (e.g. "Question")
        hint: Small caption at the bottom (e.g. "Reveal to see the answer")
        style: Optional style preset
    """
    resolved_style = style or DEFAULT_FLASHCARD_STYLE

    label_html = ""
    if label:
        label_html = (
            f'<div style="font-size: {resolved_style.label_font_size}; '
            f'color: {resolved_style.accent_color}; text-transform: uppercase; '
            f'letter-spacing: 0.08em; margin-bottom: 12px;">{html.escape(label)}</div>'
        )

    main_html = (
        f'<div style="font-size: {resolved_style.main_font_size}; '
        f'color: {resolved_style.main_color}; margin: 0; text-align: center; '
        'line-height: 1.4; max-width: 100%; overflow-wrap: anywhere;">'
        f"{html.escape(main_text)}</div>"
    )

    hint_html = ""
    if hint:
        hint_html = (
            f'<div style="font-size: {resolved_style.hint_font_size}; '
            f'color: {resolved_style.hint_color}; margin-top: 18px;">{html.escape(hint)}</div>'
        )

    card_html = (
        f'<div style="background-color: {resolved_style.bg_color}; padding: {CARD_PADDING}; '
        f'border-radius: 15px; border-top: 4px solid {resolved_style.accent_color}; '
        'text-align: center; box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1); '
        f'min-height: {CARD_MIN_HEIGHT}; display: flex; flex-direction: column; '
        'align-items: center; justify-content: center;">'
        f"{label_html}{main_html}{hint_html}</div>"
    )

    st.markdown(card_html, unsafe_allow_html=True)
