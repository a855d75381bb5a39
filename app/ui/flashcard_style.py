"""
Flashcard style presets and constants.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---- Shared Card Layout ----

CARD_PADDING = "35px 24px"
CARD_MIN_HEIGHT = "220px"
FRONT_BG_COLOR = "#f0f2f6"
BACK_BG_COLOR = "#e8f4f8"


# ---- Shared Typography Defaults ----

DEFAULT_MAIN_FONT_SIZE = "1.8em"
DEFAULT_MAIN_COLOR = "#1f1f1f"
DEFAULT_LABEL_FONT_SIZE = "0.85em"
DEFAULT_LABEL_COLOR = "#666"
DEFAULT_HINT_FONT_SIZE = "0.8em"
DEFAULT_HINT_COLOR = "#999"


@dataclass(frozen=True)
class FlashcardStyle:
    """
    Visual style preset for flashcards.
    """
    main_font_size: str = DEFAULT_MAIN_FONT_SIZE
    main_color: str = DEFAULT_MAIN_COLOR
    label_font_size: str = DEFAULT_LABEL_FONT_SIZE
    label_color: str = DEFAULT_LABEL_COLOR
    hint_font_size: str = DEFAULT_HINT_FONT_SIZE
    hint_color: str = DEFAULT_HINT_COLOR
    accent_color: str = "#6366F1"
    bg_color: str = FRONT_BG_COLOR


DEFAULT_FLASHCARD_STYLE = FlashcardStyle()


def question_style(accent_color: str) -> FlashcardStyle:
    return FlashcardStyle(accent_color=accent_color, bg_color=FRONT_BG_COLOR)


def answer_style(accent_color: str) -> FlashcardStyle:
    return FlashcardStyle(accent_color=accent_color, bg_color=BACK_BG_COLOR)
