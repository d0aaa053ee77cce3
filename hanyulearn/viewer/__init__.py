"""
HanyuLearn Viewer - Rendering components for the review screens.

This module provides:
- Theme: immutable colour configuration
- Flashcard and example card rendering
- Writing practice pad rendering
"""

from .theme import (
    Theme,
    DEFAULT_THEME,
)

from .cards import (
    get_card_css,
    highlight_keyword,
    render_vocabulary_card,
    render_example_card,
    render_progress_label,
    render_writing_pad,
    PAD_SIZE,
)

__all__ = [
    # Theme
    "Theme",
    "DEFAULT_THEME",
    # Cards
    "get_card_css",
    "highlight_keyword",
    "render_vocabulary_card",
    "render_example_card",
    "render_progress_label",
    "render_writing_pad",
    "PAD_SIZE",
]
