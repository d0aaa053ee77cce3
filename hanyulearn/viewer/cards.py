"""
Card renderer - HTML for the review screens.

Provides:
- Vocabulary flashcards
- Example sentence cards with keyword highlighting
- Writing practice pad (SVG grid + ink strokes)
"""

import html
from typing import Iterable, Optional

from hanyulearn.schemas import InnerItem, OuterItem

from .theme import DEFAULT_THEME, Theme


PAD_SIZE = 200


def get_card_css(theme: Theme = DEFAULT_THEME) -> str:
    """Get CSS styles for review cards."""
    return f"""
    <style>
    .review-card {{
        background: {theme.card_background};
        border: 1px solid {theme.border};
        border-radius: 16px;
        padding: 1.5em;
        margin: 1em 0;
        text-align: center;
    }}
    .review-word {{
        font-size: 3.5em;
        color: {theme.text_primary};
        font-weight: 600;
    }}
    .review-pinyin {{
        font-size: 1.2em;
        color: {theme.text_secondary};
        margin-top: 0.3em;
    }}
    .review-meaning {{
        font-size: 1.1em;
        color: {theme.text_primary};
        margin-top: 0.8em;
    }}
    .review-sentence {{
        font-size: 1.8em;
        color: {theme.text_primary};
        line-height: 1.5;
    }}
    .review-keyword {{
        color: {theme.primary};
        font-weight: 700;
    }}
    .review-badges {{
        margin-top: 1em;
        font-size: 0.9em;
    }}
    .review-badge-mastered {{
        color: {theme.success};
    }}
    .review-badge-favorite {{
        color: {theme.star};
    }}
    .review-progress {{
        color: {theme.text_muted};
        text-align: center;
    }}
    .review-fallback {{
        background: {theme.primary_light};
        color: {theme.primary};
        border-radius: 8px;
        padding: 0.4em 0.8em;
        font-size: 0.85em;
    }}
    </style>
    """


def highlight_keyword(text: str, keyword: Optional[str]) -> str:
    """Escape text and wrap the first occurrence of keyword in a highlight span."""
    if not keyword or keyword not in text:
        return html.escape(text)
    before, _, after = text.partition(keyword)
    return (
        f'{html.escape(before)}'
        f'<span class="review-keyword">{html.escape(keyword)}</span>'
        f'{html.escape(after)}'
    )


def _badges(mastered: bool, favorite: bool) -> str:
    parts = []
    if mastered:
        parts.append('<span class="review-badge-mastered">✓ Đã nhớ</span>')
    if favorite:
        parts.append('<span class="review-badge-favorite">★ Yêu thích</span>')
    if not parts:
        return ""
    return f'<div class="review-badges">{" · ".join(parts)}</div>'


def render_vocabulary_card(
    outer: OuterItem,
    inner: InnerItem,
    mastered: bool = False,
    favorite: bool = False,
) -> str:
    """Render a word flashcard."""
    parts = ['<div class="review-card">']
    parts.append(f'<div class="review-word">{html.escape(inner.text or outer.word)}</div>')
    parts.append(f'<div class="review-pinyin">{html.escape(inner.pinyin or outer.pinyin)}</div>')
    parts.append(f'<div class="review-meaning">{html.escape(inner.translation or outer.meaning)}</div>')
    parts.append(_badges(mastered, favorite))
    parts.append('</div>')
    return ''.join(parts)


def render_example_card(
    outer: OuterItem,
    inner: InnerItem,
    mastered: bool = False,
    favorite: bool = False,
) -> str:
    """Render an example sentence with the word it illustrates highlighted."""
    keyword = inner.keyword or outer.word
    parts = ['<div class="review-card">']
    parts.append(f'<div class="review-pinyin">{html.escape(outer.word)} · {html.escape(outer.pinyin)}</div>')
    parts.append(f'<div class="review-sentence">{highlight_keyword(inner.text, keyword)}</div>')
    parts.append(f'<div class="review-pinyin">{highlight_keyword(inner.pinyin, inner.keyword_pinyin)}</div>')
    parts.append(f'<div class="review-meaning">{html.escape(inner.translation)}</div>')
    parts.append(_badges(mastered, favorite))
    parts.append('</div>')
    return ''.join(parts)


def render_progress_label(completed: int, total: int) -> str:
    return f'<div class="review-progress">{completed} / {total}</div>'


def render_writing_pad(paths: Iterable[str], theme: Theme = DEFAULT_THEME, size: int = PAD_SIZE) -> str:
    """
    Render the writing practice pad as an inline SVG.

    The grid (outline, dashed midlines, diagonals) is drawn in a 200x200
    viewBox; ink paths use the same coordinate space.
    """
    n = PAD_SIZE
    m = n // 2
    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{size}" height="{size}" '
        f'viewBox="0 0 {n} {n}" style="background: {theme.card_background}">'
    ]
    parts.append(
        f'<path d="M1,1 L{n - 1},1 L{n - 1},{n - 1} L1,{n - 1} Z" '
        f'stroke="{theme.border}" stroke-width="1" fill="none"/>'
    )
    parts.append(f'<path d="M{m},0 L{m},{n}" stroke="{theme.border}" stroke-width="1" stroke-dasharray="5,5"/>')
    parts.append(f'<path d="M0,{m} L{n},{m}" stroke="{theme.border}" stroke-width="1" stroke-dasharray="5,5"/>')
    parts.append(
        f'<path d="M0,0 L{n},{n} M{n},0 L0,{n}" stroke="{theme.border}" '
        f'stroke-width="0.5" stroke-dasharray="5,5"/>'
    )
    for d in paths:
        parts.append(
            f'<path class="ink" d="{html.escape(d)}" stroke="{theme.text_primary}" stroke-width="6" '
            f'stroke-linecap="round" stroke-linejoin="round" fill="none"/>'
        )
    parts.append('</svg>')
    return ''.join(parts)
