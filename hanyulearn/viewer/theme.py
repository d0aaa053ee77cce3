"""Colour theme for the HanyuLearn screens."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    primary: str = "#E53935"
    primary_light: str = "#FDECEA"
    background: str = "#F8F9FA"
    card_background: str = "#FFFFFF"
    text_primary: str = "#212121"
    text_secondary: str = "#757575"
    text_muted: str = "#9E9E9E"
    border: str = "#E0E0E0"
    star: str = "#FFB300"
    success: str = "#4CAF50"


DEFAULT_THEME = Theme()
