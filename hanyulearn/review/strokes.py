"""
StrokeBuffer - Capture freehand drag gestures as SVG path data.

Used by the writing practice pad. Each stroke is one continuous drag,
stored as an SVG path command string ("M x,y L x,y ..."). Coordinates are
taken in the local space of the drawing surface; no scaling is applied.
"""

import math
from enum import Enum


class StrokeState(str, Enum):
    IDLE = "idle"
    DRAWING = "drawing"


def _fmt(value: float) -> str:
    """Format a coordinate the way SVG path strings are usually written (10, 10.5)."""
    number = float(value)
    assert math.isfinite(number), f"stroke coordinate must be finite, got {value!r}"
    if number.is_integer():
        return str(int(number))
    return repr(number)


class StrokeBuffer:
    """
    Finished strokes plus at most one stroke in progress.

    Single pointer only: a gesture start while a stroke is in progress
    restarts that stroke.
    """

    def __init__(self):
        self._paths: list[str] = []
        self._current: str = ""
        self._state = StrokeState.IDLE

    @property
    def state(self) -> StrokeState:
        return self._state

    @property
    def is_drawing(self) -> bool:
        return self._state == StrokeState.DRAWING

    @property
    def paths(self) -> tuple[str, ...]:
        """Finished strokes, oldest first."""
        return tuple(self._paths)

    @property
    def current_path(self) -> str:
        """Stroke in progress, or an empty string."""
        return self._current

    # -------------------------------------------------------------------------
    # Gesture events
    # -------------------------------------------------------------------------

    def begin(self, x: float, y: float):
        """Gesture start: seed a new path at (x, y)."""
        self._current = f"M{_fmt(x)},{_fmt(y)}"
        self._state = StrokeState.DRAWING

    def move(self, x: float, y: float):
        """Gesture move: extend the stroke in progress with a line to (x, y)."""
        if self._state != StrokeState.DRAWING:
            return
        self._current = f"{self._current} L{_fmt(x)},{_fmt(y)}"

    def end(self):
        """Gesture end: keep the stroke."""
        if self._current:
            self._paths.append(self._current)
        self._current = ""
        self._state = StrokeState.IDLE

    def cancel(self):
        """Gesture interrupted: drop the stroke, leaving no partial mark."""
        self._current = ""
        self._state = StrokeState.IDLE

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    def clear(self):
        """Remove all strokes, including the one in progress."""
        self._paths = []
        self._current = ""
        self._state = StrokeState.IDLE

    def render(self) -> list[str]:
        """All paths to draw: finished strokes, then the one in progress."""
        result = list(self._paths)
        if self._current:
            result.append(self._current)
        return result

    def __len__(self) -> int:
        return len(self._paths)
