"""
Recognition session: the capture contract of a drawing surface, minus the UI.

A session collects samples in one of two modes and hands the finished stroke
to ``recognize``:

* ``"draw"``   -- freehand; a stroke is only recognized with more than 5 samples
* ``"points"`` -- explicit vertices; recognized once at least 2 are placed

Matches are kept in a bounded history, most recent first.
"""

from typing import List, Optional

from shaperec._types import Point, RecognizedShape
from shaperec.config import (
    DEFAULT_THRESHOLDS, HISTORY_LIMIT, MIN_FREEHAND_POINTS, MIN_PLACED_POINTS, MODES,
)
from shaperec.geometry import as_points
from shaperec.pipeline import recognize


class RecognitionSession:
    """Stateful wrapper around the pure recognizer."""

    def __init__(self, mode="draw", thresholds=DEFAULT_THRESHOLDS, history_limit=HISTORY_LIMIT):
        self.thresholds = thresholds
        self.history_limit = history_limit
        self.history: List[RecognizedShape] = []
        self.last_result: Optional[RecognizedShape] = None
        self._pending: List[Point] = []
        self._mode = None
        self.set_mode(mode)

    # ------------------------------------------------------------------
    # Mode & pending input
    # ------------------------------------------------------------------

    @property
    def mode(self):
        return self._mode

    def set_mode(self, mode):
        """Switch capture mode; pending samples are discarded."""
        if mode not in MODES:
            raise ValueError(f"unknown mode {mode!r}, expected one of {MODES}")
        self._mode = mode
        self.clear()

    @property
    def pending(self) -> List[Point]:
        return list(self._pending)

    def add_point(self, x, y):
        self._pending.extend(as_points([(x, y)]))

    def clear(self):
        """Drop pending samples and the last result.  History is kept."""
        self._pending = []
        self.last_result = None

    # ------------------------------------------------------------------
    # Recognition
    # ------------------------------------------------------------------

    def ready(self) -> bool:
        """Whether the pending input passes the mode's minimum-length gate."""
        if self._mode == "draw":
            return len(self._pending) >= MIN_FREEHAND_POINTS
        return len(self._pending) >= MIN_PLACED_POINTS

    def finish(self) -> Optional[RecognizedShape]:
        """Recognize the pending stroke (if gated in) and reset for the next one."""
        if not self.ready():
            self._pending = []
            return None
        points, self._pending = self._pending, []
        return self._record(recognize(points, self.thresholds))

    def recognize(self, points) -> Optional[RecognizedShape]:
        """One-shot recognition of a complete stroke, recorded like ``finish``."""
        return self._record(recognize(points, self.thresholds))

    def _record(self, shape):
        self.last_result = shape
        if shape is not None:
            self.history.insert(0, shape)
            del self.history[self.history_limit:]
        return shape
