"""Shared dataclass for the strokes package (avoids circular imports)."""

from dataclasses import dataclass, field

import numpy as np


@dataclass
class StrokeSample:
    """One synthetic input for the recognizer."""
    points: np.ndarray                   # float64 [N, 2], capture order
    category: str = ""                   # label the stroke was drawn as
    mode: str = "draw"                   # "draw" (freehand) or "points" (placed vertices)
    metadata: dict = field(default_factory=dict)

    def __len__(self):
        return len(self.points)
