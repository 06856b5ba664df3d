"""Recognition history save / load (JSON)."""

import json
import os
from datetime import datetime

import numpy as np

from shaperec._types import RecognizedShape


class _NumpyEncoder(json.JSONEncoder):
    """JSON encoder that handles numpy types (bool_, int64, float64, etc.)."""

    def default(self, obj):
        if isinstance(obj, (np.bool_,)):
            return bool(obj)
        if isinstance(obj, (np.integer,)):
            return int(obj)
        if isinstance(obj, (np.floating,)):
            return float(obj)
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        return super().default(obj)


def save_history(shapes, path, metadata=None):
    """Persist recognized shapes (most recent first) plus arbitrary metadata."""
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    payload = {
        "shapes": [s.to_dict() for s in shapes],
        "metadata": metadata or {},
        "timestamp": datetime.now().isoformat(),
    }
    with open(path, "w") as f:
        json.dump(payload, f, indent=2, cls=_NumpyEncoder)


def load_history(path):
    """Restore shapes saved by ``save_history``.  Returns (shapes, metadata)."""
    with open(path) as f:
        payload = json.load(f)
    shapes = [RecognizedShape.from_dict(d) for d in payload.get("shapes", [])]
    return shapes, payload.get("metadata", {})


def load_points(path):
    """Read a stroke from JSON: a list of [x, y] pairs or {"x", "y"} objects,
    optionally wrapped as ``{"points": [...], "mode": ...}``.

    Returns (points, mode) where mode is None when the file does not say.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Cannot read stroke file: {path}")
    with open(path) as f:
        data = json.load(f)
    if isinstance(data, dict):
        return data["points"], data.get("mode")
    return data, None
