"""
Plane geometry primitives shared by the simplifier and the classifiers.

Everything here is a pure function over sequences of ``Point`` (or anything
indexable as ``p[0], p[1]``).  No function mutates its input.
"""

import math
from collections.abc import Mapping
from typing import List, NamedTuple, Sequence

import numpy as np

from shaperec._types import Point


# ---------------------------------------------------------------------------
# Input normalisation
# ---------------------------------------------------------------------------

def as_points(points) -> List[Point]:
    """Normalise caller input into a fresh list of ``Point``.

    Accepts ``Point``/tuples/lists, an (N, 2) numpy array, or mappings with
    ``x`` and ``y`` keys.  Non-finite coordinates are a caller bug and raise
    ``ValueError``.
    """
    out = []
    for i, p in enumerate(points):
        if isinstance(p, Mapping):
            x, y = p["x"], p["y"]
        else:
            if len(p) != 2:
                raise ValueError(f"point {i} must have exactly two coordinates, got {p!r}")
            x, y = p[0], p[1]
        x, y = float(x), float(y)
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f"point {i} has non-finite coordinates ({x}, {y})")
        out.append(Point(x, y))
    return out


def _as_array(points) -> np.ndarray:
    return np.asarray([(p[0], p[1]) for p in points], dtype=np.float64).reshape(-1, 2)


# ---------------------------------------------------------------------------
# Metric primitives
# ---------------------------------------------------------------------------

def distance(a, b) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def centroid(points: Sequence) -> Point:
    """Arithmetic mean of the points.  Undefined (``ValueError``) for no points."""
    if len(points) == 0:
        raise ValueError("centroid of an empty point sequence is undefined")
    cx, cy = _as_array(points).mean(axis=0)
    return Point(float(cx), float(cy))


def perimeter(points: Sequence) -> float:
    """Length of the closed loop through *points* (last wraps to first)."""
    n = len(points)
    return sum(distance(points[i], points[(i + 1) % n]) for i in range(n))


def angle_at(a, b, c) -> float:
    """Unsigned angle at vertex *b* between rays b->a and b->c, in [0, pi]."""
    abx, aby = a[0] - b[0], a[1] - b[1]
    cbx, cby = c[0] - b[0], c[1] - b[1]
    dot = abx * cbx + aby * cby
    cross = abx * cby - aby * cbx
    return math.atan2(abs(cross), dot)


def point_to_segment_distance(p, a, b) -> float:
    """Perpendicular distance from *p* to the line through *a* and *b*.

    Falls back to the distance to *a* when the segment is degenerate.
    """
    dx, dy = b[0] - a[0], b[1] - a[1]
    length = math.hypot(dx, dy)
    if length == 0:
        return distance(p, a)
    return abs((p[0] - a[0]) * dy - (p[1] - a[1]) * dx) / length


def polygon_area(points: Sequence) -> float:
    """Absolute shoelace area.  Vertices must already be in traversal order."""
    if len(points) < 3:
        return 0.0
    arr = _as_array(points)
    x, y = arr[:, 0], arr[:, 1]
    s = np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))
    return float(abs(s) / 2.0)


class BoundingBox(NamedTuple):
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def aspect_ratio(self) -> float:
        """Long side over short side (>= 1); the short side is floored at 1px."""
        short = max(1.0, min(self.width, self.height))
        return max(self.width, self.height) / short


def bounding_box(points: Sequence) -> BoundingBox:
    if len(points) == 0:
        raise ValueError("bounding box of an empty point sequence is undefined")
    arr = _as_array(points)
    lo = arr.min(axis=0)
    hi = arr.max(axis=0)
    return BoundingBox(float(lo[0]), float(lo[1]), float(hi[0]), float(hi[1]))


# ---------------------------------------------------------------------------
# Ordering & hull
# ---------------------------------------------------------------------------

def order_by_angle(points: Sequence) -> List[Point]:
    """Sort vertices by polar angle around their centroid, ascending.

    The sort is stable, so points sharing an angle (including points that
    coincide with the centroid) keep their input order.
    """
    if len(points) == 0:
        return []
    c = centroid(points)
    pts = [Point(float(p[0]), float(p[1])) for p in points]
    return sorted(pts, key=lambda p: math.atan2(p.y - c.y, p.x - c.x))


def _cross(o, a, b) -> float:
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def convex_hull(points: Sequence) -> List[Point]:
    """Monotone-chain convex hull, counter-clockwise, no collinear points.

    Three or fewer points are returned as they are.
    """
    pts = [Point(float(p[0]), float(p[1])) for p in points]
    if len(pts) <= 3:
        return pts
    pts.sort()

    lower: List[Point] = []
    for p in pts:
        while len(lower) >= 2 and _cross(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)

    upper: List[Point] = []
    for p in reversed(pts):
        while len(upper) >= 2 and _cross(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)

    return lower[:-1] + upper[:-1]


# ---------------------------------------------------------------------------
# Small numeric helpers used by the scorers
# ---------------------------------------------------------------------------

def clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def round_half_up(x: float) -> int:
    """Round .5 upwards (towards +inf) rather than to even."""
    return int(math.floor(x + 0.5))


def format_fixed(x: float, digits: int = 2) -> str:
    """Fixed-point text with halves rounded up, so 0.125 reads "0.13"."""
    scale = 10 ** digits
    return f"{round_half_up(x * scale) / scale:.{digits}f}"
