"""Ramer-Douglas-Peucker path simplification."""

from typing import List, Sequence

from shaperec._types import Point
from shaperec.geometry import distance, point_to_segment_distance


def rdp(points: Sequence, epsilon: float) -> List[Point]:
    """Reduce *points* to the vertices that deviate more than *epsilon*.

    The first and last points are always kept and every discarded point lies
    within *epsilon* of the returned polyline.  Ties for the farthest point
    go to the lowest index.  Sequences of two or fewer points come back
    unchanged (as a new list).
    """
    if epsilon < 0:
        raise ValueError(f"epsilon must be >= 0, got {epsilon}")
    pts = [Point(float(p[0]), float(p[1])) for p in points]
    if len(pts) <= 2:
        return pts
    return _rdp(pts, 0, len(pts) - 1, epsilon)


def _rdp(pts: List[Point], lo: int, hi: int, epsilon: float) -> List[Point]:
    start, end = pts[lo], pts[hi]
    max_dist = 0.0
    index = lo
    for i in range(lo + 1, hi):
        d = point_to_segment_distance(pts[i], start, end)
        if d > max_dist:
            max_dist = d
            index = i

    if max_dist > epsilon:
        left = _rdp(pts, lo, index, epsilon)
        right = _rdp(pts, index, hi, epsilon)
        return left[:-1] + right
    return [start, end]


def drop_closing_point(poly: List[Point], tolerance: float) -> List[Point]:
    """Drop the last vertex of a closed path if it returns to within *tolerance* of the first."""
    if len(poly) > 2 and distance(poly[0], poly[-1]) < tolerance:
        return poly[:-1]
    return poly
