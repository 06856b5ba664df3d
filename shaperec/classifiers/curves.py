"""
Circle / oval detection for dense, closed freehand strokes.

Two independent scores are computed from circularity (4*pi*A / P^2), the
bounding-box aspect ratio and the spread of centroid distances.  The higher
score wins if it clears the floor; ties go to the circle.
"""

import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from shaperec._types import ShapeType
from shaperec.config import DEFAULT_THRESHOLDS, Thresholds
from shaperec.geometry import (
    bounding_box, centroid, clamp01, distance, format_fixed, lerp, order_by_angle,
    perimeter, polygon_area, round_half_up,
)
from shaperec.simplify import drop_closing_point, rdp


@dataclass(frozen=True)
class CurveMatch:
    type: Optional[ShapeType]       # CIRCLE, OVAL or None
    confidence: int = 0
    circularity: float = 0.0
    aspect_ratio: float = 1.0
    radius: float = 0.0

    @property
    def matched(self) -> bool:
        return self.type is not None

    @property
    def summary(self) -> str:
        return f"circularity {format_fixed(self.circularity)} · AR {format_fixed(self.aspect_ratio)}"


NO_CURVE = CurveMatch(None)


def is_closed(points: Sequence, cfg: Thresholds = DEFAULT_THRESHOLDS) -> bool:
    """Endpoints meet within max(18px, 8% of the perimeter)."""
    perim = perimeter(points)
    tol = max(cfg.circle_closure_min, perim * cfg.circle_closure_fraction)
    return distance(points[0], points[-1]) < tol


def circle_score(circ: float, ar: float, dev: float) -> float:
    s_circ = clamp01((circ - 0.70) / (0.95 - 0.70))
    s_ar = clamp01((1.28 - ar) / (1.28 - 1.02))
    s_dev = clamp01((0.30 - dev) / (0.30 - 0.10))
    return s_circ * s_ar * lerp(0.6, 1.0, s_dev)


def oval_score(circ: float, ar: float) -> float:
    s_circ = clamp01((circ - 0.58) / (0.90 - 0.58))
    s_ar = clamp01((ar - 1.10) / (2.20 - 1.10))
    return s_circ * s_ar


def pick_curve(s_circle: float, s_oval: float,
               cfg: Thresholds = DEFAULT_THRESHOLDS) -> Optional[Tuple[ShapeType, int]]:
    """Label and confidence for the better score, or None if both miss the floor.

    Equal scores go to the circle.
    """
    if s_circle < cfg.curve_score_floor and s_oval < cfg.curve_score_floor:
        return None
    if s_circle >= s_oval:
        return ShapeType.CIRCLE, min(99, round_half_up(60 + s_circle * 39))
    return ShapeType.OVAL, min(99, round_half_up(55 + s_oval * 44))


def classify_circle_or_oval(points: Sequence,
                            cfg: Thresholds = DEFAULT_THRESHOLDS) -> CurveMatch:
    if len(points) < cfg.circle_min_points:
        return NO_CURVE
    if not is_closed(points, cfg):
        return NO_CURVE

    perim = perimeter(points)
    eps = max(cfg.circle_epsilon_min, perim * cfg.circle_epsilon_fraction)
    poly = drop_closing_point(rdp(points, eps), perim * cfg.circle_closure_fraction)
    if len(poly) < cfg.circle_min_vertices:
        return NO_CURVE

    area = polygon_area(order_by_angle(poly))
    if area <= 0 or perim <= 0:
        return NO_CURVE
    circ = 4 * math.pi * area / (perim * perim)

    ar = bounding_box(points).aspect_ratio

    c = centroid(points)
    ds = [distance(p, c) for p in points]
    avg_r = sum(ds) / len(ds)
    if avg_r < cfg.min_circle_radius:
        return NO_CURVE
    dev = sum(abs(d - avg_r) / avg_r for d in ds) / len(ds)

    picked = pick_curve(circle_score(circ, ar, dev), oval_score(circ, ar), cfg)
    if picked is None:
        return NO_CURVE
    shape_type, conf = picked
    return CurveMatch(shape_type, conf, circ, ar, avg_r)
