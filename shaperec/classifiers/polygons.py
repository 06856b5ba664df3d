"""
Polygon classification from an already simplified vertex set.

Two vertices make a line, three a triangle (equilateral / isosceles / right /
generic), four a quadrilateral (square / rectangle / diamond / generic) and
five or more a named n-gon graded by side-length regularity.

The confidence formulas are empirically tuned blends; treat the constants as
calibration, not as probabilities.
"""

import math
from typing import List, Optional, Sequence

from shaperec._types import POLYGON_NAMES, Point, RecognizedShape, ShapeType
from shaperec.config import DEFAULT_THRESHOLDS, SHAPE_COLORS, Thresholds, polygon_color
from shaperec.geometry import angle_at, clamp01, distance, order_by_angle, round_half_up


def side_lengths(ordered: Sequence) -> List[float]:
    n = len(ordered)
    return [distance(ordered[i], ordered[(i + 1) % n]) for i in range(n)]


def interior_angles(ordered: Sequence) -> List[float]:
    n = len(ordered)
    return [angle_at(ordered[(i - 1) % n], ordered[i], ordered[(i + 1) % n])
            for i in range(n)]


def regularity_score(ordered: Sequence) -> float:
    """1.0 when all sides are equal, falling to 0 at 35% mean deviation."""
    if len(ordered) < 3:
        return 0.0
    sides = side_lengths(ordered)
    avg = sum(sides) / len(sides)
    if avg <= 0:
        return 0.0
    dev = sum(abs(s - avg) / avg for s in sides) / len(sides)
    return clamp01(1 - dev / 0.35)


def _result(shape_type, confidence, description, points, color=None, vertex_count=None):
    pts = tuple(Point(float(p[0]), float(p[1])) for p in points)
    return RecognizedShape(
        type=shape_type,
        confidence=min(99, round_half_up(confidence)),
        vertex_count=len(pts) if vertex_count is None else vertex_count,
        description=description,
        points=pts,
        color=color or SHAPE_COLORS[shape_type],
    )


# ---------------------------------------------------------------------------
# n == 2
# ---------------------------------------------------------------------------

def classify_line(vertices: Sequence, cfg: Thresholds = DEFAULT_THRESHOLDS) -> Optional[RecognizedShape]:
    d = distance(vertices[0], vertices[1])
    if d < cfg.min_line_length:
        return None
    return _result(ShapeType.LINE, 90, f"Length: {round_half_up(d)}px", vertices)


# ---------------------------------------------------------------------------
# n == 3
# ---------------------------------------------------------------------------

def classify_triangle(vertices: Sequence, cfg: Thresholds = DEFAULT_THRESHOLDS) -> Optional[RecognizedShape]:
    ordered = order_by_angle(vertices)
    sides = sorted(side_lengths(ordered))
    if sides[0] < cfg.min_triangle_side:
        return None

    angles = interior_angles(ordered)
    side_ratio = sides[0] / sides[2]
    subtype = ShapeType.TRIANGLE
    conf = 70.0

    if side_ratio > 0.85:
        subtype = ShapeType.EQUILATERAL_TRIANGLE
        conf = 85 + side_ratio * 15
    elif (abs(sides[0] - sides[1]) / sides[2] < 0.15
          or abs(sides[1] - sides[2]) / sides[2] < 0.15):
        subtype = ShapeType.ISOSCELES_TRIANGLE
        conf = 80

    # A near-right corner wins over the side-ratio labels
    if any(abs(a - math.pi / 2) < cfg.right_angle_tolerance for a in angles):
        subtype = ShapeType.RIGHT_TRIANGLE
        conf = 85

    desc = "3 vertices · " + " × ".join(f"{round_half_up(s)}px" for s in sides)
    return _result(subtype, conf, desc, ordered)


# ---------------------------------------------------------------------------
# n == 4
# ---------------------------------------------------------------------------

def classify_quadrilateral(vertices: Sequence, cfg: Thresholds = DEFAULT_THRESHOLDS) -> Optional[RecognizedShape]:
    ordered = order_by_angle(vertices)
    sides = side_lengths(ordered)
    side_min, side_max = min(sides), max(sides)
    if side_min < cfg.min_quad_side:
        return None
    side_ratio = side_min / side_max

    max_angle_diff = max(abs(a - math.pi / 2) for a in interior_angles(ordered))
    rectish = max_angle_diff < cfg.rectish_tolerance

    if rectish and side_ratio > 0.8:
        conf = 70 + side_ratio * 20 + (1 - max_angle_diff) * 10
        return _result(ShapeType.SQUARE, conf, "4 vertices · angles ~90°", ordered)

    if rectish:
        conf = 75 + (1 - max_angle_diff / cfg.rectish_tolerance) * 25
        desc = f"4 vertices · {round_half_up(side_min)}×{round_half_up(side_max)}px"
        return _result(ShapeType.RECTANGLE, conf, desc, ordered)

    if side_ratio > 0.7:
        conf = 65 + side_ratio * 30
        return _result(ShapeType.DIAMOND, conf, "4 vertices · similar sides", ordered)

    return _result(ShapeType.QUADRILATERAL, 60, "4 irregular vertices", ordered)


# ---------------------------------------------------------------------------
# n >= 5
# ---------------------------------------------------------------------------

def classify_regular_polygon(vertices: Sequence, cfg: Thresholds = DEFAULT_THRESHOLDS) -> RecognizedShape:
    ordered = order_by_angle(vertices)
    n = len(ordered)
    reg = regularity_score(ordered)
    shape_type = POLYGON_NAMES.get(n, ShapeType.POLYGON)
    conf = 62 + reg * 30 if n <= 10 else 50 + reg * 20
    desc = f"{n} vertices detected · regularity {round_half_up(reg * 100)}%"
    return _result(shape_type, conf, desc, ordered, color=polygon_color(n))


def classify_polygon(vertices: Sequence, cfg: Thresholds = DEFAULT_THRESHOLDS) -> Optional[RecognizedShape]:
    """Dispatch on vertex count; fewer than two vertices never match."""
    n = len(vertices)
    if n == 2:
        return classify_line(vertices, cfg)
    if n == 3:
        return classify_triangle(vertices, cfg)
    if n == 4:
        return classify_quadrilateral(vertices, cfg)
    if n >= 5:
        return classify_regular_polygon(vertices, cfg)
    return None
