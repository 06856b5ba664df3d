"""Star detection: concavity measured as polygon area over convex-hull area."""

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from shaperec._types import Point
from shaperec.config import DEFAULT_THRESHOLDS, Thresholds
from shaperec.geometry import (
    clamp01, convex_hull, order_by_angle, perimeter, polygon_area, round_half_up,
)
from shaperec.simplify import drop_closing_point, rdp


@dataclass(frozen=True)
class StarMatch:
    match: bool
    confidence: int = 0
    simplified_count: int = 0
    concavity_ratio: float = 1.0
    vertices: Tuple[Point, ...] = field(default_factory=tuple)


def star_outline(points: Sequence, cfg: Thresholds = DEFAULT_THRESHOLDS) -> List[Point]:
    """Aggressively simplified, angularly ordered outline of a closed stroke."""
    perim = perimeter(points)
    eps = max(cfg.star_epsilon_min, perim * cfg.star_epsilon_fraction)
    poly = drop_closing_point(rdp(points, eps), perim * cfg.star_closure_fraction)
    return order_by_angle(poly)


def concavity_ratio(ordered: Sequence) -> float:
    """Area over hull area: 1.0 for convex outlines, lower for concave ones."""
    area = polygon_area(ordered)
    hull_area = polygon_area(convex_hull(ordered))
    if area <= 0 or hull_area <= 0:
        return 1.0
    return area / hull_area


def detect_star(points: Sequence, cfg: Thresholds = DEFAULT_THRESHOLDS) -> StarMatch:
    if len(points) < cfg.star_min_points:
        return StarMatch(False)

    poly = star_outline(points, cfg)
    if len(poly) < cfg.star_min_vertices:
        return StarMatch(False, simplified_count=len(poly))

    ratio = concavity_ratio(poly)
    span = cfg.star_ratio_convex - cfg.star_ratio_concave
    score = clamp01((cfg.star_ratio_convex - ratio) / span)
    if score < cfg.star_score_floor:
        return StarMatch(False, simplified_count=len(poly), concavity_ratio=ratio)

    return StarMatch(
        True,
        confidence=min(99, round_half_up(60 + score * 39)),
        simplified_count=len(poly),
        concavity_ratio=ratio,
        vertices=tuple(poly),
    )
