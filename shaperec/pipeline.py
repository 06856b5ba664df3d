"""
Recognition pipeline: raw point sequence -> one ``RecognizedShape`` or ``None``.

Routing by point count:

* fewer than 2 points      -> no match
* 2..6 points              -> explicit vertices, classified as given
* more than 6 points       -> freehand: circle/oval, then star, then the
                              simplified polygon

Curves and stars are tried before the coarse polygon tolerance so a round
or spiky stroke is not collapsed into a low-vertex polygon first.
"""

from typing import Optional, Sequence

from shaperec._types import RecognizedShape, ShapeType
from shaperec.classifiers import classify_circle_or_oval, classify_polygon, detect_star
from shaperec.config import DEFAULT_THRESHOLDS, SHAPE_COLORS, Thresholds
from shaperec.geometry import as_points, centroid, format_fixed, perimeter, round_half_up
from shaperec.simplify import drop_closing_point, rdp


def recognize(points: Sequence, thresholds: Thresholds = DEFAULT_THRESHOLDS) -> Optional[RecognizedShape]:
    """Classify a complete stroke.

    Parameters
    ----------
    points : sequence
        Samples in capture order: ``Point``/(x, y) pairs, an (N, 2) array or
        ``{"x": .., "y": ..}`` mappings.
    thresholds : Thresholds
        Pixel thresholds; see ``shaperec.config.THRESHOLD_PRESETS``.

    Returns
    -------
    RecognizedShape or None
        ``None`` means no shape matched.  Raises ``ValueError`` only for
        malformed or non-finite input.
    """
    pts = as_points(points)
    if len(pts) < 2:
        return None

    if len(pts) <= thresholds.sparse_max_points:
        return classify_polygon(pts, thresholds)

    return _recognize_freehand(pts, thresholds)


def _recognize_freehand(pts, cfg: Thresholds) -> Optional[RecognizedShape]:
    # 1) Circle / oval
    curve = classify_circle_or_oval(pts, cfg)
    if curve.matched:
        c = centroid(pts)
        if curve.type is ShapeType.CIRCLE:
            desc = f"Radius ≈ {round_half_up(curve.radius)}px · {curve.summary}"
        else:
            desc = f"Oval · {curve.summary}"
        return RecognizedShape(
            type=curve.type,
            confidence=curve.confidence,
            vertex_count=0,
            description=desc,
            points=(c,),
            color=SHAPE_COLORS[curve.type],
        )

    # 2) Star
    star = detect_star(pts, cfg)
    if star.match:
        outline = star.vertices
        return RecognizedShape(
            type=ShapeType.STAR,
            confidence=star.confidence,
            vertex_count=len(outline),
            description=f"Concave · ratio {format_fixed(star.concavity_ratio)} · {len(outline)} pts",
            points=tuple(outline),
            color=SHAPE_COLORS[ShapeType.STAR],
        )

    # 3) Simplified polygon
    perim = perimeter(pts)
    epsilon = max(cfg.polygon_epsilon_min, perim * cfg.polygon_epsilon_fraction)
    verts = drop_closing_point(rdp(pts, epsilon), perim * cfg.polygon_closure_fraction)
    return classify_polygon(verts, cfg)
