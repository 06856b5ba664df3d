"""
Global configuration: recognition thresholds, presets, colour table.

All length thresholds are in device pixels.  They are *not* unit-agnostic:
strokes captured in other units (HiDPI canvases, millimetres, normalised
coordinates) need a rescaled preset, see ``Thresholds.scaled``.  Values given
as fractions of the stroke perimeter are dimensionless and never rescaled.
"""

from dataclasses import dataclass, fields, replace

from shaperec._types import ShapeType

# ---------------------------------------------------------------------------
# Recognition thresholds
# ---------------------------------------------------------------------------

# Fields measured in pixels; ``scaled`` multiplies exactly these.
_PIXEL_FIELDS = (
    "min_line_length",
    "min_triangle_side",
    "min_quad_side",
    "min_circle_radius",
    "circle_closure_min",
    "circle_epsilon_min",
    "star_epsilon_min",
    "polygon_epsilon_min",
)


@dataclass(frozen=True)
class Thresholds:
    # --- sparse / explicit-vertex mode ---
    sparse_max_points: int = 6          # 2..6 points skip simplification
    min_line_length: float = 20.0
    min_triangle_side: float = 15.0
    min_quad_side: float = 35.0
    right_angle_tolerance: float = 0.2  # rad, triangles
    rectish_tolerance: float = 0.35     # rad, quadrilaterals

    # --- circle / oval ---
    circle_min_points: int = 10
    circle_closure_min: float = 18.0
    circle_closure_fraction: float = 0.08
    circle_epsilon_min: float = 6.0
    circle_epsilon_fraction: float = 0.02
    circle_min_vertices: int = 6
    min_circle_radius: float = 12.0
    curve_score_floor: float = 0.18

    # --- star ---
    star_min_points: int = 20
    star_min_vertices: int = 8
    star_epsilon_min: float = 5.0
    star_epsilon_fraction: float = 0.015
    star_closure_fraction: float = 0.08
    star_ratio_convex: float = 0.92     # score 0 at or above this ratio
    star_ratio_concave: float = 0.62    # score 1 at or below this ratio
    star_score_floor: float = 0.28

    # --- freehand polygon fallback ---
    polygon_epsilon_min: float = 8.0
    polygon_epsilon_fraction: float = 0.04
    polygon_closure_fraction: float = 0.10

    def scaled(self, factor: float) -> "Thresholds":
        """Return a copy with pixel-denominated thresholds multiplied by *factor*."""
        if factor <= 0:
            raise ValueError(f"scale factor must be positive, got {factor}")
        return replace(self, **{name: getattr(self, name) * factor
                                for name in _PIXEL_FIELDS})

    def as_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


DEFAULT_THRESHOLDS = Thresholds()

THRESHOLD_PRESETS = {
    "default": DEFAULT_THRESHOLDS,
    "hidpi": DEFAULT_THRESHOLDS.scaled(2.0),   # devicePixelRatio == 2 canvases
}

# ---------------------------------------------------------------------------
# Capture gating (drawing-surface contract)
# ---------------------------------------------------------------------------

MODES = ("draw", "points")
MIN_FREEHAND_POINTS = 6     # a free-draw stroke needs strictly more than 5 samples
MIN_PLACED_POINTS = 2
HISTORY_LIMIT = 20

# ---------------------------------------------------------------------------
# Presentation colours (opaque to the recognizer)
# ---------------------------------------------------------------------------

_TEAL = "hsla(175, 80%, 50%, 1)"
_AMBER = "hsla(35, 90%, 55%, 1)"

SHAPE_COLORS = {
    ShapeType.LINE: _TEAL,
    ShapeType.TRIANGLE: _AMBER,
    ShapeType.EQUILATERAL_TRIANGLE: _AMBER,
    ShapeType.ISOSCELES_TRIANGLE: _AMBER,
    ShapeType.RIGHT_TRIANGLE: _AMBER,
    ShapeType.SQUARE: "hsla(280, 60%, 55%, 1)",
    ShapeType.RECTANGLE: "hsla(210, 70%, 55%, 1)",
    ShapeType.DIAMOND: "hsla(330, 70%, 55%, 1)",
    ShapeType.QUADRILATERAL: "hsla(50, 60%, 50%, 1)",
    ShapeType.CIRCLE: _TEAL,
    ShapeType.OVAL: _TEAL,
    ShapeType.STAR: "hsla(45, 90%, 60%, 1)",
}


def polygon_color(n_vertices: int) -> str:
    """Colour for n >= 5 polygons: blue up to hexagons, olive beyond."""
    return "hsla(200, 80%, 55%, 1)" if n_vertices <= 6 else "hsla(60, 60%, 50%, 1)"
