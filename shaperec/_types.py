"""Shared types for the recognition package (avoids circular imports)."""

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Tuple


class Point(NamedTuple):
    """One 2D sample in device units (pixels)."""
    x: float
    y: float


class ShapeType(Enum):
    """Closed set of labels the recognizer can emit.

    Member values are the display labels.  ``POLYGON`` is the catch-all for
    n > 10 and is rendered as ``"POLYGON (n)"`` by ``RecognizedShape.label``.
    """
    LINE = "LINE"
    TRIANGLE = "TRIANGLE"
    EQUILATERAL_TRIANGLE = "EQUILATERAL TRIANGLE"
    ISOSCELES_TRIANGLE = "ISOSCELES TRIANGLE"
    RIGHT_TRIANGLE = "RIGHT TRIANGLE"
    SQUARE = "SQUARE"
    RECTANGLE = "RECTANGLE"
    DIAMOND = "DIAMOND"
    QUADRILATERAL = "QUADRILATERAL"
    PENTAGON = "PENTAGON"
    HEXAGON = "HEXAGON"
    HEPTAGON = "HEPTAGON"
    OCTAGON = "OCTAGON"
    ENNEAGON = "ENNEAGON"
    DECAGON = "DECAGON"
    POLYGON = "POLYGON"
    CIRCLE = "CIRCLE"
    OVAL = "OVAL"
    STAR = "STAR"

    @property
    def is_triangle(self) -> bool:
        return self in _TRIANGLES

    @property
    def is_quadrilateral(self) -> bool:
        return self in _QUADS

    @property
    def is_curve(self) -> bool:
        return self in (ShapeType.CIRCLE, ShapeType.OVAL)


_TRIANGLES = frozenset({
    ShapeType.TRIANGLE, ShapeType.EQUILATERAL_TRIANGLE,
    ShapeType.ISOSCELES_TRIANGLE, ShapeType.RIGHT_TRIANGLE,
})
_QUADS = frozenset({
    ShapeType.SQUARE, ShapeType.RECTANGLE,
    ShapeType.DIAMOND, ShapeType.QUADRILATERAL,
})

# Named n-gons; anything above ten sides falls back to ShapeType.POLYGON
POLYGON_NAMES = {
    5: ShapeType.PENTAGON,
    6: ShapeType.HEXAGON,
    7: ShapeType.HEPTAGON,
    8: ShapeType.OCTAGON,
    9: ShapeType.ENNEAGON,
    10: ShapeType.DECAGON,
}


@dataclass(frozen=True)
class RecognizedShape:
    """Result of one recognition call.

    ``points`` is the canonical vertex list used to draw the match: a single
    centroid for circles and ovals, angularly ordered vertices otherwise.
    ``vertex_count`` is 0 for circles and ovals and ``len(points)`` for every
    other type.
    """
    type: ShapeType
    confidence: int                      # 0..99, never 100
    vertex_count: int
    description: str
    points: Tuple[Point, ...] = field(default_factory=tuple)
    color: str = ""

    @property
    def label(self) -> str:
        if self.type is ShapeType.POLYGON:
            return f"POLYGON ({self.vertex_count})"
        return self.type.value

    def to_dict(self) -> dict:
        """Plain-dict form: ``{type, confidence, vertexCount, description, points, color}``."""
        return {
            "type": self.label,
            "confidence": int(self.confidence),
            "vertexCount": int(self.vertex_count),
            "description": self.description,
            "points": [{"x": float(p.x), "y": float(p.y)} for p in self.points],
            "color": self.color,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "RecognizedShape":
        label = data["type"]
        if label.startswith("POLYGON ("):
            shape_type = ShapeType.POLYGON
        else:
            shape_type = ShapeType(label)
        return cls(
            type=shape_type,
            confidence=int(data["confidence"]),
            vertex_count=int(data["vertexCount"]),
            description=data.get("description", ""),
            points=tuple(Point(float(p["x"]), float(p["y"])) for p in data["points"]),
            color=data.get("color", ""),
        )
