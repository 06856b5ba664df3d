"""Tests for thresholds, presets and the result data model."""

import dataclasses

import pytest

from shaperec._types import POLYGON_NAMES, Point, RecognizedShape, ShapeType
from shaperec.config import (
    DEFAULT_THRESHOLDS, SHAPE_COLORS, THRESHOLD_PRESETS, Thresholds, polygon_color,
)


class TestThresholds:
    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_THRESHOLDS.min_line_length = 1

    def test_scaled_multiplies_pixel_fields_only(self):
        t = DEFAULT_THRESHOLDS.scaled(2.0)
        assert t.min_line_length == 40.0
        assert t.min_quad_side == 70.0
        assert t.polygon_epsilon_min == 16.0
        assert t.polygon_epsilon_fraction == DEFAULT_THRESHOLDS.polygon_epsilon_fraction
        assert t.star_ratio_concave == DEFAULT_THRESHOLDS.star_ratio_concave
        assert t.circle_min_points == DEFAULT_THRESHOLDS.circle_min_points

    def test_scaled_rejects_non_positive(self):
        with pytest.raises(ValueError):
            DEFAULT_THRESHOLDS.scaled(0)

    def test_hidpi_preset(self):
        assert THRESHOLD_PRESETS["hidpi"] == DEFAULT_THRESHOLDS.scaled(2.0)

    def test_as_dict(self):
        d = Thresholds().as_dict()
        assert d["sparse_max_points"] == 6
        assert d["min_triangle_side"] == 15.0


class TestColors:
    def test_every_fixed_type_has_a_colour(self):
        for t in ShapeType:
            if t in POLYGON_NAMES.values() or t is ShapeType.POLYGON:
                continue
            assert t in SHAPE_COLORS

    def test_polygon_colour_split(self):
        assert polygon_color(5) == polygon_color(6)
        assert polygon_color(7) == polygon_color(12)
        assert polygon_color(6) != polygon_color(7)


class TestShapeType:
    def test_categories(self):
        assert ShapeType.RIGHT_TRIANGLE.is_triangle
        assert ShapeType.DIAMOND.is_quadrilateral
        assert ShapeType.OVAL.is_curve
        assert not ShapeType.STAR.is_curve
        assert not ShapeType.PENTAGON.is_quadrilateral

    def test_display_labels(self):
        assert ShapeType.EQUILATERAL_TRIANGLE.value == "EQUILATERAL TRIANGLE"
        assert ShapeType("ISOSCELES TRIANGLE") is ShapeType.ISOSCELES_TRIANGLE


class TestRecognizedShape:
    def test_dict_roundtrip(self):
        shape = RecognizedShape(ShapeType.CIRCLE, 91, 0, "Radius ≈ 80px",
                                (Point(1.5, 2.0),), SHAPE_COLORS[ShapeType.CIRCLE])
        d = shape.to_dict()
        assert d["vertexCount"] == 0
        assert d["points"] == [{"x": 1.5, "y": 2.0}]
        assert RecognizedShape.from_dict(d) == shape

    def test_label_for_named_type(self):
        shape = RecognizedShape(ShapeType.HEXAGON, 92, 6, "")
        assert shape.label == "HEXAGON"

    def test_frozen(self):
        shape = RecognizedShape(ShapeType.LINE, 90, 2, "")
        with pytest.raises(dataclasses.FrozenInstanceError):
            shape.confidence = 10
