"""End-to-end tests for ``recognize``."""

import math
import re

import numpy as np
import pytest

from shaperec import RecognizedShape, ShapeType, recognize
from shaperec.config import DEFAULT_THRESHOLDS, THRESHOLD_PRESETS
from shaperec.raster import (
    ellipse_samples, jitter, polyline_samples, regular_polygon_vertices, star_vertices,
)
from shaperec.strokes import ALL_GENERATORS


@pytest.fixture
def circle_stroke():
    rng = np.random.default_rng(0)
    return jitter(ellipse_samples((200, 200), (80, 80), 40), 2.0, rng)


@pytest.fixture
def star_stroke():
    verts = star_vertices((250, 250), 100, 40, 5, angle_offset=-math.pi / 2)
    return polyline_samples(verts, points_per_edge=10)


class TestScenarios:
    def test_explicit_square(self):
        shape = recognize([(0, 0), (100, 0), (100, 100), (0, 100)])
        assert shape.type is ShapeType.SQUARE
        assert shape.vertex_count == 4
        assert shape.confidence >= 90

    def test_two_point_line(self):
        shape = recognize([(0, 0), (50, 0)])
        assert shape.type is ShapeType.LINE
        assert "50" in shape.description

    def test_degenerate_short_line(self):
        assert recognize([(0, 0), (5, 0)]) is None

    def test_dense_circle(self, circle_stroke):
        shape = recognize(circle_stroke)
        assert shape.type is ShapeType.CIRCLE
        assert shape.confidence >= 80
        radius = int(re.search(r"Radius ≈ (\d+)px", shape.description).group(1))
        assert abs(radius - 80) <= 3

    def test_star_polyline(self, star_stroke):
        shape = recognize(star_stroke)
        assert shape.type is ShapeType.STAR
        assert shape.vertex_count == 10
        assert 0 < shape.confidence <= 99
        assert shape.description == "Concave · ratio 0.49 · 10 pts"

    @pytest.mark.parametrize("points", [[], [(3, 4)]])
    def test_empty_and_single(self, points):
        assert recognize(points) is None


class TestSparseMode:
    def test_no_simplification_for_six_points(self):
        shape = recognize(regular_polygon_vertices((200, 200), 100, 6))
        assert shape.type is ShapeType.HEXAGON
        assert shape.vertex_count == 6

    def test_pentagon(self):
        shape = recognize(regular_polygon_vertices((200, 200), 100, 5, 0.4))
        assert shape.type is ShapeType.PENTAGON

    def test_triangle_click_order_irrelevant(self):
        a = recognize([(0, 0), (100, 0), (0, 60)])
        b = recognize([(0, 60), (0, 0), (100, 0)])
        assert a == b

    def test_accepts_mappings(self):
        shape = recognize([{"x": 0, "y": 0}, {"x": 100, "y": 0},
                           {"x": 100, "y": 100}, {"x": 0, "y": 100}])
        assert shape.type is ShapeType.SQUARE

    def test_non_finite_raises(self):
        with pytest.raises(ValueError):
            recognize([(0, 0), (math.nan, 5)])


class TestFreehandMode:
    def test_line(self):
        ts = np.linspace(0, 1, 30)[:, None]
        pts = np.array([50, 50]) + np.array([250, 70]) * ts
        shape = recognize(pts)
        assert shape.type is ShapeType.LINE
        assert shape.vertex_count == 2

    def test_triangle(self):
        verts = regular_polygon_vertices((250, 250), 120, 3, -math.pi / 2)
        shape = recognize(polyline_samples(verts, 15))
        assert shape.type is ShapeType.EQUILATERAL_TRIANGLE
        assert shape.vertex_count == 3

    def test_long_rectangle(self):
        corners = [(100, 200), (400, 200), (400, 290), (100, 290)]
        shape = recognize(polyline_samples(corners, 12))
        assert shape.type is ShapeType.RECTANGLE
        assert shape.vertex_count == 4

    def test_oval(self):
        shape = recognize(ellipse_samples((250, 250), (150, 75), 60))
        assert shape.type is ShapeType.OVAL
        assert shape.description.startswith("Oval · circularity")

    def test_circle_reports_centroid(self, circle_stroke):
        shape = recognize(circle_stroke)
        assert shape.vertex_count == 0
        assert len(shape.points) == 1
        cx, cy = shape.points[0]
        assert cx == pytest.approx(200, abs=2)
        assert cy == pytest.approx(200, abs=2)

    def test_star_points_are_outline(self, star_stroke):
        shape = recognize(star_stroke)
        dists = sorted(math.hypot(p.x - 250, p.y - 250) for p in shape.points)
        assert dists[0] == pytest.approx(40, abs=1)
        assert dists[-1] == pytest.approx(100, abs=1)

    def test_scribble_gives_polygon_or_nothing(self):
        rng = np.random.default_rng(11)
        pts = rng.uniform(0, 400, size=(50, 2))
        shape = recognize(pts)
        assert shape is None or isinstance(shape, RecognizedShape)


class TestProperties:
    def test_deterministic(self, circle_stroke, star_stroke):
        for pts in (circle_stroke, star_stroke, [(0, 0), (100, 0), (50, 80)]):
            assert recognize(pts) == recognize(pts)

    def test_input_not_mutated(self, star_stroke):
        before = star_stroke.copy()
        recognize(star_stroke)
        np.testing.assert_array_equal(star_stroke, before)

    def test_result_invariants_over_random_strokes(self):
        np.random.seed(5)
        for _ in range(60):
            for gen in ALL_GENERATORS:
                shape = recognize(gen(512).points)
                if shape is None:
                    continue
                assert 0 < shape.confidence <= 99
                assert len(shape.points) >= 1
                if shape.type.is_curve:
                    assert shape.vertex_count == 0
                    assert len(shape.points) == 1
                else:
                    assert shape.vertex_count == len(shape.points)

    def test_thresholds_are_honoured(self):
        assert recognize([(0, 0), (30, 0)]).type is ShapeType.LINE
        assert recognize([(0, 0), (30, 0)], THRESHOLD_PRESETS["hidpi"]) is None

    def test_default_preset(self):
        assert THRESHOLD_PRESETS["default"] is DEFAULT_THRESHOLDS
