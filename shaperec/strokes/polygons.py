"""
Polygon and star generators.

Triangles and stars are traced freehand.  Squares and regular n-gons are
placed as explicit vertices ("points" mode): traced by hand, a square or a
pentagon is round enough that the circle test claims it first.
"""

import numpy as np

from shaperec.raster import jitter, polyline_samples, regular_polygon_vertices, star_vertices
from shaperec.strokes._types import StrokeSample

_NGON_NAMES = {5: "PENTAGON", 6: "HEXAGON"}


def _rand_center(margin, S):
    return np.random.randint(margin, S - margin, 2)


def _max_radius(center, m, S):
    return min(center[0] - m, S - center[0] - m, center[1] - m, S - center[1] - m)


# ---------------------------------------------------------------------------
# Freehand equilateral triangle
# ---------------------------------------------------------------------------

def gen_triangle(S: int) -> StrokeSample:
    m = 40
    center = _rand_center(m + 50, S)
    radius = np.random.randint(50, max(51, _max_radius(center, m, S) + 1))
    angle_off = np.random.uniform(0, 2 * np.pi)
    verts = regular_polygon_vertices(center, radius, 3, angle_off)
    pts = jitter(polyline_samples(verts, np.random.randint(12, 21)), 1.0)
    return StrokeSample(pts, "EQUILATERAL TRIANGLE", "draw", {"radius": radius})


# ---------------------------------------------------------------------------
# Freehand star
# ---------------------------------------------------------------------------

def gen_star(S: int) -> StrokeSample:
    m = 40
    center = _rand_center(m + 60, S)
    outer_r = np.random.randint(60, max(61, _max_radius(center, m, S) + 1))
    inner_r = outer_r * np.random.uniform(0.35, 0.5)
    angle_off = np.random.uniform(0, 2 * np.pi)
    verts = star_vertices(center, outer_r, inner_r, 5, angle_off)
    pts = jitter(polyline_samples(verts, 10), 1.0)
    return StrokeSample(pts, "STAR", "draw",
                        {"outer_r": outer_r, "inner_r": inner_r, "n_points": 5})


# ---------------------------------------------------------------------------
# Placed vertices
# ---------------------------------------------------------------------------

def gen_placed_square(S: int) -> StrokeSample:
    m = 40
    center = _rand_center(m + 50, S)
    radius = np.random.randint(50, max(51, _max_radius(center, m, S) + 1))
    angle_off = np.random.uniform(0, np.pi / 2)
    verts = regular_polygon_vertices(center, radius, 4, angle_off)
    np.random.shuffle(verts)  # click order must not matter
    pts = jitter(verts, 2.0)
    return StrokeSample(pts, "SQUARE", "points", {"radius": radius})


def gen_placed_polygon(S: int) -> StrokeSample:
    m = 40
    n_sides = np.random.randint(5, 7)
    center = _rand_center(m + 50, S)
    radius = np.random.randint(50, max(51, _max_radius(center, m, S) + 1))
    angle_off = np.random.uniform(0, 2 * np.pi)
    verts = regular_polygon_vertices(center, radius, n_sides, angle_off)
    pts = jitter(verts, 2.0)
    return StrokeSample(pts, _NGON_NAMES[n_sides], "points",
                        {"n_sides": n_sides, "radius": radius})


POLYGON_GENERATORS = [
    gen_triangle,
    gen_star,
    gen_placed_square,
    gen_placed_polygon,
]
