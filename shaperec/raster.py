"""
Rasterisation and stroke-sampling utilities backed by OpenCV.

Drawing functions operate on float32 RGB numpy images of shape (H, W, 3) in
[0, 1].  Anti-aliased rendering (LINE_AA) is used throughout.  The sampling
helpers at the bottom produce dense point sequences along ideal outlines and
are shared by the synthetic stroke generators and the tests.
"""

import colorsys
import re

import cv2
import numpy as np

from shaperec.geometry import centroid


STROKE_COLOR = (0.55, 0.55, 0.6)
BACKGROUND = (0.03, 0.04, 0.06)


def _pt(p):
    return int(round(p[0])), int(round(p[1]))


# ---------------------------------------------------------------------------
# Colours
# ---------------------------------------------------------------------------

_HSLA_RE = re.compile(
    r"hsla?\(\s*([\d.]+)\s*,\s*([\d.]+)%\s*,\s*([\d.]+)%\s*(?:,\s*([\d.]+)\s*)?\)"
)


def hsla_to_rgb(color):
    """Parse a CSS ``hsla(h, s%, l%, a)`` string into an (r, g, b) float tuple."""
    m = _HSLA_RE.fullmatch(color.strip())
    if m is None:
        raise ValueError(f"not an hsl/hsla colour: {color!r}")
    h, s, l = float(m.group(1)), float(m.group(2)), float(m.group(3))
    return colorsys.hls_to_rgb((h % 360) / 360.0, l / 100.0, s / 100.0)


# ---------------------------------------------------------------------------
# Core primitives
# ---------------------------------------------------------------------------

def blank_canvas(width, height=None, color=BACKGROUND):
    height = height or width
    img = np.empty((height, width, 3), dtype=np.float32)
    img[...] = color
    return img


def rasterize_line(img, p1, p2, color=(1.0, 1.0, 1.0), thickness=1):
    """Draw an anti-aliased line segment."""
    cv2.line(img, _pt(p1), _pt(p2), tuple(float(c) for c in color), thickness,
             lineType=cv2.LINE_AA)
    return img


def rasterize_circle(img, center, radius, color=(1.0, 1.0, 1.0), thickness=1):
    """Draw an anti-aliased circle (``thickness=-1`` fills it)."""
    cv2.circle(img, _pt(center), int(max(round(radius), 1)),
               tuple(float(c) for c in color), thickness, lineType=cv2.LINE_AA)
    return img


def rasterize_polyline(img, points, color=(1.0, 1.0, 1.0), thickness=1, closed=False):
    """Draw connected line segments through a list of points."""
    n = len(points)
    if n < 2:
        return img
    segs = n if closed else n - 1
    for i in range(segs):
        rasterize_line(img, points[i], points[(i + 1) % n], color, thickness)
    return img


def draw_vertex_marker(img, p, color=(1.0, 1.0, 1.0), radius=4):
    """Filled dot inside a thin ring, as used for placed vertices."""
    rasterize_circle(img, p, radius * 3, color, 1)
    rasterize_circle(img, p, radius, color, -1)
    return img


# ---------------------------------------------------------------------------
# Recognition overlay
# ---------------------------------------------------------------------------

def render_stroke(img, stroke, color=STROKE_COLOR, thickness=2):
    return rasterize_polyline(img, stroke, color, thickness, closed=False)


def render_shape(img, shape, radius=None, thickness=2):
    """Draw a recognized shape in its presentation colour.

    Circles and ovals carry only their centroid; pass *radius* (for example
    the mean distance of the stroke to that centroid) to draw the outline.
    """
    color = hsla_to_rgb(shape.color)
    pts = list(shape.points)
    if shape.type.is_curve:
        if radius is not None:
            rasterize_circle(img, pts[0], radius, color, thickness)
        draw_vertex_marker(img, pts[0], color)
        return img
    rasterize_polyline(img, pts, color, thickness, closed=len(pts) >= 3)
    for p in pts:
        draw_vertex_marker(img, p, color)
    return img


def render_recognition(stroke, shape, size=512):
    """Compose stroke + recognized overlay on a dark square canvas.

    Returns a uint8 RGB array suitable for ``PIL.Image.fromarray``.
    """
    img = blank_canvas(size)
    render_stroke(img, stroke)
    if shape is not None:
        radius = None
        if shape.type.is_curve:
            c = centroid(stroke)
            radius = float(np.mean([np.hypot(p[0] - c.x, p[1] - c.y) for p in stroke]))
        render_shape(img, shape, radius=radius)
    return (np.clip(img, 0, 1) * 255).astype(np.uint8)


# ---------------------------------------------------------------------------
# Outline & sampling helpers (public -- also used by stroke generators)
# ---------------------------------------------------------------------------

def regular_polygon_vertices(center, radius, num_sides, angle_offset=0.0):
    """Return vertices of a regular polygon as a list of (x, y) tuples."""
    cx, cy = center
    angles = np.linspace(0, 2 * np.pi, num_sides, endpoint=False) + angle_offset
    return [(cx + radius * np.cos(a), cy + radius * np.sin(a)) for a in angles]


def star_vertices(center, outer_r, inner_r, num_points, angle_offset=0.0):
    """Return alternating outer/inner vertices for a star."""
    cx, cy = center
    verts = []
    for i in range(num_points):
        a_out = angle_offset + 2 * np.pi * i / num_points
        a_in = a_out + np.pi / num_points
        verts.append((cx + outer_r * np.cos(a_out), cy + outer_r * np.sin(a_out)))
        verts.append((cx + inner_r * np.cos(a_in), cy + inner_r * np.sin(a_in)))
    return verts


def polyline_samples(vertices, points_per_edge=10, closed=True):
    """Trace straight edges through *vertices* with evenly spaced samples.

    Each edge contributes *points_per_edge* samples starting at its first
    vertex; open paths also emit the final vertex.  A closed trace therefore
    stops one step short of its starting point, like a hand returning to it.
    """
    v = np.asarray(vertices, dtype=np.float64)
    n = len(v)
    segs = n if closed else n - 1
    ts = np.arange(points_per_edge) / points_per_edge
    out = []
    for i in range(segs):
        a, b = v[i], v[(i + 1) % n]
        out.extend(a + (b - a) * t for t in ts)
    if not closed:
        out.append(v[-1])
    return np.array(out)


def ellipse_samples(center, axes, num_samples=40, angle=0.0, start=0.0, sweep=2 * np.pi):
    """Sample an ellipse (semi-axes *axes*, rotation *angle* in radians).

    With the default full *sweep* the last sample stops one step before the
    first, so the trace is closed without a duplicated endpoint.
    """
    cx, cy = center
    a, b = axes
    full = np.isclose(sweep, 2 * np.pi)
    ts = start + np.linspace(0, sweep, num_samples, endpoint=not full)
    x = a * np.cos(ts)
    y = b * np.sin(ts)
    ca, sa = np.cos(angle), np.sin(angle)
    return np.stack([cx + x * ca - y * sa, cy + x * sa + y * ca], axis=1)


def jitter(points, amount, rng=None):
    """Add uniform noise in [-amount, amount] to each coordinate."""
    pts = np.asarray(points, dtype=np.float64)
    if amount <= 0:
        return pts.copy()
    rng = rng if rng is not None else np.random
    return pts + rng.uniform(-amount, amount, size=pts.shape)
