"""
Freehand primitive generators: lines, circles, ovals, rectangles.

Every generator takes the canvas size ``S`` and returns a ``StrokeSample``
whose points look like a pointer trace: densely sampled, lightly jittered,
and (for closed shapes) ending just short of where they started.
"""

import numpy as np

from shaperec.raster import ellipse_samples, jitter, polyline_samples
from shaperec.strokes._types import StrokeSample


def _rand_pt(margin, S):
    return np.random.randint(margin, S - margin, 2)


def _well_separated(num, margin, S, min_dist=50):
    pts = [_rand_pt(margin, S)]
    for _ in range(num - 1):
        for _try in range(100):
            p = _rand_pt(margin, S)
            if np.linalg.norm(p - pts[-1]) >= min_dist:
                break
        pts.append(p)
    return pts


def _rotated_rect(center, w, h, angle):
    cx, cy = center
    ca, sa = np.cos(angle), np.sin(angle)
    corners = [(-w / 2, -h / 2), (w / 2, -h / 2), (w / 2, h / 2), (-w / 2, h / 2)]
    return [(cx + x * ca - y * sa, cy + x * sa + y * ca) for x, y in corners]


# ---------------------------------------------------------------------------
# Line
# ---------------------------------------------------------------------------

def gen_line(S: int) -> StrokeSample:
    m = 30
    a, b = _well_separated(2, m, S, 80)
    n = np.random.randint(20, 41)
    ts = np.linspace(0, 1, n)[:, None]
    pts = a[None, :] + (b - a)[None, :] * ts
    pts = jitter(pts, 1.0)
    return StrokeSample(pts, "LINE", "draw", {"length": float(np.linalg.norm(b - a))})


# ---------------------------------------------------------------------------
# Circle
# ---------------------------------------------------------------------------

def gen_circle(S: int) -> StrokeSample:
    m = 30
    safe = m + 50
    center = np.random.randint(safe, S - safe, 2)
    max_r = min(center[0] - m, S - center[0] - m, center[1] - m, S - center[1] - m)
    radius = np.random.randint(50, max(51, max_r + 1))
    n = np.random.randint(40, 61)
    start = np.random.uniform(0, 2 * np.pi)
    pts = jitter(ellipse_samples(center, (radius, radius), n, start=start), 1.5)
    return StrokeSample(pts, "CIRCLE", "draw", {"center": center, "radius": radius})


# ---------------------------------------------------------------------------
# Oval
# ---------------------------------------------------------------------------

def gen_oval(S: int) -> StrokeSample:
    m = 40
    center = _rand_pt(m + 80, S)
    max_ax = min(center[0] - m, S - center[0] - m, center[1] - m, S - center[1] - m)
    a = np.random.randint(80, max(81, max_ax + 1))
    b = a / np.random.uniform(1.7, 2.2)
    # Near-axis tilt only; the recognizer measures aspect on the axis-aligned box
    angle = np.random.uniform(-0.25, 0.25) + np.random.choice([0.0, np.pi / 2])
    n = np.random.randint(50, 71)
    pts = jitter(ellipse_samples(center, (a, b), n, angle=angle), 1.5)
    return StrokeSample(pts, "OVAL", "draw",
                        {"center": center, "axes": (a, b), "angle": angle})


# ---------------------------------------------------------------------------
# Rectangle (elongated -- squat ones read as ovals)
# ---------------------------------------------------------------------------

def gen_rectangle(S: int) -> StrokeSample:
    m = 30
    h = np.random.randint(40, max(41, S // 6))
    w = int(h * np.random.uniform(3.0, 4.0))
    w = min(w, S - 2 * m - 10)
    center = (S / 2 + np.random.uniform(-10, 10), S / 2 + np.random.uniform(-10, 10))
    angle = np.random.uniform(-0.2, 0.2)
    corners = _rotated_rect(center, w, h, angle)
    pts = jitter(polyline_samples(corners, np.random.randint(10, 16)), 1.0)
    return StrokeSample(pts, "RECTANGLE", "draw", {"size": (w, h), "angle": angle})


PRIMITIVE_GENERATORS = [
    gen_line,
    gen_circle,
    gen_oval,
    gen_rectangle,
]
