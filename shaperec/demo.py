"""
Recognition demo.

Recognize a stroke read from a JSON file (or a random synthetic stroke),
print the result and save a rendering of the stroke with its recognized
overlay.

Usage (CLI):
    python -m shaperec.demo --points stroke.json --save-path outputs/recognized.png
    python -m shaperec.demo --random circle
    python -m shaperec.demo --random any --preset hidpi

Or from a notebook:
    from shaperec.demo import recognize_stroke
    recognize_stroke([(0, 0), (100, 0), (100, 100), (0, 100)], mode="points")
"""

import argparse
import os

import numpy as np
from PIL import Image

from shaperec.config import THRESHOLD_PRESETS
from shaperec.export import load_points
from shaperec.raster import render_recognition
from shaperec.session import RecognitionSession


def format_result(shape):
    if shape is None:
        return "no match"
    return f"{shape.label} ({shape.confidence}%) · {shape.description}"


def recognize_stroke(points, mode="draw", preset="default",
                     save_path="outputs/recognized.png", canvas_size=512):
    """Feed *points* through a session as if captured live, then render.

    Parameters
    ----------
    points : sequence of (x, y) or {"x", "y"}
    mode : str
        'draw' (freehand) or 'points' (placed vertices).
    preset : str
        Threshold preset name, see ``shaperec.config.THRESHOLD_PRESETS``.
    save_path : str or None
        Where to save the PNG.  None skips rendering.
    canvas_size : int

    Returns
    -------
    RecognizedShape or None
    """
    session = RecognitionSession(mode=mode, thresholds=THRESHOLD_PRESETS[preset])
    for p in points:
        if isinstance(p, dict):
            session.add_point(p["x"], p["y"])
        else:
            session.add_point(p[0], p[1])
    stroke = session.pending
    shape = session.finish()
    print(format_result(shape))

    if save_path:
        frame = render_recognition(stroke, shape, size=canvas_size)
        os.makedirs(os.path.dirname(save_path) or ".", exist_ok=True)
        Image.fromarray(frame).save(save_path)
        print(f"Rendering saved to {save_path}")
    return shape


def main():
    from shaperec.strokes import GENERATOR_MAP, random_stroke

    p = argparse.ArgumentParser(description="Freehand shape recognition demo")
    src = p.add_mutually_exclusive_group()
    src.add_argument("--points", default=None, help="JSON file with the stroke")
    src.add_argument("--random", default=None, choices=["any"] + sorted(GENERATOR_MAP),
                     help="Recognize a synthetic stroke of this kind")
    p.add_argument("--mode", choices=["draw", "points"], default=None,
                   help="Capture mode (defaults to the file's or generator's)")
    p.add_argument("--preset", choices=sorted(THRESHOLD_PRESETS), default="default")
    p.add_argument("--canvas-size", type=int, default=512)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--save-path", default="outputs/recognized.png")
    args = p.parse_args()

    if args.seed is not None:
        np.random.seed(args.seed)

    if args.points is not None:
        points, mode = load_points(args.points)
        mode = args.mode or mode or "draw"
    else:
        kind = args.random or "any"
        sample = random_stroke(args.canvas_size) if kind == "any" else GENERATOR_MAP[kind](args.canvas_size)
        print(f"Synthetic stroke: {sample.category} ({len(sample)} points, {sample.mode} mode)")
        points = sample.points.tolist()
        mode = args.mode or sample.mode

    recognize_stroke(points, mode=mode, preset=args.preset,
                     save_path=args.save_path, canvas_size=args.canvas_size)


if __name__ == "__main__":
    main()
