"""
Visualization and diagnostics toolkit.

Provides functions for eyeballing recognizer output on synthetic strokes and
for measuring how often each drawn category comes back with its own label.

Usage (CLI):
    python -m shaperec.viz gallery [--num-samples 16] [--save-path ...]
    python -m shaperec.viz stats   [--num-samples 1000] [--save-path ...]

Or from a notebook:
    from shaperec.viz import recognition_gallery
    recognition_gallery()
"""

import argparse
import os
from collections import Counter

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
from tqdm import tqdm

from shaperec.pipeline import recognize
from shaperec.raster import render_recognition

NO_MATCH = "no match"


def _recognize_sample(sample):
    shape = recognize(sample.points)
    return shape, (shape.label if shape is not None else NO_MATCH)


# -----------------------------------------------------------------------
# 1. Gallery grid
# -----------------------------------------------------------------------

def recognition_gallery(samples=None, num_samples=16, canvas_size=512,
                        save_path="outputs/gallery.png"):
    """Render a grid of synthetic strokes with their recognized overlay.

    Each tile is titled ``drawn -> recognized (confidence)``; mismatches are
    titled in red.
    """
    from shaperec.strokes import random_stroke
    samples = samples or [random_stroke(canvas_size) for _ in range(num_samples)]

    cols = min(len(samples), 4)
    rows = (len(samples) + cols - 1) // cols
    fig, axes = plt.subplots(rows, cols, figsize=(4 * cols, 4.4 * rows))
    axes = np.atleast_1d(axes).ravel()

    for ax, sample in zip(axes, samples):
        shape, label = _recognize_sample(sample)
        ax.imshow(render_recognition(sample.points, shape, size=canvas_size))
        conf = f" ({shape.confidence}%)" if shape is not None else ""
        color = "black" if label == sample.category else "red"
        ax.set_title(f"{sample.category} -> {label}{conf}", fontsize=9, color=color)
        if shape is not None:
            ax.text(0.5, -0.03, shape.description, transform=ax.transAxes,
                    fontsize=6, ha="center", va="top", fontfamily="monospace")
        ax.axis("off")

    for j in range(len(samples), len(axes)):
        axes[j].axis("off")

    plt.tight_layout()
    os.makedirs(os.path.dirname(save_path) or ".", exist_ok=True)
    fig.savefig(save_path, dpi=120, bbox_inches="tight")
    plt.close(fig)
    print(f"Gallery saved to {save_path}")


# -----------------------------------------------------------------------
# 2. Accuracy statistics
# -----------------------------------------------------------------------

def confusion_counts(samples):
    """Count (drawn category, recognized label) pairs over *samples*."""
    counts = Counter()
    for sample in samples:
        _, label = _recognize_sample(sample)
        counts[(sample.category, label)] += 1
    return counts


def per_category_accuracy(counts):
    totals = Counter()
    hits = Counter()
    for (drawn, got), k in counts.items():
        totals[drawn] += k
        if drawn == got:
            hits[drawn] += k
    return {cat: hits[cat] / totals[cat] for cat in totals}


def recognition_statistics(num_samples=1000, canvas_size=512,
                           save_path="outputs/recognition_stats.png"):
    """Plot per-category accuracy and the drawn-vs-recognized confusion matrix."""
    from shaperec.strokes import random_stroke

    samples = [random_stroke(canvas_size)
               for _ in tqdm(range(num_samples), desc="generating")]
    counts = confusion_counts(tqdm(samples, desc="recognizing"))
    accuracy = per_category_accuracy(counts)

    drawn = sorted({d for d, _ in counts})
    got = sorted({g for _, g in counts})
    matrix = np.zeros((len(drawn), len(got)), dtype=np.int64)
    for (d, g), k in counts.items():
        matrix[drawn.index(d), got.index(g)] = k

    fig, axes = plt.subplots(1, 2, figsize=(16, 6),
                             gridspec_kw={"width_ratios": [1, 2]})

    ax = axes[0]
    ax.barh(drawn, [accuracy[d] for d in drawn], color="steelblue")
    ax.set_xlim(0, 1)
    ax.set_title("Accuracy by drawn category")

    ax = axes[1]
    ax.imshow(matrix, cmap="Blues", aspect="auto")
    ax.set_xticks(range(len(got)))
    ax.set_xticklabels(got, rotation=45, ha="right", fontsize=7)
    ax.set_yticks(range(len(drawn)))
    ax.set_yticklabels(drawn, fontsize=7)
    for i in range(len(drawn)):
        for j in range(len(got)):
            if matrix[i, j]:
                ax.text(j, i, str(matrix[i, j]), ha="center", va="center", fontsize=7)
    ax.set_title("Drawn vs recognized")

    plt.tight_layout()
    os.makedirs(os.path.dirname(save_path) or ".", exist_ok=True)
    fig.savefig(save_path, dpi=120, bbox_inches="tight")
    plt.close(fig)

    for d in drawn:
        print(f"  {d:<22s} {accuracy[d]:6.1%}")
    print(f"Recognition statistics saved to {save_path}")
    return accuracy


# -----------------------------------------------------------------------
# CLI
# -----------------------------------------------------------------------

def main():
    p = argparse.ArgumentParser(description="shaperec visualization toolkit")
    sub = p.add_subparsers(dest="command")

    ga = sub.add_parser("gallery", help="Grid of synthetic strokes with recognized overlays")
    ga.add_argument("--num-samples", type=int, default=16)
    ga.add_argument("--canvas-size", type=int, default=512)
    ga.add_argument("--seed", type=int, default=None)
    ga.add_argument("--save-path", default="outputs/gallery.png")

    st = sub.add_parser("stats", help="Accuracy and confusion over random strokes")
    st.add_argument("--num-samples", type=int, default=1000)
    st.add_argument("--canvas-size", type=int, default=512)
    st.add_argument("--seed", type=int, default=None)
    st.add_argument("--save-path", default="outputs/recognition_stats.png")

    args = p.parse_args()
    if getattr(args, "seed", None) is not None:
        np.random.seed(args.seed)

    if args.command == "gallery":
        recognition_gallery(num_samples=args.num_samples, canvas_size=args.canvas_size,
                            save_path=args.save_path)

    elif args.command == "stats":
        recognition_statistics(num_samples=args.num_samples, canvas_size=args.canvas_size,
                               save_path=args.save_path)

    else:
        p.print_help()


if __name__ == "__main__":
    main()
