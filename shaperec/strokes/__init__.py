"""
Synthetic stroke generation.

Each sub-module exposes a list of generator functions.  Every generator
returns a ``StrokeSample`` -- the captured points, the label it was drawn as,
the capture mode and metadata.

Usage::

    from shaperec.strokes import ALL_GENERATORS, random_stroke
    sample = random_stroke(S=512)
"""

import numpy as np

from shaperec.strokes._types import StrokeSample  # noqa: F401
from shaperec.strokes.primitives import PRIMITIVE_GENERATORS
from shaperec.strokes.polygons import POLYGON_GENERATORS


ALL_GENERATORS = PRIMITIVE_GENERATORS + POLYGON_GENERATORS

GENERATOR_MAP = {gen.__name__[len("gen_"):]: gen for gen in ALL_GENERATORS}


def random_stroke(S: int = 512) -> StrokeSample:
    """Pick a random generator and produce a sample."""
    gen = ALL_GENERATORS[np.random.randint(len(ALL_GENERATORS))]
    return gen(S)
