"""
Shape classifiers.

Each classifier is a pure scoring function over a point set.  When a
minimum sample count or size threshold is not met the answer is "no match".

    from shaperec.classifiers import classify_polygon, detect_star
"""

from shaperec.classifiers.curves import CurveMatch, classify_circle_or_oval  # noqa: F401
from shaperec.classifiers.star import StarMatch, detect_star, star_outline  # noqa: F401
from shaperec.classifiers.polygons import (  # noqa: F401
    classify_line, classify_polygon, classify_quadrilateral,
    classify_regular_polygon, classify_triangle, regularity_score,
)
