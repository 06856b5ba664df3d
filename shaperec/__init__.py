"""shaperec - classify freehand or vertex-sampled strokes into named geometric shapes."""

from shaperec._types import Point, RecognizedShape, ShapeType
from shaperec.config import DEFAULT_THRESHOLDS, THRESHOLD_PRESETS, Thresholds
from shaperec.pipeline import recognize
from shaperec.session import RecognitionSession
