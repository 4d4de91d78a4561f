"""Mask vectorization engine module."""

from .border_follow_engine import BorderFollowEngine
from .cv2_vectorizer_engine import CV2VectorizationEngine
from .vectorizer_engine import MaskVectorizationEngine, coerce_bounds

ENGINES = {
    BorderFollowEngine.name: BorderFollowEngine,
    CV2VectorizationEngine.name: CV2VectorizationEngine,
}

__all__ = [
    "ENGINES",
    "BorderFollowEngine",
    "CV2VectorizationEngine",
    "MaskVectorizationEngine",
    "coerce_bounds",
]
