"""Vectorization of segmentation masks into geographic polygons."""

from .config import VectorizerConfig
from .engine import BorderFollowEngine, CV2VectorizationEngine, MaskVectorizationEngine
from .polygonize import vectorize, vectorize_async
from .raster import MaskDecodeError, build_grid, decode_mask
from .schemas import GeoBounds, LatLng, VectorizationResult

__all__ = [
    "BorderFollowEngine",
    "CV2VectorizationEngine",
    "GeoBounds",
    "LatLng",
    "MaskDecodeError",
    "MaskVectorizationEngine",
    "VectorizationResult",
    "VectorizerConfig",
    "build_grid",
    "decode_mask",
    "vectorize",
    "vectorize_async",
]
