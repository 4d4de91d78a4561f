"""Segmentation engine module."""

from .mask_file_engine import MaskFileSegmentationEngine
from .segmentation_engine import SegmentationEngine

__all__ = [
    "MaskFileSegmentationEngine",
    "SegmentationEngine",
]
