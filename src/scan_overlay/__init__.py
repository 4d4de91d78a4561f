"""Pipeline from pavement scans to map overlays."""

from .pipeline import ScanOverlayPipeline
from .schemas import ScanOverlay

__all__ = ["ScanOverlay", "ScanOverlayPipeline"]
