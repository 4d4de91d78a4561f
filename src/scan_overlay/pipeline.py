"""Pipeline turning pavement scans into geo-referenced overlays."""

import logging
import os
from collections.abc import Mapping

import cv2
import numpy as np

from segmentation.engine.segmentation_engine import SegmentationEngine
from vectorization.engine.border_follow_engine import BorderFollowEngine
from vectorization.engine.vectorizer_engine import (
    MaskVectorizationEngine,
    coerce_bounds,
)
from vectorization.schemas import GeoBounds

from .schemas import ScanOverlay

logger = logging.getLogger(__name__)

# Constants
RING_THICKNESS = 2
RING_COLOR = (0, 0, 255)  # Red
START_COLOR = (0, 255, 0)  # Green
START_RADIUS = 4


class ScanOverlayPipeline:
    """Pipeline to outline the segmented region of a scan on the map.

    Attributes:
        segmentation_engine: Collaborator returning a mask for a scan.
        vectorization_engine: Engine converting the mask into a polygon.
    """

    def __init__(
        self,
        segmentation_engine: SegmentationEngine,
        vectorization_engine: MaskVectorizationEngine = None,
    ):
        """Initializes the pipeline.

        Args:
            segmentation_engine: Engine producing the binary mask.
            vectorization_engine: Optional custom engine. Defaults to
                BorderFollowEngine.
        """
        self.segmentation_engine = segmentation_engine
        self.vectorization_engine = vectorization_engine or BorderFollowEngine()

    def run(self, image_path: str, bounds: GeoBounds | Mapping) -> ScanOverlay:
        """Runs the pipeline.

        Args:
            image_path: Path to the scan image.
            bounds: Geographic rectangle covered by the scan.

        Returns:
            ScanOverlay whose polygon is empty when nothing was detected.
        """
        logger.info("Processing %s...", image_path)

        mask = self.segmentation_engine.segment(image_path)
        grid = self.vectorization_engine.load_grid(mask)
        result = self.vectorization_engine.vectorize_grid(grid, coerce_bounds(bounds))

        if result.is_empty:
            logger.info("Nothing detected in %s.", image_path)
        else:
            logger.info(
                "Outlined %s with %d vertices.", image_path, len(result.polygon)
            )

        return ScanOverlay(image_path=str(image_path), result=result)

    def visualize(self, overlay: ScanOverlay, mask: np.ndarray, output_path: str):
        """Draws the overlay ring back onto its mask for inspection.

        Args:
            overlay: The ScanOverlay to visualize.
            mask: The mask the overlay was computed from (H, W) or (H, W, 3).
            output_path: Path to save the visualization.
        """
        if mask.ndim == 2:
            canvas = cv2.cvtColor(mask.astype(np.uint8), cv2.COLOR_GRAY2BGR)
        else:
            canvas = mask.astype(np.uint8).copy()

        pixels = self.polygon_to_pixels(overlay)
        if pixels:
            pts = np.array(pixels, dtype=np.int32).reshape((-1, 1, 2))
            cv2.polylines(
                canvas,
                [pts],
                isClosed=True,
                color=RING_COLOR,
                thickness=RING_THICKNESS,
            )
            cv2.circle(canvas, pixels[0], START_RADIUS, START_COLOR, -1)

        dir_name = os.path.dirname(output_path)
        if dir_name:
            os.makedirs(dir_name, exist_ok=True)
        cv2.imwrite(output_path, canvas)
        logger.info("Saved visualization to %s", output_path)

    @staticmethod
    def polygon_to_pixels(overlay: ScanOverlay) -> list[tuple[int, int]]:
        """Maps the overlay's (lat, lon) ring back to pixel positions."""
        result = overlay.result
        bounds = result.bounds
        lon_span = bounds.east - bounds.west
        lat_span = bounds.north - bounds.south

        pixels = []
        for lat, lon in result.polygon:
            x = y = 0.0
            if lon_span:
                x = (lon - bounds.west) / lon_span * (result.width - 1)
            if lat_span:
                y = (bounds.north - lat) / lat_span * (result.height - 1)
            pixels.append((int(round(x)), int(round(y))))
        return pixels
