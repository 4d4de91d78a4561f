"""CV2 implementation of the mask vectorization engine."""

import logging

import cv2
import numpy as np

from ..config import VectorizerConfig
from ..geo import project_to_geo, simplify_path
from ..schemas import GeoBounds, VectorizationResult
from ..tracing import find_start
from .vectorizer_engine import MaskVectorizationEngine

logger = logging.getLogger(__name__)


class CV2VectorizationEngine(MaskVectorizationEngine):
    """Vectorizes masks using OpenCV contour extraction.

    Picks the same blob as the border-follow engine (the 4-connected
    component holding the first foreground pixel in scan order), takes its
    external contour and reduces it with Douglas-Peucker.

    Attributes:
        config: Threshold and output size settings.
        epsilon_factor: Approximation accuracy as a fraction of the perimeter.
    """

    name = "cv2"

    def __init__(
        self,
        config: VectorizerConfig | None = None,
        epsilon_factor: float = 0.005,
    ):
        """Initializes the CV2 vectorization engine.

        Args:
            config: Optional configuration. Defaults to VectorizerConfig().
            epsilon_factor: Factor for approximation accuracy.
        """
        super().__init__(config)
        self.epsilon_factor = epsilon_factor

    def vectorize_grid(
        self, grid: np.ndarray, bounds: GeoBounds
    ) -> VectorizationResult:
        """Extracts, approximates and projects the external contour."""
        height, width = grid.shape
        points = self.extract_boundary(grid)
        sampled = simplify_path(points, self.config.max_vertices)
        polygon = project_to_geo(sampled, width, height, bounds)

        return VectorizationResult(
            polygon=polygon,
            bounds=bounds,
            width=width,
            height=height,
            path_length=len(points),
            engine=self.name,
        )

    def extract_boundary(self, grid: np.ndarray) -> list[tuple[int, int]]:
        """Returns the approximated external contour of the first blob.

        Args:
            grid: Binary array of shape (H, W), 1 = foreground.

        Returns:
            List of (x, y) pixels, empty if the grid has no foreground.
        """
        start = find_start(grid)
        if start is None:
            return []

        _, labels = cv2.connectedComponents(grid.astype(np.uint8), connectivity=4)
        component = (labels == labels[start[1], start[0]]).astype(np.uint8)

        # RETR_EXTERNAL: outer boundary only, holes are ignored
        # CHAIN_APPROX_NONE: keep every boundary pixel before approximation
        contours, _ = cv2.findContours(
            component, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_NONE
        )
        contour = max(contours, key=len)

        length = cv2.arcLength(contour, closed=True)
        if length > 0:
            contour = cv2.approxPolyDP(
                contour, self.epsilon_factor * length, closed=True
            )

        logger.debug("CV2 boundary has %d vertices", len(contour))
        return [(int(p[0][0]), int(p[0][1])) for p in contour]
