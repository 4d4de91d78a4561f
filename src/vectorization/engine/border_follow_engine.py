"""Border-following implementation of the mask vectorization engine."""

import logging

import numpy as np

from ..geo import project_to_geo, simplify_path
from ..schemas import GeoBounds, VectorizationResult
from ..tracing import trace_contour
from .vectorizer_engine import MaskVectorizationEngine

logger = logging.getLogger(__name__)


class BorderFollowEngine(MaskVectorizationEngine):
    """Vectorizes masks by walking the outer border of the first blob.

    The tracer starts at the first foreground pixel in scan order and
    follows the edge with a fixed left/straight/right/reverse preference.
    The visited path is sampled down to at most config.max_vertices points,
    projected onto the bounds and closed.
    """

    name = "border_follow"

    def vectorize_grid(
        self, grid: np.ndarray, bounds: GeoBounds
    ) -> VectorizationResult:
        """Traces, samples and projects the grid."""
        height, width = grid.shape
        path = trace_contour(grid, self.config.step_cap_factor)
        sampled = simplify_path(path, self.config.max_vertices)
        polygon = project_to_geo(sampled, width, height, bounds)

        logger.debug(
            "Traced %d pixels, kept %d vertices", len(path), len(sampled)
        )

        return VectorizationResult(
            polygon=polygon,
            bounds=bounds,
            width=width,
            height=height,
            path_length=len(path),
            engine=self.name,
        )
