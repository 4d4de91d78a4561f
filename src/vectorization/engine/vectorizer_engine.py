"""Abstract base class for mask vectorization engines."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

import numpy as np

from ..config import VectorizerConfig
from ..raster import build_grid, decode_mask
from ..schemas import GeoBounds, VectorizationResult


def coerce_bounds(bounds: GeoBounds | Mapping) -> GeoBounds:
    """Accepts a GeoBounds or a mapping with north/south/east/west keys."""
    if isinstance(bounds, GeoBounds):
        return bounds
    return GeoBounds.model_validate(dict(bounds))


class MaskVectorizationEngine(ABC):
    """Abstract base class for mask vectorization engines.

    This class defines the interface for turning a binary mask into a
    geo-referenced polygon. Decoding and thresholding are shared; subclasses
    implement the boundary extraction.

    Attributes:
        config: Threshold and output size settings.
    """

    name = "base"

    def __init__(self, config: VectorizerConfig | None = None):
        """Initializes the engine.

        Args:
            config: Optional configuration. Defaults to VectorizerConfig().
        """
        self.config = config or VectorizerConfig()

    def load_grid(self, mask_image: Any) -> np.ndarray:
        """Decodes a mask image and thresholds it into a binary grid."""
        return build_grid(decode_mask(mask_image), self.config.threshold)

    def vectorize(
        self, mask_image: Any, bounds: GeoBounds | Mapping
    ) -> VectorizationResult:
        """Decodes a mask image and vectorizes it.

        Args:
            mask_image: Anything accepted by decode_mask.
            bounds: Geographic rectangle covering the whole mask.

        Returns:
            VectorizationResult with the closed ring, empty if no foreground.
        """
        return self.vectorize_grid(self.load_grid(mask_image), coerce_bounds(bounds))

    @abstractmethod
    def vectorize_grid(
        self, grid: np.ndarray, bounds: GeoBounds
    ) -> VectorizationResult:
        """Vectorizes an already thresholded grid.

        Args:
            grid: Binary array of shape (H, W), 1 = foreground.
            bounds: Geographic rectangle covering the whole grid.

        Returns:
            VectorizationResult with the closed ring, empty if no foreground.
        """
        pass
