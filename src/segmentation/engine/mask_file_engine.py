"""Segmentation engine that reads precomputed masks from disk."""

import logging
from pathlib import Path

import numpy as np

from vectorization.raster import MaskDecodeError, decode_mask

from .segmentation_engine import SegmentationEngine

logger = logging.getLogger(__name__)


class MaskFileSegmentationEngine(SegmentationEngine):
    """Returns masks that an external service already wrote next to the scans.

    A scan ``tile.png`` is paired with ``tile<suffix>.png`` in the same
    directory, or in mask_dir if one is given.
    """

    def __init__(self, suffix: str = "_mask", mask_dir: str | Path | None = None):
        """Initializes the engine.

        Args:
            suffix: Appended to the scan file stem to find its mask.
            mask_dir: Optional directory holding the masks.
        """
        self.suffix = suffix
        self.mask_dir = Path(mask_dir) if mask_dir is not None else None

    def mask_path_for(self, image_path: str | Path) -> Path:
        """Resolves the mask path for a scan image."""
        image_path = Path(image_path)
        directory = self.mask_dir if self.mask_dir is not None else image_path.parent
        return directory / f"{image_path.stem}{self.suffix}.png"

    def segment(self, image_path: str) -> np.ndarray:
        """Loads the red/gray channel of the mask paired with image_path.

        Raises:
            FileNotFoundError: If the mask is missing or unreadable.
        """
        mask_path = self.mask_path_for(image_path)
        try:
            mask = decode_mask(mask_path)
        except MaskDecodeError as e:
            raise FileNotFoundError(f"Could not read mask at {mask_path}") from e

        logger.info("Loaded mask %s", mask_path.name)
        return mask
