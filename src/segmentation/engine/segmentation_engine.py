"""Engine to obtain binary masks for pavement scan images."""

from abc import ABC, abstractmethod

import numpy as np


class SegmentationEngine(ABC):
    """Abstract base class for segmentation engines."""

    @abstractmethod
    def segment(self, image_path: str) -> np.ndarray:
        """Returns the binary mask for the scan at image_path.

        The mask has the same pixel size as the scan; foreground pixels are
        bright (255) and background is 0.
        """
        pass
