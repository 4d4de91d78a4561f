"""Decoding of mask images into binary foreground grids."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import cv2
import numpy as np
from PIL import Image

if TYPE_CHECKING:
    from numpy.typing import NDArray

logger = logging.getLogger(__name__)

# Channel consulted in an OpenCV-decoded (BGR) image
BGR_RED_CHANNEL = 2
# Channel consulted in an in-memory (RGB/RGBA) array
RGB_RED_CHANNEL = 0


class MaskDecodeError(ValueError):
    """Raised when a mask image cannot be decoded."""


def decode_mask(mask_image: Any) -> NDArray:
    """Decodes a mask image to a 2D array of red/gray channel values.

    The image is read at its native resolution. Colour images contribute
    only their red channel, grayscale images their single channel. Fully
    transparent pixels read as 0.

    Args:
        mask_image: A path, encoded image bytes, a binary file object, a
            PIL image, or a numpy array. 2D arrays are treated as grayscale,
            3D arrays as RGB(A) in channel-last order.

    Returns:
        Array of shape (H, W) holding the sampled channel.

    Raises:
        FileNotFoundError: If a path does not exist.
        MaskDecodeError: If the data cannot be decoded as an image.
    """
    if isinstance(mask_image, np.ndarray):
        return _channel_from_array(mask_image)

    if isinstance(mask_image, Image.Image):
        if mask_image.mode in ("L", "1", "I", "I;16", "F"):
            return _channel_from_array(np.asarray(mask_image.convert("L")))
        return _channel_from_array(np.asarray(mask_image.convert("RGBA")))

    if isinstance(mask_image, (str, Path)):
        path = Path(mask_image)
        if not path.exists():
            raise FileNotFoundError(f"Could not read mask at {path}")
        data = path.read_bytes()
    elif isinstance(mask_image, (bytes, bytearray, memoryview)):
        data = bytes(mask_image)
    elif hasattr(mask_image, "read"):
        data = mask_image.read()
    else:
        raise TypeError(f"Unsupported mask image type: {type(mask_image).__name__}")

    return _decode_bytes(data)


def _decode_bytes(data: bytes) -> NDArray:
    buffer = np.frombuffer(data, dtype=np.uint8)
    if buffer.size == 0:
        raise MaskDecodeError("Mask image is empty")

    # IMREAD_UNCHANGED keeps the alpha channel so transparent pixels read as 0
    image = cv2.imdecode(buffer, cv2.IMREAD_UNCHANGED)
    if image is None:
        raise MaskDecodeError("Could not decode mask image")

    if image.dtype == np.uint16:
        image = (image >> 8).astype(np.uint8)

    logger.debug("Decoded mask of %dx%d pixels", image.shape[1], image.shape[0])

    if image.ndim == 2:
        return image
    if image.shape[2] == 2:
        return _apply_alpha(image[:, :, 0], image[:, :, 1])
    if image.shape[2] == 4:
        return _apply_alpha(image[:, :, BGR_RED_CHANNEL], image[:, :, 3])
    return image[:, :, BGR_RED_CHANNEL]


def _apply_alpha(channel: NDArray, alpha: NDArray) -> NDArray:
    """Zeroes fully transparent pixels, whatever colour they store."""
    return np.where(alpha == 0, 0, channel).astype(channel.dtype)


def _channel_from_array(array: NDArray) -> NDArray:
    if array.dtype == bool:
        array = array.astype(np.uint8) * 255

    if array.ndim == 2:
        return array
    if array.ndim == 3 and array.shape[2] == 4:
        return _apply_alpha(array[:, :, RGB_RED_CHANNEL], array[:, :, 3])
    if array.ndim == 3 and array.shape[2] >= 1:
        return array[:, :, RGB_RED_CHANNEL]

    raise MaskDecodeError(f"Expected a 2D or 3D mask array, got shape {array.shape}")


def build_grid(channel: NDArray, threshold: int = 127) -> NDArray[np.uint8]:
    """Thresholds a channel into a binary grid (1 = foreground).

    Args:
        channel: Array of shape (H, W).
        threshold: Values >= threshold become foreground.

    Returns:
        uint8 array of shape (H, W) with values 0 or 1.
    """
    grid = (channel >= threshold).astype(np.uint8)
    grid.flags.writeable = False
    return grid
