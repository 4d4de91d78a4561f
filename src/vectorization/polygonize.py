"""Convenience functions for turning a mask image into a lat/lon ring."""

import asyncio
from collections.abc import Mapping
from typing import Any

from .config import VectorizerConfig
from .engine.border_follow_engine import BorderFollowEngine
from .engine.vectorizer_engine import coerce_bounds
from .raster import build_grid, decode_mask
from .schemas import GeoBounds, LatLng


def vectorize(
    mask_image: Any, bounds: GeoBounds | Mapping, threshold: int = 127
) -> list[LatLng]:
    """Vectorizes the outer boundary of a mask into a closed (lat, lon) ring.

    Args:
        mask_image: Path, encoded bytes, file object, PIL image or array.
        bounds: Rectangle covering the whole mask (north/south/east/west).
        threshold: Red/gray values >= threshold count as foreground.

    Returns:
        Closed ring of (lat, lon) pairs; empty if the mask has no foreground.

    Raises:
        FileNotFoundError: If mask_image is a missing path.
        MaskDecodeError: If the image cannot be decoded.
    """
    engine = BorderFollowEngine(VectorizerConfig(threshold=threshold))
    return engine.vectorize(mask_image, bounds).polygon


async def vectorize_async(
    mask_image: Any, bounds: GeoBounds | Mapping, threshold: int = 127
) -> list[LatLng]:
    """Async variant of vectorize.

    Only decoding runs in a worker thread; it is awaited once and the rest
    of the work is synchronous.
    """
    engine = BorderFollowEngine(VectorizerConfig(threshold=threshold))
    channel = await asyncio.to_thread(decode_mask, mask_image)
    grid = build_grid(channel, engine.config.threshold)
    return engine.vectorize_grid(grid, coerce_bounds(bounds)).polygon
