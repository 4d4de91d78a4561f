"""Path simplification and pixel-to-geographic projection."""

import math

from .schemas import GeoBounds, LatLng
from .tracing import PixelPath


def sample_stride(path_length: int, max_vertices: int = 200) -> int:
    """Returns the stride that keeps at most max_vertices points of a path."""
    return max(1, math.ceil(path_length / max_vertices))


def simplify_path(path: PixelPath, max_vertices: int = 200) -> PixelPath:
    """Keeps every n-th point of the path (index % n == 0).

    Uniform sampling only; no curvature-aware simplification.
    """
    return path[:: sample_stride(len(path), max_vertices)]


def _interpolate(index: int, extent: int, start: float, end: float) -> float:
    # Endpoints are exact
    if extent <= 1 or index == 0:
        return start
    if index == extent - 1:
        return end
    return start + (index / (extent - 1)) * (end - start)


def pixel_to_latlng(
    x: int, y: int, width: int, height: int, bounds: GeoBounds
) -> LatLng:
    """Maps a pixel to (lat, lon).

    Column 0 maps to west and the last column to east. Row 0 maps to north
    and the last row to south. A one-pixel extent maps to west/north.
    """
    lon = _interpolate(x, width, bounds.west, bounds.east)
    lat = _interpolate(y, height, bounds.north, bounds.south)
    return lat, lon


def close_ring(points: list[LatLng]) -> list[LatLng]:
    """Appends the first point if the ring is not already closed.

    A single point is closed onto itself, giving two identical points.
    """
    if len(points) == 1 or (points and points[0] != points[-1]):
        points.append(points[0])
    return points


def project_to_geo(
    path: PixelPath, width: int, height: int, bounds: GeoBounds
) -> list[LatLng]:
    """Projects a pixel path to a closed ring of (lat, lon) pairs."""
    points = [pixel_to_latlng(x, y, width, height, bounds) for x, y in path]
    return close_ring(points)
