"""Border-following contour tracer for binary grids."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy.typing import NDArray

logger = logging.getLogger(__name__)

PixelPath = list[tuple[int, int]]

# Heading index -> (dx, dy): right, down, left, up
STEPS = ((1, 0), (0, 1), (-1, 0), (0, -1))
RIGHT = 0


def find_start(grid: NDArray) -> tuple[int, int] | None:
    """Returns the first foreground pixel (x, y) in row-major order, or None."""
    flat = np.flatnonzero(grid)
    if flat.size == 0:
        return None
    y, x = divmod(int(flat[0]), grid.shape[1])
    return x, y


def candidate_headings(heading: int) -> tuple[int, int, int, int]:
    """Headings to try from the current one, most preferred first.

    Order is left, straight, right, reverse relative to the trace, which
    keeps the foreground on one side while walking the outer edge.
    """
    return (heading + 1) & 3, heading, (heading + 3) & 3, (heading + 2) & 3


def trace_contour(grid: NDArray, step_cap_factor: int = 4) -> PixelPath:
    """Traces the outer boundary of the region containing the first pixel.

    Only the component reached from the first foreground pixel in scan order
    is followed; holes and other blobs are ignored.

    Args:
        grid: Binary array of shape (H, W), 1 = foreground.
        step_cap_factor: Tracing stops after step_cap_factor * W * H moves.

    Returns:
        Visited pixels in trace order, starting pixel included. Empty if the
        grid has no foreground. A dead end ends the path early.
    """
    start = find_start(grid)
    if start is None:
        return []

    height, width = grid.shape
    rows = grid.tolist()

    def is_inside(x: int, y: int) -> bool:
        return 0 <= x < width and 0 <= y < height and bool(rows[y][x])

    max_steps = width * height * step_cap_factor
    steps = 0
    cx, cy = start
    heading = RIGHT
    path: PixelPath = []

    while True:
        path.append((cx, cy))

        for candidate in candidate_headings(heading):
            dx, dy = STEPS[candidate]
            if is_inside(cx + dx, cy + dy):
                cx, cy, heading = cx + dx, cy + dy, candidate
                break
        else:
            logger.debug("Trace reached a dead end at %s", (cx, cy))
            break

        steps += 1
        if steps > max_steps:
            logger.warning("Trace stopped after %d steps without closing", max_steps)
            break
        if (cx, cy) == start and len(path) >= 2:
            break

    return path
