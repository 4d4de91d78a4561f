"""Configuration for mask vectorization."""

import numbers
from dataclasses import dataclass

MAX_CHANNEL_VALUE = 255


@dataclass
class VectorizerConfig:
    """Configuration for the mask vectorizer.

    Attributes:
        threshold: A pixel is foreground iff its red/gray value is >= threshold.
        max_vertices: Upper bound on sampled ring vertices (before closure).
        step_cap_factor: The tracer stops after step_cap_factor * width * height
            moves.
    """

    threshold: int = 127
    max_vertices: int = 200
    step_cap_factor: int = 4

    def __post_init__(self):
        """Validate ranges."""
        if isinstance(self.threshold, float) and self.threshold.is_integer():
            self.threshold = int(self.threshold)
        if isinstance(self.threshold, bool) or not isinstance(
            self.threshold, numbers.Integral
        ):
            raise ValueError(f"threshold must be an integer, got {self.threshold!r}")
        self.threshold = int(self.threshold)
        if not 0 <= self.threshold <= MAX_CHANNEL_VALUE:
            raise ValueError(
                f"threshold must be in [0, {MAX_CHANNEL_VALUE}], got {self.threshold}"
            )
        if self.max_vertices < 1:
            raise ValueError(f"max_vertices must be positive, got {self.max_vertices}")
        if self.step_cap_factor < 1:
            raise ValueError(
                f"step_cap_factor must be positive, got {self.step_cap_factor}"
            )
