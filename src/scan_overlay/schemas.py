"""Pydantic models for scan overlay output."""

from pydantic import BaseModel, Field

from vectorization.schemas import VectorizationResult


class ScanOverlay(BaseModel):
    """Map overlay produced for a single pavement scan."""

    image_path: str = Field(..., description="Path to the source scan image.")
    result: VectorizationResult = Field(
        ..., description="Vectorized outline of the detected pavement region."
    )

    @property
    def detected(self) -> bool:
        """False when nothing was detected and no overlay should be drawn."""
        return not self.result.is_empty

    def to_geojson(self) -> dict:
        """Returns the overlay as a GeoJSON Feature tagged with the scan path."""
        return self.result.to_geojson(properties={"image_path": self.image_path})
