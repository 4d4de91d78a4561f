"""Pydantic models for mask vectorization output."""

from pydantic import BaseModel, Field

LatLng = tuple[float, float]


class GeoBounds(BaseModel):
    """Geographic rectangle mapped linearly onto the full pixel extent of a mask.

    Ordering (north > south, east > west) is left to the caller; inverted
    bounds produce a mirrored polygon rather than an error.
    """

    north: float = Field(..., description="Latitude of pixel row 0.")
    south: float = Field(..., description="Latitude of the last pixel row.")
    east: float = Field(..., description="Longitude of the last pixel column.")
    west: float = Field(..., description="Longitude of pixel column 0.")


class VectorizationResult(BaseModel):
    """Represents the outcome of vectorizing a single mask."""

    polygon: list[LatLng] = Field(
        default_factory=list,
        description="Closed ring of (lat, lon) pairs, empty if nothing was detected.",
    )
    bounds: GeoBounds = Field(..., description="Bounds used for the projection.")
    width: int = Field(..., description="Mask width in pixels.")
    height: int = Field(..., description="Mask height in pixels.")
    path_length: int = Field(
        0, description="Number of pixels visited by the tracer before sampling."
    )
    engine: str = Field("border_follow", description="Name of the engine used.")

    @property
    def is_empty(self) -> bool:
        return not self.polygon

    def to_geojson(self, properties: dict | None = None) -> dict:
        """Returns the polygon as a GeoJSON Feature.

        GeoJSON positions are [lon, lat]. An empty result becomes a Feature
        with a null geometry.
        """
        geometry = None
        if self.polygon:
            ring = [[lon, lat] for lat, lon in self.polygon]
            geometry = {"type": "Polygon", "coordinates": [ring]}

        feature_properties = {
            "width": self.width,
            "height": self.height,
            "path_length": self.path_length,
            "engine": self.engine,
        }
        if properties:
            feature_properties.update(properties)

        return {
            "type": "Feature",
            "geometry": geometry,
            "properties": feature_properties,
        }
