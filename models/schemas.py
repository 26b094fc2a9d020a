"""Pydantic models for sanitized values."""
from pydantic import BaseModel, Field
from typing import Tuple


class CoordinatePair(BaseModel):
    """Sanitized latitude/longitude pair."""
    latitude: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    longitude: float = Field(..., ge=-180, lt=180, description="Longitude in decimal degrees")

    def as_tuple(self) -> Tuple[float, float]:
        """Return the pair as (latitude, longitude)."""
        return self.latitude, self.longitude
