from __future__ import annotations
import math
from pydantic import BaseModel, ConfigDict, Field
from .ring import Ring360, reverse_mod


class GeoPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat_deg: float = Field(..., ge=-90, le=90)
    lon_deg: float = Field(..., ge=-180, le=180)
    alt_m: float | None = None

    @property
    def longitude(self) -> Ring360:
        return Ring360.from_gis(self.lon_deg)

    def lon_offset_to(self, other: "GeoPoint") -> float:
        """Signed longitude difference to `other`, east positive, in (-180, 180]."""
        return self.longitude.angle(other.longitude)

    def with_lon_shift(self, delta_deg: float) -> "GeoPoint":
        """Move east by `delta_deg` (negative = west), wrapping across the antimeridian."""
        lon = (self.longitude + Ring360(delta_deg)).to_gis()
        return GeoPoint(lat_deg=self.lat_deg, lon_deg=lon, alt_m=self.alt_m)


class Heading(BaseModel):
    model_config = ConfigDict(frozen=True)

    heading_deg: float = Field(..., ge=0, lt=360)

    @classmethod
    def from_components(cls, north: float, east: float) -> "Heading":
        """Compass heading (0 = north, 90 = east) of a velocity vector."""
        return cls(heading_deg=reverse_mod(math.degrees(math.atan2(east, north))))

    @property
    def bearing(self) -> Ring360:
        return Ring360(self.heading_deg)

    def turn_to(self, other: "Heading") -> float:
        """Shortest turn to `other`; positive is clockwise (to starboard)."""
        return self.bearing.angle(other.bearing)
