"""GeoPoint value object — immutable (lat, lon) pair."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float

    @property
    def is_unknown(self) -> bool:
        """True for (0, 0), which doubles as the "not found" sentinel."""
        return self.latitude == 0.0 and self.longitude == 0.0

    def as_tuple(self) -> tuple[float, float]:
        return self.latitude, self.longitude


# Returned for absent postal codes; indistinguishable from a stored (0, 0)
UNKNOWN_LOCATION = GeoPoint(latitude=0.0, longitude=0.0)
