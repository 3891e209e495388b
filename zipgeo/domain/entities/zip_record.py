"""ZipRecord entity — one postal code with its centroid."""

from dataclasses import dataclass

from zipgeo.domain.value_objects.geo_point import GeoPoint


@dataclass(frozen=True)
class ZipRecord:
    code: int
    location: GeoPoint
