"""In-memory CoordinateTable implementation."""

from __future__ import annotations

import logging

from zipgeo.application.ports.coordinate_table import CoordinateTable
from zipgeo.domain.entities.zip_record import ZipRecord
from zipgeo.domain.value_objects.geo_point import UNKNOWN_LOCATION, GeoPoint

logger = logging.getLogger(__name__)


class InMemoryCoordinateTable(CoordinateTable):
    """Dict-backed table. Not thread-safe: load once, then read."""

    def __init__(self) -> None:
        self._points: dict[int, GeoPoint] = {}

    def insert(self, record: ZipRecord) -> None:
        self._points[record.code] = record.location

    def lookup(self, code: int) -> GeoPoint:
        return self._points.get(code, UNKNOWN_LOCATION)

    def find(self, code: int) -> GeoPoint | None:
        return self._points.get(code)

    def clear(self) -> None:
        if self._points:
            logger.debug("Releasing %d postal codes", len(self._points))
        # Rebind rather than dict.clear() so the old capacity is freed
        self._points = {}

    def __len__(self) -> int:
        return len(self._points)
