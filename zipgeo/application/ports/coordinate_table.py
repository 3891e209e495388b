"""Port interface for the postal code → coordinate table."""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from zipgeo.domain.entities.zip_record import ZipRecord
from zipgeo.domain.value_objects.geo_point import GeoPoint


class CoordinateTable(ABC):
    @abstractmethod
    def insert(self, record: ZipRecord) -> None:
        """Store one record, replacing any previous value for the same code."""
        ...

    @abstractmethod
    def lookup(self, code: int) -> GeoPoint:
        """Return the stored point, or UNKNOWN_LOCATION if the code is absent."""
        ...

    @abstractmethod
    def find(self, code: int) -> GeoPoint | None:
        """Like lookup, but returns None for an absent code."""
        ...

    @abstractmethod
    def clear(self) -> None:
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...

    def load(self, records: Iterable[ZipRecord]) -> None:
        """Insert every record in order (last write wins)."""
        for record in records:
            self.insert(record)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, int) and self.find(code) is not None
