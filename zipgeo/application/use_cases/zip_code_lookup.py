"""ZipCodeLookup — load a postal code table and answer coordinate queries."""

from __future__ import annotations

import os

from zipgeo.adapters.csv_loader.loader import TableLoader
from zipgeo.adapters.persistence.coordinate_table import InMemoryCoordinateTable
from zipgeo.application.ports.coordinate_table import CoordinateTable
from zipgeo.domain.value_objects.geo_point import GeoPoint


class ZipCodeLookup:
    """Owns one coordinate table and the loader that fills it.

    Instances are independent; nothing is shared at module level.
    """

    def __init__(self, table: CoordinateTable | None = None, loader: TableLoader | None = None):
        """
        Raises:
            ValueError: if *loader* fills a different table than *table*.
        """
        if table is None:
            table = loader.table if loader is not None else InMemoryCoordinateTable()
        if loader is None:
            loader = TableLoader(table)
        elif loader.table is not table:
            raise ValueError("Loader must fill the same table the lookup reads from")

        self._table = table
        self._loader = loader

    @property
    def table(self) -> CoordinateTable:
        return self._table

    def load_zip_codes(self, path: str | os.PathLike | None = None) -> tuple[bool, str]:
        """Load (or add to) the table from *path*.

        Returns:
            (success, message). Repeated calls merge into the same table;
            only release_zip_codes() empties it.
        """
        return self._loader.load_zip_codes(path).as_tuple()

    def get_lat_and_lon(self, zip_code: int) -> tuple[float, float]:
        """Return (latitude, longitude), or (0.0, 0.0) when the code is unknown."""
        return self._table.lookup(zip_code).as_tuple()

    def find_location(self, zip_code: int) -> GeoPoint | None:
        return self._table.find(zip_code)

    def release_zip_codes(self) -> None:
        self._table.clear()
