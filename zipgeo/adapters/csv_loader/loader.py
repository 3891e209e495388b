"""Postal code table loader — reads the delimited table into a CoordinateTable."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from dataclasses import replace
from pathlib import Path

from zipgeo.adapters.csv_loader.field_parser import split_fields
from zipgeo.adapters.csv_loader.normalizer import (
    is_float_text,
    is_int_text,
    parse_float,
    parse_int,
)
from zipgeo.application.ports.coordinate_table import CoordinateTable
from zipgeo.config import settings
from zipgeo.domain.entities.zip_record import ZipRecord
from zipgeo.domain.value_objects.geo_point import GeoPoint
from zipgeo.domain.value_objects.load_result import LoadResult

logger = logging.getLogger(__name__)

# Column positions: postal_code, <name>, latitude, longitude, ...
CODE_FIELD = 0
LATITUDE_FIELD = 2
LONGITUDE_FIELD = 3
EXPECTED_FIELDS = 4

OPEN_ERROR_PREFIX = "An error occurred while attempting to open our file"
READ_ERROR_PREFIX = "An error occurred while reading our file"


def parse_record(fields: list[str]) -> tuple[ZipRecord, bool]:
    """Convert tokenized fields into a ZipRecord.

    Missing or non-numeric fields are zero-filled. The second element tells
    whether any substitution happened.
    """
    padded = fields + [""] * (EXPECTED_FIELDS - len(fields))
    code_text = padded[CODE_FIELD]
    lat_text = padded[LATITUDE_FIELD]
    lon_text = padded[LONGITUDE_FIELD]

    record = ZipRecord(
        code=parse_int(code_text),
        location=GeoPoint(latitude=parse_float(lat_text), longitude=parse_float(lon_text)),
    )
    exact = is_int_text(code_text) and is_float_text(lat_text) and is_float_text(lon_text)
    return record, not exact


class TableLoader:
    """Streams a delimited postal code table into a CoordinateTable.

    Each parsed line is inserted right away; a failure part-way through the
    file leaves the rows already inserted in place.
    """

    def __init__(
        self,
        table: CoordinateTable,
        delimiter: str | None = None,
        encoding: str | None = None,
    ):
        self._table = table
        self._delimiter = settings.zip_codes_delimiter if delimiter is None else delimiter
        self._encoding = settings.zip_codes_encoding if encoding is None else encoding

    @property
    def table(self) -> CoordinateTable:
        return self._table

    def load_zip_codes(self, path: str | os.PathLike | None = None) -> LoadResult:
        """Load the table file at *path* (defaults to ZIP_CODES_PATH).

        Never raises for I/O or data problems; see LoadResult.
        """
        if path is None:
            path = settings.zip_codes_path

        try:
            # An empty path is a valid input that must fail like a missing file.
            # Undecodable bytes only damage their own field.
            source = open(path or "", encoding=self._encoding, errors="replace", newline="")
        except (OSError, ValueError) as e:
            # ValueError: embedded NUL byte in the path
            reason = getattr(e, "strerror", None) or str(e)
            logger.warning("Could not open postal code table '%s': %s", path, reason)
            return LoadResult(success=False, message=f"{OPEN_ERROR_PREFIX}: {reason}")

        with source:
            result = self.load_lines(source)

        name = Path(path).name
        if not result.success:
            logger.warning("Error reading postal code table '%s': %s", path, result.message)
            return result

        logger.info(
            "Loaded %d postal codes from %s (zero-filled: %d, skipped: %d)",
            result.records_loaded, name, result.lines_zero_filled, result.lines_skipped,
        )
        return replace(result, message=f"Success: loaded {result.records_loaded} records from {name}")

    def load_lines(self, lines: Iterable[str]) -> LoadResult:
        """Parse and insert every line of an already-open text source.

        A read error stops the load; rows inserted before it stay in the table
        and are counted in the failed result.
        """
        loaded = zero_filled = skipped = 0
        try:
            for line_no, line in enumerate(lines, start=1):
                fields = split_fields(line, self._delimiter)
                if not fields:
                    skipped += 1
                    continue

                record, substituted = parse_record(fields)
                if substituted:
                    zero_filled += 1
                    logger.debug("Line %d zero-filled: %r", line_no, line.rstrip("\r\n"))

                self._table.insert(record)
                loaded += 1
        except (OSError, UnicodeDecodeError) as e:
            return LoadResult(
                success=False,
                message=f"{READ_ERROR_PREFIX}: {e} ({loaded} records loaded before the error)",
                records_loaded=loaded,
                lines_zero_filled=zero_filled,
                lines_skipped=skipped,
            )

        return LoadResult(
            success=True,
            message=f"Success: loaded {loaded} records",
            records_loaded=loaded,
            lines_zero_filled=zero_filled,
            lines_skipped=skipped,
        )
