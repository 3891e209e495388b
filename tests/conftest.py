"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from zipgeo.adapters.persistence.coordinate_table import InMemoryCoordinateTable


@pytest.fixture
def table():
    return InMemoryCoordinateTable()


@pytest.fixture
def write_table(tmp_path):
    """Return a helper that writes raw table lines to a file and returns its path."""

    def _write(lines: list[str], name: str = "zipcodes.txt") -> Path:
        path = tmp_path / name
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write("\n".join(lines) + "\n")
        return path

    return _write


@pytest.fixture
def sample_lines():
    return [
        "94040,Mountain View,37.3861,-122.0839,CA",
        "10001,New York,40.7506,-73.9972,NY",
        "60601,Chicago,41.8858,-87.6181,IL",
    ]
