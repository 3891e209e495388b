"""LoadResult value object — outcome of a single table load."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LoadResult:
    """Coarse two-outcome result of a load plus diagnostic counters."""

    success: bool
    message: str
    records_loaded: int = 0
    lines_zero_filled: int = 0
    lines_skipped: int = 0

    def as_tuple(self) -> tuple[bool, str]:
        return self.success, self.message
