"""Line tokenizer — splits one raw table line into trimmed fields."""

from __future__ import annotations

LINE_TERMINATORS = "\r\n"
BOM = "\ufeff"


def split_fields(line: str, delimiter: str = ",") -> list[str]:
    """Split *line* on every *delimiter* and trim each field.

    Boundary behavior:
        - "" or "\\n" (or whitespace only)  -> []
        - "94040"                            -> ["94040"]
        - "a,,b"                             -> ["a", "", "b"]
        - "a,b,"                             -> ["a", "b", ""]

    A leading byte-order mark is dropped. No quoting or escaping is recognized.

    Raises:
        ValueError: if *delimiter* is not exactly one character.
    """
    if len(delimiter) != 1:
        raise ValueError(f"Delimiter must be a single character, got {delimiter!r}")

    line = line.rstrip(LINE_TERMINATORS).lstrip(BOM)
    if not line.strip():
        return []
    return [field.strip() for field in line.split(delimiter)]
