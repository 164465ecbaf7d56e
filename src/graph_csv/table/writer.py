"""CsvWriter: the default TableWriter, backed by the standard library csv module."""

from __future__ import annotations

import csv
import io
from collections.abc import Sequence
from typing import Any

__all__ = ["CsvWriter", "format_cell"]


def format_cell(value: Any) -> Any:
    """Return the cell form of ``value``: booleans as true/false, None as empty."""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return ""
    return value


class CsvWriter:
    """Encodes a header and rows as CSV text with minimal quoting.

    Satisfies the ``TableWriter`` Protocol structurally.

    Args:
        lineterminator: Record separator.  Defaults to "\\n".
    """

    def __init__(self, lineterminator: str = "\n") -> None:
        self._lineterminator = lineterminator

    def write(self, header: Sequence[str], rows: Sequence[Sequence[Any]]) -> str:
        """Return ``header`` (when non-empty) followed by ``rows``, one record per line."""
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator=self._lineterminator)
        if header:
            writer.writerow(header)
        for row in rows:
            writer.writerow([format_cell(value) for value in row])
        return buffer.getvalue()
