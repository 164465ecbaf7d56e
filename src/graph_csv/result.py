"""CsvTable dataclass for tabulation output.

This module provides the result type returned by tabulate() calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["CsvTable"]


@dataclass(frozen=True, slots=True)
class CsvTable:
    """Header and rows of one call, before text encoding.

    Attributes:
        header: Header text of each column.  Empty when the call produced no
            columns; always populated otherwise, even with ``headers=False``.
        fields: Field identifier read for each column, parallel to ``header``.
        rows: Deduplicated rows in emission order.  Every row has exactly
            ``len(fields)`` cells.
        headers: Whether the header line is written when encoding.
        computation_time_ms: Wall-clock duration of the call in milliseconds.
    """

    header: list[str]
    fields: list[str]
    rows: list[list[Any]]
    headers: bool = True
    computation_time_ms: float = 0.0

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to write (no columns and no rows)."""
        return not self.fields and not self.rows
