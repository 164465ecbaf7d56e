"""Table subpackage: from normalized trees to header, rows and CSV text.

Re-exports the public API for the table module:
- Column / HeaderResolver: the column layout of a call
- RowEmitter / dedupe_rows: one row per leaf, repeats removed
- CsvWriter: the default TableWriter
"""

from graph_csv.table.headers import Column, HeaderResolver
from graph_csv.table.rows import RowEmitter, dedupe_rows
from graph_csv.table.writer import CsvWriter, format_cell

__all__ = [
    "Column",
    "CsvWriter",
    "HeaderResolver",
    "RowEmitter",
    "dedupe_rows",
    "format_cell",
]
