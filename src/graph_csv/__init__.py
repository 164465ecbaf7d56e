"""graph-csv - flatten object graphs with associations into rectangular CSV."""

from __future__ import annotations

from graph_csv.api import serialize, tabulate, to_csv
from graph_csv.policy import Inclusion, RowPolicy
from graph_csv.protocols import Record, TableWriter
from graph_csv.result import CsvTable
from graph_csv.serializer import CsvSerializer

__version__: str = "0.1.0"
__all__: list[str] = [
    "CsvSerializer",
    "CsvTable",
    "Inclusion",
    "Record",
    "RowPolicy",
    "TableWriter",
    "serialize",
    "tabulate",
    "to_csv",
]
