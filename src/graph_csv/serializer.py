"""CsvSerializer: orchestrator that wires TreeBuilder + TreeNormalizer + HeaderResolver + RowEmitter.

This is the central wiring layer between the tree/table components and the
public API.

Architecture:
- tabulate() flattens the input into a list of records and, for each one,
  builds its attribute tree, normalizes it, and emits its rows.
- The column layout is resolved from the FIRST record's normalized tree and
  frozen for the rest of the call; every later record's rows are laid out on
  that same layout, which keeps the table rectangular.
- Rows of all records are deduplicated (first occurrence wins) after
  emission.
- serialize() hands the header and rows to the TableWriter in one call.
  Nothing else in the pipeline does I/O.
- Label inflections are cached via LabelFormatter (LRU), shared by tree
  construction and header resolution within one serializer instance.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from graph_csv.labels import LabelFormatter
from graph_csv.policy import RowPolicy
from graph_csv.resolve.associations import flatten_objects
from graph_csv.result import CsvTable
from graph_csv.table.headers import Column, HeaderResolver
from graph_csv.table.rows import RowEmitter, dedupe_rows
from graph_csv.table.writer import CsvWriter
from graph_csv.tree.builder import TreeBuilder
from graph_csv.tree.normalizer import TreeNormalizer

if TYPE_CHECKING:
    from graph_csv.protocols import TableWriter

__all__ = ["CsvSerializer"]

logger = logging.getLogger(__name__)


class CsvSerializer:
    """Orchestrator for object-graph to CSV serialization.

    Two separate ``CsvSerializer`` instances never share cache state; each
    instance maintains its own ``LabelFormatter``.

    Example::

        from graph_csv.serializer import CsvSerializer
        from graph_csv.policy import RowPolicy

        serializer = CsvSerializer()
        text = serializer.serialize(users, RowPolicy.from_options({"only": "name"}))
        # "Name\\nAry\\nNati\\n"
    """

    def __init__(
        self,
        writer: TableWriter | None = None,
        max_cache_size: int = 512,
    ) -> None:
        """Initialise the serializer.

        Args:
            writer: A TableWriter-conformant object.  Defaults to
                ``CsvWriter()`` when None.
            max_cache_size: Maximum number of formatted labels held in the
                per-instance LRU cache.  This is an infrastructure parameter;
                it is NOT part of ``RowPolicy``.
        """
        self._writer: Any = writer if writer is not None else CsvWriter()
        self._labels = LabelFormatter(max_size=max_cache_size)
        self._builder = TreeBuilder(labels=self._labels)
        self._normalizer = TreeNormalizer()
        self._headers = HeaderResolver(labels=self._labels)
        self._rows = RowEmitter()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def tabulate(self, objects: Any, policy: RowPolicy | None = None) -> CsvTable:
        """Turn ``objects`` into a header and deduplicated rows.

        Args:
            objects: A record, or a (possibly nested) sequence of records.
            policy:  Options.  Defaults to ``RowPolicy()`` when None.

        Returns:
            A ``CsvTable``.  Empty input gives an empty table.
        """
        t0 = time.perf_counter()
        policy = policy if policy is not None else RowPolicy()
        records = flatten_objects(objects)

        columns: list[Column] | None = None
        fields: list[str] = []
        rows: list[list[Any]] = []

        for record in records:
            tree = self._normalizer.rebuild(self._builder.build(record, policy))
            if columns is None:
                columns = self._headers.resolve(tree, policy)
                fields = [column.field for column in columns]
            rows.extend(self._rows.emit(tree, fields, policy))

        unique = dedupe_rows(rows)
        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        logger.debug(
            "Tabulated %d records into %d columns, %d rows (%d before dedupe)",
            len(records),
            len(fields),
            len(unique),
            len(rows),
        )

        return CsvTable(
            header=[column.title for column in columns or ()],
            fields=fields,
            rows=unique,
            headers=policy.headers,
            computation_time_ms=elapsed_ms,
        )

    def serialize(self, objects: Any, policy: RowPolicy | None = None) -> str:
        """Return ``objects`` as CSV text.

        Args:
            objects: A record, or a (possibly nested) sequence of records.
            policy:  Options.  Defaults to ``RowPolicy()`` when None.

        Returns:
            The header line (unless disabled or empty) followed by one line
            per deduplicated row.  ``""`` when there is nothing to write.
        """
        table = self.tabulate(objects, policy)
        if table.is_empty:
            return ""
        header = table.header if table.headers else []
        return self._writer.write(header, table.rows)
