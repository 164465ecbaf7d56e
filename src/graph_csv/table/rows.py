"""RowEmitter: one output row per leaf of a normalized tree.

Leaves are visited depth-first, left to right.  For each leaf the emitter
walks the parent back-references up to the root and gathers the attribute
values found along that path.  The gathered values are then laid out on the
call's column layout, so every row has exactly one cell per column and a
field missing on a path gives an empty (``None``) cell.

Two modes:

- Natural order (no ``column_order``): values are gathered level by level
  from root to leaf, each level's fields in ascending order.  The natural
  column layout follows the same order, so rows read root-to-leaf.
- Explicit order (``column_order`` given): values are merged from leaf to
  root, each level written unconditionally, so when two levels of one path
  define the same field identifier the ancestor's value prevails.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import Any

from graph_csv.policy import RowPolicy
from graph_csv.tree.nodes import TreeNode

__all__ = ["RowEmitter", "dedupe_rows"]


class RowEmitter:
    """Emits the rows of one normalized tree."""

    def emit(
        self,
        tree: TreeNode,
        fields: Sequence[str],
        policy: RowPolicy,
    ) -> list[list[Any]]:
        """Return one row per leaf of ``tree``.

        Args:
            tree:   Normalized tree of one record.
            fields: Field identifier of each output column, in order.
            policy: Options of the call; ``column_order`` selects the mode.

        Returns:
            Rows in leaf order.  Empty rows (no columns) are skipped.
        """
        if policy.column_order is not None:
            gather = self.explicit_values
        else:
            gather = self.natural_values
        rows: list[list[Any]] = []
        for leaf in tree.leaves():
            values = gather(leaf)
            row = [values.get(field) for field in fields]
            if row:
                rows.append(row)
        return rows

    def natural_values(self, leaf: TreeNode) -> dict[str, Any]:
        """Gather a path's values root to leaf, ascending within each level.

        The first value seen for a field identifier is kept.
        """
        values: dict[str, Any] = {}
        for node in leaf.path():
            for field in sorted(node.content, key=str):
                values.setdefault(field, node.content[field])
        return values

    def explicit_values(self, leaf: TreeNode) -> dict[str, Any]:
        """Merge a path's values leaf to root; later (ancestor) writes win.

        NOTE: an ancestor overwriting a leaf value for the same qualified name
        is kept for compatibility with existing exports.
        """
        merged: dict[str, Any] = {}
        node: TreeNode | None = leaf
        while node is not None:
            merged.update(node.content)
            node = node.parent
        return merged


def _cell_key(value: Any) -> tuple[str, Any]:
    # Type name first: True == 1 and hash(True) == hash(1), but they are
    # different cells.
    if isinstance(value, Hashable):
        return type(value).__name__, value
    return type(value).__name__, repr(value)


def dedupe_rows(rows: Sequence[Sequence[Any]]) -> list[list[Any]]:
    """Return ``rows`` without repeats, keeping the first occurrence of each."""
    seen: set[tuple[tuple[str, Any], ...]] = set()
    unique: list[list[Any]] = []
    for row in rows:
        key = tuple(_cell_key(value) for value in row)
        if key in seen:
            continue
        seen.add(key)
        unique.append(list(row))
    return unique
