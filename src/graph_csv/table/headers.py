"""HeaderResolver: computes the column layout of a serialization call.

The layout is a list of ``Column(field, title)`` pairs.  ``field`` is the
(qualified) field identifier that RowEmitter reads for that column and
``title`` is the header text.

Two strategies, matching RowEmitter's two modes:

- Explicit (``column_order`` given): one column per ``column_order`` entry,
  in that order, duplicates kept.  Title = ``column_names[field]`` or
  ``titleize(field)``.
- Natural: depth-first over the normalized tree, each node's fields sorted
  ascending.  Title = ``column_names[field]`` or
  ``titleize(singularize(field))``.  A column whose title is already present
  is dropped (first seen wins).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from graph_csv.labels import LabelFormatter
from graph_csv.policy import RowPolicy
from graph_csv.tree.nodes import TreeNode

__all__ = ["Column", "HeaderResolver"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Column:
    """One output column.

    Attributes:
        field: Field identifier whose value fills the column.
        title: Header text.
    """

    field: str
    title: str


class HeaderResolver:
    """Resolves the ordered, deduplicated column layout for a tree and policy."""

    def __init__(self, labels: LabelFormatter | None = None) -> None:
        self._labels = labels if labels is not None else LabelFormatter()

    def resolve(self, tree: TreeNode, policy: RowPolicy) -> list[Column]:
        """Return the column layout.

        Args:
            tree:   The normalized tree of the first record of the call.
            policy: Top-level options (``column_order``, ``column_names``).

        Returns:
            Columns in output order.  May be empty (e.g. ``only=""`` with no
            includes), in which case no header line is written.
        """
        if policy.column_order is not None:
            return self._explicit(policy)
        return self._natural(tree, policy)

    def _explicit(self, policy: RowPolicy) -> list[Column]:
        names = policy.column_names
        columns: list[Column] = []
        for field in policy.column_order or ():
            title = names[field] if field in names else self._labels.titleize(field)
            columns.append(Column(field=field, title=title))
        return columns

    def _natural(self, tree: TreeNode, policy: RowPolicy) -> list[Column]:
        names = policy.column_names
        columns: list[Column] = []
        titles: set[str] = set()
        for node in tree.walk():
            for field in sorted(node.content, key=str):
                if field in names:
                    title = names[field]
                else:
                    title = self._labels.column_title(field)
                if title in titles:
                    logger.debug(
                        "Dropping field %r: title %r is already taken", field, title
                    )
                    continue
                titles.add(title)
                columns.append(Column(field=field, title=title))
        return columns
