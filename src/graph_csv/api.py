"""Public API functions for graph-csv.

This module provides the user-facing functions: serialize (aliased as
to_csv) and tabulate.  Each call creates a fresh CsvSerializer to guarantee
zero global state mutation between calls.

Options can be given as a RowPolicy, as a mapping, as keyword arguments, or
as a mapping/policy plus keyword overrides::

    serialize(users, only="name")
    serialize(users, {"except": ["id"], "include": {"favorites": {"only": "name"}}})
    serialize(users, RowPolicy(only=("name",)), headers=False)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from graph_csv.policy import RowPolicy
from graph_csv.result import CsvTable
from graph_csv.serializer import CsvSerializer

__all__ = ["serialize", "tabulate", "to_csv"]


def _policy(
    options: RowPolicy | Mapping[str, Any] | None,
    overrides: dict[str, Any],
) -> RowPolicy:
    if isinstance(options, RowPolicy):
        return options.merged(**overrides)
    merged: dict[str, Any] = dict(options) if isinstance(options, Mapping) else {}
    merged.update(overrides)
    return RowPolicy.from_options(merged)


def serialize(
    objects: Any,
    options: RowPolicy | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> str:
    """Return ``objects`` as CSV text.

    Args:
        objects:   A record, or a (possibly nested) sequence of records.
                   Records are objects with an ``attributes()`` method,
                   mappings, dataclass instances, or plain objects.
        options:   A RowPolicy or an option mapping.  Defaults to all fields,
                   natural column order, with a header.
        overrides: Loose options (``headers``, ``only``, ``except_``,
                   ``methods``, ``include``, ``column_order``,
                   ``column_names``) applied on top of ``options``.

    Returns:
        The CSV document.  ``""`` for empty input.
    """
    return CsvSerializer().serialize(objects, _policy(options, overrides))


def tabulate(
    objects: Any,
    options: RowPolicy | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> CsvTable:
    """Return the header and deduplicated rows ``serialize`` would encode.

    Takes the same arguments as ``serialize``.
    """
    return CsvSerializer().tabulate(objects, _policy(options, overrides))


to_csv = serialize
