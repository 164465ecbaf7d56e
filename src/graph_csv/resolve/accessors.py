"""Field access for records: the only place that touches objects dynamically.

Two functions make up the accessor layer:

- ``attribute_map(record)``: the record's declared attributes.
- ``invoke(record, name)``: the value of one named accessor, as a
  ``(value, ok)`` pair.  ``ok`` is False when the record does not expose
  ``name``; callers treat that as "field absent", never as an error.

Supported record shapes, checked in order:

1. ``Record`` protocol: ``attributes()`` is the source of truth.
2. ``Mapping``: keys are the fields.
3. dataclass instances: dataclass fields.
4. plain objects: public instance attributes (``vars()``).

For shapes 2 to 4, values that look like nested records or collections of
records (mappings, lists, tuples, sets, dataclass instances, plain objects)
are associations, not attributes, and are left out of the attribute map.
They stay reachable through ``invoke`` for ``include``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any

from graph_csv.protocols import Record

__all__ = ["attribute_map", "invoke", "is_scalar"]

_MISSING = object()


def is_scalar(value: Any) -> bool:
    """Return True if ``value`` belongs in a cell rather than in a child node."""
    # Enum before the __dict__ check: enum members carry a __dict__.
    if value is None or isinstance(value, (str, bytes, int, float, Enum)):
        return True
    if isinstance(value, (Mapping, list, tuple, set, frozenset)):
        return False
    if isinstance(value, Record) or is_dataclass(value):
        return False
    return not hasattr(value, "__dict__")


def attribute_map(record: Any) -> dict[str, Any]:
    """Return the declared attributes of ``record``.

    Args:
        record: Any supported record shape (see module docstring).

    Returns:
        A new dict of field identifier -> value.

    Raises:
        TypeError: If ``record`` exposes no attributes at all (e.g. an int).
    """
    if isinstance(record, Record) and callable(record.attributes):
        return dict(record.attributes())

    if isinstance(record, Mapping):
        return {key: value for key, value in record.items() if is_scalar(value)}

    if is_dataclass(record) and not isinstance(record, type):
        values = ((f.name, getattr(record, f.name)) for f in fields(record))
        return {name: value for name, value in values if is_scalar(value)}

    if hasattr(record, "__dict__") and not isinstance(record, type):
        return {
            name: value
            for name, value in vars(record).items()
            if not name.startswith("_") and is_scalar(value)
        }

    raise TypeError(f"Unsupported record type: {type(record)!r}")


def invoke(record: Any, name: Any) -> tuple[Any, bool]:
    """Call (or read) the accessor ``name`` on ``record``.

    Methods and other callables are invoked with no arguments; plain
    attributes and properties are returned as-is.

    Args:
        record: Any supported record shape.
        name:   Field identifier.  Non-string names are never supported.

    Returns:
        ``(value, True)`` when the record exposes ``name``,
        ``(None, False)`` otherwise.
    """
    if not isinstance(name, str):
        return None, False

    if isinstance(record, Mapping):
        if name in record:
            return record[name], True
        return None, False

    accessor = getattr(record, name, _MISSING)
    if accessor is _MISSING:
        return None, False
    if callable(accessor) and not isinstance(accessor, type):
        return accessor(), True
    return accessor, True
