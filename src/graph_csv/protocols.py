"""Structural protocols for the two collaborators graph-csv talks to.

- ``Record``: the object model.  Any object with an ``attributes()`` method
  returning a field -> value mapping satisfies it; no inheritance required.
  Mappings, dataclass instances and plain objects are adapted without it
  (see ``graph_csv.resolve.accessors``).
- ``TableWriter``: the text encoder.  Receives the header and the
  deduplicated rows and returns the encoded document.

Example::

    from graph_csv.protocols import Record

    class User:
        def __init__(self, id, name):
            self.id, self.name = id, name

        def attributes(self):
            return {"id": self.id, "name": self.name}

    assert isinstance(User(1, "Ary"), Record)  # True: structural conformance
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

__all__ = ["Record", "TableWriter"]


@runtime_checkable
class Record(Protocol):
    """Structural protocol for serializable objects."""

    def attributes(self) -> Mapping[str, Any]: ...


@runtime_checkable
class TableWriter(Protocol):
    """Structural protocol for table encoders.

    ``write`` must emit the header first (when non-empty), then every row in
    the order given, and return the encoded text.
    """

    def write(self, header: Sequence[str], rows: Sequence[Sequence[Any]]) -> str: ...
