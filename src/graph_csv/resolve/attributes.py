"""AttributeResolver: selects and reads the fields of one record.

The resolver applies a RowPolicy's ``only`` / ``except_`` / ``methods``
options to a record's declared attributes and returns the resulting
field -> value map.  Field identifiers of non-root records are qualified
with the association label (``name`` under ``profile_item`` becomes
``profile_item_name``) so that fields of different levels never collide.
"""

from __future__ import annotations

from typing import Any

from graph_csv.policy import RowPolicy
from graph_csv.resolve.accessors import attribute_map, invoke

__all__ = ["AttributeResolver"]


class AttributeResolver:
    """Pure function object: (record, policy, label) -> attribute map.

    Resolution order:

    1. Declared attribute names, sorted by ``str``.
    2. ``only`` (when given, even if empty) keeps the intersection, in sorted
       order; otherwise ``except_`` removes names.
    3. ``methods`` are appended in the order given.
    4. Names the record does not expose are dropped silently.
    5. With a non-empty label, every name is qualified as ``<label>_<name>``.

    Example::

        resolver = AttributeResolver()
        resolver.resolve({"id": 1, "name": "Ary"}, RowPolicy(only=("name",)))
        # {"name": "Ary"}
        resolver.resolve({"id": 1, "name": "Pizza"}, RowPolicy(), label="favorite")
        # {"favorite_id": 1, "favorite_name": "Pizza"}
    """

    def resolve(
        self,
        record: Any,
        policy: RowPolicy,
        label: str = "",
    ) -> dict[str, Any]:
        """Return the selected fields of ``record``.

        Args:
            record: Any supported record shape.
            policy: Field-selection options; ``include`` is not consulted.
            label:  Association label of the record's node. "" for the root.

        Returns:
            Ordered dict of (possibly qualified) field identifier -> value.
        """
        declared = attribute_map(record)
        names = sorted(declared, key=str)

        if policy.only is not None:
            wanted = set(policy.only)
            names = [name for name in names if name in wanted]
        else:
            unwanted = set(policy.except_)
            names = [name for name in names if name not in unwanted]

        content: dict[str, Any] = {}
        for name in names:
            content[self._qualify(name, label)] = declared[name]

        for name in policy.methods:
            if name in declared:
                content[self._qualify(name, label)] = declared[name]
                continue
            value, ok = invoke(record, name)
            if ok:
                content[self._qualify(name, label)] = value

        return content

    @staticmethod
    def _qualify(name: Any, label: str) -> str:
        if not label:
            return name
        return f"{label}_{name}"
