"""AssociationExpander: resolves the objects behind one ``include`` entry."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from graph_csv.policy import Inclusion, RowPolicy
from graph_csv.resolve.accessors import invoke

__all__ = ["Association", "AssociationExpander", "flatten_objects"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Association:
    """Associated objects of one record for one inclusion, with their options."""

    objects: list[Any] = field(default_factory=list)
    policy: RowPolicy = field(default_factory=RowPolicy)


def flatten_objects(value: Any) -> list[Any]:
    """Return ``value`` as a flat list of objects.

    ``None`` gives ``[]``; strings, bytes and mappings are single objects;
    any other iterable is flattened recursively; everything else is wrapped
    in a one-element list.
    """
    if value is None:
        return []
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
        return [value]
    objects: list[Any] = []
    for item in value:
        objects.extend(flatten_objects(item))
    return objects


class AssociationExpander:
    """Turns an Inclusion into the list of associated objects of a record.

    - A field-identifier key is looked up as an accessor on the record
      (method, property, attribute or mapping key).  A record without that
      accessor has no associated objects for it; this is not an error.
    - Any other key is a literal associated object and is used as-is.
    """

    def expand(self, record: Any, inclusion: Inclusion) -> Association:
        """Resolve ``inclusion`` against ``record``.

        Args:
            record:    The owning record.
            inclusion: One normalized include entry.

        Returns:
            An Association holding the flattened objects and the nested policy.
        """
        key = inclusion.key
        if isinstance(key, str):
            value, ok = invoke(record, key)
            if not ok:
                logger.debug(
                    "No association %r on %s; skipping", key, type(record).__name__
                )
                return Association(objects=[], policy=inclusion.policy)
            return Association(objects=flatten_objects(value), policy=inclusion.policy)

        return Association(objects=flatten_objects(key), policy=inclusion.policy)
