"""LabelFormatter: LRU-cached humanized labels for associations and columns.

Wraps the ``inflection`` library (a port of the Rails inflector) and caches
every formatted label in memory.  Header resolution and tree construction ask
for the same handful of labels over and over (once per associated object and
once per column), so each distinct identifier is inflected only once per
formatter.  LRU eviction occurs silently when ``max_size`` is exceeded.

Each ``LabelFormatter`` instance maintains its own ``LRUCache``; there is no
class-level shared state, so two instances never interfere with each other.

Example::

    labels = LabelFormatter()
    labels.association_label("profile_items")   # "profile_item"
    labels.column_title("profile_item_value")    # "Profile Item Value"
    labels.column_title("profile_item_id")       # "Profile Item"
    labels.titleize("is_old")                    # "Is Old"
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import inflection
from cachetools import LRUCache

__all__ = ["LabelFormatter"]


class LabelFormatter:
    """Humanizes field identifiers and association keys.

    Args:
        max_size: Maximum number of formatted labels to hold in memory.
            Defaults to 512.  When exceeded, the least-recently-used entry
            is silently evicted.
    """

    def __init__(self, max_size: int = 512) -> None:
        self._cache: LRUCache[tuple[str, str], str] = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Inflections
    # ------------------------------------------------------------------

    def titleize(self, identifier: Any) -> str:
        """Return ``identifier`` as capitalized words ("favorite_name" -> "Favorite Name").

        A trailing ``_id`` is dropped, so "profile_item_id" -> "Profile Item".
        """
        return self._lookup("titleize", str(identifier), inflection.titleize)

    def singularize(self, identifier: Any) -> str:
        """Return the singular form of ``identifier`` ("favorites" -> "favorite")."""
        return self._lookup("singularize", str(identifier), inflection.singularize)

    def column_title(self, field: Any) -> str:
        """Return the natural-order header text for a field identifier."""
        return self.titleize(self.singularize(field))

    def association_label(self, key: Any) -> str:
        """Return the node label for an include key.

        A field identifier is singularized and titleized, then lowercased with
        spaces turned into underscores: "profile_items" -> "profile_item".
        A literal object is labelled by its class name instead
        (``CheeseFavorite()`` -> "cheese_favorite"); a list of literal objects
        by the class name of its first element.
        """
        if isinstance(key, str):
            name = self.column_title(key)
        else:
            if isinstance(key, (list, tuple)) and key:
                key = key[0]
            name = self.titleize(type(key).__name__)
        return name.lower().replace(" ", "_")

    def _lookup(self, kind: str, text: str, inflect: Callable[[str], str]) -> str:
        cache_key = (kind, text)
        label = self._cache.get(cache_key)
        if label is None:
            label = inflect(text)
            self._cache[cache_key] = label
        return label
