"""RowPolicy and Inclusion: the options that drive one serialization call.

RowPolicy is a frozen (immutable) dataclass holding the field-selection,
association and column-layout options.  It is normally built from the loose
keyword/mapping form accepted by the public API::

    RowPolicy.from_options({
        "only": ["name"],
        "include": {"profile_item": {"only": "name", "include": "colors"}},
        "column_names": {"name": "NAME"},
    })

Option resolution is permissive: unknown keys are ignored, scalars are
wrapped into one-element tuples, and include values that are not mappings
become empty nested policies.  Nothing in this module raises for malformed
options.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

__all__ = ["Inclusion", "RowPolicy"]

logger = logging.getLogger(__name__)

# "except" is a Python keyword, so the keyword-argument spelling is "except_".
_OPTION_KEYS = {
    "headers": "headers",
    "only": "only",
    "except": "except_",
    "except_": "except_",
    "methods": "methods",
    "include": "include",
    "column_order": "column_order",
    "column_names": "column_names",
}


def _as_tuple(value: Any) -> tuple[Any, ...]:
    """Wrap a scalar into a one-element tuple; tuple-ize any other iterable.

    Strings are scalars here: ``"name"`` becomes ``("name",)`` and ``""``
    becomes ``("",)``, which matches no field.
    """
    if value is None:
        return ()
    if isinstance(value, (str, bytes)):
        return (value,)
    if isinstance(value, Iterable):
        return tuple(value)
    return (value,)


def _field_names(option: str, value: Any) -> tuple[Any, ...]:
    """Like ``_as_tuple``, but drop entries that cannot name a field.

    Field identifiers are looked up in sets and dicts, so unhashable entries
    (e.g. a nested list) would match nothing anyway.
    """
    names: list[Any] = []
    for name in _as_tuple(value):
        try:
            hash(name)
        except TypeError:
            logger.debug("Ignoring unhashable %s entry %r", option, name)
            continue
        names.append(name)
    return tuple(names)


@dataclass(frozen=True, slots=True)
class Inclusion:
    """One association to expand.

    Attributes:
        key:    Accessor name of the association (a field identifier), or a
                literal associated object (any non-``str`` value).
        policy: Options applied to the associated objects.
    """

    key: Any
    policy: RowPolicy


@dataclass(frozen=True, slots=True)
class RowPolicy:
    """Immutable options for one serialization call (or one nested association).

    Attributes:
        headers:      Emit the header row.  Only meaningful on the top-level policy.
        only:         Keep only these fields.  ``None`` means "not given"; an
                      empty tuple keeps none.
        except_:      Drop these fields.  Ignored when ``only`` is given.
        methods:      Computed fields appended after the declared attributes.
        include:      Associations to expand, in the order given.
        column_order: Explicit column layout.  ``None`` selects natural order.
        column_names: Header label overrides, keyed by field identifier.
    """

    headers: bool = True
    only: tuple[Any, ...] | None = None
    except_: tuple[Any, ...] = ()
    methods: tuple[Any, ...] = ()
    include: tuple[Inclusion, ...] = ()
    column_order: tuple[Any, ...] | None = None
    column_names: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> RowPolicy:
        """Build a policy from a mapping of loose option values.

        Args:
            options: Mapping using the keys ``headers``, ``only``, ``except``
                (or ``except_``), ``methods``, ``include``, ``column_order``
                and ``column_names``.  ``None`` gives the default policy.

        Returns:
            A new RowPolicy.  Unknown keys are dropped with a debug message.
        """
        if not options:
            return cls()

        values: dict[str, Any] = {}
        for key, value in options.items():
            name = _OPTION_KEYS.get(key)
            if name is None:
                logger.debug("Ignoring unknown option %r", key)
                continue
            values[name] = value

        only = values.get("only")
        column_order = values.get("column_order")
        column_names = values.get("column_names")
        if not isinstance(column_names, Mapping):
            column_names = {}
        headers = values.get("headers")

        return cls(
            headers=True if headers is None else bool(headers),
            only=None if only is None else _field_names("only", only),
            except_=_field_names("except", values.get("except_")),
            methods=_field_names("methods", values.get("methods")),
            include=_normalize_include(values.get("include")),
            column_order=(
                None
                if column_order is None
                else _field_names("column_order", column_order)
            ),
            column_names=dict(column_names),
        )

    @classmethod
    def coerce(cls, value: Any) -> RowPolicy:
        """Return ``value`` as a RowPolicy.

        A RowPolicy is returned unchanged, a mapping goes through
        ``from_options``, and anything else (``None``, ``True``, a string)
        becomes the default policy.
        """
        if isinstance(value, RowPolicy):
            return value
        if isinstance(value, Mapping):
            return cls.from_options(value)
        return cls()

    def merged(self, **overrides: Any) -> RowPolicy:
        """Return a copy with the given loose options applied on top."""
        if not overrides:
            return self
        current: dict[str, Any] = {
            "headers": self.headers,
            "only": self.only,
            "except_": self.except_,
            "methods": self.methods,
            "column_order": self.column_order,
            "column_names": self.column_names,
        }
        include = overrides.pop("include", None)
        current.update(overrides)
        policy = RowPolicy.from_options(current)
        return RowPolicy(
            headers=policy.headers,
            only=policy.only,
            except_=policy.except_,
            methods=policy.methods,
            include=self.include if include is None else _normalize_include(include),
            column_order=policy.column_order,
            column_names=policy.column_names,
        )


def _normalize_include(value: Any) -> tuple[Inclusion, ...]:
    """Turn any accepted ``include`` shape into a tuple of Inclusion entries.

    Accepted shapes:
    - ``"favorites"``                        -> one accessor, default options
    - ``["favorites", "profile_items"]``     -> several accessors
    - ``{"favorites": {"only": "name"}}``    -> accessors with nested options
    - ``some_object``                        -> a literal associated object
    """
    if value is None:
        return ()
    if isinstance(value, Mapping):
        return tuple(
            Inclusion(key=key, policy=RowPolicy.coerce(options))
            for key, options in value.items()
        )
    if isinstance(value, (list, tuple)):
        inclusions: list[Inclusion] = []
        for item in value:
            inclusions.extend(_normalize_include(item))
        return tuple(inclusions)
    return (Inclusion(key=value, policy=RowPolicy()),)
