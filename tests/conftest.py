"""Deterministic sample object graph shared by the test suite.

All records produce fixed, reproducible values.  No random data.

Shape::

    User(id, name, age)
    |- profile_items -> [ProfileItem(1, "First Name", "Person One"),
    |                    ProfileItem(2, "Last Name", "Smith")]
    |     |- favorite -> Favorite(1, "Pizza")
    |     |- colors   -> [Color("Red"), Color("Blue")]
    |- favorites     -> [Favorite(1, "Pizza"), Favorite(2, "Beer")]
          |- colors   -> [Color("Red"), Color("Blue")]

Singular accessors (``profile_item``, ``favorite``, ``color``) return the
first element of the matching plural accessor.
"""

from __future__ import annotations

from typing import Any

import pytest


class SampleRecord:
    """Base for sample records: keyword construction + ``attributes()``."""

    COLUMNS: tuple[str, ...] = ()

    def __init__(self, **params: Any) -> None:
        for key, value in params.items():
            setattr(self, key, value)

    def attributes(self) -> dict[str, Any]:
        return {column: getattr(self, column) for column in self.COLUMNS}


class Color(SampleRecord):
    COLUMNS = ("name",)


class Favorite(SampleRecord):
    COLUMNS = ("id", "name")

    def color(self) -> Color:
        return self.colors()[0]

    def colors(self) -> list[Color]:
        return [Color(name="Red"), Color(name="Blue")]


class ProfileItem(SampleRecord):
    COLUMNS = ("id", "name", "value")

    def my_label(self) -> str:
        return self.name.lower()

    def favorite(self) -> Favorite:
        return Favorite(id=1, name="Pizza")

    def color(self) -> Color:
        return self.colors()[0]

    def colors(self) -> list[Color]:
        return [Color(name="Red"), Color(name="Blue")]


class User(SampleRecord):
    COLUMNS = ("id", "name", "age")

    def is_old(self) -> bool:
        return self.age > 40

    def profile_item(self) -> ProfileItem:
        return self.profile_items()[0]

    def profile_items(self) -> list[ProfileItem]:
        return [
            ProfileItem(id=1, name="First Name", value="Person One"),
            ProfileItem(id=2, name="Last Name", value="Smith"),
        ]

    def favorite(self) -> Favorite:
        return self.favorites()[0]

    def favorites(self) -> list[Favorite]:
        return [Favorite(id=1, name="Pizza"), Favorite(id=2, name="Beer")]


@pytest.fixture
def users() -> list[User]:
    """Two users, neither of them old."""
    return [User(id=1, name="Ary", age=25), User(id=2, name="Nati", age=22)]


@pytest.fixture
def cheese() -> Favorite:
    """A favorite that no user owns, for literal ``include`` keys."""
    return Favorite(id=5, name="Cheese")
