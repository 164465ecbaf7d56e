"""Tests for AttributeResolver field selection."""

from __future__ import annotations

from typing import Any

import pytest

from graph_csv.policy import RowPolicy
from graph_csv.resolve.attributes import AttributeResolver


@pytest.fixture
def resolver() -> AttributeResolver:
    return AttributeResolver()


def _policy(**options: Any) -> RowPolicy:
    return RowPolicy.from_options(options)


class TestSelection:
    def test_all_declared_fields_sorted(
        self, resolver: AttributeResolver, users: list[Any]
    ) -> None:
        content = resolver.resolve(users[0], RowPolicy())
        assert list(content) == ["age", "id", "name"]

    def test_only_keeps_sorted_intersection(
        self, resolver: AttributeResolver, users: list[Any]
    ) -> None:
        content = resolver.resolve(users[0], _policy(only=["name", "id", "nope"]))
        assert content == {"id": 1, "name": "Ary"}
        assert list(content) == ["id", "name"]

    def test_empty_only_selects_nothing(
        self, resolver: AttributeResolver, users: list[Any]
    ) -> None:
        assert resolver.resolve(users[0], _policy(only=[])) == {}

    def test_except_removes(self, resolver: AttributeResolver, users: list[Any]) -> None:
        assert resolver.resolve(users[0], _policy(**{"except": "age"})) == {
            "id": 1,
            "name": "Ary",
        }

    def test_only_wins_over_except(
        self, resolver: AttributeResolver, users: list[Any]
    ) -> None:
        policy = _policy(only="name", **{"except": "name"})
        assert resolver.resolve(users[0], policy) == {"name": "Ary"}


class TestMethods:
    def test_methods_appended_in_given_order(
        self, resolver: AttributeResolver, users: list[Any]
    ) -> None:
        content = resolver.resolve(
            users[0], _policy(only="id", methods=["profile_item", "is_old"])
        )
        assert list(content) == ["id", "profile_item", "is_old"]
        assert content["is_old"] is False

    def test_unsupported_method_dropped(
        self, resolver: AttributeResolver, users: list[Any]
    ) -> None:
        assert resolver.resolve(users[0], _policy(only=[], methods="nope")) == {}

    def test_method_naming_declared_field_uses_declared_value(
        self, resolver: AttributeResolver
    ) -> None:
        record = {"id": 1, "name": "x"}
        content = resolver.resolve(record, _policy(only="id", methods="name"))
        assert content == {"id": 1, "name": "x"}


class TestQualification:
    def test_label_prefixes_every_field(
        self, resolver: AttributeResolver, users: list[Any]
    ) -> None:
        favorite = users[0].favorite()
        content = resolver.resolve(
            favorite, _policy(methods="color"), label="favorite"
        )
        assert list(content) == ["favorite_id", "favorite_name", "favorite_color"]

    def test_root_label_leaves_fields_unqualified(
        self, resolver: AttributeResolver
    ) -> None:
        assert resolver.resolve({"id": 1}, RowPolicy(), label="") == {"id": 1}
