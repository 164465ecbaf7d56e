"""Tests for AssociationExpander and flatten_objects."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from graph_csv.policy import Inclusion, RowPolicy
from graph_csv.resolve.associations import (
    Association,
    AssociationExpander,
    flatten_objects,
)


class TestFlattenObjects:
    def test_none(self) -> None:
        assert flatten_objects(None) == []

    def test_single_object(self) -> None:
        marker = object()
        assert flatten_objects(marker) == [marker]

    @pytest.mark.parametrize("value", ["text", b"raw", {"id": 1}])
    def test_atomic_iterables_are_single_objects(self, value: Any) -> None:
        assert flatten_objects(value) == [value]

    def test_nested_sequences(self) -> None:
        assert flatten_objects([1, [2, (3, [4])], None, 5]) == [1, 2, 3, 4, 5]

    def test_generator(self) -> None:
        assert flatten_objects(x for x in "ab") == ["a", "b"]


class TestExpand:
    def test_default_association(self) -> None:
        association = Association()
        assert association.objects == []
        assert association.policy == RowPolicy()

    def test_plural_accessor(self, users: list[Any]) -> None:
        association = AssociationExpander().expand(
            users[0], Inclusion(key="favorites", policy=RowPolicy())
        )
        assert [obj.name for obj in association.objects] == ["Pizza", "Beer"]

    def test_singular_accessor_is_wrapped(self, users: list[Any]) -> None:
        association = AssociationExpander().expand(
            users[0], Inclusion(key="favorite", policy=RowPolicy())
        )
        assert [obj.name for obj in association.objects] == ["Pizza"]

    def test_policy_is_passed_through(self, users: list[Any]) -> None:
        nested = RowPolicy(only=("name",))
        association = AssociationExpander().expand(
            users[0], Inclusion(key="favorites", policy=nested)
        )
        assert association.policy is nested

    def test_missing_accessor_is_empty(
        self, users: list[Any], caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="graph_csv.resolve.associations"):
            association = AssociationExpander().expand(
                users[0], Inclusion(key="enemies", policy=RowPolicy())
            )
        assert association.objects == []
        assert "enemies" in caplog.text

    def test_literal_object(self, users: list[Any], cheese: Any) -> None:
        association = AssociationExpander().expand(
            users[0], Inclusion(key=cheese, policy=RowPolicy())
        )
        assert association.objects == [cheese]

    def test_literal_list(self, users: list[Any], cheese: Any) -> None:
        association = AssociationExpander().expand(
            users[0], Inclusion(key=(cheese, [cheese]), policy=RowPolicy())
        )
        assert association.objects == [cheese, cheese]
