"""Deterministic record generators for performance benchmarks.

All generators produce fixed, reproducible records.  No random values.
Three tiers: 10 flat records, 100 records with one association, and
100 records with a mixed include graph that forces a tree rebuild.
"""

from __future__ import annotations

from typing import Any

import pytest


def generate_flat_records(count: int, num_keys: int = 10) -> list[dict[str, Any]]:
    """Generate flat mapping records with deterministic string values."""
    return [
        {f"field_{k}": f"value_{i}_{k}" for k in range(num_keys)} for i in range(count)
    ]


def generate_nested_records(count: int, fanout: int) -> list[dict[str, Any]]:
    """Generate records with ``fanout`` orders and ``fanout`` notes each."""
    return [
        {
            "id": i,
            "name": f"customer_{i}",
            "orders": [
                {
                    "id": j,
                    "total": j * 10,
                    "items": [{"sku": f"sku_{j}_{n}"} for n in range(2)],
                }
                for j in range(fanout)
            ],
            "notes": [{"text": f"note_{i}_{n}"} for n in range(fanout)],
        }
        for i in range(count)
    ]


@pytest.fixture
def records_10_flat() -> list[dict[str, Any]]:
    return generate_flat_records(10)


@pytest.fixture
def records_100_nested() -> list[dict[str, Any]]:
    return generate_nested_records(100, fanout=3)
