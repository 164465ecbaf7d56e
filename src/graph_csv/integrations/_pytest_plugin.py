"""pytest plugin for graph-csv.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

import csv
import io
from typing import Any

import pytest


@pytest.fixture(scope="session")
def assert_rectangular_csv() -> Any:
    """Fixture that returns a callable CSV width asserter.

    The fixture is session-scoped because the returned callable is stateless.

    Usage in tests::

        def test_export(assert_rectangular_csv):
            rows = assert_rectangular_csv(to_csv(users, include="favorites"))
            assert len(rows) == 5

    Returns:
        A callable ``_assert(text, width=None) -> list[list[str]]`` that parses
        ``text`` and raises ``AssertionError`` when any record's field count
        differs from the first record's (or from ``width`` when given).  The
        parsed records are returned for further checks.
    """

    def _assert(text: str, width: int | None = None) -> list[list[str]]:
        """Assert that every CSV record of ``text`` has the same number of fields.

        Args:
            text:  CSV document, e.g. the output of ``serialize``.
            width: Expected field count.  Defaults to the first record's.

        Raises:
            AssertionError: On the first record with a different width, with
                a message including the line number, both widths and the
                offending record.
        """
        records = list(csv.reader(io.StringIO(text)))
        if not records:
            return records
        expected = width if width is not None else len(records[0])
        for lineno, record in enumerate(records, start=1):
            if len(record) != expected:
                raise AssertionError(
                    f"CSV is not rectangular: "
                    f"line {lineno} has width={len(record)}, expected width={expected}\n"
                    f"  record: {record}"
                )
        return records

    return _assert
