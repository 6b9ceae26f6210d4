"""Exposes ``correspond.assert_that`` to test suites as a fixture.

Registered under the ``correspond`` name in the ``pytest11`` entry-point group,
so any suite running with the package installed can request ``assert_that``
without importing it or touching its conftest.
"""

from __future__ import annotations

from typing import Any

import pytest

import correspond


@pytest.fixture(scope="session")
def assert_that() -> Any:
    """Fixture that returns :func:`correspond.assert_that`.

    The fixture is session-scoped because the returned callable is stateless
    (every check builds a fresh engine and exception store).

    Usage in tests::

        def test_scores(assert_that):
            assert_that([1.02, 2.04]).comparing_elements_using(
                tolerance(0.05)
            ).contains_exactly(1.0, 2.0)

        def test_missing(assert_that):
            with pytest.raises(AssertionError, match=r"missing \\(1\\)"):
                assert_that([1, 2]).contains_exactly(1, 2, 3)

    Returns:
        ``correspond.assert_that``; failed checks raise ``FactsAssertionError``,
        a subclass of ``AssertionError``.
    """
    return correspond.assert_that

