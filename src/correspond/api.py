"""Public functional API for correspond.

These functions return a :class:`MatchVerdict` instead of raising, for callers
that want to inspect the verdict kind or the diagnostic facts themselves.
Each call creates a fresh engine (and exception store), so no state is shared
between calls.

For assertion-style use see :func:`correspond.assert_that`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from correspond.algorithm.pairing import Pairer
from correspond.config import MatchConfig
from correspond.correspondence import Correspondence
from correspond.engine import MapValuesEngine, MatchingEngine
from correspond.result import MatchVerdict

__all__ = [
    "contains",
    "contains_any_in",
    "contains_at_least",
    "contains_entry",
    "contains_exactly",
    "contains_none_in",
    "does_not_contain",
    "does_not_contain_entry",
]

KeyFunction = Callable[[Any], Any]


def _engine(
    actual: Iterable[Any],
    correspondence: Correspondence | None,
    key_function: KeyFunction | None,
    expected_key_function: KeyFunction | None,
    config: MatchConfig | None,
) -> MatchingEngine:
    pairer = Pairer(key_function, expected_key_function) if key_function is not None else None
    return MatchingEngine(actual, correspondence, pairer=pairer, config=config)


def contains_exactly(
    actual: Iterable[Any],
    expected: Iterable[Any],
    correspondence: Correspondence | None = None,
    *,
    key_function: KeyFunction | None = None,
    expected_key_function: KeyFunction | None = None,
    config: MatchConfig | None = None,
) -> MatchVerdict:
    """Check that *actual* and *expected* correspond 1:1.

    Args:
        actual:                The collection under test.
        expected:              The expected values.
        correspondence:        How elements are compared.  Defaults to ``==``.
        key_function:          Optional key for pairing missing and unexpected
                               values in the failure facts (both sides unless
                               *expected_key_function* is given).
        expected_key_function: Optional separate key for expected values.
        config:                Diagnostics configuration.

    Returns:
        ``IN_ORDER``, ``OUT_OF_ORDER`` or ``FAILED`` (with facts).
    """
    engine = _engine(actual, correspondence, key_function, expected_key_function, config)
    return engine.contains_exactly_elements_in(expected)


def contains_at_least(
    actual: Iterable[Any],
    expected: Iterable[Any],
    correspondence: Correspondence | None = None,
    *,
    key_function: KeyFunction | None = None,
    expected_key_function: KeyFunction | None = None,
    config: MatchConfig | None = None,
) -> MatchVerdict:
    """Check that every expected value corresponds to a distinct actual element.

    Arguments are as for :func:`contains_exactly`.
    """
    engine = _engine(actual, correspondence, key_function, expected_key_function, config)
    return engine.contains_at_least_elements_in(expected)


def contains(
    actual: Iterable[Any],
    expected: Any,
    correspondence: Correspondence | None = None,
    *,
    key_function: KeyFunction | None = None,
    expected_key_function: KeyFunction | None = None,
    config: MatchConfig | None = None,
) -> MatchVerdict:
    """Check that some actual element corresponds to *expected*."""
    engine = _engine(actual, correspondence, key_function, expected_key_function, config)
    return engine.contains(expected)


def does_not_contain(
    actual: Iterable[Any],
    excluded: Any,
    correspondence: Correspondence | None = None,
    *,
    config: MatchConfig | None = None,
) -> MatchVerdict:
    """Check that no actual element corresponds to *excluded*."""
    return MatchingEngine(actual, correspondence, config=config).does_not_contain(excluded)


def contains_any_in(
    actual: Iterable[Any],
    expected: Iterable[Any],
    correspondence: Correspondence | None = None,
    *,
    key_function: KeyFunction | None = None,
    expected_key_function: KeyFunction | None = None,
    config: MatchConfig | None = None,
) -> MatchVerdict:
    """Check that some actual element corresponds to at least one expected value."""
    engine = _engine(actual, correspondence, key_function, expected_key_function, config)
    return engine.contains_any_in(expected)


def contains_none_in(
    actual: Iterable[Any],
    excluded: Iterable[Any],
    correspondence: Correspondence | None = None,
    *,
    config: MatchConfig | None = None,
) -> MatchVerdict:
    """Check that no actual element corresponds to any excluded value."""
    return MatchingEngine(actual, correspondence, config=config).contains_none_in(excluded)


def contains_entry(
    actual: Mapping[Any, Any],
    key: Any,
    value: Any,
    correspondence: Correspondence,
    *,
    config: MatchConfig | None = None,
) -> MatchVerdict:
    """Check that *key* maps to a value corresponding to *value*."""
    return MapValuesEngine(actual, correspondence, config=config).contains_entry(key, value)


def does_not_contain_entry(
    actual: Mapping[Any, Any],
    key: Any,
    value: Any,
    correspondence: Correspondence,
    *,
    config: MatchConfig | None = None,
) -> MatchVerdict:
    """Check that *key* does not map to a value corresponding to *value*."""
    return MapValuesEngine(actual, correspondence, config=config).does_not_contain_entry(key, value)
