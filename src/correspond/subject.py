"""Fluent assertion surface: ``assert_that(actual).comparing_elements_using(...)``.

Each check runs the matching engine and raises :class:`FactsAssertionError`
when the verdict is a failure.  Ordered checks (``contains_exactly*`` and
``contains_at_least*``) return an :class:`Ordered` whose ``in_order()``
additionally requires the original order::

    assert_that(actual).contains_exactly(3, 2, 1)             # any order
    assert_that(actual).contains_exactly(1, 2, 3).in_order()  # exact order

    (
        assert_that(records)
        .comparing_elements_using(same_id)
        .displaying_diffs_paired_by(lambda r: r.id)
        .contains_exactly_elements_in(expected_records)
    )

    assert_that({"a": "+1"}).comparing_values_using(parses_to).contains_entry("a", 1)
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any, overload

from correspond.algorithm.pairing import Pairer
from correspond.config import MatchConfig
from correspond.correspondence import Correspondence, DiffFormatter, equality
from correspond.engine import MapValuesEngine, MatchingEngine
from correspond.failure import FactsAssertionError
from correspond.result import MatchVerdict

__all__ = [
    "IterableSubject",
    "MapSubject",
    "MapValuesUsingCorrespondence",
    "Ordered",
    "UsingCorrespondence",
    "assert_that",
]


def _check(verdict: MatchVerdict) -> MatchVerdict:
    if verdict.failed:
        raise FactsAssertionError(verdict.facts)
    return verdict


class Ordered:
    """Returned by ordered checks that have already passed in some order."""

    def __init__(self, verdict: MatchVerdict) -> None:
        self.verdict = verdict

    def in_order(self) -> None:
        """Fail unless the matched elements also appeared in the expected order."""
        _check(self.verdict.in_order())


class _ContainmentChecks:
    """Containment checks shared by plain and correspondence-based subjects."""

    def __init__(
        self,
        actual: Iterable[Any],
        correspondence: Correspondence | None = None,
        pairer: Pairer | None = None,
        config: MatchConfig | None = None,
    ) -> None:
        self._actual = list(actual)
        self._correspondence = correspondence
        self._pairer = pairer
        self._config = config

    def _engine(self) -> MatchingEngine:
        return MatchingEngine(
            self._actual, self._correspondence, pairer=self._pairer, config=self._config
        )

    def contains(self, expected: Any) -> None:
        _check(self._engine().contains(expected))

    def does_not_contain(self, excluded: Any) -> None:
        _check(self._engine().does_not_contain(excluded))

    def contains_any_of(self, *expected: Any) -> None:
        _check(self._engine().contains_any_in(expected))

    def contains_any_in(self, expected: Iterable[Any]) -> None:
        _check(self._engine().contains_any_in(expected))

    def contains_none_of(self, *excluded: Any) -> None:
        _check(self._engine().contains_none_in(excluded))

    def contains_none_in(self, excluded: Iterable[Any]) -> None:
        _check(self._engine().contains_none_in(excluded))

    def contains_exactly(self, *expected: Any) -> Ordered:
        return Ordered(_check(self._engine().contains_exactly(*expected)))

    def contains_exactly_elements_in(self, expected: Iterable[Any]) -> Ordered:
        return Ordered(_check(self._engine().contains_exactly_elements_in(expected)))

    def contains_at_least(self, *expected: Any) -> Ordered:
        return Ordered(_check(self._engine().contains_at_least_elements_in(expected)))

    def contains_at_least_elements_in(self, expected: Iterable[Any]) -> Ordered:
        return Ordered(_check(self._engine().contains_at_least_elements_in(expected)))


class IterableSubject(_ContainmentChecks):
    """Assertions about an iterable, comparing elements with ``==``."""

    def __init__(self, actual: Iterable[Any], config: MatchConfig | None = None) -> None:
        super().__init__(actual, config=config)

    def comparing_elements_using(self, correspondence: Correspondence) -> UsingCorrespondence:
        """Compare elements through *correspondence* in the checks that follow."""
        return UsingCorrespondence(self._actual, correspondence, config=self._config)

    def formatting_diffs_using(self, formatter: DiffFormatter) -> UsingCorrespondence:
        """Compare elements with ``==`` but explain mismatches with *formatter*."""
        return UsingCorrespondence(
            self._actual, equality().formatting_diffs_using(formatter), config=self._config
        )


class UsingCorrespondence(_ContainmentChecks):
    """Assertions about an iterable whose elements are compared through a correspondence."""

    def __init__(
        self,
        actual: Iterable[Any],
        correspondence: Correspondence,
        pairer: Pairer | None = None,
        config: MatchConfig | None = None,
    ) -> None:
        super().__init__(actual, correspondence, pairer, config)
        self._using = correspondence

    def displaying_diffs_paired_by(
        self,
        actual_key_function: Callable[[Any], Any],
        expected_key_function: Callable[[Any], Any] | None = None,
    ) -> UsingCorrespondence:
        """Pair missing and unexpected elements by key in failure messages.

        This never changes whether a check passes, only how a failure reads.
        When *expected_key_function* is omitted the same function keys both sides.
        """
        pairer = Pairer(actual_key_function, expected_key_function)
        return UsingCorrespondence(self._actual, self._using, pairer, self._config)


class MapValuesUsingCorrespondence:
    """Assertions about a mapping whose values are compared through a correspondence."""

    def __init__(
        self,
        actual: Mapping[Any, Any],
        correspondence: Correspondence,
        config: MatchConfig | None = None,
    ) -> None:
        self._engine = MapValuesEngine(actual, correspondence, config=config)

    def contains_entry(self, key: Any, value: Any) -> None:
        _check(self._engine.contains_entry(key, value))

    def does_not_contain_entry(self, key: Any, value: Any) -> None:
        _check(self._engine.does_not_contain_entry(key, value))


class MapSubject:
    """Assertions about a mapping."""

    def __init__(self, actual: Mapping[Any, Any], config: MatchConfig | None = None) -> None:
        self._actual = actual
        self._config = config

    def comparing_values_using(
        self, correspondence: Correspondence
    ) -> MapValuesUsingCorrespondence:
        """Compare values through *correspondence* in the checks that follow."""
        return MapValuesUsingCorrespondence(self._actual, correspondence, self._config)

    def contains_entry(self, key: Any, value: Any) -> None:
        self.comparing_values_using(equality()).contains_entry(key, value)

    def does_not_contain_entry(self, key: Any, value: Any) -> None:
        self.comparing_values_using(equality()).does_not_contain_entry(key, value)


@overload
def assert_that(actual: Mapping[Any, Any], config: MatchConfig | None = None) -> MapSubject: ...


@overload
def assert_that(actual: Iterable[Any], config: MatchConfig | None = None) -> IterableSubject: ...


def assert_that(
    actual: Iterable[Any] | Mapping[Any, Any], config: MatchConfig | None = None
) -> IterableSubject | MapSubject:
    """Begin an assertion about *actual*.

    Args:
        actual: A mapping (for entry checks) or any finite iterable.
        config: Optional diagnostics configuration.

    Returns:
        A :class:`MapSubject` for mappings, otherwise an :class:`IterableSubject`.
    """
    if isinstance(actual, Mapping):
        return MapSubject(actual, config)
    return IterableSubject(actual, config)
