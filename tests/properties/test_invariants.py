"""Randomized checks of the matching invariants.

Covers:
- Multiplicity: each expected element needs its own actual element
- Verdicts agree with brute force over permutations on small inputs
- The linear fast path and the exhaustive path give identical verdicts
- Exceptions from the correspondence are never silently dropped
"""

from __future__ import annotations

import itertools
import random
from typing import Any

import pytest

from correspond.config import MatchConfig
from correspond.correspondence import Correspondence, from_predicate
from correspond.engine import MatchingEngine
from correspond.result import MatchVerdict, VerdictKind

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

SAME_MOD_3 = from_predicate(lambda actual, expected: actual % 3 == expected % 3, "is congruent to")


def _raises_on_four(actual: int, expected: int) -> bool:
    if actual == 4:
        msg = "four is not supported"
        raise ValueError(msg)
    return actual % 3 == expected % 3


RAISES_ON_FOUR = from_predicate(_raises_on_four, "is congruent to")
SLOW = MatchConfig(skip_fast_path=True)


def random_lists(seed: int, max_len: int = 5) -> tuple[list[int], list[int]]:
    rng = random.Random(seed)
    actual = [rng.randrange(6) for _ in range(rng.randrange(max_len + 1))]
    expected = [rng.randrange(6) for _ in range(rng.randrange(max_len + 1))]
    return actual, expected


def brute_exactly(actual: list[Any], expected: list[Any], corr: Correspondence) -> VerdictKind:
    if len(actual) != len(expected):
        return VerdictKind.FAILED
    if all(corr.compare(a, e) for a, e in zip(actual, expected)):
        return VerdictKind.IN_ORDER
    for order in itertools.permutations(range(len(actual))):
        if all(corr.compare(actual[i], e) for i, e in zip(order, expected)):
            return VerdictKind.OUT_OF_ORDER
    return VerdictKind.FAILED


def brute_at_least(actual: list[Any], expected: list[Any], corr: Correspondence) -> VerdictKind:
    positions = range(len(actual))
    for chosen in itertools.combinations(positions, len(expected)):
        if all(corr.compare(actual[i], e) for i, e in zip(chosen, expected)):
            return VerdictKind.IN_ORDER
    for chosen in itertools.permutations(positions, len(expected)):
        if all(corr.compare(actual[i], e) for i, e in zip(chosen, expected)):
            return VerdictKind.OUT_OF_ORDER
    return VerdictKind.FAILED


def exception_keys(verdict: MatchVerdict) -> list[str]:
    return [f.key for f in verdict.facts if "exceptions were thrown" in f.key]


# ---------------------------------------------------------------------------
# Multiplicity
# ---------------------------------------------------------------------------


class TestMultiplicity:
    """Duplicates must be matched one to one."""

    @pytest.mark.parametrize("correspondence", [None, SAME_MOD_3])
    def test_extra_duplicate_in_actual(self, correspondence: Correspondence | None) -> None:
        assert MatchingEngine([1, 1], correspondence).contains_exactly(1).failed

    @pytest.mark.parametrize("correspondence", [None, SAME_MOD_3])
    def test_extra_duplicate_in_expected(self, correspondence: Correspondence | None) -> None:
        assert MatchingEngine([1], correspondence).contains_at_least(1, 1).failed

    @pytest.mark.parametrize("correspondence", [None, SAME_MOD_3])
    def test_matching_duplicates(self, correspondence: Correspondence | None) -> None:
        verdict = MatchingEngine([1, 2, 1], correspondence).contains_at_least(1, 1)
        assert verdict.kind is VerdictKind.IN_ORDER


# ---------------------------------------------------------------------------
# Brute force agreement
# ---------------------------------------------------------------------------


@pytest.mark.slow
class TestAgainstBruteForce:
    """Verdict kinds match an exhaustive search over assignments."""

    @pytest.mark.parametrize("seed", range(60))
    def test_contains_exactly(self, seed: int) -> None:
        actual, expected = random_lists(seed)
        verdict = MatchingEngine(actual, SAME_MOD_3).contains_exactly_elements_in(expected)
        assert verdict.kind is brute_exactly(actual, expected, SAME_MOD_3)

    @pytest.mark.parametrize("seed", range(60))
    def test_contains_at_least(self, seed: int) -> None:
        actual, expected = random_lists(seed)
        verdict = MatchingEngine(actual, SAME_MOD_3).contains_at_least_elements_in(expected)
        assert verdict.kind is brute_at_least(actual, expected, SAME_MOD_3)

    @pytest.mark.parametrize("seed", range(30))
    def test_plain_equality_contains_exactly(self, seed: int) -> None:
        actual, expected = random_lists(seed)
        verdict = MatchingEngine(actual).contains_exactly_elements_in(expected)
        assert verdict.kind is brute_exactly(actual, expected, Correspondence.equality())

    @pytest.mark.parametrize("seed", range(30))
    def test_plain_equality_contains_at_least(self, seed: int) -> None:
        actual, expected = random_lists(seed)
        verdict = MatchingEngine(actual).contains_at_least_elements_in(expected)
        assert verdict.kind is brute_at_least(actual, expected, Correspondence.equality())


# ---------------------------------------------------------------------------
# Fast path equivalence
# ---------------------------------------------------------------------------


class TestFastPathEquivalence:
    """skip_fast_path=True never changes a verdict."""

    @pytest.mark.parametrize("correspondence", [SAME_MOD_3, RAISES_ON_FOUR])
    @pytest.mark.parametrize("seed", range(40))
    def test_contains_exactly(self, seed: int, correspondence: Correspondence) -> None:
        actual, expected = random_lists(seed)
        fast = MatchingEngine(actual, correspondence).contains_exactly_elements_in(expected)
        slow = MatchingEngine(actual, correspondence, config=SLOW).contains_exactly_elements_in(
            expected
        )
        assert fast.kind is slow.kind
        assert fast.missing == slow.missing
        assert fast.extra == slow.extra

    @pytest.mark.parametrize("correspondence", [SAME_MOD_3, RAISES_ON_FOUR])
    @pytest.mark.parametrize("seed", range(40))
    def test_contains_at_least(self, seed: int, correspondence: Correspondence) -> None:
        actual, expected = random_lists(seed)
        fast = MatchingEngine(actual, correspondence).contains_at_least_elements_in(expected)
        slow = MatchingEngine(actual, correspondence, config=SLOW).contains_at_least_elements_in(
            expected
        )
        assert fast.kind is slow.kind
        assert fast.missing == slow.missing

    def test_in_order_pass_with_skip(self) -> None:
        verdict = MatchingEngine([1, 2], SAME_MOD_3, config=SLOW).contains_exactly(4, 5)
        assert verdict.kind is VerdictKind.IN_ORDER


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class TestExceptionsAreNeverSilent:
    """A raising correspondence is always visible in the outcome."""

    @pytest.mark.parametrize("seed", range(40))
    def test_contains_exactly_with_four_in_actual(self, seed: int) -> None:
        actual, expected = random_lists(seed)
        actual = [*actual, 4]
        verdict = MatchingEngine(actual, RAISES_ON_FOUR).contains_exactly_elements_in(
            [*expected, 1]
        )
        assert verdict.failed
        assert exception_keys(verdict)

    def test_passing_verdicts_record_nothing(self) -> None:
        verdict = MatchingEngine([1, 2], RAISES_ON_FOUR).contains_exactly(2, 1)
        assert verdict.kind is VerdictKind.OUT_OF_ORDER
        assert verdict.exceptions is None
