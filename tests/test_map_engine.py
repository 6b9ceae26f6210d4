"""Tests for MapValuesEngine.

Covers:
- contains_entry: pass, wrong value (with and without a diff), missing key
  with and without other keys holding a matching value, exceptions
- does_not_contain_entry: absent key, non-matching value, matching value,
  exceptions as the main cause
"""

from __future__ import annotations

from correspond.correspondence import Correspondence, from_predicate
from correspond.engine import MapValuesEngine
from correspond.facts import Fact, simple_fact

PARSES_TO = from_predicate(lambda actual, expected: int(actual) == expected, "parses to")
PARSES_TO_FACT = Fact("testing whether", "actual value parses to expected value")
ACTUAL = {"abc": "+123", "def": "+456"}


def engine(
    actual: dict[str, str] = ACTUAL, correspondence: Correspondence = PARSES_TO
) -> MapValuesEngine:
    return MapValuesEngine(actual, correspondence)


class TestContainsEntry:
    """contains_entry()."""

    def test_passes(self) -> None:
        assert engine().contains_entry("abc", 123).passed

    def test_wrong_value(self) -> None:
        verdict = engine().contains_entry("def", 123)
        assert verdict.facts == (
            Fact("for key", "def"),
            Fact("expected value", "123"),
            PARSES_TO_FACT,
            Fact("but got value", "+456"),
            Fact("full map", "{abc: +123, def: +456}"),
        )
        assert verdict.missing == (("def", 123),)
        assert verdict.extra == (("def", "+456"),)

    def test_wrong_value_with_diff(self) -> None:
        corr = PARSES_TO.formatting_diffs_using(lambda a, e: f"off by {int(a) - e}")
        verdict = engine(correspondence=corr).contains_entry("def", 123)
        assert verdict.facts[4] == Fact("diff", "off by 333")

    def test_missing_key_with_matching_value_elsewhere(self) -> None:
        verdict = engine().contains_entry("xyz", 123)
        assert verdict.facts == (
            Fact("for key", "xyz"),
            Fact("expected value", "123"),
            PARSES_TO_FACT,
            simple_fact("but was missing"),
            Fact("other keys with matching values", "[abc]"),
            Fact("full map", "{abc: +123, def: +456}"),
        )

    def test_missing_key_without_matching_value(self) -> None:
        verdict = engine().contains_entry("xyz", 7)
        assert "other keys with matching values" not in [f.key for f in verdict.facts]

    def test_exception_is_reported_as_values(self) -> None:
        verdict = engine({"a": "oops"}).contains_entry("a", 1)
        assert verdict.failed
        assert (
            simple_fact("additionally, one or more exceptions were thrown while comparing values")
            in verdict.facts
        )


class TestDoesNotContainEntry:
    """does_not_contain_entry()."""

    def test_absent_key_passes(self) -> None:
        assert engine().does_not_contain_entry("xyz", 1).passed

    def test_non_matching_value_passes(self) -> None:
        assert engine().does_not_contain_entry("def", 123).passed

    def test_matching_value_fails(self) -> None:
        verdict = engine({"def": "+456"}).does_not_contain_entry("def", 456)
        assert verdict.facts == (
            Fact("expected not to contain", "def: 456"),
            PARSES_TO_FACT,
            Fact("but contained", "def: +456"),
            Fact("full map", "{def: +456}"),
        )
        assert verdict.extra == (("def", "+456"),)

    def test_exception_is_main_cause(self) -> None:
        verdict = engine({"a": "oops"}).does_not_contain_entry("a", 1)
        assert verdict.facts[0] == simple_fact(
            "one or more exceptions were thrown while comparing values"
        )
        assert simple_fact("found no match (but failing because of exception)") in verdict.facts


class TestExceptionFactPlacement:
    """Exception facts come right before the final "full map" fact."""

    def test_wrong_value(self) -> None:
        verdict = engine({"a": "oops"}).contains_entry("a", 1)
        assert [f.key for f in verdict.facts][-3:] == [
            "additionally, one or more exceptions were thrown while comparing values",
            "first exception",
            "full map",
        ]

    def test_missing_key(self) -> None:
        verdict = engine({"a": "oops"}).contains_entry("b", 1)
        assert [f.key for f in verdict.facts][-3:] == [
            "additionally, one or more exceptions were thrown while comparing values",
            "first exception",
            "full map",
        ]
