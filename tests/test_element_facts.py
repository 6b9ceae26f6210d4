"""Tests for element fact layout (pick_grouping / make_element_facts*).

Covers:
- Grouping choice: commas, newlines, empty entries, length limit
- Single fact vs header plus numbered facts
- Duplicate counts in numbered keys
- Homogeneous type name in the header
- Two-list layout: near-miss type info, blank separator, closing ---
"""

from __future__ import annotations

from correspond.config import ElementFactGrouping, MatchConfig
from correspond.element_facts import make_element_facts, make_element_facts_for_both, pick_grouping
from correspond.facts import DuplicateGrouped, Fact, simple_fact

EMPTY = DuplicateGrouped.of([])


class TestPickGrouping:
    """pick_grouping heuristics."""

    def test_short_plain_lists_use_one_fact(self) -> None:
        grouping = pick_grouping(DuplicateGrouped.of(["a", "b"]), EMPTY)
        assert grouping is ElementFactGrouping.ALL_IN_ONE_FACT

    def test_comma_in_multi_element_list_splits(self) -> None:
        grouping = pick_grouping(DuplicateGrouped.of(["a,b", "c"]), EMPTY)
        assert grouping is ElementFactGrouping.FACT_PER_ELEMENT

    def test_newline_in_other_list_splits(self) -> None:
        grouping = pick_grouping(DuplicateGrouped.of(["a", "b"]), DuplicateGrouped.of(["x\ny"]))
        assert grouping is ElementFactGrouping.FACT_PER_ELEMENT

    def test_comma_in_single_elements_does_not_split(self) -> None:
        grouping = pick_grouping(DuplicateGrouped.of(["a,b"]), DuplicateGrouped.of(["c"]))
        assert grouping is ElementFactGrouping.ALL_IN_ONE_FACT

    def test_empty_entry_splits(self) -> None:
        grouping = pick_grouping(DuplicateGrouped.of(["", "a"]), EMPTY)
        assert grouping is ElementFactGrouping.FACT_PER_ELEMENT

    def test_long_list_splits(self) -> None:
        grouping = pick_grouping(DuplicateGrouped.of(["x" * 150, "y" * 150]), EMPTY)
        assert grouping is ElementFactGrouping.FACT_PER_ELEMENT

    def test_length_limit_is_configurable(self) -> None:
        grouping = pick_grouping(
            DuplicateGrouped.of(["x" * 150, "y" * 150]),
            EMPTY,
            MatchConfig(grouping_length_limit=1000),
        )
        assert grouping is ElementFactGrouping.ALL_IN_ONE_FACT


class TestMakeElementFacts:
    """make_element_facts layouts."""

    def test_empty_list_gives_no_facts(self) -> None:
        assert make_element_facts("missing", EMPTY, ElementFactGrouping.ALL_IN_ONE_FACT) == []

    def test_all_in_one(self) -> None:
        facts = make_element_facts(
            "missing", DuplicateGrouped.of([1, 2]), ElementFactGrouping.ALL_IN_ONE_FACT
        )
        assert facts == [Fact("missing (2)", "1, 2")]

    def test_fact_per_element_numbers_by_position(self) -> None:
        facts = make_element_facts(
            "missing", DuplicateGrouped.of(["a", "a", "b"]), ElementFactGrouping.FACT_PER_ELEMENT
        )
        assert facts == [
            simple_fact("missing (3)"),
            Fact("#1 [2 copies]", "a"),
            Fact("#3", "b"),
        ]

    def test_header_carries_homogeneous_type(self) -> None:
        facts = make_element_facts(
            "missing",
            DuplicateGrouped.of([1, 2], add_type_info=True),
            ElementFactGrouping.FACT_PER_ELEMENT,
        )
        assert facts[0] == simple_fact("missing (2) (int)")


class TestMakeElementFactsForBoth:
    """Side-by-side layout of two lists."""

    def test_one_of_each(self) -> None:
        facts = make_element_facts_for_both("missing", [1], "unexpected", [2])
        assert facts == [Fact("missing (1)", "1"), Fact("unexpected (1)", "2"), simple_fact("---")]

    def test_empty_second_list_is_omitted(self) -> None:
        facts = make_element_facts_for_both("missing", [1, 2], "unexpected", [])
        assert facts == [Fact("missing (2)", "1, 2"), simple_fact("---")]

    def test_lookalike_values_get_type_info(self) -> None:
        facts = make_element_facts_for_both("missing", [1], "unexpected", ["1"])
        assert facts[0] == Fact("missing (1)", "1 (int)")
        assert facts[1] == Fact("unexpected (1)", "1 (str)")

    def test_blank_fact_between_two_multi_fact_lists(self) -> None:
        facts = make_element_facts_for_both("missing", ["a,b", "c"], "unexpected", ["d", "e"])
        assert facts[0] == simple_fact("missing (2)")
        assert facts[3] == simple_fact("")
        assert facts[4] == simple_fact("unexpected (2)")
        assert facts[-1] == simple_fact("---")
