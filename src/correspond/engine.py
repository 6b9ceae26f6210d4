"""MatchingEngine: checks an actual collection against expected values.

The engine decides every operation in up to three stages:

1. **Fast path.**  A linear walk that proves the common, correct, in-order
   case without building anything.  Exceptions here just mean "fall back".
2. **Exhaustive path.**  A :class:`CandidateMapping` of every pair that
   corresponds, then a maximum 1:1 mapping over it.  Positions left unmatched
   are the genuinely missing and extra values.
3. **Diagnostics.**  Only on failure: group missing/extra values, pair them
   by key when a :class:`Pairer` was supplied, and format diffs.

User callables are invoked only through the guarded wrappers, so an exception
never escapes; it is recorded and, where the verdict could have depended on
it, turns a pass into a failure.

With plain ``==`` and no pairing or diff formatting requested, operations
route to the equality-only algorithms in :mod:`correspond.algorithm.exact`.

Every operation returns a :class:`MatchVerdict`; nothing here raises on a
failed match.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from correspond.algorithm import exact
from correspond.algorithm.candidates import CandidateMapping
from correspond.algorithm.matcher import maximum_matching
from correspond.algorithm.pairing import Pairer, Pairing
from correspond.config import DEFAULT_CONFIG, MatchConfig
from correspond.correspondence import Correspondence, equality
from correspond.element_facts import make_element_facts_for_both
from correspond.exception_store import ExceptionStore
from correspond.facts import (
    Fact,
    annotate_empty_strings,
    count_duplicates,
    fact,
    format_entry,
    simple_fact,
)
from correspond.result import MatchVerdict

__all__ = [
    "AMBIGUOUS_KEY_FUNCTION",
    "NO_ONE_TO_ONE_AT_LEAST",
    "NO_ONE_TO_ONE_EXACTLY",
    "USING_MOST_COMPLETE_MAPPING",
    "MapValuesEngine",
    "MatchingEngine",
]

logger = logging.getLogger(__name__)

NO_ONE_TO_ONE_EXACTLY = (
    "in an assertion requiring a 1:1 mapping between the expected and the actual elements, "
    "each actual element matches as least one expected element, and vice versa, but there "
    "was no 1:1 mapping"
)
NO_ONE_TO_ONE_AT_LEAST = (
    "in an assertion requiring a 1:1 mapping between the expected and a subset of the actual "
    "elements, each actual element matches as least one expected element, and vice versa, but "
    "there was no 1:1 mapping"
)
USING_MOST_COMPLETE_MAPPING = (
    "using the most complete 1:1 mapping (or one such mapping, if there is a tie)"
)
AMBIGUOUS_KEY_FUNCTION = (
    "a key function which does not uniquely key the expected elements was provided and has "
    "consequently been ignored"
)


def _distinct(items: list[Any]) -> list[Any]:
    distinct: list[Any] = []
    for item in items:
        if item not in distinct:
            distinct.append(item)
    return distinct


class MatchingEngine:
    """Evaluates containment operations of *actual* against expected values.

    Args:
        actual:         The collection under test.  Drained into a list once.
        correspondence: How actual elements are compared to expected ones.
                        None means plain ``==``.
        pairer:         Optional key-based pairing used only to improve
                        failure facts.
        config:         Diagnostics and fast-path configuration.
    """

    def __init__(
        self,
        actual: Iterable[Any],
        correspondence: Correspondence | None = None,
        *,
        pairer: Pairer | None = None,
        config: MatchConfig | None = None,
    ) -> None:
        self._actual = list(actual)
        self._correspondence = correspondence if correspondence is not None else equality()
        self._pairer = pairer
        self._config = config if config is not None else DEFAULT_CONFIG

    @property
    def actual(self) -> list[Any]:
        return self._actual

    @property
    def correspondence(self) -> Correspondence:
        return self._correspondence

    @property
    def uses_plain_equality(self) -> bool:
        """True when operations route to the equality-only algorithms."""
        return (
            self._correspondence.is_equality
            and not self._correspondence.has_diff_formatter
            and self._pairer is None
        )

    # ------------------------------------------------------------------
    # Shared facts
    # ------------------------------------------------------------------

    def _new_store(self) -> ExceptionStore:
        return ExceptionStore.for_iterable(self._config)

    def _but_was(self) -> Fact:
        return fact("but was", self._actual)

    def _full_contents(self) -> Fact:
        return fact("full contents", self._actual)

    def _testing_whether(self) -> list[Fact]:
        return self._correspondence.describe_for_iterable()

    # ------------------------------------------------------------------
    # Single-value operations
    # ------------------------------------------------------------------

    def contains(self, expected: Any) -> MatchVerdict:
        """Check that some actual element corresponds to *expected*."""
        if self.uses_plain_equality:
            return exact.contains(self._actual, expected)
        store = self._new_store()
        for element in self._actual:
            if self._correspondence.safe_compare(element, expected, store):
                if store.has_compare_exception():
                    return MatchVerdict.failure(
                        [
                            *store.describe_as_main_cause(),
                            fact("expected to contain", expected),
                            *self._testing_whether(),
                            fact("found match (but failing because of exception)", element),
                            self._full_contents(),
                        ],
                        exceptions=store,
                    )
                return MatchVerdict.in_order_pass()

        if self._pairer is not None:
            key_matches = self._pairer.pair_one(expected, self._actual, store)
            if key_matches:
                return MatchVerdict.failure(
                    [
                        fact("expected to contain", expected),
                        *self._testing_whether(),
                        simple_fact("but did not"),
                        *self._format_extras(
                            "though it did contain elements with correct key",
                            expected,
                            key_matches,
                            store,
                        ),
                        simple_fact("---"),
                        *store.describe_as_additional_info(),
                        self._full_contents(),
                    ],
                    missing=[expected],
                    exceptions=store,
                )
        return MatchVerdict.failure(
            [
                fact("expected to contain", expected),
                *self._testing_whether(),
                *store.describe_as_additional_info(),
                self._but_was(),
            ],
            missing=[expected],
            exceptions=store,
        )

    def does_not_contain(self, excluded: Any) -> MatchVerdict:
        """Check that no actual element corresponds to *excluded*."""
        if self.uses_plain_equality:
            return exact.does_not_contain(self._actual, excluded)
        store = self._new_store()
        matching = [
            element
            for element in self._actual
            if self._correspondence.safe_compare(element, excluded, store)
        ]
        if matching:
            return MatchVerdict.failure(
                [
                    fact("expected not to contain", excluded),
                    *self._testing_whether(),
                    fact("but contained", count_duplicates(matching)),
                    *store.describe_as_additional_info(),
                    self._full_contents(),
                ],
                extra=matching,
                exceptions=store,
            )
        if store.has_compare_exception():
            return MatchVerdict.failure(
                [
                    *store.describe_as_main_cause(),
                    fact("expected not to contain", excluded),
                    *self._testing_whether(),
                    simple_fact("found no match (but failing because of exception)"),
                    self._full_contents(),
                ],
                exceptions=store,
            )
        return MatchVerdict.in_order_pass()

    # ------------------------------------------------------------------
    # Any-of / none-of
    # ------------------------------------------------------------------

    def contains_any_of(self, *expected: Any) -> MatchVerdict:
        return self.contains_any_in(expected)

    def contains_any_in(self, expected: Iterable[Any]) -> MatchVerdict:
        """Check that some actual element corresponds to some expected value."""
        expected = list(expected)
        if self.uses_plain_equality:
            return exact.contains_any_in(self._actual, expected)
        store = self._new_store()
        for expected_item in expected:
            for element in self._actual:
                if self._correspondence.safe_compare(element, expected_item, store):
                    if store.has_compare_exception():
                        return MatchVerdict.failure(
                            [
                                *store.describe_as_main_cause(),
                                fact("expected to contain any of", expected),
                                *self._testing_whether(),
                                simple_fact("found match (but failing because of exception)"),
                                self._full_contents(),
                            ],
                            exceptions=store,
                        )
                    return MatchVerdict.in_order_pass()

        facts = [fact("expected to contain any of", expected), *self._testing_whether()]
        pairing: Pairing | None = None
        if self._pairer is not None:
            pairing = self._pairer.pair(expected, self._actual, store)
            if pairing is None:
                logger.debug("ignoring key function: expected values are not uniquely keyed")
                facts.append(simple_fact(AMBIGUOUS_KEY_FUNCTION))
            elif pairing.paired_keys_to_expected:
                facts.extend(self._describe_any_matches_by_key(pairing, store))
            else:
                facts.append(simple_fact("it does not contain any matches by key, either"))
        facts.extend(store.describe_as_additional_info())
        facts.append(self._but_was())
        return MatchVerdict.failure(facts, missing=expected, pairing=pairing, exceptions=store)

    def _describe_any_matches_by_key(self, pairing: Pairing, store: ExceptionStore) -> list[Fact]:
        facts: list[Fact] = []
        for key, expected_value in pairing.paired_keys_to_expected.items():
            got = pairing.paired_keys_to_actual[key]
            facts.append(fact("for key", key))
            facts.append(fact("expected any of", expected_value))
            facts.extend(self._format_extras("but got", expected_value, got, store))
            facts.append(simple_fact("---"))
        return facts

    def contains_none_of(self, *excluded: Any) -> MatchVerdict:
        return self.contains_none_in(excluded)

    def contains_none_in(self, excluded: Iterable[Any]) -> MatchVerdict:
        """Check that no actual element corresponds to any excluded value.

        Duplicates among the excluded values are irrelevant.
        """
        excluded = list(excluded)
        if self.uses_plain_equality:
            return exact.contains_none_in(self._actual, excluded)
        store = self._new_store()
        present: list[tuple[Any, list[Any]]] = []
        for excluded_item in _distinct(excluded):
            matches = [
                element
                for element in self._actual
                if self._correspondence.safe_compare(element, excluded_item, store)
            ]
            if matches:
                present.append((excluded_item, matches))

        if present:
            facts = [
                fact("expected not to contain any of", annotate_empty_strings(excluded)),
                *self._testing_whether(),
            ]
            for excluded_item, matches in present:
                facts.append(fact("but contained", annotate_empty_strings(matches)))
                facts.append(fact("corresponding to", excluded_item))
                facts.append(simple_fact("---"))
            facts.extend(store.describe_as_additional_info())
            facts.append(self._full_contents())
            return MatchVerdict.failure(
                facts,
                extra=[element for _, matches in present for element in matches],
                exceptions=store,
            )
        if store.has_compare_exception():
            return MatchVerdict.failure(
                [
                    *store.describe_as_main_cause(),
                    fact("expected not to contain any of", annotate_empty_strings(excluded)),
                    *self._testing_whether(),
                    simple_fact("found no matches (but failing because of exception)"),
                    self._full_contents(),
                ],
                exceptions=store,
            )
        return MatchVerdict.in_order_pass()

    # ------------------------------------------------------------------
    # contains_exactly
    # ------------------------------------------------------------------

    def contains_exactly(self, *expected: Any) -> MatchVerdict:
        return self.contains_exactly_elements_in(
            expected, varargs_warning=exact.is_lone_iterable_argument(expected)
        )

    def contains_exactly_elements_in(
        self, expected: Iterable[Any], *, varargs_warning: bool = False
    ) -> MatchVerdict:
        """Check for a 1:1 mapping between all actual and all expected elements.

        Returns:
            ``IN_ORDER`` if position ``i`` corresponds to position ``i`` throughout,
            ``OUT_OF_ORDER`` if only some other complete 1:1 mapping exists,
            ``FAILED`` otherwise.
        """
        expected = list(expected)
        actual = self._actual
        if self.uses_plain_equality:
            return exact.contains_exactly(
                actual, expected, varargs_warning=varargs_warning, config=self._config
            )
        if not expected:
            if not actual:
                return MatchVerdict.in_order_pass()
            return MatchVerdict.failure(
                [simple_fact("expected to be empty"), self._but_was()], extra=actual
            )
        if not self._config.skip_fast_path and self._correspond_in_order_exactly(expected):
            return MatchVerdict.in_order_pass()

        logger.debug(
            "in-order walk failed; building %dx%d candidate mapping", len(actual), len(expected)
        )
        store = self._new_store()
        candidates = CandidateMapping.build(actual, expected, self._correspondence, store)
        if self._config.skip_fast_path and candidates.matches_diagonal():
            return MatchVerdict.in_order_pass()

        extra_positions = candidates.unmatched_actual()
        missing_positions = candidates.unmatched_expected()
        if missing_positions or extra_positions:
            missing = [expected[j] for j in missing_positions]
            extra = [actual[i] for i in extra_positions]
            described, pairing = self._describe_missing_or_extra(missing, extra, store)
            return MatchVerdict.failure(
                [
                    *described,
                    fact("expected", expected),
                    *self._testing_whether(),
                    *store.describe_as_additional_info(),
                    self._but_was(),
                ],
                missing=missing,
                extra=extra,
                pairing=pairing,
                exceptions=store,
            )

        mapping = maximum_matching(candidates)
        logger.debug(
            "maximum 1:1 mapping pairs %d of %d actual, %d expected",
            mapping.size,
            len(actual),
            len(expected),
        )
        extra_positions = mapping.unmatched_actual()
        missing_positions = mapping.unmatched_expected()
        if missing_positions or extra_positions:
            missing = [expected[j] for j in missing_positions]
            extra = [actual[i] for i in extra_positions]
            described, pairing = self._describe_missing_or_extra(missing, extra, store)
            return MatchVerdict.failure(
                [
                    simple_fact(NO_ONE_TO_ONE_EXACTLY),
                    simple_fact(USING_MOST_COMPLETE_MAPPING),
                    *described,
                    fact("expected", expected),
                    *self._testing_whether(),
                    *store.describe_as_additional_info(),
                    self._but_was(),
                ],
                missing=missing,
                extra=extra,
                pairing=pairing,
                exceptions=store,
            )

        # The matching passed treating exceptions as "no match", but a pass
        # cannot be trusted if any comparison raised.
        if store.has_compare_exception():
            return MatchVerdict.failure(
                [
                    *store.describe_as_main_cause(),
                    fact("expected", expected),
                    *self._testing_whether(),
                    simple_fact("found all expected elements (but failing because of exception)"),
                    self._full_contents(),
                ],
                exceptions=store,
            )
        return MatchVerdict.out_of_order(
            [
                simple_fact("contents match, but order was wrong"),
                fact("expected", expected),
                *self._testing_whether(),
                self._but_was(),
            ]
        )

    def _correspond_in_order_exactly(self, expected: list[Any]) -> bool:
        if len(self._actual) != len(expected):
            return False
        # Exceptions only mean "fall back" here; the exhaustive path records them.
        scratch = self._new_store()
        return all(
            self._correspondence.safe_compare(a, e, scratch)
            for a, e in zip(self._actual, expected)
        )

    # ------------------------------------------------------------------
    # contains_at_least
    # ------------------------------------------------------------------

    def contains_at_least(self, *expected: Any) -> MatchVerdict:
        return self.contains_at_least_elements_in(expected)

    def contains_at_least_elements_in(self, expected: Iterable[Any]) -> MatchVerdict:
        """Check for a 1:1 mapping between all expected elements and a subset of actual ones.

        Returns:
            ``IN_ORDER`` if the expected elements correspond to an in-order
            subsequence of the actual ones, ``OUT_OF_ORDER`` if they are covered
            only in some other order, ``FAILED`` otherwise.
        """
        expected = list(expected)
        actual = self._actual
        if self.uses_plain_equality:
            return exact.contains_at_least(actual, expected, config=self._config)
        if not self._config.skip_fast_path and self._correspond_in_order_all_in(expected):
            return MatchVerdict.in_order_pass()

        logger.debug(
            "in-order search failed; building %dx%d candidate mapping", len(actual), len(expected)
        )
        store = self._new_store()
        candidates = CandidateMapping.build(actual, expected, self._correspondence, store)
        if self._config.skip_fast_path and candidates.embeds_in_order():
            return MatchVerdict.in_order_pass()

        missing_positions = candidates.unmatched_expected()
        if missing_positions:
            missing = [expected[j] for j in missing_positions]
            extra = [actual[i] for i in candidates.unmatched_actual()]
            described, pairing = self._describe_missing(missing, extra, store)
            return MatchVerdict.failure(
                [
                    *described,
                    fact("expected to contain at least", expected),
                    *self._testing_whether(),
                    *store.describe_as_additional_info(),
                    self._but_was(),
                ],
                missing=missing,
                extra=extra,
                pairing=pairing,
                exceptions=store,
            )

        mapping = maximum_matching(candidates)
        logger.debug("maximum 1:1 mapping covers %d of %d expected", mapping.size, len(expected))
        missing_positions = mapping.unmatched_expected()
        if missing_positions:
            missing = [expected[j] for j in missing_positions]
            extra = [actual[i] for i in mapping.unmatched_actual()]
            described, pairing = self._describe_missing(missing, extra, store)
            return MatchVerdict.failure(
                [
                    simple_fact(NO_ONE_TO_ONE_AT_LEAST),
                    simple_fact(USING_MOST_COMPLETE_MAPPING),
                    *described,
                    fact("expected to contain at least", expected),
                    *self._testing_whether(),
                    *store.describe_as_additional_info(),
                    self._but_was(),
                ],
                missing=missing,
                extra=extra,
                pairing=pairing,
                exceptions=store,
            )

        if store.has_compare_exception():
            return MatchVerdict.failure(
                [
                    *store.describe_as_main_cause(),
                    fact("expected to contain at least", expected),
                    *self._testing_whether(),
                    simple_fact("found all expected elements (but failing because of exception)"),
                    self._full_contents(),
                ],
                exceptions=store,
            )
        return MatchVerdict.out_of_order(
            [
                simple_fact("required elements were all found, but order was wrong"),
                fact("expected order for required elements", expected),
                *self._testing_whether(),
                self._but_was(),
            ]
        )

    def _correspond_in_order_all_in(self, expected: list[Any]) -> bool:
        # Greedy: pairing each expected element with the first later match
        # never rules out an in-order solution.
        scratch = self._new_store()
        remaining = iter(self._actual)
        for expected_element in expected:
            found = any(
                self._correspondence.safe_compare(element, expected_element, scratch)
                for element in remaining
            )
            if not found or scratch.has_compare_exception():
                return False
        return True

    # ------------------------------------------------------------------
    # Missing / extra descriptions
    # ------------------------------------------------------------------

    def _format_extras(
        self,
        label: str,
        expected: Any,
        extras: list[Any],
        store: ExceptionStore,
    ) -> list[Fact]:
        diffs = [self._correspondence.safe_format_diff(extra, expected, store) for extra in extras]
        if all(diff is None for diff in diffs):
            return [fact(f"{label} ({len(extras)})", count_duplicates(extras))]
        facts = [simple_fact(f"{label} ({len(extras)})")]
        for n, (extra, diff) in enumerate(zip(extras, diffs), start=1):
            facts.append(fact(f"#{n}", extra))
            if diff is not None:
                facts.append(fact("diff", diff))
        return facts

    def _describe_missing_or_extra(
        self,
        missing: list[Any],
        extra: list[Any],
        store: ExceptionStore,
    ) -> tuple[list[Fact], Pairing | None]:
        if self._pairer is not None:
            pairing = self._pairer.pair(missing, extra, store)
            if pairing is None:
                logger.debug("ignoring key function: expected values are not uniquely keyed")
                facts = make_element_facts_for_both(
                    "missing", missing, "unexpected", extra, self._config
                )
                facts.append(simple_fact(AMBIGUOUS_KEY_FUNCTION))
                return facts, None
            facts = []
            for key, missing_value in pairing.paired_keys_to_expected.items():
                extras = pairing.paired_keys_to_actual[key]
                facts.append(fact("for key", key))
                facts.append(fact("missing", missing_value))
                facts.extend(self._format_extras("unexpected", missing_value, extras, store))
                facts.append(simple_fact("---"))
            if pairing.has_unpaired:
                facts.append(simple_fact("elements without matching keys:"))
                facts.extend(
                    make_element_facts_for_both(
                        "missing",
                        pairing.unpaired_expected,
                        "unexpected",
                        pairing.unpaired_actual,
                        self._config,
                    )
                )
            return facts, pairing

        if len(missing) == 1 and extra:
            facts = [fact("missing (1)", missing[0])]
            facts.extend(self._format_extras("unexpected", missing[0], extra, store))
            facts.append(simple_fact("---"))
            return facts, None
        facts = make_element_facts_for_both("missing", missing, "unexpected", extra, self._config)
        return facts, None

    def _describe_missing(
        self,
        missing: list[Any],
        extra: list[Any],
        store: ExceptionStore,
    ) -> tuple[list[Fact], Pairing | None]:
        # Extra elements are allowed by at-least assertions, so they are shown
        # only when the caller asked for key pairing.
        if self._pairer is not None:
            pairing = self._pairer.pair(missing, extra, store)
            if pairing is None:
                logger.debug("ignoring key function: expected values are not uniquely keyed")
                facts = make_element_facts_for_both(
                    "missing", missing, "unexpected", [], self._config
                )
                facts.append(simple_fact(AMBIGUOUS_KEY_FUNCTION))
                return facts, None
            facts = []
            for key, missing_value in pairing.paired_keys_to_expected.items():
                extras = pairing.paired_keys_to_actual[key]
                facts.append(fact("for key", key))
                facts.append(fact("missing", missing_value))
                facts.extend(
                    self._format_extras(
                        "did contain elements with that key", missing_value, extras, store
                    )
                )
                facts.append(simple_fact("---"))
            if pairing.unpaired_expected:
                facts.append(simple_fact("elements without matching keys:"))
                facts.extend(
                    make_element_facts_for_both(
                        "missing", pairing.unpaired_expected, "unexpected", [], self._config
                    )
                )
            return facts, pairing
        return make_element_facts_for_both("missing", missing, "unexpected", [], self._config), None


class MapValuesEngine:
    """Checks map entries, comparing values through a correspondence.

    Keys are always compared with ``==``; only values go through the
    correspondence.

    Args:
        actual:         The mapping under test.
        correspondence: How actual values are compared to expected ones.
        config:         Diagnostics configuration.
    """

    def __init__(
        self,
        actual: Mapping[Any, Any],
        correspondence: Correspondence,
        *,
        config: MatchConfig | None = None,
    ) -> None:
        self._actual = actual
        self._correspondence = correspondence
        self._config = config if config is not None else DEFAULT_CONFIG

    def _full_map(self) -> Fact:
        return fact("full map", self._actual)

    def contains_entry(self, key: Any, value: Any) -> MatchVerdict:
        """Check that *key* is present with a value corresponding to *value*."""
        store = ExceptionStore.for_map_values(self._config)
        testing_whether = self._correspondence.describe_for_map_values()
        if key in self._actual:
            actual_value = self._actual[key]
            if self._correspondence.safe_compare(actual_value, value, store):
                return MatchVerdict.in_order_pass()
            facts = [
                fact("for key", key),
                fact("expected value", value),
                *testing_whether,
                fact("but got value", actual_value),
            ]
            diff = self._correspondence.safe_format_diff(actual_value, value, store)
            if diff is not None:
                facts.append(fact("diff", diff))
            facts.extend(store.describe_as_additional_info())
            facts.append(self._full_map())
            return MatchVerdict.failure(
                facts, missing=[(key, value)], extra=[(key, actual_value)], exceptions=store
            )

        matching_keys = [
            other_key
            for other_key, other_value in self._actual.items()
            if self._correspondence.safe_compare(other_value, value, store)
        ]
        facts = [
            fact("for key", key),
            fact("expected value", value),
            *testing_whether,
            simple_fact("but was missing"),
        ]
        if matching_keys:
            facts.append(fact("other keys with matching values", matching_keys))
        facts.extend(store.describe_as_additional_info())
        facts.append(self._full_map())
        return MatchVerdict.failure(facts, missing=[(key, value)], exceptions=store)

    def does_not_contain_entry(self, key: Any, value: Any) -> MatchVerdict:
        """Check that *key* is absent, or present with a value not corresponding to *value*."""
        if key not in self._actual:
            return MatchVerdict.in_order_pass()
        store = ExceptionStore.for_map_values(self._config)
        actual_value = self._actual[key]
        testing_whether = self._correspondence.describe_for_map_values()
        if self._correspondence.safe_compare(actual_value, value, store):
            return MatchVerdict.failure(
                [
                    fact("expected not to contain", format_entry(key, value)),
                    *testing_whether,
                    fact("but contained", format_entry(key, actual_value)),
                    *store.describe_as_additional_info(),
                    self._full_map(),
                ],
                extra=[(key, actual_value)],
                exceptions=store,
            )
        if store.has_compare_exception():
            return MatchVerdict.failure(
                [
                    *store.describe_as_main_cause(),
                    fact("expected not to contain", format_entry(key, value)),
                    *testing_whether,
                    simple_fact("found no match (but failing because of exception)"),
                    self._full_map(),
                ],
                exceptions=store,
            )
        return MatchVerdict.in_order_pass()
