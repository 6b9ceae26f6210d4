"""Plain-equality matching: the fast, allocation-light paths.

When elements are compared with ``==`` and no diagnostic pairing or diff
formatting is requested, the exhaustive candidate/matching machinery is not
needed.  ``contains_exactly`` walks both lists in lockstep and only falls back
to multiset cancellation of the remaining tails at the first mismatch, so a
passing in-order assertion is linear.  ``contains_at_least`` consumes the
actual list front to back, parking skipped elements so that a match found
among them can be reported as out of order.

Because equality failures often involve values that *look* identical
(``1`` versus ``"1"``), these paths add type information to the facts when
a missing value renders the same as some actual value.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from correspond.config import DEFAULT_CONFIG, MatchConfig
from correspond.element_facts import make_element_facts_for_both
from correspond.facts import (
    Fact,
    annotate_empty_strings,
    count_duplicates_and_add_type_info,
    fact,
    has_matching_str_pair,
    retain_matching_str,
    simple_fact,
    type_name,
)
from correspond.result import MatchVerdict

__all__ = [
    "VARARGS_ITERABLE_WARNING",
    "contains",
    "contains_any_in",
    "contains_at_least",
    "contains_exactly",
    "contains_none_in",
    "does_not_contain",
    "is_lone_iterable_argument",
]

VARARGS_ITERABLE_WARNING = (
    "Passing an iterable to the varargs method contains_exactly(*expected) is often not "
    "the correct thing to do. Did you mean to call contains_exactly_elements_in(iterable) "
    "instead?"
)


def is_lone_iterable_argument(varargs: tuple[Any, ...]) -> bool:
    """Return True if *varargs* is a single non-string iterable, a likely API misuse."""
    if len(varargs) != 1:
        return False
    only = varargs[0]
    return isinstance(only, Iterable) and not isinstance(only, (str, bytes, Mapping))


# ---------------------------------------------------------------------------
# Single-element operations
# ---------------------------------------------------------------------------


def contains(actual: list[Any], element: Any) -> MatchVerdict:
    if element in actual:
        return MatchVerdict.in_order_pass()
    if has_matching_str_pair(actual, [element]):
        return MatchVerdict.failure(
            [
                fact("expected to contain", element),
                fact("an instance of", type_name(element)),
                simple_fact("but did not"),
                fact(
                    "though it did contain",
                    count_duplicates_and_add_type_info(retain_matching_str(actual, [element])),
                ),
                fact("full contents", actual),
            ],
            missing=[element],
        )
    return MatchVerdict.failure(
        [fact("expected to contain", element), fact("but was", actual)],
        missing=[element],
    )


def does_not_contain(actual: list[Any], element: Any) -> MatchVerdict:
    if element not in actual:
        return MatchVerdict.in_order_pass()
    return MatchVerdict.failure(
        [fact("expected not to contain", element), fact("but was", actual)],
        extra=[item for item in actual if item == element],
    )


def contains_any_in(actual: list[Any], expected: list[Any]) -> MatchVerdict:
    for item in expected:
        if item in actual:
            return MatchVerdict.in_order_pass()
    if has_matching_str_pair(actual, expected):
        return MatchVerdict.failure(
            [
                fact("expected to contain any of", count_duplicates_and_add_type_info(expected)),
                simple_fact("but did not"),
                fact(
                    "though it did contain",
                    count_duplicates_and_add_type_info(retain_matching_str(actual, expected)),
                ),
                fact("full contents", actual),
            ],
            missing=expected,
        )
    return MatchVerdict.failure(
        [fact("expected to contain any of", expected), fact("but was", actual)],
        missing=expected,
    )


def _distinct(items: list[Any]) -> list[Any]:
    distinct: list[Any] = []
    for item in items:
        if item not in distinct:
            distinct.append(item)
    return distinct


def contains_none_in(actual: list[Any], excluded: list[Any]) -> MatchVerdict:
    present = [item for item in _distinct(excluded) if item in actual]
    if not present:
        return MatchVerdict.in_order_pass()
    return MatchVerdict.failure(
        [
            fact("expected not to contain any of", annotate_empty_strings(excluded)),
            fact("but contained", annotate_empty_strings(present)),
            fact("full contents", actual),
        ],
        extra=present,
    )


# ---------------------------------------------------------------------------
# contains_exactly
# ---------------------------------------------------------------------------


def _fail_exactly(
    actual: list[Any],
    expected: list[Any],
    missing: list[Any],
    extra: list[Any],
    varargs_warning: bool,
    config: MatchConfig,
) -> MatchVerdict:
    facts = make_element_facts_for_both("missing", missing, "unexpected", extra, config)
    facts.append(fact("expected", expected))
    facts.append(fact("but was", actual))
    if varargs_warning:
        facts.append(simple_fact(VARARGS_ITERABLE_WARNING))
    return MatchVerdict.failure(facts, missing=missing, extra=extra)


def contains_exactly(
    actual: list[Any],
    expected: list[Any],
    *,
    varargs_warning: bool = False,
    config: MatchConfig = DEFAULT_CONFIG,
) -> MatchVerdict:
    """Check that *actual* holds exactly the elements of *expected*, with multiplicity.

    Args:
        actual:          The materialized actual elements.
        expected:        The materialized expected elements.
        varargs_warning: Append a hint that a lone iterable was probably passed
                         to the varargs form by mistake.
        config:          Grouping configuration for the failure facts.

    Returns:
        ``IN_ORDER`` when the lists are equal, ``OUT_OF_ORDER`` when they are
        equal as multisets only, otherwise ``FAILED``.
    """
    if not expected:
        if not actual:
            return MatchVerdict.in_order_pass()
        return MatchVerdict.failure(
            [simple_fact("expected to be empty"), fact("but was", actual)],
            extra=actual,
        )

    for i, (actual_element, expected_element) in enumerate(zip(actual, expected)):
        # Identity first, as ``in`` and ``list.remove`` do, so a NaN matches itself.
        if actual_element is expected_element or actual_element == expected_element:
            continue
        if i == 0 and len(actual) == 1 and len(expected) == 1:
            # Exactly one element on each side and they differ.
            return MatchVerdict.failure(
                [fact("expected", expected_element), fact("but was", actual_element)],
                missing=[expected_element],
                extra=[actual_element],
            )
        missing = list(expected[i:])
        extra = []
        for item in actual[i:]:
            try:
                missing.remove(item)
            except ValueError:
                extra.append(item)
        if not missing and not extra:
            return MatchVerdict.out_of_order(
                [
                    simple_fact("contents match, but order was wrong"),
                    fact("expected", expected),
                    fact("but was", actual),
                ]
            )
        return _fail_exactly(actual, expected, missing, extra, varargs_warning, config)

    # One list is a prefix of the other.
    common = min(len(actual), len(expected))
    if len(actual) > common:
        return _fail_exactly(actual, expected, [], actual[common:], varargs_warning, config)
    if len(expected) > common:
        return _fail_exactly(actual, expected, expected[common:], [], varargs_warning, config)
    return MatchVerdict.in_order_pass()


# ---------------------------------------------------------------------------
# contains_at_least
# ---------------------------------------------------------------------------


def contains_at_least(
    actual: list[Any],
    expected: list[Any],
    *,
    config: MatchConfig = DEFAULT_CONFIG,
) -> MatchVerdict:
    """Check that every expected element occurs in *actual*, with multiplicity.

    Each expected element is searched for in the not-yet-consumed part of
    *actual*; elements skipped over are parked.  An element found only among
    the parked ones makes the result out of order.
    """
    position = 0
    parked: list[Any] = []
    missing: list[Any] = []
    ordered = True
    for element in expected:
        try:
            index = actual.index(element, position)
        except ValueError:
            try:
                parked.remove(element)
            except ValueError:
                missing.append(element)
            else:
                ordered = False
            continue
        parked.extend(actual[position:index])
        position = index + 1

    if missing:
        near_misses = retain_matching_str(actual, missing)
        facts: list[Fact] = make_element_facts_for_both(
            "missing", missing, "though it did contain", near_misses, config
        )
        facts.append(fact("expected to contain at least", expected))
        facts.append(fact("but was", actual))
        return MatchVerdict.failure(facts, missing=missing)

    if ordered:
        return MatchVerdict.in_order_pass()
    return MatchVerdict.out_of_order(
        [
            simple_fact("required elements were all found, but order was wrong"),
            fact("expected order for required elements", expected),
            fact("but was", actual),
        ]
    )
