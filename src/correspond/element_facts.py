"""Lay out lists of missing, unexpected or near-miss elements as facts.

Short lists render as a single fact (``"missing (2)": "a, b"``).  Lists whose
entries contain commas or newlines, or that are empty-stringed or very long,
render as a header plus one ``#n`` fact per duplicate group so the reader can
tell where one element ends and the next begins.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from correspond.config import DEFAULT_CONFIG, ElementFactGrouping, MatchConfig
from correspond.facts import (
    DuplicateGrouped,
    Fact,
    entry_string,
    format_value,
    has_matching_str_pair,
    simple_fact,
)

__all__ = ["make_element_facts", "make_element_facts_for_both", "pick_grouping"]


def _has_multiple(elements: DuplicateGrouped) -> bool:
    return elements.total_copies > 1


def _contains_comma_or_newline(*groups: DuplicateGrouped) -> bool:
    for group in groups:
        for item, _ in group.entries:
            rendered = format_value(item)
            if "\n" in rendered or "," in rendered:
                return True
    return False


def _contains_empty_or_long(elements: DuplicateGrouped, limit: int) -> bool:
    total = 0
    for item, count in elements.entries:
        rendered = entry_string(item, count)
        if not rendered:
            return True
        total += len(rendered)
    return total > limit


def pick_grouping(
    first: DuplicateGrouped,
    second: DuplicateGrouped,
    config: MatchConfig = DEFAULT_CONFIG,
) -> ElementFactGrouping:
    """Choose between one fact per list and one fact per element.

    Args:
        first:  The first duplicate-grouped list (e.g. missing elements).
        second: The second duplicate-grouped list (e.g. unexpected elements).
        config: Supplies ``grouping_length_limit``.

    Returns:
        ``FACT_PER_ELEMENT`` when either list has several elements and any entry
        contains a comma or newline, or when a multi-element list has an empty
        entry or exceeds the length limit; otherwise ``ALL_IN_ONE_FACT``.
    """
    first_multiple = _has_multiple(first)
    second_multiple = _has_multiple(second)
    if (first_multiple or second_multiple) and _contains_comma_or_newline(first, second):
        return ElementFactGrouping.FACT_PER_ELEMENT
    limit = config.grouping_length_limit
    if first_multiple and _contains_empty_or_long(first, limit):
        return ElementFactGrouping.FACT_PER_ELEMENT
    if second_multiple and _contains_empty_or_long(second, limit):
        return ElementFactGrouping.FACT_PER_ELEMENT
    return ElementFactGrouping.ALL_IN_ONE_FACT


def make_element_facts(
    label: str,
    elements: DuplicateGrouped,
    grouping: ElementFactGrouping,
) -> list[Fact]:
    """Return zero, one or many facts describing *elements* under *label*."""
    if not elements:
        return []
    key = f"{label} ({elements.total_copies})"
    if grouping is ElementFactGrouping.ALL_IN_ONE_FACT:
        return [Fact(key, str(elements))]

    # The header carries no value, so the homogeneous type can go in the key
    # without pushing the aligned values over.
    if elements.homogeneous_type is not None:
        key += f" ({elements.homogeneous_type})"
    facts = [simple_fact(key)]
    n = 1
    for item, count in elements.entries:
        number = f"#{n}" if count == 1 else f"#{n} [{count} copies]"
        facts.append(Fact(number, format_value(item)))
        n += count
    return facts


def make_element_facts_for_both(
    first_label: str,
    first: Iterable[Any],
    second_label: str,
    second: Iterable[Any],
    config: MatchConfig = DEFAULT_CONFIG,
) -> list[Fact]:
    """Describe two element lists side by side, closed by a ``---`` separator.

    Type names are added to both lists when some pair of elements across them
    renders identically without being equal.
    """
    first_list = list(first)
    second_list = list(second)
    add_type_info = has_matching_str_pair(first_list, second_list)
    first_grouped = DuplicateGrouped.of(first_list, add_type_info)
    second_grouped = DuplicateGrouped.of(second_list, add_type_info)
    grouping = pick_grouping(first_grouped, second_grouped, config)

    first_facts = make_element_facts(first_label, first_grouped, grouping)
    second_facts = make_element_facts(second_label, second_grouped, grouping)
    facts = list(first_facts)
    if len(first_facts) > 1 and len(second_facts) > 1:
        facts.append(simple_fact(""))
    facts.extend(second_facts)
    facts.append(simple_fact("---"))
    return facts
