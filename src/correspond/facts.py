"""Fact: the unit of failure-message content, plus value formatting helpers.

A ``Fact`` is a ``(key, value)`` pair.  A fact whose value is ``None`` is a
*simple fact*: a bare label such as ``"---"`` or ``"but did not"``.  Values are
rendered to strings eagerly so a verdict never holds references to the
caller's objects through its facts.

Formatting follows a human-oriented convention rather than ``repr()``:
strings render unquoted, sequences as ``[a, b]`` and mappings as
``{k: v, ...}``.  Duplicate grouping scans linearly with ``==`` so elements
that are unhashable can still be counted.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

__all__ = [
    "HUMAN_UNDERSTANDABLE_EMPTY_STRING",
    "DuplicateGrouped",
    "Fact",
    "annotate_empty_strings",
    "count_duplicates",
    "count_duplicates_and_add_type_info",
    "entry_string",
    "fact",
    "format_entry",
    "format_value",
    "group_duplicates",
    "has_matching_str_pair",
    "retain_matching_str",
    "simple_fact",
    "type_name",
]

HUMAN_UNDERSTANDABLE_EMPTY_STRING = '"" (empty str)'


@dataclass(frozen=True, slots=True)
class Fact:
    """A single piece of failure-message content.

    Attributes:
        key:   The label, e.g. ``"expected"`` or ``"missing (2)"``.
        value: The rendered value, or ``None`` for a bare label.
    """

    key: str
    value: str | None = None

    def __str__(self) -> str:
        return self.key if self.value is None else f"{self.key}: {self.value}"


def fact(key: str, value: Any) -> Fact:
    """Return a ``Fact`` with *value* rendered through :func:`format_value`."""
    return Fact(key, format_value(value))


def simple_fact(key: str) -> Fact:
    """Return a ``Fact`` with no value."""
    return Fact(key)


def format_value(value: Any) -> str:
    """Render *value* for display inside a fact.

    Args:
        value: Any object.

    Returns:
        ``str(value)`` for scalars, ``[a, b]`` for lists, tuples and sets, and
        ``{k: v}`` for mappings, applied recursively.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        return "{" + ", ".join(format_entry(k, v) for k, v in value.items()) + "}"
    if isinstance(value, (list, tuple, set, frozenset)):
        return "[" + ", ".join(format_value(item) for item in value) + "]"
    return str(value)


def format_entry(key: Any, value: Any) -> str:
    """Render a single mapping entry as ``key: value``."""
    return f"{format_value(key)}: {format_value(value)}"


def type_name(item: Any) -> str:
    """Return the display name of *item*'s type, e.g. ``"int"`` or ``"NoneType"``."""
    return type(item).__name__


# ---------------------------------------------------------------------------
# Duplicate grouping
# ---------------------------------------------------------------------------


def group_duplicates(items: Iterable[Any]) -> list[tuple[Any, int]]:
    """Group equal items, preserving first-occurrence order.

    Returns:
        A list of ``(item, count)`` pairs.
    """
    groups: list[list[Any]] = []
    for item in items:
        for group in groups:
            if group[0] == item:
                group[1] += 1
                break
        else:
            groups.append([item, 1])
    return [(item, count) for item, count in groups]


def entry_string(item: Any, count: int) -> str:
    """Render one duplicate group, e.g. ``"a [2 copies]"``."""
    rendered = format_value(item)
    return f"{rendered} [{count} copies]" if count > 1 else rendered


def count_duplicates(items: Iterable[Any]) -> str:
    """Render *items* in brackets with duplicates collapsed: ``[a, b [2 copies]]``."""
    return "[" + ", ".join(entry_string(item, n) for item, n in group_duplicates(items)) + "]"


def _homogeneous_type_name(items: list[Any]) -> str | None:
    name: str | None = None
    for item in items:
        if item is None:
            return None
        if name is None:
            name = type_name(item)
        elif type_name(item) != name:
            return None
    return name


def _with_type_info(items: list[Any]) -> list[str]:
    return [f"{format_value(item)} ({type_name(item)})" for item in items]


def count_duplicates_and_add_type_info(items: Iterable[Any]) -> str:
    """Like :func:`count_duplicates` but with type names attached.

    A homogeneous list gets one trailing ``(typename)``; a mixed list gets a
    type name on every item.
    """
    materialized = list(items)
    homogeneous = _homogeneous_type_name(materialized)
    if homogeneous is not None:
        return f"{count_duplicates(materialized)} ({homogeneous})"
    return count_duplicates(_with_type_info(materialized))


@dataclass(frozen=True, slots=True)
class DuplicateGrouped:
    """Duplicate-grouped elements, optionally carrying type information.

    Attributes:
        entries: ``(item, count)`` pairs in first-occurrence order.  When type
            info was added per item, each item is already a ``"x (type)"`` string.
        homogeneous_type: Shared type name to display once, if any.
    """

    entries: tuple[tuple[Any, int], ...]
    homogeneous_type: str | None = None

    @classmethod
    def of(cls, items: Iterable[Any], add_type_info: bool = False) -> DuplicateGrouped:
        materialized = list(items)
        if not add_type_info:
            return cls(tuple(group_duplicates(materialized)))
        homogeneous = _homogeneous_type_name(materialized)
        if homogeneous is not None:
            return cls(tuple(group_duplicates(materialized)), homogeneous)
        return cls(tuple(group_duplicates(_with_type_info(materialized))))

    @property
    def total_copies(self) -> int:
        return sum(count for _, count in self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)

    def __str__(self) -> str:
        body = ", ".join(entry_string(item, count) for item, count in self.entries)
        if self.homogeneous_type is not None:
            return f"{body} ({self.homogeneous_type})"
        return body


# ---------------------------------------------------------------------------
# Near-miss detection
# ---------------------------------------------------------------------------


def retain_matching_str(items: Iterable[Any], items_to_check: Iterable[Any]) -> list[Any]:
    """Return the members of *items* that render like, but do not equal, some item to check.

    This spots near misses such as ``1`` versus ``"1"``, where the failure
    message would otherwise show two identical-looking values.
    """
    by_str: dict[str, list[Any]] = {}
    for candidate in items_to_check:
        by_str.setdefault(format_value(candidate), []).append(candidate)
    result = []
    for item in items:
        for candidate in by_str.get(format_value(item), ()):
            if candidate != item:
                result.append(item)
                break
    return result


def has_matching_str_pair(first: Iterable[Any], second: Iterable[Any]) -> bool:
    """Return True if any item of *first* renders like, but does not equal, an item of *second*."""
    first_list = list(first)
    second_list = list(second)
    if not first_list or not second_list:
        return False
    return bool(retain_matching_str(first_list, second_list))


def annotate_empty_strings(items: Iterable[Any]) -> list[Any]:
    """Replace ``""`` items with a visible placeholder so they do not vanish when rendered."""
    return [
        HUMAN_UNDERSTANDABLE_EMPTY_STRING if isinstance(item, str) and item == "" else item
        for item in items
    ]
