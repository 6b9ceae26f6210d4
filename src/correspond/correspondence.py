"""Correspondence: a user-defined relation between actual and expected values.

A ``Correspondence`` decides whether an actual-typed value "matches" an
expected-typed value, and carries a human-readable description used in
failure messages (e.g. ``"is a finite number within 0.05 of"``).  It may
also carry a diff formatter that explains *how* a non-matching pair differs.

Correspondences are immutable and hold no state, so a single instance may be
shared across any number of assertions and threads.

Both ``compare`` and ``format_diff`` are allowed to raise.  Matching code
calls them only through :meth:`Correspondence.safe_compare` and
:meth:`Correspondence.safe_format_diff`, which record the exception in an
:class:`~correspond.exception_store.ExceptionStore` and carry on.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from correspond.facts import Fact, fact

if TYPE_CHECKING:
    from correspond.exception_store import ExceptionStore

__all__ = ["Correspondence", "equality", "from_predicate", "tolerance", "transforming"]

Predicate = Callable[[Any, Any], bool]
DiffFormatter = Callable[[Any, Any], "str | None"]


def _equals(actual: Any, expected: Any) -> bool:
    return actual is expected or bool(actual == expected)


@dataclass(frozen=True, slots=True)
class Correspondence:
    """A binary relation plus the metadata needed to explain it.

    Prefer the factory functions (:func:`equality`, :func:`from_predicate`,
    :func:`transforming`, :func:`tolerance`) over calling this directly.

    Attributes:
        predicate:      ``(actual, expected) -> bool``.  May raise.
        description:    Verb phrase completing "actual element ... expected element".
        is_equality:    True only for the plain ``==`` correspondence.
        diff_formatter: Optional ``(actual, expected) -> str | None``.  May raise.
    """

    predicate: Predicate
    description: str
    is_equality: bool = False
    diff_formatter: DiffFormatter | None = None

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def equality(cls) -> Correspondence:
        return equality()

    @classmethod
    def from_predicate(cls, predicate: Predicate, description: str) -> Correspondence:
        return from_predicate(predicate, description)

    @classmethod
    def transforming(
        cls,
        actual_transform: Callable[[Any], Any],
        description: str,
        expected_transform: Callable[[Any], Any] | None = None,
    ) -> Correspondence:
        return transforming(actual_transform, description, expected_transform)

    @classmethod
    def tolerance(cls, tol: float) -> Correspondence:
        return tolerance(tol)

    # ------------------------------------------------------------------
    # Relation
    # ------------------------------------------------------------------

    def compare(self, actual: Any, expected: Any) -> bool:
        return bool(self.predicate(actual, expected))

    def format_diff(self, actual: Any, expected: Any) -> str | None:
        if self.diff_formatter is None:
            return None
        return self.diff_formatter(actual, expected)

    def formatting_diffs_using(self, formatter: DiffFormatter) -> Correspondence:
        """Return a copy of this correspondence that formats diffs with *formatter*."""
        return replace(self, diff_formatter=formatter)

    @property
    def has_diff_formatter(self) -> bool:
        return self.diff_formatter is not None

    def safe_compare(self, actual: Any, expected: Any, exceptions: ExceptionStore) -> bool:
        """Return ``compare(actual, expected)``, or False if it raised (and record it)."""
        try:
            return self.compare(actual, expected)
        except Exception as error:  # noqa: BLE001 - user predicate, recorded below
            exceptions.record_compare(actual, expected, error)
            return False

    def safe_format_diff(
        self, actual: Any, expected: Any, exceptions: ExceptionStore
    ) -> str | None:
        """Return ``format_diff(actual, expected)``, or None if it raised (and record it)."""
        try:
            return self.format_diff(actual, expected)
        except Exception as error:  # noqa: BLE001 - user formatter, recorded below
            exceptions.record_format_diff(actual, expected, error)
            return None

    # ------------------------------------------------------------------
    # Description facts
    # ------------------------------------------------------------------

    def describe_for_iterable(self) -> list[Fact]:
        if self.is_equality:
            return []
        return [fact("testing whether", f"actual element {self.description} expected element")]

    def describe_for_map_values(self) -> list[Fact]:
        if self.is_equality:
            return []
        return [fact("testing whether", f"actual value {self.description} expected value")]

    def __str__(self) -> str:
        return self.description


_EQUALITY = Correspondence(_equals, "is equal to", is_equality=True)


def equality() -> Correspondence:
    """Return the correspondence that matches values with ``==``."""
    return _EQUALITY


def from_predicate(predicate: Predicate, description: str) -> Correspondence:
    """Return a correspondence backed by an arbitrary binary predicate.

    Args:
        predicate:   ``(actual, expected) -> bool``.  It may raise for inputs it
                     does not handle; matching records and reports the exception.
        description: Verb phrase such as ``"starts with"``.
    """
    if not callable(predicate):
        msg = f"predicate must be callable, got {type(predicate).__name__}"
        raise TypeError(msg)
    return Correspondence(predicate, description)


def transforming(
    actual_transform: Callable[[Any], Any],
    description: str,
    expected_transform: Callable[[Any], Any] | None = None,
) -> Correspondence:
    """Return a correspondence that transforms values before comparing them with ``==``.

    ``None`` on a transformed side is never passed to the transform; such a
    pair simply does not match.

    Args:
        actual_transform:   Applied to each actual value.
        description:        Verb phrase such as ``"has a length of"``.
        expected_transform: Applied to each expected value.  When None the
                            expected value is compared as-is.
    """
    if not callable(actual_transform):
        msg = f"actual_transform must be callable, got {type(actual_transform).__name__}"
        raise TypeError(msg)
    if expected_transform is not None and not callable(expected_transform):
        msg = f"expected_transform must be callable, got {type(expected_transform).__name__}"
        raise TypeError(msg)

    def _compare(actual: Any, expected: Any) -> bool:
        if actual is None:
            return False
        if expected_transform is None:
            return bool(actual_transform(actual) == expected)
        if expected is None:
            return False
        return bool(actual_transform(actual) == expected_transform(expected))

    return Correspondence(_compare, description)


def tolerance(tol: float) -> Correspondence:
    """Return a correspondence matching finite numbers within an absolute tolerance.

    NaN and infinities never match anything, including themselves.  Non-numeric
    values make ``compare`` raise ``TypeError``.

    Raises:
        ValueError: If *tol* is negative, NaN or infinite.
    """
    if not math.isfinite(tol) or tol < 0.0:
        msg = f"tolerance must be finite and >= 0, got {tol}"
        raise ValueError(msg)

    def _within(actual: Any, expected: Any) -> bool:
        return bool(abs(actual - expected) <= tol)

    return Correspondence(_within, f"is a finite number within {tol} of")
