"""MatchConfig and ElementFactGrouping for matching and diagnostics configuration.

MatchConfig is a frozen (immutable) dataclass holding the knobs that shape
failure diagnostics and, for testing, the choice between the linear fast path
and the exhaustive matching path.  ElementFactGrouping selects how a list of
missing or unexpected elements is laid out as facts.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["DEFAULT_CONFIG", "ElementFactGrouping", "MatchConfig"]


class ElementFactGrouping(StrEnum):
    """How to lay out a list of elements as failure facts.

    - ALL_IN_ONE_FACT:  A single ``"missing (3)": "a, b, c"`` fact.
    - FACT_PER_ELEMENT: A ``"missing (3)"`` header followed by ``#1``, ``#2`` ... facts.
    """

    ALL_IN_ONE_FACT = auto()
    FACT_PER_ELEMENT = auto()


@dataclass(frozen=True, slots=True)
class MatchConfig:
    """Immutable configuration for a matching call.

    Attributes:
        grouping_length_limit: Total rendered length of a multi-element list above
            which each element gets its own fact (> 0).  Default 200.
        traceback_limit: Maximum number of stack frames included when describing a
            captured exception (>= 0).  ``0`` omits the traceback entirely.
        skip_fast_path: When True, ordered operations always build the full
            candidate mapping instead of trying the linear in-order walk first.
            Verdicts are identical either way; this exists to cross-check the
            two paths.  Default False.
    """

    grouping_length_limit: int = 200
    traceback_limit: int = 5
    skip_fast_path: bool = False

    def __post_init__(self) -> None:
        if self.grouping_length_limit <= 0:
            msg = f"grouping_length_limit must be > 0, got {self.grouping_length_limit}"
            raise ValueError(msg)
        if self.traceback_limit < 0:
            msg = f"traceback_limit must be >= 0, got {self.traceback_limit}"
            raise ValueError(msg)


DEFAULT_CONFIG = MatchConfig()
