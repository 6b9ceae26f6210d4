"""MatchVerdict: the outcome of a matching call.

This module provides the result type returned by every matching operation.
A verdict never carries a rendered message, only facts; rendering is the job
of :mod:`correspond.failure`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import StrEnum, auto
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from correspond.algorithm.pairing import Pairing
    from correspond.exception_store import ExceptionStore
    from correspond.facts import Fact

__all__ = ["MatchVerdict", "VerdictKind"]


class VerdictKind(StrEnum):
    """Outcome of a matching call.

    - IN_ORDER:     Passed, and (for ordered operations) in the expected order.
    - OUT_OF_ORDER: Passed, but the matched elements were not in the expected order.
    - FAILED:       Did not pass; ``facts`` explains why.
    """

    IN_ORDER = auto()
    OUT_OF_ORDER = auto()
    FAILED = auto()


@dataclass(frozen=True, slots=True)
class MatchVerdict:
    """Result of a matching call.

    Attributes:
        kind: The outcome.
        facts: Diagnostic facts, populated for ``FAILED`` verdicts.
        missing: Expected values with no counterpart, where known.
        extra: Actual values with no counterpart, where known.
        pairing: The diagnostic key pairing used to describe the failure, if any.
        exceptions: The exception store of the call, when the verdict was
            produced by a correspondence-based operation.
        order_facts: For ``OUT_OF_ORDER`` verdicts, the facts reported if the
            caller additionally requires the original order.
    """

    kind: VerdictKind
    facts: tuple[Fact, ...] = ()
    missing: tuple[Any, ...] = ()
    extra: tuple[Any, ...] = ()
    pairing: Pairing | None = None
    exceptions: ExceptionStore | None = field(default=None, compare=False)
    order_facts: tuple[Fact, ...] = ()

    @classmethod
    def in_order_pass(cls) -> MatchVerdict:
        return cls(VerdictKind.IN_ORDER)

    @classmethod
    def out_of_order(cls, order_facts: list[Fact]) -> MatchVerdict:
        return cls(VerdictKind.OUT_OF_ORDER, order_facts=tuple(order_facts))

    @classmethod
    def failure(
        cls,
        facts: list[Fact],
        *,
        missing: list[Any] | tuple[Any, ...] = (),
        extra: list[Any] | tuple[Any, ...] = (),
        pairing: Pairing | None = None,
        exceptions: ExceptionStore | None = None,
    ) -> MatchVerdict:
        return cls(
            VerdictKind.FAILED,
            facts=tuple(facts),
            missing=tuple(missing),
            extra=tuple(extra),
            pairing=pairing,
            exceptions=exceptions,
        )

    @property
    def passed(self) -> bool:
        return self.kind is not VerdictKind.FAILED

    @property
    def failed(self) -> bool:
        return self.kind is VerdictKind.FAILED

    def in_order(self) -> MatchVerdict:
        """Return the verdict with the additional requirement that order be preserved.

        An ``OUT_OF_ORDER`` verdict becomes ``FAILED`` carrying its order facts;
        ``IN_ORDER`` and ``FAILED`` verdicts are returned unchanged.
        """
        if self.kind is VerdictKind.OUT_OF_ORDER:
            return replace(self, kind=VerdictKind.FAILED, facts=self.order_facts)
        return self
