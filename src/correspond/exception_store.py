"""ExceptionStore: captures exceptions raised by user-supplied callables.

Correspondence predicates, diff formatters and pairing key functions are user
code and may raise for inputs they were not written for (``None``, the wrong
type, ...).  The matching algorithms never let such an exception escape.
Instead every failure is appended to an ``ExceptionStore`` scoped to a
single matching call, the affected comparison is treated as "no match", and
the store later describes itself as facts so the failure stays visible.

Records are kept per ``CallKind`` in occurrence order, so the first record
of each kind is deterministic and the ``has_*`` predicates are O(1).
"""

from __future__ import annotations

import logging
import traceback
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from correspond.config import DEFAULT_CONFIG, MatchConfig
from correspond.facts import Fact, simple_fact

__all__ = ["CallKind", "ExceptionRecord", "ExceptionStore"]

logger = logging.getLogger(__name__)


class CallKind(StrEnum):
    """Which user-supplied callable raised."""

    COMPARE = "compare"
    FORMAT_DIFF = "format_diff"
    ACTUAL_KEY_FUNCTION = "actual_key_function"
    EXPECTED_KEY_FUNCTION = "expected_key_function"


@dataclass(frozen=True, slots=True)
class ExceptionRecord:
    """One captured exception.

    Attributes:
        kind:      The callable that raised.
        arguments: The inputs it was called with.
        error:     The exception instance (with its ``__traceback__``).
        sequence:  Position of this record among all records in its store.
    """

    kind: CallKind
    arguments: tuple[Any, ...]
    error: Exception
    sequence: int

    def describe(self, traceback_limit: int) -> str:
        """Render as ``compare(None, 'x') threw TypeError: ...`` plus a trimmed traceback."""
        args = ", ".join(repr(arg) for arg in self.arguments)
        text = f"{self.kind}({args}) threw {type(self.error).__name__}: {self.error}"
        if traceback_limit > 0 and self.error.__traceback__ is not None:
            formatted = "".join(
                traceback.format_exception(
                    type(self.error), self.error, self.error.__traceback__, limit=traceback_limit
                )
            ).rstrip()
            text = f"{text}\n---\n{formatted}"
        return text


class ExceptionStore:
    """Ordered, append-only record of exceptions from user callables.

    Args:
        noun:   What is being compared, used in the describing facts:
                ``"elements"`` for iterables, ``"values"`` for maps.
        config: Supplies ``traceback_limit`` for the describing facts.
    """

    def __init__(self, noun: str = "elements", config: MatchConfig | None = None) -> None:
        self._noun = noun
        self._config = config if config is not None else DEFAULT_CONFIG
        self._records: dict[CallKind, list[ExceptionRecord]] = {kind: [] for kind in CallKind}
        self._sequence = 0

    @classmethod
    def for_iterable(cls, config: MatchConfig | None = None) -> ExceptionStore:
        return cls("elements", config)

    @classmethod
    def for_map_values(cls, config: MatchConfig | None = None) -> ExceptionStore:
        return cls("values", config)

    @property
    def noun(self) -> str:
        return self._noun

    # ------------------------------------------------------------------
    # Recording
    # ------------------------------------------------------------------

    def record(self, kind: CallKind, arguments: tuple[Any, ...], error: Exception) -> None:
        """Append a record.  Never raises."""
        self._records[kind].append(ExceptionRecord(kind, arguments, error, self._sequence))
        self._sequence += 1
        logger.debug("captured %s exception from %s: %r", self._noun, kind, error)

    def record_compare(self, actual: Any, expected: Any, error: Exception) -> None:
        self.record(CallKind.COMPARE, (actual, expected), error)

    def record_format_diff(self, actual: Any, expected: Any, error: Exception) -> None:
        self.record(CallKind.FORMAT_DIFF, (actual, expected), error)

    def record_actual_key_function(self, actual: Any, error: Exception) -> None:
        self.record(CallKind.ACTUAL_KEY_FUNCTION, (actual,), error)

    def record_expected_key_function(self, expected: Any, error: Exception) -> None:
        self.record(CallKind.EXPECTED_KEY_FUNCTION, (expected,), error)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_compare_exception(self) -> bool:
        return bool(self._records[CallKind.COMPARE])

    def has_format_diff_exception(self) -> bool:
        return bool(self._records[CallKind.FORMAT_DIFF])

    def has_key_function_exception(self) -> bool:
        return bool(
            self._records[CallKind.ACTUAL_KEY_FUNCTION]
            or self._records[CallKind.EXPECTED_KEY_FUNCTION]
        )

    def first_of_kind(self, kind: CallKind) -> ExceptionRecord | None:
        records = self._records[kind]
        return records[0] if records else None

    def count(self, kind: CallKind) -> int:
        return len(self._records[kind])

    def __len__(self) -> int:
        return self._sequence

    # ------------------------------------------------------------------
    # Describing
    # ------------------------------------------------------------------

    def describe_as_main_cause(self) -> list[Fact]:
        """Describe the compare exceptions as the reason an assertion failed.

        Raises:
            RuntimeError: If no compare exception was recorded.
        """
        if not self.has_compare_exception():
            msg = "describe_as_main_cause() requires at least one recorded compare exception"
            raise RuntimeError(msg)
        return [
            simple_fact(f"one or more exceptions were thrown while comparing {self._noun}"),
            self._first_exception_fact(self._records[CallKind.COMPARE]),
        ]

    def describe_as_additional_info(self) -> list[Fact]:
        """Describe recorded exceptions as extra context for an assertion that failed anyway.

        Returns:
            Up to three header/``first exception`` fact pairs, in the order
            compare, key functions, format_diff.  Empty when nothing was recorded.
        """
        facts: list[Fact] = []
        if self.has_compare_exception():
            facts.append(
                simple_fact(
                    f"additionally, one or more exceptions were thrown while comparing {self._noun}"
                )
            )
            facts.append(self._first_exception_fact(self._records[CallKind.COMPARE]))
        if self.has_key_function_exception():
            keyed = sorted(
                self._records[CallKind.ACTUAL_KEY_FUNCTION]
                + self._records[CallKind.EXPECTED_KEY_FUNCTION],
                key=lambda record: record.sequence,
            )
            facts.append(
                simple_fact(
                    "additionally, one or more exceptions were thrown while keying "
                    f"{self._noun} for pairing"
                )
            )
            facts.append(self._first_exception_fact(keyed))
        if self.has_format_diff_exception():
            facts.append(
                simple_fact(
                    "additionally, one or more exceptions were thrown while formatting diffs"
                )
            )
            facts.append(self._first_exception_fact(self._records[CallKind.FORMAT_DIFF]))
        return facts

    def _first_exception_fact(self, records: list[ExceptionRecord]) -> Fact:
        text = records[0].describe(self._config.traceback_limit)
        if len(records) > 1:
            text = f"{text}\n({len(records) - 1} more exceptions of this kind were recorded)"
        return Fact("first exception", text)
