"""Pairer and Pairing: diagnostic grouping of missing and extra values by key.

When an assertion fails, a long flat list of "missing" and "unexpected"
values is hard to read.  If the caller can name a key that identifies which
actual value was *meant* to be which expected value (an id, a name), the
failure can instead be shown key by key, with a diff for each pair.

Pairing never influences whether an assertion passes; it only shapes the
message.  Key-function exceptions and unhashable keys degrade the affected
value to "unkeyed" and are recorded in the exception store.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from correspond.exception_store import ExceptionStore

__all__ = ["Pairer", "Pairing"]

logger = logging.getLogger(__name__)

KeyFunction = Callable[[Any], Any]


@dataclass(frozen=True, slots=True)
class Pairing:
    """Expected and actual values grouped by a shared key.

    Attributes:
        paired_keys_to_expected: Key -> the expected value with that key, in
            expected order.  Only keys that some actual value also has.
        paired_keys_to_actual: Key -> the actual values with that key, keys in
            order of first appearance among the actual values.
        unpaired_expected: Expected values whose key no actual value shares,
            or that have no key.
        unpaired_actual: Actual values whose key no expected value shares,
            or that have no key.
    """

    paired_keys_to_expected: dict[Any, Any]
    paired_keys_to_actual: dict[Any, list[Any]]
    unpaired_expected: list[Any]
    unpaired_actual: list[Any]

    @property
    def has_unpaired(self) -> bool:
        return bool(self.unpaired_expected or self.unpaired_actual)


class Pairer:
    """Pairs expected and actual values using one key function per side.

    Args:
        actual_key_function:   Computes the key of an actual value.
        expected_key_function: Computes the key of an expected value.  When
                               None, *actual_key_function* is used for both sides.

    Keys are compared as dict keys, so keys that are equal and hash alike
    (``1``, ``1.0`` and ``True``) are the same key.  Two expected values with
    such keys make the key function ambiguous.

    Raises:
        TypeError: If a key function is not callable.
    """

    def __init__(
        self,
        actual_key_function: KeyFunction,
        expected_key_function: KeyFunction | None = None,
    ) -> None:
        if expected_key_function is None:
            expected_key_function = actual_key_function
        for name, function in (
            ("actual_key_function", actual_key_function),
            ("expected_key_function", expected_key_function),
        ):
            if not callable(function):
                msg = f"{name} must be callable, got {type(function).__name__}"
                raise TypeError(msg)
        self._actual_key_function = actual_key_function
        self._expected_key_function = expected_key_function

    def actual_key(self, actual: Any, exceptions: ExceptionStore) -> Any:
        """Return the key of *actual*, or None if it has none (failures are recorded)."""
        try:
            key = self._actual_key_function(actual)
            hash(key)
        except Exception as error:  # noqa: BLE001 - user key function, recorded below
            exceptions.record_actual_key_function(actual, error)
            return None
        return key

    def expected_key(self, expected: Any, exceptions: ExceptionStore) -> Any:
        """Return the key of *expected*, or None if it has none (failures are recorded)."""
        try:
            key = self._expected_key_function(expected)
            hash(key)
        except Exception as error:  # noqa: BLE001 - user key function, recorded below
            exceptions.record_expected_key_function(expected, error)
            return None
        return key

    def pair(
        self,
        expected_values: list[Any],
        actual_values: list[Any],
        exceptions: ExceptionStore,
    ) -> Pairing | None:
        """Group *expected_values* and *actual_values* by key.

        Returns:
            The pairing, or None when two expected values share a key (the
            key function does not uniquely identify the expected values).
        """
        # Key each expected value once; the key function may be expensive or noisy.
        expected_keys = [self.expected_key(value, exceptions) for value in expected_values]

        keyed_expected: dict[Any, Any] = {}
        for value, key in zip(expected_values, expected_keys):
            if key is None:
                continue
            if key in keyed_expected:
                logger.debug("expected values are not uniquely keyed (duplicate key %r)", key)
                return None
            keyed_expected[key] = value

        paired_actual: dict[Any, list[Any]] = {}
        unpaired_actual: list[Any] = []
        for value in actual_values:
            key = self.actual_key(value, exceptions)
            if key is not None and key in keyed_expected:
                paired_actual.setdefault(key, []).append(value)
            else:
                unpaired_actual.append(value)

        paired_expected: dict[Any, Any] = {}
        unpaired_expected: list[Any] = []
        for value, key in zip(expected_values, expected_keys):
            if key is not None and key in paired_actual:
                paired_expected[key] = value
            else:
                unpaired_expected.append(value)

        return Pairing(paired_expected, paired_actual, unpaired_expected, unpaired_actual)

    def pair_one(
        self,
        expected_value: Any,
        actual_values: list[Any],
        exceptions: ExceptionStore,
    ) -> list[Any]:
        """Return the actual values whose key equals the key of *expected_value*."""
        key = self.expected_key(expected_value, exceptions)
        if key is None:
            return []
        return [value for value in actual_values if self.actual_key(value, exceptions) == key]
