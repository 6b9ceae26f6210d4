"""CandidateMapping: the many-to-many "could match" relation between two lists.

Cell ``[i, j]`` of the boolean matrix is True when the correspondence holds
for ``actual[i]`` and ``expected[j]``.  Building it costs one guarded
``compare`` call per cell; an exception counts as "no match" and is recorded
in the caller's exception store.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    from correspond.correspondence import Correspondence
    from correspond.exception_store import ExceptionStore

__all__ = ["CandidateMapping"]


@dataclass(frozen=True, slots=True)
class CandidateMapping:
    """Boolean matrix of shape ``(len(actual), len(expected))``.

    Attributes:
        matrix: ``matrix[i, j]`` is True when ``actual[i]`` corresponds to ``expected[j]``.
        raised: ``raised[i, j]`` is True when comparing that pair raised.
    """

    matrix: np.ndarray
    raised: np.ndarray

    @classmethod
    def build(
        cls,
        actual: list[Any],
        expected: list[Any],
        correspondence: Correspondence,
        exceptions: ExceptionStore,
    ) -> CandidateMapping:
        """Evaluate the correspondence on every (actual, expected) pair."""
        shape = (len(actual), len(expected))
        matrix = np.zeros(shape, dtype=bool)
        raised = np.zeros(shape, dtype=bool)
        for i, actual_element in enumerate(actual):
            for j, expected_element in enumerate(expected):
                before = len(exceptions)
                if correspondence.safe_compare(actual_element, expected_element, exceptions):
                    matrix[i, j] = True
                elif len(exceptions) != before:
                    raised[i, j] = True
        return cls(matrix, raised)

    @classmethod
    def from_matrix(cls, matrix: np.ndarray) -> CandidateMapping:
        """Wrap a precomputed boolean matrix (no cell raised)."""
        matrix = np.asarray(matrix, dtype=bool)
        return cls(matrix, np.zeros(matrix.shape, dtype=bool))

    @property
    def n_actual(self) -> int:
        return int(self.matrix.shape[0])

    @property
    def n_expected(self) -> int:
        return int(self.matrix.shape[1])

    def candidates_for(self, actual_index: int) -> list[int]:
        """Expected positions the given actual position could be matched with, ascending."""
        return [int(j) for j in np.flatnonzero(self.matrix[actual_index])]

    def unmatched_actual(self) -> list[int]:
        """Actual positions with no candidate at all."""
        if self.n_expected == 0:
            return list(range(self.n_actual))
        return [int(i) for i in np.flatnonzero(~self.matrix.any(axis=1))]

    def unmatched_expected(self) -> list[int]:
        """Expected positions with no candidate at all."""
        if self.n_actual == 0:
            return list(range(self.n_expected))
        return [int(j) for j in np.flatnonzero(~self.matrix.any(axis=0))]

    def edge_count(self) -> int:
        return int(self.matrix.sum())

    # ------------------------------------------------------------------
    # Order checks (same verdicts as the linear in-order walks)
    # ------------------------------------------------------------------

    def matches_diagonal(self) -> bool:
        """True when lengths agree and each ``actual[i]`` matches ``expected[i]``."""
        if self.n_actual != self.n_expected:
            return False
        return bool(np.diagonal(self.matrix).all())

    def embeds_in_order(self) -> bool:
        """True when the expected positions match an in-order subsequence of the actual ones.

        Each expected position is greedily paired with the first matching actual
        position after the previous pairing.  Reaching a cell that raised ends
        the search, exactly as the linear walk gives up on an exception.
        """
        position = 0
        for j in range(self.n_expected):
            while position < self.n_actual:
                i = position
                position += 1
                if self.matrix[i, j]:
                    break
                if self.raised[i, j]:
                    return False
            else:
                return False
        return True
