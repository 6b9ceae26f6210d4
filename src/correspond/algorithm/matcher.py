"""Maximum-cardinality bipartite matching over a CandidateMapping.

Finding the most complete 1:1 mapping between actual and expected positions
is maximum bipartite matching: positions are vertices, candidate cells are
edges.  This uses augmenting paths (Kuhn's algorithm): each actual position
in turn searches depth-first for an expected position that is either free or
whose current partner can be re-routed elsewhere, then flips the alternating
path.  Once no actual position has an augmenting path the matching is
maximum (Berge's lemma).

The search uses an explicit stack, so deep alternating chains cannot hit the
interpreter's recursion limit.  Each attempt gets a fresh ``visited`` array.

Complexity: ``O(V * E)``.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from correspond.algorithm.candidates import CandidateMapping

__all__ = ["OneToOneMapping", "find_augmenting_path", "maximum_matching"]

_FREE = -1


@dataclass(frozen=True, slots=True)
class OneToOneMapping:
    """A matching: each actual position maps to at most one expected position and vice versa.

    Attributes:
        actual_to_expected: Matched pairs keyed by actual position, ascending.
        n_actual:   Number of actual positions.
        n_expected: Number of expected positions.
    """

    actual_to_expected: dict[int, int]
    n_actual: int
    n_expected: int

    @property
    def size(self) -> int:
        return len(self.actual_to_expected)

    @property
    def expected_to_actual(self) -> dict[int, int]:
        return {e: a for a, e in self.actual_to_expected.items()}

    def expected_partners(self) -> np.ndarray:
        """Array of length ``n_expected`` holding each expected position's actual partner, or -1."""
        partners = np.full(self.n_expected, _FREE, dtype=np.intp)
        for a, e in self.actual_to_expected.items():
            partners[e] = a
        return partners

    def unmatched_actual(self) -> list[int]:
        return [i for i in range(self.n_actual) if i not in self.actual_to_expected]

    def unmatched_expected(self) -> list[int]:
        matched = set(self.actual_to_expected.values())
        return [j for j in range(self.n_expected) if j not in matched]


def find_augmenting_path(
    candidates: CandidateMapping,
    expected_partner: np.ndarray,
    start: int,
    adjacency: list[list[int]] | None = None,
) -> list[tuple[int, int]] | None:
    """Search for an augmenting path from an unmatched actual position.

    Args:
        candidates:       The candidate edges.
        expected_partner: For each expected position, its matched actual
                          position or -1 when free.
        start:            The unmatched actual position to start from.
        adjacency:        Precomputed ``candidates_for`` lists, to avoid
                          recomputing them on every attempt.

    Returns:
        The ``(actual, expected)`` edges to assign, root first, or None when no
        augmenting path exists from *start*.
    """
    if adjacency is None:
        adjacency = [candidates.candidates_for(i) for i in range(candidates.n_actual)]
    visited = np.zeros(candidates.n_expected, dtype=bool)

    # Each frame is (actual position, index of the next candidate to try).
    # len(chosen) == len(stack) - 1 whenever the top frame is being expanded.
    stack: list[tuple[int, int]] = [(start, 0)]
    chosen: list[int] = []
    while stack:
        actual_index, k = stack[-1]
        options = adjacency[actual_index]
        if k >= len(options):
            stack.pop()
            if chosen:
                chosen.pop()
            continue
        stack[-1] = (actual_index, k + 1)
        expected_index = options[k]
        if visited[expected_index]:
            continue
        visited[expected_index] = True
        chosen.append(expected_index)
        partner = int(expected_partner[expected_index])
        if partner == _FREE:
            return [(stack[d][0], chosen[d]) for d in range(len(stack))]
        stack.append((partner, 0))
    return None


def maximum_matching(candidates: CandidateMapping) -> OneToOneMapping:
    """Return a maximum 1:1 mapping contained in *candidates*.

    When several maximum mappings exist, an arbitrary one is returned.
    """
    adjacency = [candidates.candidates_for(i) for i in range(candidates.n_actual)]
    expected_partner = np.full(candidates.n_expected, _FREE, dtype=np.intp)
    actual_partner = np.full(candidates.n_actual, _FREE, dtype=np.intp)

    for start in range(candidates.n_actual):
        if not adjacency[start]:
            continue
        path = find_augmenting_path(candidates, expected_partner, start, adjacency)
        if path is None:
            continue
        for a, e in path:
            expected_partner[e] = a
            actual_partner[a] = e

    actual_to_expected = {
        int(a): int(actual_partner[a])
        for a in range(candidates.n_actual)
        if actual_partner[a] != _FREE
    }
    return OneToOneMapping(actual_to_expected, candidates.n_actual, candidates.n_expected)
