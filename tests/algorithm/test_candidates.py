"""Test suite for CandidateMapping.

Tests matrix construction through a correspondence (including cells that
raised), the per-position queries, and the two order checks used when the
linear fast path is skipped.
"""

from __future__ import annotations

import numpy as np

from correspond.algorithm.candidates import CandidateMapping
from correspond.correspondence import from_predicate, tolerance
from correspond.exception_store import ExceptionStore

STARTS_WITH = from_predicate(lambda actual, expected: actual.startswith(expected), "starts with")


def mapping(rows: list[list[bool]]) -> CandidateMapping:
    return CandidateMapping.from_matrix(np.array(rows, dtype=bool))


class TestBuild:
    """CandidateMapping.build()."""

    def test_cells_follow_correspondence(self) -> None:
        store = ExceptionStore()
        candidates = CandidateMapping.build(["ab", "ba"], ["a", "b"], STARTS_WITH, store)
        assert candidates.matrix.tolist() == [[True, False], [False, True]]
        assert not candidates.raised.any()
        assert len(store) == 0

    def test_raising_cells_are_recorded(self) -> None:
        store = ExceptionStore()
        candidates = CandidateMapping.build([None, 1.0], [1.0], tolerance(0.1), store)
        assert candidates.matrix.tolist() == [[False], [True]]
        assert candidates.raised.tolist() == [[True], [False]]
        assert store.has_compare_exception()

    def test_shape(self) -> None:
        candidates = CandidateMapping.build(["a"], ["a", "b", "c"], STARTS_WITH, ExceptionStore())
        assert candidates.n_actual == 1
        assert candidates.n_expected == 3


class TestQueries:
    """Per-position queries."""

    def test_candidates_for(self) -> None:
        candidates = mapping([[True, False, True], [False, False, False]])
        assert candidates.candidates_for(0) == [0, 2]
        assert candidates.candidates_for(1) == []

    def test_unmatched_positions(self) -> None:
        candidates = mapping([[True, False, False], [False, False, False]])
        assert candidates.unmatched_actual() == [1]
        assert candidates.unmatched_expected() == [1, 2]

    def test_edge_count(self) -> None:
        assert mapping([[True, True], [False, True]]).edge_count() == 3

    def test_no_expected_positions(self) -> None:
        candidates = CandidateMapping.from_matrix(np.zeros((2, 0), dtype=bool))
        assert candidates.unmatched_actual() == [0, 1]
        assert candidates.unmatched_expected() == []

    def test_no_actual_positions(self) -> None:
        candidates = CandidateMapping.from_matrix(np.zeros((0, 2), dtype=bool))
        assert candidates.unmatched_actual() == []
        assert candidates.unmatched_expected() == [0, 1]


class TestOrderChecks:
    """matches_diagonal() / embeds_in_order()."""

    def test_diagonal(self) -> None:
        assert mapping([[True, False], [False, True]]).matches_diagonal()

    def test_anti_diagonal_is_not_diagonal(self) -> None:
        assert not mapping([[False, True], [True, False]]).matches_diagonal()

    def test_non_square_is_not_diagonal(self) -> None:
        assert not mapping([[True], [False]]).matches_diagonal()

    def test_embeds_with_gaps(self) -> None:
        assert mapping([[True, False], [False, False], [False, True]]).embeds_in_order()

    def test_reversed_does_not_embed(self) -> None:
        assert not mapping([[False, True], [True, False]]).embeds_in_order()

    def test_empty_expected_embeds(self) -> None:
        assert CandidateMapping.from_matrix(np.zeros((2, 0), dtype=bool)).embeds_in_order()

    def test_raised_cell_stops_embedding(self) -> None:
        candidates = CandidateMapping(
            np.array([[False], [True]], dtype=bool),
            np.array([[True], [False]], dtype=bool),
        )
        assert not candidates.embeds_in_order()
