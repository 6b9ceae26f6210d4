"""algorithm subpackage: the matching machinery behind the engine.

Provides the equality-only fast paths, the candidate mapping, maximum
bipartite matching over it, and the diagnostic key pairing.

Example::

    from correspond import equality
    from correspond.algorithm import CandidateMapping, maximum_matching
    from correspond.exception_store import ExceptionStore

    store = ExceptionStore.for_iterable()
    candidates = CandidateMapping.build([1, 2], [2, 1], equality(), store)
    mapping = maximum_matching(candidates)
    # mapping.actual_to_expected == {0: 1, 1: 0}
"""

from __future__ import annotations

from correspond.algorithm.candidates import CandidateMapping
from correspond.algorithm.matcher import OneToOneMapping, find_augmenting_path, maximum_matching
from correspond.algorithm.pairing import Pairer, Pairing

__all__ = [
    "CandidateMapping",
    "OneToOneMapping",
    "Pairer",
    "Pairing",
    "find_augmenting_path",
    "maximum_matching",
]
