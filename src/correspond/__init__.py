"""correspond - correspondence-based collection matching with fact-based diagnostics."""

from __future__ import annotations

import logging

from correspond.algorithm.pairing import Pairer, Pairing
from correspond.api import (
    contains,
    contains_any_in,
    contains_at_least,
    contains_entry,
    contains_exactly,
    contains_none_in,
    does_not_contain,
    does_not_contain_entry,
)
from correspond.config import ElementFactGrouping, MatchConfig
from correspond.correspondence import (
    Correspondence,
    equality,
    from_predicate,
    tolerance,
    transforming,
)
from correspond.engine import MapValuesEngine, MatchingEngine
from correspond.exception_store import CallKind, ExceptionStore
from correspond.facts import Fact
from correspond.failure import FactsAssertionError, render_facts
from correspond.result import MatchVerdict, VerdictKind
from correspond.subject import assert_that

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "CallKind",
    "Correspondence",
    "ElementFactGrouping",
    "ExceptionStore",
    "Fact",
    "FactsAssertionError",
    "MapValuesEngine",
    "MatchConfig",
    "MatchVerdict",
    "MatchingEngine",
    "Pairer",
    "Pairing",
    "VerdictKind",
    "assert_that",
    "contains",
    "contains_any_in",
    "contains_at_least",
    "contains_entry",
    "contains_exactly",
    "contains_none_in",
    "does_not_contain",
    "does_not_contain_entry",
    "equality",
    "from_predicate",
    "render_facts",
    "tolerance",
    "transforming",
]
