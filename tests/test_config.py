"""Tests for MatchConfig and ElementFactGrouping.

Covers:
- Default values
- Validation of grouping_length_limit and traceback_limit
- Frozen (immutable) enforcement
- ElementFactGrouping string values
- __all__ export
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from correspond.config import DEFAULT_CONFIG, ElementFactGrouping, MatchConfig


class TestDefaults:
    """MatchConfig() carries the documented defaults."""

    def test_grouping_length_limit_default(self) -> None:
        assert MatchConfig().grouping_length_limit == 200

    def test_traceback_limit_default(self) -> None:
        assert MatchConfig().traceback_limit == 5

    def test_skip_fast_path_default(self) -> None:
        assert MatchConfig().skip_fast_path is False

    def test_default_config_equals_fresh_instance(self) -> None:
        assert DEFAULT_CONFIG == MatchConfig()


class TestValidation:
    """__post_init__ rejects out-of-range values."""

    @pytest.mark.parametrize("limit", [0, -1, -200])
    def test_non_positive_grouping_length_limit_raises(self, limit: int) -> None:
        with pytest.raises(ValueError, match="grouping_length_limit"):
            MatchConfig(grouping_length_limit=limit)

    def test_negative_traceback_limit_raises(self) -> None:
        with pytest.raises(ValueError, match="traceback_limit"):
            MatchConfig(traceback_limit=-1)

    def test_zero_traceback_limit_is_allowed(self) -> None:
        assert MatchConfig(traceback_limit=0).traceback_limit == 0

    def test_custom_values_are_kept(self) -> None:
        config = MatchConfig(grouping_length_limit=10, traceback_limit=2, skip_fast_path=True)
        assert config.grouping_length_limit == 10
        assert config.traceback_limit == 2
        assert config.skip_fast_path is True


class TestFrozen:
    """MatchConfig is immutable."""

    def test_setting_field_raises(self) -> None:
        config = MatchConfig()
        with pytest.raises(FrozenInstanceError):
            config.traceback_limit = 1  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert hash(MatchConfig()) == hash(MatchConfig())


class TestElementFactGrouping:
    """StrEnum members compare equal to their lowercase names."""

    def test_values(self) -> None:
        assert ElementFactGrouping.ALL_IN_ONE_FACT == "all_in_one_fact"
        assert ElementFactGrouping.FACT_PER_ELEMENT == "fact_per_element"


def test_all_exports() -> None:
    import correspond.config as module

    assert set(module.__all__) == {"DEFAULT_CONFIG", "ElementFactGrouping", "MatchConfig"}
