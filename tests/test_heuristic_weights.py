"""Tests for heuristic weight profiles."""

import pytest

from infectious.ai import heuristic_weights
from infectious.ai.evaluator import PositionEvaluator
from infectious.ai.heuristic_weights import (
    BASE_V1_WEIGHTS,
    HEURISTIC_V1_DEFAULT,
    HEURISTIC_WEIGHT_KEYS,
    get_weights,
    register_profile,
)
from infectious.errors import ConfigurationError
from infectious.models import AIConfig


@pytest.fixture
def restore_profiles(monkeypatch):
    monkeypatch.setattr(
        heuristic_weights,
        "HEURISTIC_WEIGHT_PROFILES",
        dict(heuristic_weights.HEURISTIC_WEIGHT_PROFILES),
    )


class TestProfiles:
    def test_keys_stay_in_lockstep(self):
        assert list(BASE_V1_WEIGHTS) == HEURISTIC_WEIGHT_KEYS

    def test_default_profile_values(self):
        weights = get_weights(HEURISTIC_V1_DEFAULT)
        assert weights == {
            "WEIGHT_ACTIVE_COLONY": 100.0,
            "WEIGHT_PASSIVE_COLONY": 1.0,
            "WEIGHT_MOBILITY": 10.0,
            "WEIGHT_PASSIVE_BLOCK": 10000.0,
        }

    def test_get_weights_returns_a_copy(self):
        weights = get_weights(HEURISTIC_V1_DEFAULT)
        weights["WEIGHT_MOBILITY"] = 0.0
        assert get_weights(HEURISTIC_V1_DEFAULT)["WEIGHT_MOBILITY"] == 10.0

    def test_unknown_profile(self):
        with pytest.raises(ConfigurationError) as exc_info:
            get_weights("missing")

        assert exc_info.value.code == "CONFIGURATION_ERROR"
        assert HEURISTIC_V1_DEFAULT in exc_info.value.context["known"]


class TestRegisterProfile:
    def test_registered_profile_drives_evaluator(self, restore_profiles, capture_board):
        register_profile("actives_only", {
            "WEIGHT_ACTIVE_COLONY": 1,
            "WEIGHT_PASSIVE_COLONY": 0,
            "WEIGHT_MOBILITY": 0,
            "WEIGHT_PASSIVE_BLOCK": 0,
        })
        evaluator = PositionEvaluator.from_config(
            AIConfig(heuristic_profile_id="actives_only")
        )
        capture_board.grid[0, 0] = 1

        assert evaluator.estimate(capture_board, 1) == 1.0

    def test_missing_key_rejected(self, restore_profiles):
        weights = dict(BASE_V1_WEIGHTS)
        del weights["WEIGHT_MOBILITY"]
        with pytest.raises(ConfigurationError) as exc_info:
            register_profile("broken", weights)

        assert exc_info.value.context["missing"] == ["WEIGHT_MOBILITY"]
        with pytest.raises(ConfigurationError):
            get_weights("broken")

    def test_unknown_key_rejected(self, restore_profiles):
        weights = dict(BASE_V1_WEIGHTS, WEIGHT_LUCK=1.0)
        with pytest.raises(ConfigurationError) as exc_info:
            register_profile("broken", weights)

        assert exc_info.value.context["unknown"] == ["WEIGHT_LUCK"]
