"""Heuristic weight profiles for the Infectious AI.

This module keeps every scalar used by :class:`PositionEvaluator` in one
place and exposes them as named profiles, referenced from
``AIConfig.heuristic_profile_id``.

The weights encode the game's priorities:

* active colonies are the valuable unit (they move and capture);
* passive colonies count for little (they never move);
* mobility is a mid-weight positional term;
* a fully packed 3x3 block of passive colonies cannot be dislodged and
  outweighs any other positional consideration.

Game-over positions are scored with :data:`TERMINAL_SCORE_MULTIPLIER` per
colony of advantage instead, so that a proven win beats any heuristic
estimate and a small proven loss beats a large one.
"""

from __future__ import annotations

from ..errors import ConfigurationError

HeuristicWeights = dict[str, float]


# Game-over score per colony of advantage. A one-colony win (1001) outscores
# the heuristic of any block-free position with at most five colonies, whose
# magnitude is bounded by 5 * (100 + 8 * 10) = 900.
TERMINAL_SCORE_MULTIPLIER: float = 1001.0


# --- v1 Default Profile ----------------------------------------------------

BASE_V1_WEIGHTS: HeuristicWeights = {
    "WEIGHT_ACTIVE_COLONY": 100.0,
    "WEIGHT_PASSIVE_COLONY": 1.0,
    "WEIGHT_MOBILITY": 10.0,
    "WEIGHT_PASSIVE_BLOCK": 10000.0,
}


# Canonical ordered list of weight keys. Must stay in lockstep with
# :data:`BASE_V1_WEIGHTS`; every registered profile carries exactly these keys.
HEURISTIC_WEIGHT_KEYS: list[str] = [
    "WEIGHT_ACTIVE_COLONY",
    "WEIGHT_PASSIVE_COLONY",
    "WEIGHT_MOBILITY",
    "WEIGHT_PASSIVE_BLOCK",
]


HEURISTIC_V1_DEFAULT = "infectious_v1_default"

HEURISTIC_WEIGHT_PROFILES: dict[str, HeuristicWeights] = {
    HEURISTIC_V1_DEFAULT: BASE_V1_WEIGHTS,
}


def get_weights(profile_id: str) -> HeuristicWeights:
    """Return a copy of the weight profile registered as ``profile_id``.

    Raises:
        ConfigurationError: if no profile is registered under that id.
    """
    try:
        return dict(HEURISTIC_WEIGHT_PROFILES[profile_id])
    except KeyError:
        raise ConfigurationError(
            f"Unknown heuristic profile {profile_id!r}",
            context={"known": ", ".join(sorted(HEURISTIC_WEIGHT_PROFILES))},
        ) from None


def register_profile(profile_id: str, weights: HeuristicWeights) -> None:
    """Register (or replace) a weight profile.

    Raises:
        ConfigurationError: if ``weights`` does not carry exactly
            :data:`HEURISTIC_WEIGHT_KEYS`.
    """
    missing = [k for k in HEURISTIC_WEIGHT_KEYS if k not in weights]
    unknown = [k for k in weights if k not in HEURISTIC_WEIGHT_KEYS]
    if missing or unknown:
        raise ConfigurationError(
            f"Profile {profile_id!r} does not match the weight keys",
            context={"missing": missing, "unknown": unknown},
        )
    HEURISTIC_WEIGHT_PROFILES[profile_id] = {
        key: float(weights[key]) for key in HEURISTIC_WEIGHT_KEYS
    }
