"""
Outcome scoring: transforms decision inputs into four [0, 100] outcome scores.

The weighted formulas are written once and evaluated over either a
DecisionInputs record (scalars) or a DataFrame (columns), so the batch and
single-profile paths cannot disagree.
"""

from typing import Dict

import numpy as np

from regretsim.config import SimConfig, DEFAULT_CONFIG
from regretsim.models import (
    DecisionInputs,
    LifePath,
    OutcomeScore,
    Outcomes,
    INPUT_MIN,
    INPUT_MAX,
)


OUTCOME_NAMES = ("financial", "social", "health", "mental_stability")

SCORE_MIN = 0
SCORE_MAX = 100


# ---------------------------------------------------------------------------
# Numeric helpers (scalar- and column-generic)
# ---------------------------------------------------------------------------

def clamp_round(value):
    """Clamp to [0, 100] then round half up."""
    clipped = np.clip(value, SCORE_MIN, SCORE_MAX)
    return np.floor(clipped + 0.5)


def outcome_bases(x, cfg: SimConfig) -> Dict[str, object]:
    """
    Unscaled outcome values before the path multiplier.

    `x` is anything indexable by input name: a DecisionInputs or a DataFrame.
    Inputs are clipped to [0, 100] first.
    """
    w = cfg.outcome_weights

    career = np.clip(x["career_focus"], INPUT_MIN, INPUT_MAX)
    money = np.clip(x["money_discipline"], INPUT_MIN, INPUT_MAX)
    fitness = np.clip(x["health_fitness"], INPUT_MIN, INPUT_MAX)
    relationships = np.clip(x["relationships"], INPUT_MIN, INPUT_MAX)
    learning = np.clip(x["learning_growth"], INPUT_MIN, INPUT_MAX)
    risk = np.clip(x["risk_taking"], INPUT_MIN, INPUT_MAX)

    # Inverted risk (used in three outcomes, computed once)
    risk_aversion = INPUT_MAX - risk

    return {
        "financial": (
            career * w.financial_career
            + money * w.financial_money
            + risk * w.financial_risk
        ),
        "social": (
            relationships * w.social_relationships
            + career * w.social_career
            + risk_aversion * w.social_risk_aversion
        ),
        "health": (
            fitness * w.health_fitness
            + money * w.health_money
            + risk_aversion * w.health_risk_aversion
        ),
        "mental_stability": (
            relationships * w.mental_relationships
            + learning * w.mental_learning
            + fitness * w.mental_fitness
            + risk_aversion * w.mental_risk_aversion
        ),
    }


def scaled_outcomes(x, multipliers, cfg: SimConfig) -> Dict[str, object]:
    """Apply path multipliers, clamp and round. `multipliers` may be columns too."""
    bases = outcome_bases(x, cfg)
    return {
        "financial": clamp_round(bases["financial"] * multipliers["financial"]),
        "social": clamp_round(bases["social"] * multipliers["social"]),
        "health": clamp_round(bases["health"] * multipliers["health"]),
        "mental_stability": clamp_round(bases["mental_stability"] * multipliers["mental"]),
    }


# ---------------------------------------------------------------------------
# Public calculator
# ---------------------------------------------------------------------------

def compute_outcomes(
    path: LifePath,
    inputs: DecisionInputs,
    cfg: SimConfig | None = None,
) -> Outcomes:
    """Compute the four outcome scores for one profile. Pure and deterministic."""
    if cfg is None:
        cfg = DEFAULT_CONFIG

    m = cfg.multipliers_for(LifePath.parse(path))
    scores = scaled_outcomes(
        inputs,
        {
            "financial": m.financial,
            "social": m.social,
            "health": m.health,
            "mental": m.mental,
        },
        cfg,
    )

    return Outcomes(
        financial=OutcomeScore(int(scores["financial"])),
        social=OutcomeScore(int(scores["social"])),
        health=OutcomeScore(int(scores["health"])),
        mental_stability=OutcomeScore(int(scores["mental_stability"])),
    )
