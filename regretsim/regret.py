"""
Regret scoring: input imbalance + weak outcomes → a [0, 100] regret score.

Also ranks the candidate regret causes. Ties keep the order of
REGRET_CAUSES, which is part of the output contract.
"""

from typing import List, Tuple

import numpy as np

from regretsim.config import SimConfig, DEFAULT_CONFIG
from regretsim.models import DecisionInputs, LifePath, Outcomes, RegretData
from regretsim.scoring import clamp_round


# ---------------------------------------------------------------------------
# Regret causes
# ---------------------------------------------------------------------------

REGRET_CAUSES = (
    "Career Neglect",
    "Financial Recklessness",
    "Health Deterioration",
    "Relationship Abandonment",
    "Stagnation",
    "Reckless Risk-Taking",
    "Fear of Risk",
)


def regret_cause_magnitudes(
    inputs: DecisionInputs,
    cfg: SimConfig,
) -> List[Tuple[str, int]]:
    """(label, magnitude) pairs in reference order."""
    rp = cfg.regret
    risk = inputs.risk_taking

    magnitudes = (
        100 - inputs.career_focus,
        100 - inputs.money_discipline,
        100 - inputs.health_fitness,
        100 - inputs.relationships,
        100 - inputs.learning_growth,
        risk if risk > rp.reckless_risk_above else 0,
        100 - risk if risk < rp.fear_of_risk_below else 0,
    )
    return list(zip(REGRET_CAUSES, magnitudes))


def rank_regret_causes(
    inputs: DecisionInputs,
    cfg: SimConfig | None = None,
) -> List[Tuple[str, int]]:
    """Causes sorted by descending magnitude; sorted() is stable, so ties keep reference order."""
    if cfg is None:
        cfg = DEFAULT_CONFIG
    return sorted(regret_cause_magnitudes(inputs, cfg), key=lambda c: c[1], reverse=True)


# ---------------------------------------------------------------------------
# Regret score
# ---------------------------------------------------------------------------

def variance_regret(inputs: DecisionInputs, cfg: SimConfig) -> float:
    """Population standard deviation of the six inputs, scaled."""
    values = np.asarray(inputs.values(), dtype=np.float64)
    return float(np.std(values)) * cfg.regret.variance_factor


def outcome_regret(outcomes: Outcomes, cfg: SimConfig) -> float:
    """Shortfall of the (already rounded) outcome scores from 100."""
    w = cfg.regret.per_outcome
    return sum((100 - score) * w for score in outcomes.scores())


def compute_regret(
    path: LifePath,
    inputs: DecisionInputs,
    outcomes: Outcomes,
    cfg: SimConfig | None = None,
) -> RegretData:
    """
    Compute regret score, primary cause and top two decisions.

    base = (variance_regret + outcome_factor * outcome_regret) * path.regret,
    clamped to [0, 100] and rounded.
    """
    if cfg is None:
        cfg = DEFAULT_CONFIG

    m = cfg.multipliers_for(LifePath.parse(path))

    base = (
        variance_regret(inputs, cfg)
        + cfg.regret.outcome_factor * outcome_regret(outcomes, cfg)
    ) * m.regret

    ranked = rank_regret_causes(inputs, cfg)

    return RegretData(
        score=int(clamp_round(base)),
        primary_cause=ranked[0][0],
        top_decisions=(ranked[0][0], ranked[1][0]),
    )
