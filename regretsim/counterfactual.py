"""
Alternate-reality recomputation.

No new scoring logic: the outcome and regret calculators are re-run with
one decision input replaced. Both calculators are pure, so the original
and alternate results never share state.
"""

from dataclasses import dataclass
from typing import Dict, Iterable

import pandas as pd

from regretsim.config import SimConfig, DEFAULT_CONFIG
from regretsim.models import (
    DecisionInputs,
    InvalidInputError,
    LifePath,
    Outcomes,
    RegretData,
    INPUT_FIELDS,
)
from regretsim.regret import compute_regret
from regretsim.scoring import compute_outcomes, OUTCOME_NAMES


@dataclass(frozen=True)
class Counterfactual:
    """Side-by-side original vs alternate outcomes for one changed input."""

    field: str
    original_value: int
    alternate_value: int
    original_outcomes: Outcomes
    alternate_outcomes: Outcomes
    original_regret: RegretData
    alternate_regret: RegretData

    @property
    def regret_delta(self) -> int:
        return self.alternate_regret.score - self.original_regret.score

    @property
    def outcome_delta(self) -> float:
        return self.alternate_outcomes.mean - self.original_outcomes.mean

    def to_dict(self) -> Dict:
        return {
            "field": self.field,
            "original_value": self.original_value,
            "alternate_value": self.alternate_value,
            "original_outcomes": self.original_outcomes.to_dict(),
            "alternate_outcomes": self.alternate_outcomes.to_dict(),
            "original_regret": self.original_regret.to_dict(),
            "alternate_regret": self.alternate_regret.to_dict(),
            "regret_delta": self.regret_delta,
            "outcome_delta": self.outcome_delta,
        }


def alternate_reality(
    path: LifePath,
    inputs: DecisionInputs,
    field: str,
    value: int,
    cfg: SimConfig | None = None,
) -> Counterfactual:
    """What if `field` had been `value`? Recompute and compare."""
    if cfg is None:
        cfg = DEFAULT_CONFIG

    path = LifePath.parse(path)
    alt_inputs = inputs.with_value(field, value)

    original_outcomes = compute_outcomes(path, inputs, cfg)
    alternate_outcomes = compute_outcomes(path, alt_inputs, cfg)

    return Counterfactual(
        field=field,
        original_value=inputs[field],
        alternate_value=alt_inputs[field],
        original_outcomes=original_outcomes,
        alternate_outcomes=alternate_outcomes,
        original_regret=compute_regret(path, inputs, original_outcomes, cfg),
        alternate_regret=compute_regret(path, alt_inputs, alternate_outcomes, cfg),
    )


def sweep_counterfactual(
    path: LifePath,
    inputs: DecisionInputs,
    field: str,
    values: Iterable[int] = range(0, 101, 10),
    cfg: SimConfig | None = None,
) -> pd.DataFrame:
    """
    Run alternate_reality for each candidate value of one input.

    Returns one row per value with the outcome scores, regret score and
    deltas against the unmodified profile.
    """
    if field not in INPUT_FIELDS:
        raise InvalidInputError(f"Unknown decision input {field!r}")

    rows = []
    for value in values:
        cf = alternate_reality(path, inputs, field, value, cfg)
        row = {field: cf.alternate_value}
        for name, score in zip(OUTCOME_NAMES, cf.alternate_outcomes.scores()):
            row[f"{name}_score"] = score
        row["regret_score"] = cf.alternate_regret.score
        row["primary_cause"] = cf.alternate_regret.primary_cause
        row["regret_delta"] = cf.regret_delta
        row["outcome_delta"] = cf.outcome_delta
        rows.append(row)

    return pd.DataFrame(rows)
