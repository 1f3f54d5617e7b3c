"""
Batch scoring: many profiles at once as a DataFrame.

Numeric stages are column transforms over the same formulas the
single-profile calculators use; the rule-based stages (cause ranking,
point of no return, archetype) run per row on the scored values.
"""

import logging
from typing import List

import numpy as np
import pandas as pd

from regretsim.archetype import classify_archetype
from regretsim.bands import intensity_for, severity_for
from regretsim.config import SimConfig, DEFAULT_CONFIG
from regretsim.horizon import compute_point_of_no_return
from regretsim.models import (
    DecisionInputs,
    InvalidInputError,
    LifePath,
    OutcomeScore,
    Outcomes,
    RegretData,
    INPUT_FIELDS,
)
from regretsim.regret import rank_regret_causes
from regretsim.scoring import OUTCOME_NAMES, clamp_round, scaled_outcomes

logger = logging.getLogger(__name__)


REQUIRED_COLUMNS = {"life_path", *INPUT_FIELDS}


# ---------------------------------------------------------------------------
# Column stages
# ---------------------------------------------------------------------------

def _multiplier_column(df: pd.DataFrame, name: str, cfg: SimConfig) -> pd.Series:
    return df["life_path"].map(lambda p: getattr(cfg.multipliers_for(LifePath(p)), name))


def compute_outcome_columns(df: pd.DataFrame, cfg: SimConfig) -> pd.DataFrame:
    """Add <outcome>_score and <outcome>_severity for each of the four outcomes."""
    multipliers = {
        name: _multiplier_column(df, name, cfg)
        for name in ("financial", "social", "health", "mental")
    }
    scores = scaled_outcomes(df, multipliers, cfg)

    for name in OUTCOME_NAMES:
        df[f"{name}_score"] = scores[name].astype(int)
        df[f"{name}_severity"] = df[f"{name}_score"].map(severity_for)

    return df


def compute_regret_columns(
    df: pd.DataFrame,
    profiles: List[DecisionInputs],
    cfg: SimConfig,
) -> pd.DataFrame:
    """Add regret_score, regret_intensity, primary_cause and secondary_cause."""
    rp = cfg.regret

    values = df[list(INPUT_FIELDS)].to_numpy(dtype=np.float64)
    variance = pd.Series(np.std(values, axis=1), index=df.index) * rp.variance_factor

    shortfall = sum((100 - df[f"{name}_score"]) * rp.per_outcome for name in OUTCOME_NAMES)

    base = (variance + rp.outcome_factor * shortfall) * _multiplier_column(df, "regret", cfg)
    df["regret_score"] = clamp_round(base).astype(int)
    df["regret_intensity"] = df["regret_score"].map(intensity_for)

    ranked = [rank_regret_causes(p, cfg) for p in profiles]
    df["primary_cause"] = [r[0][0] for r in ranked]
    df["secondary_cause"] = [r[1][0] for r in ranked]

    return df


def classify_rows(
    df: pd.DataFrame,
    profiles: List[DecisionInputs],
    cfg: SimConfig,
) -> pd.DataFrame:
    """Add point-of-no-return year/difficulty and archetype per row."""
    years, difficulties, archetypes = [], [], []

    for (_, row), inputs in zip(df.iterrows(), profiles):
        path = LifePath(row["life_path"])
        outcomes = Outcomes(
            *(OutcomeScore(int(row[f"{name}_score"])) for name in OUTCOME_NAMES)
        )
        regret = RegretData(
            score=int(row["regret_score"]),
            primary_cause=row["primary_cause"],
            top_decisions=(row["primary_cause"], row["secondary_cause"]),
        )
        ponr = compute_point_of_no_return(path, inputs, outcomes, cfg)
        years.append(ponr.year)
        difficulties.append(ponr.recovery_difficulty)
        archetypes.append(classify_archetype(path, outcomes, regret, cfg))

    df["ponr_year"] = years
    df["ponr_difficulty"] = difficulties
    df["archetype"] = archetypes
    return df


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def score_profiles(
    data: list[dict],
    cfg: SimConfig | None = None,
) -> pd.DataFrame:
    """
    Score a list of profiles.

    Each record holds `life_path` plus the six snake_case decision inputs.
    Every row is validated before any scoring happens.
    """
    if cfg is None:
        cfg = DEFAULT_CONFIG

    if not data:
        raise ValueError("Input data cannot be empty")

    df = pd.DataFrame(data)

    missing = REQUIRED_COLUMNS - set(df.columns)
    if missing:
        raise InvalidInputError(f"Missing required columns: {sorted(missing)}")

    df["life_path"] = [LifePath.parse(p).value for p in df["life_path"]]
    profiles = [
        DecisionInputs.from_dict(record)
        for record in df[list(INPUT_FIELDS)].to_dict("records")
    ]

    df = compute_outcome_columns(df, cfg)
    df = compute_regret_columns(df, profiles, cfg)
    df = classify_rows(df, profiles, cfg)

    logger.info("Scored %d profiles", len(df))
    return df
