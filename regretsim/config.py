"""
Centralized configuration for all weights, multipliers and thresholds.

Every tunable constant lives here. The narrative thresholds assume the
default outcome weights.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple

from regretsim.models import LifePath


def _check_sum(name: str, *weights: float) -> None:
    total = sum(weights)
    if abs(total - 1.0) > 1e-9:
        raise ValueError(f"{name} weights must sum to 1.0, got {total}")


# ---------------------------------------------------------------------------
# Outcome weights
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class OutcomeWeights:
    """Weights used to compose each outcome score from decision inputs."""

    # Financial = career * w1 + money * w2 + risk * w3
    financial_career: float = 0.4
    financial_money: float = 0.4
    financial_risk: float = 0.2

    # Social = relationships * w1 + career * w2 + (100 - risk) * w3
    social_relationships: float = 0.5
    social_career: float = 0.2
    social_risk_aversion: float = 0.3

    # Health = fitness * w1 + money * w2 + (100 - risk) * w3
    health_fitness: float = 0.6
    health_money: float = 0.2
    health_risk_aversion: float = 0.2

    # Mental = relationships * w1 + learning * w2 + fitness * w3 + (100 - risk) * w4
    mental_relationships: float = 0.3
    mental_learning: float = 0.3
    mental_fitness: float = 0.2
    mental_risk_aversion: float = 0.2

    def __post_init__(self):
        _check_sum("Financial", self.financial_career, self.financial_money, self.financial_risk)
        _check_sum("Social", self.social_relationships, self.social_career, self.social_risk_aversion)
        _check_sum("Health", self.health_fitness, self.health_money, self.health_risk_aversion)
        _check_sum(
            "Mental stability",
            self.mental_relationships,
            self.mental_learning,
            self.mental_fitness,
            self.mental_risk_aversion,
        )


# ---------------------------------------------------------------------------
# Life path multipliers
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PathMultipliers:
    """Scaling applied to each outcome (and to regret) for one life path."""

    financial: float
    social: float
    health: float
    mental: float
    regret: float


DEFAULT_PATH_MULTIPLIERS: Mapping[LifePath, PathMultipliers] = MappingProxyType({
    LifePath.SAFE: PathMultipliers(financial=1.1, social=1.0, health=1.1, mental=1.2, regret=0.8),
    LifePath.RISKY: PathMultipliers(financial=1.3, social=0.9, health=0.9, mental=0.8, regret=1.2),
    LifePath.CHAOTIC: PathMultipliers(financial=0.7, social=1.1, health=0.7, mental=0.6, regret=1.4),
    LifePath.DISCIPLINED: PathMultipliers(financial=1.2, social=0.9, health=1.3, mental=1.1, regret=0.7),
    LifePath.LAZY: PathMultipliers(financial=0.6, social=1.0, health=0.5, mental=0.9, regret=1.5),
    LifePath.OBSESSIVE: PathMultipliers(financial=1.4, social=0.6, health=0.8, mental=0.5, regret=1.3),
})


# ---------------------------------------------------------------------------
# Regret parameters
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RegretParams:
    """
    Composition of the regret score.

    regret = (std(inputs) * variance_factor
              + outcome_factor * Σ per_outcome * (100 - outcome)) * path.regret
    """

    variance_factor: float = 0.5
    per_outcome: float = 0.25
    outcome_factor: float = 0.5

    # Risk causes only count past these thresholds (strict inequality)
    reckless_risk_above: int = 70
    fear_of_risk_below: int = 30


# ---------------------------------------------------------------------------
# Point of no return
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class HorizonStep:
    """Applies when mean outcome < upper_bound (checked in ascending order)."""

    upper_bound: float
    year: int
    difficulty: str
    warning: str


DEFAULT_HORIZON_STEPS: Tuple[HorizonStep, ...] = (
    HorizonStep(
        upper_bound=30,
        year=5,
        difficulty="nearly-impossible",
        warning="Critical trajectory detected. Immediate intervention required.",
    ),
    HorizonStep(
        upper_bound=50,
        year=10,
        difficulty="hard",
        warning="Declining path identified. Major course correction needed.",
    ),
    HorizonStep(
        upper_bound=70,
        year=15,
        difficulty="moderate",
        warning="Suboptimal trajectory. Adjustments recommended.",
    ),
    HorizonStep(
        upper_bound=float("inf"),
        year=25,
        difficulty="moderate",
        warning="Stable path with room for optimization.",
    ),
)


@dataclass(frozen=True)
class PointOfNoReturnParams:
    """Step table plus the penalty applied to volatile paths."""

    steps: Tuple[HorizonStep, ...] = DEFAULT_HORIZON_STEPS
    escalating_paths: frozenset = frozenset({LifePath.CHAOTIC, LifePath.LAZY})
    year_penalty: int = 5
    min_year: int = 5


# ---------------------------------------------------------------------------
# Archetype thresholds
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ArchetypeThresholds:
    """Every numeric boundary used by the archetype decision list."""

    fulfilled_mean: float = 80
    fulfilled_max_regret: int = 20
    balanced_mean: float = 70
    balanced_max_regret: int = 40
    gambler_financial: int = 70
    comfortable_regret: int = 60
    driven_financial: int = 80
    lonely_social: int = 30
    wandering_max_mean: float = 40
    haunted_regret: int = 70
    steady_mean: float = 60
    burned_out_health: int = 30
    isolated_social: int = 30
    heavy_heart_regret: int = 80


# ---------------------------------------------------------------------------
# Narrative parameters
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class NarrativeParams:
    """Thresholds and random ranges for the text generators."""

    # Mean outcome at or above which the optimistic templates are used
    optimistic_mean: float = 60
    career_momentum: int = 60

    # Per-outcome branch points inside the templates
    early_good: int = 60
    late_good: int = 70
    early_poor: int = 40
    late_poor: int = 50

    # Micro-regret percentage = round(low + U[0, 1) * span)
    micro_regret_ranges: Mapping[LifePath, Tuple[int, int]] = field(
        default_factory=lambda: MappingProxyType({
            LifePath.SAFE: (3, 5),
            LifePath.RISKY: (4, 6),
            LifePath.CHAOTIC: (5, 7),
            LifePath.DISCIPLINED: (2, 3),
            LifePath.LAZY: (6, 8),
            LifePath.OBSESSIVE: (4, 5),
        })
    )


# ---------------------------------------------------------------------------
# Top-level config aggregate
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SimConfig:
    """Complete engine configuration. Pass to the pipeline to override defaults."""

    outcome_weights: OutcomeWeights = field(default_factory=OutcomeWeights)
    path_multipliers: Mapping[LifePath, PathMultipliers] = field(
        default_factory=lambda: DEFAULT_PATH_MULTIPLIERS
    )
    regret: RegretParams = field(default_factory=RegretParams)
    point_of_no_return: PointOfNoReturnParams = field(default_factory=PointOfNoReturnParams)
    archetype: ArchetypeThresholds = field(default_factory=ArchetypeThresholds)
    narrative: NarrativeParams = field(default_factory=NarrativeParams)

    def __post_init__(self):
        missing = [p.value for p in LifePath if p not in self.path_multipliers]
        if missing:
            raise ValueError(f"Path multipliers missing for: {missing}")
        missing = [p.value for p in LifePath if p not in self.narrative.micro_regret_ranges]
        if missing:
            raise ValueError(f"Micro-regret ranges missing for: {missing}")

    def multipliers_for(self, path: LifePath) -> PathMultipliers:
        return self.path_multipliers[path]


DEFAULT_CONFIG = SimConfig()
