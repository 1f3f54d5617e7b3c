"""
Data model: life paths, decision inputs and the immutable result records.

Records are frozen dataclasses. Tiers (severity / intensity) are derived
from the stored integer score on access, so they can never drift from it.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass, asdict, replace
from enum import Enum
from typing import Dict, Mapping, Tuple

from regretsim.bands import intensity_for, severity_for


class InvalidInputError(ValueError):
    """Raised when a caller passes an out-of-range input or an unknown tag."""


# ---------------------------------------------------------------------------
# Life path
# ---------------------------------------------------------------------------

class LifePath(str, Enum):
    SAFE = "safe"
    RISKY = "risky"
    CHAOTIC = "chaotic"
    DISCIPLINED = "disciplined"
    LAZY = "lazy"
    OBSESSIVE = "obsessive"

    @classmethod
    def parse(cls, value) -> "LifePath":
        """Accept a LifePath or its string value; anything else is rejected."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(p.value for p in cls)
            raise InvalidInputError(
                f"Unknown life path {value!r} (expected one of: {valid})"
            ) from None


# ---------------------------------------------------------------------------
# Decision inputs
# ---------------------------------------------------------------------------

INPUT_FIELDS = (
    "career_focus",
    "money_discipline",
    "health_fitness",
    "relationships",
    "learning_growth",
    "risk_taking",
)

INPUT_MIN = 0
INPUT_MAX = 100


def validate_input(name: str, value) -> int:
    """Return value as int, or raise InvalidInputError."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidInputError(f"{name} must be an integer, got {value!r}")
    value = int(value)
    if not INPUT_MIN <= value <= INPUT_MAX:
        raise InvalidInputError(
            f"{name} must be within [{INPUT_MIN}, {INPUT_MAX}], got {value}"
        )
    return value


@dataclass(frozen=True)
class DecisionInputs:
    """The six user-tunable sliders. Edits produce a new instance."""

    career_focus: int = 50
    money_discipline: int = 50
    health_fitness: int = 50
    relationships: int = 50
    learning_growth: int = 50
    risk_taking: int = 50

    def __post_init__(self):
        for name in INPUT_FIELDS:
            object.__setattr__(self, name, validate_input(name, getattr(self, name)))

    def __getitem__(self, name: str) -> int:
        return getattr(self, name)

    @classmethod
    def from_dict(cls, data: Mapping) -> "DecisionInputs":
        """Build from a snake_case mapping; every field is required."""
        missing = [f for f in INPUT_FIELDS if f not in data]
        if missing:
            raise InvalidInputError(f"Missing decision inputs: {missing}")
        return cls(**{f: data[f] for f in INPUT_FIELDS})

    def with_value(self, name: str, value: int) -> "DecisionInputs":
        """Copy with one dimension replaced (the counterfactual edit)."""
        if name not in INPUT_FIELDS:
            raise InvalidInputError(f"Unknown decision input {name!r}")
        return replace(self, **{name: value})

    def values(self) -> Tuple[int, ...]:
        return tuple(getattr(self, f) for f in INPUT_FIELDS)

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Scores
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class OutcomeScore:
    score: int

    @property
    def severity(self) -> str:
        return severity_for(self.score)

    def to_dict(self) -> Dict:
        return {"score": self.score, "severity": self.severity}


@dataclass(frozen=True)
class Outcomes:
    financial: OutcomeScore
    social: OutcomeScore
    health: OutcomeScore
    mental_stability: OutcomeScore

    def scores(self) -> Tuple[int, int, int, int]:
        return (
            self.financial.score,
            self.social.score,
            self.health.score,
            self.mental_stability.score,
        )

    @property
    def mean(self) -> float:
        return sum(self.scores()) / 4

    def to_dict(self) -> Dict:
        return {
            "financial": self.financial.to_dict(),
            "social": self.social.to_dict(),
            "health": self.health.to_dict(),
            "mental_stability": self.mental_stability.to_dict(),
        }


@dataclass(frozen=True)
class RegretData:
    score: int
    primary_cause: str
    top_decisions: Tuple[str, str]

    @property
    def intensity(self) -> str:
        return intensity_for(self.score)

    def to_dict(self) -> Dict:
        return {
            "score": self.score,
            "intensity": self.intensity,
            "primary_cause": self.primary_cause,
            "top_decisions": list(self.top_decisions),
        }


@dataclass(frozen=True)
class PointOfNoReturn:
    year: int
    warning: str
    recovery_difficulty: str

    def to_dict(self) -> Dict:
        return asdict(self)


# ---------------------------------------------------------------------------
# Aggregate result
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Narratives:
    year5: str
    year10: str
    year30: str
    final_reflection: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class SimulationResult:
    """One "run simulation" action. Replaced, never updated, on re-run."""

    life_path: LifePath
    inputs: DecisionInputs
    outcomes: Outcomes
    regret: RegretData
    point_of_no_return: PointOfNoReturn
    narratives: Narratives
    archetype: str
    daily_micro_regret: str
    shareable_text: str

    def to_dict(self) -> Dict:
        return {
            "life_path": self.life_path.value,
            "inputs": self.inputs.to_dict(),
            "outcomes": self.outcomes.to_dict(),
            "regret": self.regret.to_dict(),
            "point_of_no_return": self.point_of_no_return.to_dict(),
            "narratives": self.narratives.to_dict(),
            "archetype": self.archetype,
            "daily_micro_regret": self.daily_micro_regret,
            "shareable_text": self.shareable_text,
        }
