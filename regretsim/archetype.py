"""
Archetype classification.

Maps (path, outcomes, regret) → a symbolic label. The rules are an ordered
list of (label, predicate) pairs; the predicates overlap, so evaluation order
is part of the contract.
"""

from typing import Callable, NamedTuple, Tuple

from regretsim.config import ArchetypeThresholds, SimConfig, DEFAULT_CONFIG
from regretsim.models import LifePath, Outcomes, RegretData


FALLBACK_ARCHETYPE = "The Uncertain Traveler"


class _Signals(NamedTuple):
    path: LifePath
    mean: float
    financial: int
    social: int
    health: int
    regret: int


# (label, predicate) in evaluation order; 1-2 overall quality, 3-9 path
# signatures, 10-12 single-dimension failures
_RULES: Tuple[Tuple[str, Callable[[_Signals, ArchetypeThresholds], bool]], ...] = (
    ("The Fulfilled Architect",
     lambda s, t: s.mean >= t.fulfilled_mean and s.regret <= t.fulfilled_max_regret),
    ("The Balanced Navigator",
     lambda s, t: s.mean >= t.balanced_mean and s.regret <= t.balanced_max_regret),
    ("The Calculated Gambler",
     lambda s, t: s.path is LifePath.RISKY and s.financial >= t.gambler_financial),
    ("The Comfortable Regretter",
     lambda s, t: s.path is LifePath.SAFE and s.regret >= t.comfortable_regret),
    ("The Driven Achiever",
     lambda s, t: s.path is LifePath.OBSESSIVE and s.financial >= t.driven_financial),
    ("The Lonely Climber",
     lambda s, t: s.path is LifePath.OBSESSIVE and s.social <= t.lonely_social),
    ("The Wandering Soul",
     lambda s, t: s.path is LifePath.CHAOTIC and s.mean <= t.wandering_max_mean),
    ("The Haunted Dreamer",
     lambda s, t: s.path is LifePath.LAZY and s.regret >= t.haunted_regret),
    ("The Steady Builder",
     lambda s, t: s.path is LifePath.DISCIPLINED and s.mean >= t.steady_mean),
    ("The Burned Out",
     lambda s, t: s.health <= t.burned_out_health),
    ("The Isolated Achiever",
     lambda s, t: s.social <= t.isolated_social),
    ("The Heavy Heart",
     lambda s, t: s.regret >= t.heavy_heart_regret),
)

ARCHETYPES = tuple(label for label, _ in _RULES) + (FALLBACK_ARCHETYPE,)


def classify_archetype(
    path: LifePath,
    outcomes: Outcomes,
    regret: RegretData,
    cfg: SimConfig | None = None,
) -> str:
    """
    Classify the simulated trajectory into one of thirteen archetypes.

    Decision order matters, first match wins. Falls back to
    FALLBACK_ARCHETYPE when no rule applies.
    """
    if cfg is None:
        cfg = DEFAULT_CONFIG

    signals = _Signals(
        path=LifePath.parse(path),
        mean=outcomes.mean,
        financial=outcomes.financial.score,
        social=outcomes.social.score,
        health=outcomes.health.score,
        regret=regret.score,
    )

    for label, matches in _RULES:
        if matches(signals, cfg.archetype):
            return label
    return FALLBACK_ARCHETYPE
