"""
Point-of-no-return estimation.

A step function over the mean outcome score, followed by a penalty for
volatile life paths that shortens the horizon and escalates difficulty.
"""

from regretsim.config import SimConfig, DEFAULT_CONFIG
from regretsim.models import DecisionInputs, LifePath, Outcomes, PointOfNoReturn


DIFFICULTY_LEVELS = ("moderate", "hard", "nearly-impossible")


def escalate_difficulty(difficulty: str) -> str:
    """moderate → hard; anything else → nearly-impossible."""
    if difficulty == "moderate":
        return "hard"
    return "nearly-impossible"


def compute_point_of_no_return(
    path: LifePath,
    inputs: DecisionInputs,
    outcomes: Outcomes,
    cfg: SimConfig | None = None,
) -> PointOfNoReturn:
    """
    Estimate the year beyond which recovery gets harder.

    `inputs` is accepted for signature parity with the other calculators;
    the estimate depends only on the outcome mean and the path.
    """
    if cfg is None:
        cfg = DEFAULT_CONFIG

    path = LifePath.parse(path)
    p = cfg.point_of_no_return
    mean = outcomes.mean

    step = next(s for s in p.steps if mean < s.upper_bound)
    year = step.year
    difficulty = step.difficulty

    if path in p.escalating_paths:
        year = max(p.min_year, year - p.year_penalty)
        difficulty = escalate_difficulty(difficulty)

    return PointOfNoReturn(
        year=year,
        warning=step.warning,
        recovery_difficulty=difficulty,
    )
