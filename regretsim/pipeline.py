"""
Pipeline orchestration: validate → outcomes → regret → horizon → archetype → text.

This is the only module with I/O (profile loading, report formatting).
All scoring logic is delegated to scoring, regret, horizon, archetype,
narrative.
"""

import json
import logging
import random
from pathlib import Path
from typing import Dict, Mapping, Tuple, Union

from regretsim.archetype import classify_archetype
from regretsim.config import SimConfig, DEFAULT_CONFIG
from regretsim.horizon import compute_point_of_no_return
from regretsim.models import (
    DecisionInputs,
    InvalidInputError,
    LifePath,
    SimulationResult,
)
from regretsim.narrative import (
    generate_daily_micro_regret,
    generate_narratives,
    generate_shareable_text,
)
from regretsim.regret import compute_regret
from regretsim.scoring import compute_outcomes

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Profile loading (CLI mode only)
# ---------------------------------------------------------------------------

REQUIRED_KEYS = {"life_path", "sliders"}


def parse_profile(data: Mapping) -> Tuple[LifePath, DecisionInputs]:
    """Validate a {"life_path": ..., "sliders": {...}} mapping."""
    if not isinstance(data, Mapping):
        raise InvalidInputError(f"Profile must be a JSON object, got {type(data).__name__}")
    if not data:
        raise InvalidInputError("Profile data cannot be empty")

    missing = REQUIRED_KEYS - set(data)
    if missing:
        raise InvalidInputError(f"Missing required keys: {sorted(missing)}")

    sliders = data["sliders"]
    if not isinstance(sliders, Mapping):
        raise InvalidInputError("sliders must be an object")

    return LifePath.parse(data["life_path"]), DecisionInputs.from_dict(sliders)


def load_profile(filepath: Union[str, Path]) -> Tuple[LifePath, DecisionInputs]:
    """Load and validate a profile from a JSON file."""
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Profile file not found: {path}")

    with open(path, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidInputError(f"Profile {path} is not valid JSON: {e}") from e

    return parse_profile(data)


# ---------------------------------------------------------------------------
# Core simulation (PURE apart from the injected random source)
# ---------------------------------------------------------------------------

def simulate(
    path: LifePath,
    inputs: DecisionInputs,
    cfg: SimConfig | None = None,
    rng: random.Random | None = None,
) -> SimulationResult:
    """
    Run one simulation.

    Every stage is deterministic except the micro-regret and shareable text,
    which draw from `rng` (a fresh random.Random when omitted).
    """
    if cfg is None:
        cfg = DEFAULT_CONFIG
    if rng is None:
        rng = random.Random()

    path = LifePath.parse(path)

    # Stage 1: Outcomes
    outcomes = compute_outcomes(path, inputs, cfg)

    # Stage 2: Regret
    regret = compute_regret(path, inputs, outcomes, cfg)

    # Stage 3: Point of no return
    ponr = compute_point_of_no_return(path, inputs, outcomes, cfg)

    # Stage 4: Archetype
    archetype = classify_archetype(path, outcomes, regret, cfg)

    # Stage 5: Text
    narratives = generate_narratives(path, inputs, outcomes, regret, archetype, cfg)
    micro_regret = generate_daily_micro_regret(path, rng, cfg)
    shareable = generate_shareable_text(archetype, regret.score, regret.primary_cause, rng)

    logger.debug(
        "Simulated %s: outcomes=%s regret=%d archetype=%s",
        path.value, outcomes.scores(), regret.score, archetype,
    )

    return SimulationResult(
        life_path=path,
        inputs=inputs,
        outcomes=outcomes,
        regret=regret,
        point_of_no_return=ponr,
        narratives=narratives,
        archetype=archetype,
        daily_micro_regret=micro_regret,
        shareable_text=shareable,
    )


# ---------------------------------------------------------------------------
# Public Entry Points
# ---------------------------------------------------------------------------

def simulate_file(
    filepath: Union[str, Path],
    cfg: SimConfig | None = None,
    rng: random.Random | None = None,
) -> SimulationResult:
    """
    CLI-compatible entry point.
    Reads a JSON profile and runs the simulation.
    """
    path, inputs = load_profile(filepath)
    return simulate(path, inputs, cfg, rng)


def simulate_data(
    data: Dict,
    cfg: SimConfig | None = None,
    rng: random.Random | None = None,
) -> SimulationResult:
    """
    Backend / UI integration entry point.

    Accepts an already-decoded profile dict.
    No file system usage.
    """
    path, inputs = parse_profile(data)
    return simulate(path, inputs, cfg, rng)


# ---------------------------------------------------------------------------
# Report generation
# ---------------------------------------------------------------------------

def generate_report(result: SimulationResult) -> str:
    """Format the simulation result as a human-readable text report."""
    o = result.outcomes
    r = result.regret
    p = result.point_of_no_return

    lines = [
        "FUTURE REGRET REPORT",
        "=" * 58,
        "",
        f"  Life Path           : {result.life_path.value}",
        f"  Archetype           : {result.archetype}",
        "",
        "  Outcomes:",
    ]

    for label, score in (
        ("Financial", o.financial),
        ("Social", o.social),
        ("Health", o.health),
        ("Mental Stability", o.mental_stability),
    ):
        lines.append(f"    {label:17s} : {score.score:3d}  ({score.severity})")

    lines += [
        "",
        f"  Regret              : {r.score} ({r.intensity})",
        f"  Primary Cause       : {r.primary_cause}",
        f"  Top Decisions       : {', '.join(r.top_decisions)}",
        "",
        f"  Point of No Return  : year {p.year} ({p.recovery_difficulty})",
        f"    {p.warning}",
        "",
        f"  Today               : {result.daily_micro_regret}",
        f"  Share               : {result.shareable_text}",
        "",
        "  5 Years:",
        f"    {result.narratives.year5}",
        "",
        "  10 Years:",
        f"    {result.narratives.year10}",
        "",
        "  30 Years:",
        f"    {result.narratives.year30}",
        "",
        "  At 60:",
        f"    {result.narratives.final_reflection}",
        "",
        "=" * 58,
    ]
    return "\n".join(lines)
