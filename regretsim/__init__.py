"""
Future Regret Simulator — Deterministic Life-Path Scoring Engine

Maps a life path and six decision inputs to outcome scores, a regret score,
a point-of-no-return estimate, an archetype and templated narrative text.

Architecture:
    config          — All weights, multipliers, bands and thresholds (single source of truth)
    models          — Life paths, decision inputs and immutable result records
    scoring         — Outcome scores (Financial, Social, Health, Mental Stability)
    regret          — Regret score and ranked regret causes
    horizon         — Point-of-no-return estimate
    archetype       — Ordered archetype decision list
    narrative       — Timeline narratives, micro-regret and shareable text
    counterfactual  — Alternate-reality recomputation and sweeps
    batch           — Vectorised scoring of many profiles
    analysis        — Behavioral-analysis service contract and client
    pipeline        — Orchestration: validate → score → classify → narrate → report

Public API:
    simulate(path, inputs)   → single run
    simulate_data(data)      → UI / backend mode
    simulate_file(filepath)  → CLI mode
    generate_report(result)  → formatted report
"""

from regretsim.models import DecisionInputs, InvalidInputError, LifePath, SimulationResult
from regretsim.pipeline import generate_report, simulate, simulate_data, simulate_file

__version__ = "1.0.0"

__all__ = [
    "DecisionInputs",
    "InvalidInputError",
    "LifePath",
    "SimulationResult",
    "generate_report",
    "simulate",
    "simulate_data",
    "simulate_file",
]
