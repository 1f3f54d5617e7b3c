"""
Text generation: timeline narratives, daily micro-regret, shareable sentence.

Narratives are deterministic templates. The micro-regret and shareable
generators draw from an injectable random.Random so callers (and tests) can
pin the selection; the module never seeds or owns a generator itself.
"""

import math
import random
from typing import Dict, Tuple

from regretsim.config import SimConfig, DEFAULT_CONFIG
from regretsim.models import (
    DecisionInputs,
    LifePath,
    Narratives,
    Outcomes,
    RegretData,
)


PATH_DESCRIPTORS: Dict[LifePath, str] = {
    LifePath.SAFE: "comfort-seeking",
    LifePath.RISKY: "high-stakes",
    LifePath.CHAOTIC: "unpredictable",
    LifePath.DISCIPLINED: "structured",
    LifePath.LAZY: "path-of-least-resistance",
    LifePath.OBSESSIVE: "all-consuming",
}


# ---------------------------------------------------------------------------
# Daily micro-regret
# ---------------------------------------------------------------------------

MICRO_REGRET_TEMPLATES: Dict[LifePath, Tuple[str, str, str]] = {
    LifePath.SAFE: (
        "Your comfort-seeking pattern today increases long-term stagnation risk by {pct}%.",
        "Another day of playing it safe. Future you wonders what could have been.",
        "Security feels good now. But at what cost to your potential?",
    ),
    LifePath.RISKY: (
        "Your impulsive tendencies today elevate burnout probability by {pct}%.",
        "High risk, high reward - or high regret. Today added to the gamble.",
        "The adrenaline fades. The consequences remain.",
    ),
    LifePath.CHAOTIC: (
        "Your scattered focus today compounds decision fatigue by {pct}%.",
        "Chaos breeds more chaos. Today was no exception.",
        "Without direction, every path leads to the same regret.",
    ),
    LifePath.DISCIPLINED: (
        "Your rigid routine today marginally increases isolation risk by {pct}%.",
        "Structure serves you well - until it becomes a prison.",
        "Discipline is a tool. Don't let it become your identity.",
    ),
    LifePath.LAZY: (
        "Your avoidance pattern today increases long-term regret risk by {pct}%.",
        "Rest is necessary. But this isn't rest - it's retreat.",
        "Every day of inaction is a vote for your future regrets.",
    ),
    LifePath.OBSESSIVE: (
        "Your overwork pattern today depletes resilience reserves by {pct}%.",
        "Achievement at what cost? Your relationships silently suffer.",
        "The goal moves further away the harder you chase it.",
    ),
}

SHAREABLE_TEMPLATES: Tuple[str, str, str] = (
    "At {score}% regret, I learned that {cause} shapes more than we admit.",
    "The {archetype} in me carries {score}% regret - mostly from {cause}.",
    "{score}% of my simulated future regrets stem from one thing: {cause}.",
)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def generate_daily_micro_regret(
    path: LifePath,
    rng: random.Random | None = None,
    cfg: SimConfig | None = None,
) -> str:
    """Pick one of the path's three micro-regret lines; the percentage is drawn first."""
    if cfg is None:
        cfg = DEFAULT_CONFIG
    if rng is None:
        rng = random.Random()

    path = LifePath.parse(path)
    low, span = cfg.narrative.micro_regret_ranges[path]
    pct = _round_half_up(low + rng.random() * span)
    template = rng.choice(MICRO_REGRET_TEMPLATES[path])
    return template.format(pct=pct)


def generate_shareable_text(
    archetype: str,
    regret_score: int,
    primary_cause: str,
    rng: random.Random | None = None,
) -> str:
    """One-sentence summary for sharing."""
    if rng is None:
        rng = random.Random()

    template = rng.choice(SHAREABLE_TEMPLATES)
    return template.format(
        score=regret_score,
        archetype=archetype,
        cause=primary_cause.lower(),
    )


# ---------------------------------------------------------------------------
# Timeline narratives
# ---------------------------------------------------------------------------

def _pick(condition: bool, yes: str, no: str) -> str:
    return yes if condition else no


def _optimistic(
    journey: str,
    inputs: DecisionInputs,
    outcomes: Outcomes,
    regret: RegretData,
    archetype: str,
    cfg: SimConfig,
) -> Narratives:
    fin = outcomes.financial.score
    soc = outcomes.social.score
    hlt = outcomes.health.score
    mnt = outcomes.mental_stability.score
    cause = regret.primary_cause.lower()
    n = cfg.narrative

    year5 = (
        f"Five years into your {journey} journey, the early signs are cautiously optimistic. "
        f"Your financial situation shows {_pick(fin >= n.early_good, 'steady growth', 'some strain')}, "
        f"while relationships {_pick(soc >= n.early_good, 'remain a source of strength', 'require more attention than you anticipated')}. "
        f"The choices you have made are beginning to compound. "
        f"{_pick(inputs.career_focus >= n.career_momentum, 'Career momentum is building', 'Career stagnation is becoming noticeable')}. "
        f"Health-wise, {_pick(hlt >= n.early_good, 'your body still forgives your choices', 'warning signs are emerging')}. "
        f"The {archetype} pattern is taking shape."
    )

    year10 = (
        f"A decade in, the {journey} approach has yielded {_pick(fin >= n.late_good, 'substantial returns', 'modest gains')}. "
        f"Your network {_pick(soc >= n.late_good, 'has become a genuine source of support', 'exists but lacks depth')}. "
        f"Mental clarity {_pick(mnt >= n.late_good, 'remains sharp, though wisdom comes with harder questions', 'wavers between confidence and doubt')}. "
        f"The {cause} still lingers in quiet moments. "
        f"You recognize yourself as {archetype}, and you are learning to accept what that means."
    )

    year30 = (
        f"Three decades have transformed the {journey} choice into a full life story. "
        f"Financial security {_pick(fin >= n.late_good, 'allows for genuine freedom', 'is adequate but not abundant')}. "
        f"Relationships {_pick(soc >= n.late_good, 'have deepened into something irreplaceable', 'provide companionship if not profound connection')}. "
        f"Health {_pick(hlt >= n.late_good, 'has been maintained through consistent effort', 'requires careful management')}. "
        f"As {archetype}, you have made peace with the roads not taken. "
        f"Regret sits at {regret.score}% - present, but not defining. "
        f"The {cause} remains your biggest what-if, but you have learned that every path has its ghosts."
    )

    final_reflection = (
        f"I am sitting here at 60, looking at old photographs, trying to find the moment when I became who I am. "
        f"The {journey} choice seemed so natural back then - was it courage or just momentum? "
        f"I think about {cause} sometimes. Not with pain anymore, just wonder. "
        f"What would that other life have looked like? But then I look at what I have: "
        f"{_pick(fin >= n.early_good, 'the security I built', 'enough to get by')}, "
        f"{_pick(soc >= n.early_good, 'the faces that light up when I walk in', 'a few people who still check in')}, "
        f"{_pick(hlt >= n.early_good, 'a body that still cooperates most days', 'health that requires attention')}. "
        f"The {archetype} in me made this. I made this. "
        f"And on the good days, I can almost believe it was worth it."
    )

    return Narratives(year5=year5, year10=year10, year30=year30, final_reflection=final_reflection)


def _pessimistic(
    journey: str,
    outcomes: Outcomes,
    regret: RegretData,
    archetype: str,
    cfg: SimConfig,
) -> Narratives:
    fin = outcomes.financial.score
    soc = outcomes.social.score
    hlt = outcomes.health.score
    cause = regret.primary_cause.lower()
    n = cfg.narrative

    year5 = (
        f"Five years down the {journey} path, cracks are forming. "
        f"Financial stress {_pick(fin < n.early_poor, 'keeps you up at night', 'is a constant background hum')}. "
        f"Relationships {_pick(soc < n.early_poor, 'have deteriorated significantly', 'feel strained')}. "
        f"Your {cause} is already casting shadows. "
        f"The body {_pick(hlt < n.early_poor, 'is sending urgent signals you keep ignoring', 'shows early signs of neglect')}. "
        f"The {archetype} archetype is crystallizing."
    )

    year10 = (
        f"Ten years of {journey} choices have accumulated into something you barely recognize. "
        f"Financial recovery {_pick(fin < n.late_poor, 'seems increasingly distant', 'is possible but requires dramatic change')}. "
        f"Social connections {_pick(soc < n.late_poor, 'have thinned to near-nothing', 'exist in a shallow, transactional state')}. "
        f"The {cause} has metastasized into daily anxiety. "
        f"Health {_pick(hlt < n.late_poor, 'is now a serious concern that can no longer be ignored', 'requires immediate attention')}. "
        f"The {archetype} identity feels less like a choice and more like a cage."
    )

    year30 = (
        f"Thirty years of {journey} living have written a story you struggle to recognize as your own. "
        f"Financial reality {_pick(fin < n.late_poor, 'has hardened into permanent limitation', 'is a constant source of stress')}. "
        f"Loneliness {_pick(soc < n.late_poor, 'has become the background noise of existence', 'visits more often than you would like')}. "
        f"Physical decline {_pick(hlt < n.late_poor, 'accelerates, a daily reminder of accumulated neglect', 'is setting in faster than expected')}. "
        f"The {archetype} label feels like a verdict. "
        f"At {regret.score}% regret, every quiet moment brings the same thought: "
        f"the {cause} changed everything, and you saw it happening, and you let it happen anyway."
    )

    final_reflection = (
        f"Sixty years old. The {journey} life has run its course. "
        f"I try not to think about the {cause} - that door closed so long ago - "
        f"but it is there in every silence, every empty room. "
        f"I used to think I had time. Time to fix things. Time to try again. Time to become someone different. "
        f"But time does not wait, and regret does not fade - it just gets quieter, more patient. "
        f"The {archetype} I became - was it inevitable? Or did I choose it, one small surrender at a time? "
        f"At {regret.score}%, I have learned that some questions do not have answers. Just echoes. "
        f"And the quiet sound of a life unlived."
    )

    return Narratives(year5=year5, year10=year10, year30=year30, final_reflection=final_reflection)


def generate_narratives(
    path: LifePath,
    inputs: DecisionInputs,
    outcomes: Outcomes,
    regret: RegretData,
    archetype: str,
    cfg: SimConfig | None = None,
) -> Narratives:
    """Year 5 / 10 / 30 projections plus the reflection at 60."""
    if cfg is None:
        cfg = DEFAULT_CONFIG

    journey = PATH_DESCRIPTORS[LifePath.parse(path)]

    if outcomes.mean >= cfg.narrative.optimistic_mean:
        return _optimistic(journey, inputs, outcomes, regret, archetype, cfg)
    return _pessimistic(journey, outcomes, regret, archetype, cfg)
