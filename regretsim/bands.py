"""
Severity and intensity tiers.

Fixed process-wide tables with their lookups. This module imports nothing
from the package, so the result records can derive tiers at module level.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SeverityBands:
    """Inclusive upper bounds for outcome severity tiers (anything above is elite)."""

    critical: int = 20
    unstable: int = 40
    balanced: int = 60
    strong: int = 80


@dataclass(frozen=True)
class IntensityBands:
    """Inclusive upper bounds for regret intensity tiers (anything above is existential)."""

    low: int = 25
    medium: int = 50
    heavy: int = 75


SEVERITY_BANDS = SeverityBands()
INTENSITY_BANDS = IntensityBands()


def severity_for(score: int, bands: SeverityBands = SEVERITY_BANDS) -> str:
    if score <= bands.critical:
        return "critical"
    if score <= bands.unstable:
        return "unstable"
    if score <= bands.balanced:
        return "balanced"
    if score <= bands.strong:
        return "strong"
    return "elite"


def intensity_for(score: int, bands: IntensityBands = INTENSITY_BANDS) -> str:
    if score <= bands.low:
        return "low"
    if score <= bands.medium:
        return "medium"
    if score <= bands.heavy:
        return "heavy"
    return "existential"
