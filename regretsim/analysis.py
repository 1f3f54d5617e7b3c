"""
Behavioral-analysis collaborator: request contract, response parsing, client.

The analysis itself is produced by a remote service backed by a language
model. This module only builds the request, calls the service once (no
retries) and validates what comes back. Failures surface as AnalysisError;
unparseable model output is replaced by FALLBACK_ANALYSIS.
"""

import json
import logging
import os
import re
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

import httpx

from regretsim.models import DecisionInputs, LifePath, Outcomes, RegretData, INPUT_FIELDS

logger = logging.getLogger(__name__)


TIMELINE_HORIZONS = (0, 5, 10, 30)

RESPONSE_FIELDS = (
    "behavioral_interpretation",
    "regret_archetype",
    "counterfactual_analysis",
    "micro_regret_forecast",
    "systemic_insight",
)

ARCHETYPE_FIELDS = ("name", "description", "dominant_source")


class AnalysisError(RuntimeError):
    """The analysis request failed; message is safe to show to the user."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


# ---------------------------------------------------------------------------
# Response model
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RegretArchetype:
    name: str
    description: str
    dominant_source: str


@dataclass(frozen=True)
class BehavioralAnalysis:
    behavioral_interpretation: str
    regret_archetype: RegretArchetype
    counterfactual_analysis: str
    micro_regret_forecast: str
    systemic_insight: str

    @classmethod
    def from_dict(cls, data: Any) -> "BehavioralAnalysis":
        """Validate a decoded response body. Raises ValueError on any mismatch."""
        if not isinstance(data, dict):
            raise ValueError("Analysis payload must be a JSON object")

        missing = [f for f in RESPONSE_FIELDS if f not in data]
        if missing:
            raise ValueError(f"Analysis payload missing fields: {missing}")

        archetype = data["regret_archetype"]
        if not isinstance(archetype, dict):
            raise ValueError("regret_archetype must be an object")
        for key in ARCHETYPE_FIELDS:
            if not isinstance(archetype.get(key), str):
                raise ValueError(f"regret_archetype.{key} must be a string")

        for key in RESPONSE_FIELDS:
            if key != "regret_archetype" and not isinstance(data[key], str):
                raise ValueError(f"{key} must be a string")

        return cls(
            behavioral_interpretation=data["behavioral_interpretation"],
            regret_archetype=RegretArchetype(**{k: archetype[k] for k in ARCHETYPE_FIELDS}),
            counterfactual_analysis=data["counterfactual_analysis"],
            micro_regret_forecast=data["micro_regret_forecast"],
            systemic_insight=data["systemic_insight"],
        )

    def to_dict(self) -> Dict:
        return asdict(self)


FALLBACK_ANALYSIS = BehavioralAnalysis(
    behavioral_interpretation=(
        "Analysis temporarily unavailable. The behavioral patterns in this "
        "configuration suggest complex interdependencies that require deeper examination."
    ),
    regret_archetype=RegretArchetype(
        name="The Uncertain Navigator",
        description="Patterns indicate unresolved directional tension.",
        dominant_source="decision variance",
    ),
    counterfactual_analysis=(
        "Variable interdependence makes isolated changes less impactful than systemic adjustments."
    ),
    micro_regret_forecast=(
        "Patterns tend to compound in ways that remain invisible until they don't."
    ),
    systemic_insight=(
        "Systems resist change proportionally to the depth of their integration."
    ),
)


_JSON_BLOCK = re.compile(r"\{[\s\S]*\}")


def parse_model_output(content: Optional[str]) -> BehavioralAnalysis:
    """
    Extract the JSON object from a raw model reply.

    Models sometimes wrap the object in prose or code fences, so the widest
    {...} span is parsed. Anything unusable yields FALLBACK_ANALYSIS.
    """
    match = _JSON_BLOCK.search(content or "")
    if match is None:
        logger.warning("No JSON object in model output; using fallback analysis")
        return FALLBACK_ANALYSIS

    try:
        return BehavioralAnalysis.from_dict(json.loads(match.group(0)))
    except ValueError as e:
        logger.warning("Unusable model output (%s); using fallback analysis", e)
        return FALLBACK_ANALYSIS


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------

def build_analysis_request(
    path: LifePath,
    inputs: DecisionInputs,
    horizon_years: int,
    outcomes: Outcomes,
    regret: RegretData,
) -> Dict[str, Any]:
    """The JSON body the analysis service expects."""
    if horizon_years not in TIMELINE_HORIZONS:
        raise ValueError(f"Timeline horizon must be one of {TIMELINE_HORIZONS}, got {horizon_years}")

    return {
        "life_path": LifePath.parse(path).value,
        "sliders": {f: inputs[f] for f in INPUT_FIELDS},
        "timeline_horizon": f"{horizon_years} Years",
        "regret_score": regret.score,
        "life_outcomes": {
            "financial": outcomes.financial.score,
            "social": outcomes.social.score,
            "health": outcomes.health.score,
            "mental_stability": outcomes.mental_stability.score,
        },
        "primary_regret_causes": list(regret.top_decisions[:2]),
    }


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AnalysisClientConfig:
    """Where the analysis service lives. timeout=None means wait indefinitely."""

    url: str
    api_key: str = ""
    timeout: Optional[float] = None

    @classmethod
    def from_env(cls) -> "AnalysisClientConfig":
        url = os.environ.get("REGRETSIM_ANALYSIS_URL")
        if not url:
            raise ValueError("REGRETSIM_ANALYSIS_URL is not configured")
        timeout = os.environ.get("REGRETSIM_ANALYSIS_TIMEOUT")
        return cls(
            url=url,
            api_key=os.environ.get("REGRETSIM_ANALYSIS_KEY", ""),
            timeout=float(timeout) if timeout else None,
        )


def _error_message(response: httpx.Response) -> str:
    """Server-supplied `error` field, or a status-derived default."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"Analysis failed: {response.status_code}"


class BehavioralAnalysisClient:
    """
    Single round-trip client for the behavioral-analysis service.

    Async so the caller can cancel it (e.g. asyncio.wait_for or task.cancel()).
    Pass `transport` to substitute an httpx transport, as the tests do.
    """

    def __init__(
        self,
        config: AnalysisClientConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.config.api_key:
            headers["Authorization"] = f"Bearer {self.config.api_key}"
        return headers

    async def fetch(self, request: Dict[str, Any]) -> BehavioralAnalysis:
        """POST the request once. Raises AnalysisError on any failure."""
        logger.info(
            "Requesting behavioral analysis for %s at %s",
            request.get("life_path"),
            request.get("timeline_horizon"),
        )

        async with httpx.AsyncClient(
            transport=self._transport,
            timeout=self.config.timeout,
        ) as client:
            try:
                response = await client.post(
                    self.config.url,
                    json=request,
                    headers=self._headers(),
                )
            except httpx.HTTPError as e:
                logger.error("Behavioral analysis request failed: %s", e)
                raise AnalysisError(f"Analysis request failed: {e}") from e

        if not response.is_success:
            message = _error_message(response)
            logger.warning("Behavioral analysis returned %d: %s", response.status_code, message)
            raise AnalysisError(message, status_code=response.status_code)

        try:
            return BehavioralAnalysis.from_dict(response.json())
        except ValueError as e:
            raise AnalysisError(f"Malformed analysis response: {e}", response.status_code) from e

    async def fetch_or_none(self, request: Dict[str, Any]) -> Optional[BehavioralAnalysis]:
        """fetch(), but failures become None so a UI can show its empty state."""
        try:
            return await self.fetch(request)
        except AnalysisError as e:
            logger.warning("Behavioral analysis unavailable: %s", e)
            return None
