"""Combine requirement evaluations into an overall score and classification."""

import logging
from collections.abc import Sequence

from config import ScoringThresholds
from models.schemas.analysis_result import AnalysisResult, MatchTier, RequirementEvaluation
from services.errors import NoRequirementsError
from services.requirement_evaluator import DEFAULT_THRESHOLDS, rounded_ratio

logger = logging.getLogger(__name__)

STRENGTH_SCORE = 100
GAP_MAX_SCORE = 20

TIER_EXPLANATIONS: dict[str, str] = {
    "Strong": (
        "Candidate demonstrates most critical technical and soft-skill requirements. "
        "High interview potential if salary/location fit."
    ),
    "Moderate": (
        "Candidate has core transferable skills but may lack some specific tools or "
        "domain experience required by the job description."
    ),
    "Weak": (
        "Candidate is missing several critical requirements or key qualifications. "
        "Interview chances may be low unless the role is flexible."
    ),
}


def tier_for_score(
    score: int, thresholds: ScoringThresholds = DEFAULT_THRESHOLDS
) -> MatchTier:
    if score >= thresholds.strong_cutoff:
        return "Strong"
    if score >= thresholds.moderate_cutoff:
        return "Moderate"
    return "Weak"


def classification_label(
    tier: MatchTier, thresholds: ScoringThresholds = DEFAULT_THRESHOLDS
) -> str:
    """Display label with the score range, e.g. 'Moderate Match (40-70%)'."""
    if tier == "Strong":
        return f"Strong Match (>{thresholds.strong_cutoff - 1}%)"
    if tier == "Moderate":
        return (
            f"Moderate Match ({thresholds.moderate_cutoff}-"
            f"{thresholds.strong_cutoff - 1}%)"
        )
    return f"Weak Match (<{thresholds.moderate_cutoff}%)"


def aggregate(
    evaluations: Sequence[RequirementEvaluation],
    thresholds: ScoringThresholds = DEFAULT_THRESHOLDS,
) -> AnalysisResult:
    """Build the overall result from per-requirement evaluations.

    Raises NoRequirementsError when there is nothing to aggregate.
    """
    if not evaluations:
        raise NoRequirementsError()

    overall = rounded_ratio(sum(ev.score for ev in evaluations), len(evaluations))
    tier = tier_for_score(overall, thresholds)
    logger.debug("Aggregated %d evaluations: %d (%s)", len(evaluations), overall, tier)

    return AnalysisResult(
        overall_score=overall,
        tier=tier,
        classification=classification_label(tier, thresholds),
        explanation=TIER_EXPLANATIONS[tier],
        evaluations=list(evaluations),
        strengths=[ev.requirement for ev in evaluations if ev.score == STRENGTH_SCORE],
        gaps=[ev.requirement for ev in evaluations if ev.score <= GAP_MAX_SCORE],
    )
