"""Evaluator strategies: the local scoring kernel and the Gemini-backed evaluator.

Both return an AnalysisResult for a (resume, job description) pair. The
remote one reports every failure as RemoteEvaluationError so the caller
can fall back to the local kernel.
"""

import logging
import math
from abc import ABC, abstractmethod

from pydantic import ValidationError

from config import ScoringThresholds, settings
from models.schemas.analysis_result import AnalysisResult, RequirementEvaluation
from models.schemas.remote_evaluation import RemoteEvaluationPayload
from services import gemini_client, prompt_builder
from services.aggregator import (
    GAP_MAX_SCORE,
    STRENGTH_SCORE,
    TIER_EXPLANATIONS,
    aggregate,
    classification_label,
    tier_for_score,
)
from services.errors import RemoteEvaluationError
from services.evidence_index import NOT_MENTIONED, build_sentence_index
from services.requirement_evaluator import clamp_score, evaluate_requirement, status_for_score
from services.requirement_extractor import extract_requirements
from services.tokenizer import stem_set, tokenize

logger = logging.getLogger(__name__)


def analyze_local(
    resume_text: str,
    job_description: str,
    thresholds: ScoringThresholds | None = None,
) -> AnalysisResult:
    """Run the local kernel end to end.

    Token sets and the sentence index are built fresh for this call, so
    concurrent runs share nothing but the constant tables.
    Raises NoRequirementsError when no requirement is evaluable.
    """
    thresholds = thresholds or settings.thresholds
    requirements = extract_requirements(job_description)
    resume_stems = stem_set(tokenize(resume_text))
    sentence_index = build_sentence_index(resume_text)

    evaluations: list[RequirementEvaluation] = []
    for requirement in requirements:
        evaluation = evaluate_requirement(requirement, resume_stems, sentence_index, thresholds)
        if evaluation is not None:
            evaluations.append(evaluation)

    logger.info(
        "Local kernel: %d requirements extracted, %d evaluated",
        len(requirements), len(evaluations),
    )
    return aggregate(evaluations, thresholds)


class Evaluator(ABC):
    """Strategy interface for producing an AnalysisResult."""

    name: str = ""

    @abstractmethod
    async def evaluate(self, resume_text: str, job_description: str) -> AnalysisResult:
        """Compare a resume against a job description."""


class LocalEvaluator(Evaluator):
    name = "local"

    def __init__(self, thresholds: ScoringThresholds | None = None) -> None:
        self.thresholds = thresholds

    async def evaluate(self, resume_text: str, job_description: str) -> AnalysisResult:
        return analyze_local(resume_text, job_description, self.thresholds)


class GeminiEvaluator(Evaluator):
    """Asks Gemini for a structured itemized comparison."""

    name = "remote"

    def __init__(
        self,
        thresholds: ScoringThresholds | None = None,
        timeout: float | None = None,
    ) -> None:
        self.thresholds = thresholds or settings.thresholds
        self.timeout = timeout if timeout is not None else settings.remote_timeout_seconds

    async def evaluate(self, resume_text: str, job_description: str) -> AnalysisResult:
        prompt = prompt_builder.build_evaluation_prompt(resume_text, job_description)
        data = await gemini_client.generate_json(prompt, timeout=self.timeout)
        try:
            payload = RemoteEvaluationPayload.model_validate(data)
        except ValidationError as e:
            raise RemoteEvaluationError(f"Malformed remote evaluation: {e}") from e
        return _payload_to_result(payload, self.thresholds)


def _to_score(value: float) -> int:
    return clamp_score(math.floor(value + 0.5))


def _payload_to_result(
    payload: RemoteEvaluationPayload, thresholds: ScoringThresholds
) -> AnalysisResult:
    """Map the remote JSON onto the local result shape.

    Only the remote scores, evidence and summary are trusted. Status, tier,
    label, strengths and gaps are recomputed from the scores with the local
    thresholds, so a remote "Yes" on a 5% item becomes "No".
    """
    evaluations: list[RequirementEvaluation] = []
    for item in payload.itemized:
        score = _to_score(item.match_percent)
        evaluations.append(RequirementEvaluation(
            requirement=item.requirement,
            status=status_for_score(score, thresholds),
            score=score,
            evidence=item.justification or item.evidence or NOT_MENTIONED,
        ))
    overall = _to_score(payload.overall_score)
    tier = tier_for_score(overall, thresholds)

    return AnalysisResult(
        overall_score=overall,
        tier=tier,
        classification=classification_label(tier, thresholds),
        explanation=payload.summary or TIER_EXPLANATIONS[tier],
        evaluations=evaluations,
        strengths=[ev.requirement for ev in evaluations if ev.score == STRENGTH_SCORE],
        gaps=[ev.requirement for ev in evaluations if ev.score <= GAP_MAX_SCORE],
    )


def get_evaluator(mode: str | None = None) -> Evaluator:
    """Select an evaluator by name ('local' or 'remote')."""
    mode = (mode or settings.evaluator_mode).lower()
    if mode == "local":
        return LocalEvaluator()
    if mode == "remote":
        return GeminiEvaluator()
    raise ValueError(f"Unknown evaluator mode: {mode}")
