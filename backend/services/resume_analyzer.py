"""Analysis orchestrator.

Pipeline:
1. Input validation (both texts need enough content)
2. Remote evaluation through Gemini, when configured
3. Local kernel: requirement extraction, stem overlap, evidence, aggregation
   (always used when the remote evaluator is off or fails)
"""

import logging

from config import settings
from models.responses import AnalysisResponse
from models.schemas.analysis_context import AnalysisContext
from services.errors import InputValidationError, RemoteEvaluationError
from services.evaluators import Evaluator, LocalEvaluator, get_evaluator

logger = logging.getLogger(__name__)

RESUME_TOO_SHORT = "Please provide enough resume text (at least a few lines)."
JD_TOO_SHORT = "Please paste a complete job description."


def validate_inputs(
    resume_text: str | None,
    job_description: str | None,
    min_chars: int | None = None,
) -> None:
    """Reject inputs too short to analyze, before any extraction happens."""
    min_chars = settings.min_input_chars if min_chars is None else min_chars
    if len((resume_text or "").strip()) < min_chars:
        raise InputValidationError(RESUME_TOO_SHORT)
    if len((job_description or "").strip()) < min_chars:
        raise InputValidationError(JD_TOO_SHORT)


async def analyze(
    resume_text: str,
    job_description: str,
    evaluator: Evaluator | None = None,
) -> AnalysisResponse:
    """Validate, evaluate, and fall back to the local kernel on remote failure.

    Raises InputValidationError or NoRequirementsError; both are meant to be
    shown to the user.
    """
    validate_inputs(resume_text, job_description)
    evaluator = evaluator or get_evaluator()

    if not isinstance(evaluator, LocalEvaluator):
        try:
            result = await evaluator.evaluate(resume_text, job_description)
            return AnalysisResponse(**result.model_dump(), scoring_method=evaluator.name)
        except RemoteEvaluationError as e:
            logger.warning("Remote evaluation unavailable, using local kernel: %s", e)
            local = await LocalEvaluator().evaluate(resume_text, job_description)
            return AnalysisResponse(**local.model_dump(), scoring_method="local", degraded=True)

    result = await evaluator.evaluate(resume_text, job_description)
    return AnalysisResponse(**result.model_dump(), scoring_method="local")


async def build_context(
    resume_text: str,
    job_description: str,
    evaluator: Evaluator | None = None,
) -> AnalysisContext:
    """Run a fresh analysis and freeze it for document generation."""
    response = await analyze(resume_text, job_description, evaluator)
    return AnalysisContext(
        resume_text=resume_text,
        job_description=job_description,
        result=response,
        scoring_method=response.scoring_method,
    )
