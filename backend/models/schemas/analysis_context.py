"""Per-run analysis context handed to document generation."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from models.schemas.analysis_result import AnalysisResult


class AnalysisContext(BaseModel):
    """Inputs and result of a single analysis run.

    Created once per run and frozen; a new run builds a new context
    instead of mutating this one.
    """
    resume_text: str
    job_description: str
    result: AnalysisResult
    scoring_method: str = "local"  # local | remote
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = {"frozen": True}
