"""Per-requirement evaluations and the aggregated analysis result."""

from typing import Literal

from pydantic import BaseModel, Field

MatchStatus = Literal["Yes", "Partially", "No"]
MatchTier = Literal["Strong", "Moderate", "Weak"]


class RequirementEvaluation(BaseModel):
    """Score for one extracted requirement.

    ``requirement`` is the extractor's text verbatim.
    """
    requirement: str
    status: MatchStatus
    score: int = Field(ge=0, le=100)
    evidence: str


class AnalysisResult(BaseModel):
    """Aggregated outcome of one resume/JD comparison."""
    overall_score: int = Field(default=0, ge=0, le=100)
    tier: MatchTier = "Weak"
    classification: str = ""  # display label, e.g. "Strong Match (>70%)"
    explanation: str = ""
    evaluations: list[RequirementEvaluation] = []
    strengths: list[str] = []  # requirements scoring 100
    gaps: list[str] = []  # requirements scoring 20 or less
