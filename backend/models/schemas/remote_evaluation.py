"""Shape of the structured JSON returned by the remote evaluator."""

from pydantic import BaseModel, Field, field_validator

from models.schemas.analysis_result import MatchStatus


class RemoteItem(BaseModel):
    requirement: str = Field(min_length=1)
    status: MatchStatus
    match_percent: float = Field(ge=0, le=100)
    justification: str = ""
    evidence: str = ""


class RemoteEvaluationPayload(BaseModel):
    """Validated remote response. Anything that fails here triggers the local fallback."""
    overall_score: float = Field(ge=0, le=100)
    classification: str = ""
    itemized: list[RemoteItem]
    strengths: list[str] = []
    gaps: list[str] = []
    summary: str = ""

    @field_validator("itemized")
    @classmethod
    def _require_items(cls, items: list[RemoteItem]) -> list[RemoteItem]:
        if not items:
            raise ValueError("itemized list is empty")
        return items
