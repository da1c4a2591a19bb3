"""Internal Pydantic contracts shared by the analysis services."""

from models.schemas.analysis_context import AnalysisContext
from models.schemas.analysis_result import AnalysisResult, RequirementEvaluation
from models.schemas.evidence import EvidenceSentence
from models.schemas.remote_evaluation import RemoteEvaluationPayload, RemoteItem
from models.schemas.tracked_job import TrackedJob

__all__ = [
    "AnalysisContext",
    "AnalysisResult",
    "RequirementEvaluation",
    "EvidenceSentence",
    "RemoteEvaluationPayload",
    "RemoteItem",
    "TrackedJob",
]
