from models.schemas.analysis_result import AnalysisResult


class AnalysisResponse(AnalysisResult):
    scoring_method: str = "local"  # local | remote
    degraded: bool = False  # remote evaluator requested but the local kernel answered
