"""Exception hierarchy for the analysis service layer.

Every error here is recoverable: the API layer turns it into a
user-facing message, and RemoteEvaluationError is absorbed by the
local-kernel fallback before it reaches a caller.
"""


class AnalysisError(Exception):
    """Base exception for service layer errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InputValidationError(AnalysisError):
    """Resume or job description too short to analyze."""


class NoRequirementsError(AnalysisError):
    """No evaluable requirement could be derived from the job description."""

    def __init__(self, message: str = (
        "Could not extract clear requirements from the job description. "
        "Please ensure it includes bullet points or sentences."
    )) -> None:
        super().__init__(message)


class RemoteEvaluationError(AnalysisError):
    """The remote evaluator failed, timed out or returned malformed data."""


class TextExtractionError(AnalysisError):
    """An uploaded file could not be turned into text."""


class DocumentWriteError(AnalysisError):
    """A generated document could not be rendered to the requested format."""


class TrackedJobNotFoundError(AnalysisError):
    """Raised when a tracked job id is unknown."""
