"""Shared test configuration, sample texts and pytest markers."""

import pytest

from models.schemas.analysis_context import AnalysisContext
from models.schemas.analysis_result import AnalysisResult, RequirementEvaluation

SAMPLE_RESUME = (
    "Led internal audits and maintained documentation per ISO 9001 for 3 years. "
    "Excellent communicator."
)

SAMPLE_JD = (
    "- Experience with ISO 9001 audit and documentation\n"
    "- Strong communication skills"
)

QA_RESUME = """Quality Officer, ABC Testing Laboratory (2019 - present)
Maintained ISO 17025 records and procedures for the chemistry section.
Coordinated proficiency testing rounds and reviewed calibration certificates.
Trained new analysts on laboratory safety.
"""

QA_JD = """QA Officer
- Maintain ISO 17025 documentation and records
- Coordinate proficiency testing and calibration schedules
- Prepare monthly KPI reports for management
- Knowledge of Python scripting is an advantage
"""


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: needs optional system libraries (Pango for PDF output)"
    )


@pytest.fixture
def sample_resume() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def sample_jd() -> str:
    return SAMPLE_JD


def make_evaluation(requirement: str, score: int, status: str = "Yes",
                    evidence: str = "Not mentioned in text.") -> RequirementEvaluation:
    return RequirementEvaluation(
        requirement=requirement, status=status, score=score, evidence=evidence
    )


def make_context(score: int, tier: str, evaluations=None,
                 resume_text: str = QA_RESUME, job_description: str = QA_JD,
                 strengths=None, gaps=None) -> AnalysisContext:
    result = AnalysisResult(
        overall_score=score,
        tier=tier,
        classification=f"{tier} Match",
        explanation=f"{tier} explanation",
        evaluations=evaluations or [],
        strengths=strengths or [],
        gaps=gaps or [],
    )
    return AnalysisContext(
        resume_text=resume_text, job_description=job_description, result=result
    )
