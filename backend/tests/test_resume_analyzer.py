from unittest.mock import AsyncMock, patch

import pytest
from pydantic import ValidationError

from conftest import QA_JD, QA_RESUME, SAMPLE_JD, SAMPLE_RESUME
from services.errors import InputValidationError, NoRequirementsError, RemoteEvaluationError
from services.evaluators import GeminiEvaluator, LocalEvaluator
from services.resume_analyzer import (
    JD_TOO_SHORT,
    RESUME_TOO_SHORT,
    analyze,
    build_context,
    validate_inputs,
)


class TestValidateInputs:
    def test_empty_resume(self):
        with pytest.raises(InputValidationError) as exc:
            validate_inputs("", SAMPLE_JD)
        assert exc.value.message == RESUME_TOO_SHORT

    def test_short_job_description(self):
        with pytest.raises(InputValidationError) as exc:
            validate_inputs(SAMPLE_RESUME, "Quality officer needed")
        assert exc.value.message == JD_TOO_SHORT

    def test_whitespace_does_not_count(self):
        with pytest.raises(InputValidationError):
            validate_inputs(" " * 100 + "abc", SAMPLE_JD)

    def test_custom_minimum(self):
        validate_inputs("short resume", "short jd", min_chars=5)


@pytest.mark.asyncio
async def test_analyze_rejects_before_extraction():
    with patch("services.evaluators.extract_requirements") as mock_extract:
        with pytest.raises(InputValidationError):
            await analyze("", "", LocalEvaluator())
    mock_extract.assert_not_called()


@pytest.mark.asyncio
async def test_analyze_local():
    response = await analyze(SAMPLE_RESUME, SAMPLE_JD, LocalEvaluator())
    assert response.scoring_method == "local"
    assert response.degraded is False
    assert response.overall_score == 73
    assert response.evaluations[0].evidence.startswith("Led internal audits")


@pytest.mark.asyncio
async def test_analyze_qa_sample():
    response = await analyze(QA_RESUME, QA_JD, LocalEvaluator())
    requirements = [ev.requirement for ev in response.evaluations]
    assert requirements[0] == "Maintain ISO 17025 documentation and records"
    assert "Knowledge of Python scripting is an advantage" in response.gaps
    assert 0 <= response.overall_score <= 100


@pytest.mark.asyncio
async def test_analyze_no_requirements():
    jd = "Chef. Cook. Baker. Waiter. Cleaner. Driver. Cashier. Guard. Clerk."
    with pytest.raises(NoRequirementsError):
        await analyze(SAMPLE_RESUME, jd, LocalEvaluator())


@pytest.mark.asyncio
async def test_remote_failure_falls_back_to_local():
    failing = AsyncMock(side_effect=RemoteEvaluationError("Gemini request timed out"))
    with patch("services.gemini_client.generate_json", new=failing):
        response = await analyze(SAMPLE_RESUME, SAMPLE_JD, GeminiEvaluator())
    assert response.scoring_method == "local"
    assert response.degraded is True
    assert response.overall_score == 73


@pytest.mark.asyncio
async def test_remote_malformed_falls_back_to_local():
    bad = AsyncMock(return_value={"overall_score": "high"})
    with patch("services.gemini_client.generate_json", new=bad):
        response = await analyze(SAMPLE_RESUME, SAMPLE_JD, GeminiEvaluator())
    assert response.degraded is True


@pytest.mark.asyncio
async def test_remote_without_key_falls_back(monkeypatch):
    from services import gemini_client
    monkeypatch.setattr(gemini_client.settings, "gemini_api_key", "")
    response = await analyze(SAMPLE_RESUME, SAMPLE_JD, GeminiEvaluator())
    assert response.degraded is True


@pytest.mark.asyncio
async def test_remote_success():
    reply = {
        "overall_score": 64,
        "itemized": [
            {"requirement": "ISO 9001 audits", "status": "Yes", "match_percent": 100},
            {"requirement": "Communication", "status": "Partially", "match_percent": 28},
        ],
    }
    with patch("services.gemini_client.generate_json", new=AsyncMock(return_value=reply)):
        response = await analyze(SAMPLE_RESUME, SAMPLE_JD, GeminiEvaluator())
    assert response.scoring_method == "remote"
    assert response.degraded is False
    assert response.tier == "Moderate"
    assert len(response.evaluations) == 2


@pytest.mark.asyncio
async def test_build_context_is_frozen_and_fresh():
    first = await build_context(SAMPLE_RESUME, SAMPLE_JD, LocalEvaluator())
    second = await build_context(SAMPLE_RESUME, SAMPLE_JD, LocalEvaluator())
    assert first is not second
    assert first.result.overall_score == second.result.overall_score == 73
    assert first.scoring_method == "local"
    with pytest.raises(ValidationError):
        first.resume_text = "changed"
