import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from services import gemini_client
from services.errors import RemoteEvaluationError


def _client_returning(text: str) -> MagicMock:
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(return_value=MagicMock(text=text))
    return client


class TestExtractJsonText:
    def test_fenced(self):
        assert gemini_client._extract_json_text('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_surrounding_prose(self):
        assert gemini_client._extract_json_text('Here you go: {"a": 1} thanks') == '{"a": 1}'

    def test_no_object(self):
        with pytest.raises(RemoteEvaluationError):
            gemini_client._extract_json_text("[1, 2, 3]")


@pytest.mark.asyncio
async def test_generate_json_parses_reply():
    client = _client_returning('```json\n{"overall_score": 50}\n```')
    with patch("services.gemini_client.get_client", return_value=client):
        data = await gemini_client.generate_json("prompt", timeout=5)
    assert data == {"overall_score": 50}
    client.aio.models.generate_content.assert_awaited_once()


@pytest.mark.asyncio
async def test_generate_json_not_configured():
    with patch("services.gemini_client.get_client", return_value=None):
        with pytest.raises(RemoteEvaluationError):
            await gemini_client.generate_json("prompt")


@pytest.mark.asyncio
async def test_generate_json_invalid_json():
    with patch("services.gemini_client.get_client", return_value=_client_returning("{not json}")):
        with pytest.raises(RemoteEvaluationError):
            await gemini_client.generate_json("prompt", timeout=5)


@pytest.mark.asyncio
async def test_generate_json_api_error():
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(side_effect=RuntimeError("quota exceeded"))
    with patch("services.gemini_client.get_client", return_value=client):
        with pytest.raises(RemoteEvaluationError, match="quota exceeded"):
            await gemini_client.generate_json("prompt", timeout=5)


@pytest.mark.asyncio
async def test_generate_json_timeout():
    async def slow(**kwargs):
        await asyncio.sleep(1)

    client = MagicMock()
    client.aio.models.generate_content = slow
    with patch("services.gemini_client.get_client", return_value=client):
        with pytest.raises(RemoteEvaluationError, match="timed out"):
            await gemini_client.generate_json("prompt", timeout=0.01)


def test_get_client_without_key(monkeypatch):
    monkeypatch.setattr(gemini_client.settings, "gemini_api_key", "")
    assert gemini_client.get_client() is None
