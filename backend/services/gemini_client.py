"""Google Gemini API wrapper with error handling."""

import asyncio
import json
import logging

from google import genai
from google.genai import types

from config import settings
from services.errors import RemoteEvaluationError

logger = logging.getLogger(__name__)

_client: genai.Client | None = None


def get_client() -> genai.Client | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - Gemini features disabled")
        return None
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


def _extract_json_text(text: str) -> str:
    """Strip markdown fences and surrounding prose from a model reply."""
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()

    first, last = text.find("{"), text.rfind("}")
    if first == -1 or last < first:
        raise RemoteEvaluationError("No JSON object in Gemini response")
    return text[first:last + 1]


async def generate_json(prompt: str, timeout: float | None = None) -> dict:
    """Send a prompt to Gemini and parse the JSON response.

    The call is bounded by ``timeout`` seconds. Every failure (missing key,
    timeout, API error, unparseable reply) is raised as RemoteEvaluationError.
    """
    client = get_client()
    if client is None:
        raise RemoteEvaluationError("Gemini is not configured")

    timeout = timeout if timeout is not None else settings.remote_timeout_seconds
    try:
        response = await asyncio.wait_for(
            client.aio.models.generate_content(
                model=settings.gemini_model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    temperature=0.3,
                    max_output_tokens=4096,
                ),
            ),
            timeout=timeout,
        )
    except asyncio.TimeoutError as e:
        logger.error("Gemini request timed out after %.1fs", timeout)
        raise RemoteEvaluationError("Gemini request timed out") from e
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        raise RemoteEvaluationError(f"Gemini API error: {e}") from e

    text = response.text or ""
    try:
        data = json.loads(_extract_json_text(text))
    except json.JSONDecodeError as e:
        logger.error("Failed to parse Gemini response as JSON: %s", e)
        raise RemoteEvaluationError("Gemini response is not valid JSON") from e

    if not isinstance(data, dict):
        raise RemoteEvaluationError("Gemini response is not a JSON object")
    return data
