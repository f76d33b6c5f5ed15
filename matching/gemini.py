import logging
import requests

from config import get_settings

logger = logging.getLogger(__name__)

GENERATION_CONFIG = {
    "temperature": 0.3,
    "topK": 40,
    "topP": 0.95,
    "maxOutputTokens": 8192,
}


class LLMError(Exception):
    """The Gemini endpoint could not be reached or returned no usable text."""


def call_gemini(prompt: str, session=None) -> str:
    """Send one prompt to Gemini generateContent and return the reply text."""
    settings = get_settings()
    if not settings.gemini_api_key:
        raise LLMError("Gemini API key is not configured")

    payload = {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": GENERATION_CONFIG,
    }
    http = session or requests
    logger.info("Calling Gemini API with prompt: %s...", prompt[:200])

    try:
        response = http.post(
            settings.gemini_api_url,
            params={"key": settings.gemini_api_key},
            headers={"Content-Type": "application/json"},
            json=payload,
            timeout=settings.http_timeout,
        )
    except requests.exceptions.RequestException as e:
        raise LLMError(f"Gemini request failed: {e}") from e

    if not response.ok:
        logger.error("Gemini API error response: %s", response.text[:500])
        raise LLMError(f"API error: {response.status_code} {response.reason}")

    try:
        data = response.json()
    except ValueError as e:
        raise LLMError("Invalid response format from Gemini API") from e

    if isinstance(data, dict) and data.get("error"):
        error = data["error"]
        message = error.get("message") if isinstance(error, dict) else str(error)
        raise LLMError(message or "Failed to get response from Gemini")

    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        logger.error("Unexpected Gemini API response format: %s", data)
        raise LLMError("Invalid response format from Gemini API") from e
    if not text:
        raise LLMError("Invalid response format from Gemini API")

    logger.info("Gemini API response received successfully")
    return text
