"""Gemini API adapter - HTTP client for schema-constrained generation."""

import json
import logging
from typing import Any

import requests

from ..ports.llm_service import LLMError

logger = logging.getLogger(__name__)

API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.5-flash"


class GeminiAPIService:
    """
    Gemini REST adapter.

    Implements LLMService protocol. Sends the prompt with a response schema
    and application/json mime type, and returns the parsed JSON payload.
    No business logic - just I/O.
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        timeout: int = 120,
        session: requests.Session | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self._session = session or requests.Session()

    def _endpoint(self, model: str) -> str:
        return f"{API_BASE}/models/{model}:generateContent"

    def generate_json(self, prompt: str, schema: dict[str, Any], *, model: str | None = None) -> Any:
        """Generate a JSON value matching schema. Raises LLMError on failure."""
        if not self.api_key.strip():
            raise LLMError("Gemini API key not configured. Set GEMINI_API_KEY or gemini_api_key in worklog.conf")

        model = model or self.model
        payload = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": schema,
            },
        }

        logger.debug(f"Calling Gemini model={model}")
        try:
            resp = self._session.post(
                self._endpoint(model),
                params={"key": self.api_key.strip()},
                json=payload,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise LLMError(f"Gemini request failed: {e}") from e

        if resp.status_code != 200:
            raise LLMError(f"Gemini request failed ({resp.status_code}): {resp.text[:500]}")

        try:
            data = resp.json()
        except ValueError as e:
            raise LLMError("Gemini returned non-JSON response") from e

        text = _extract_text(data)
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise LLMError(f"Gemini output was not valid JSON: {text[:200]}") from e


def _extract_text(data) -> str:
    """Pull the first non-empty text part out of a generateContent response."""
    if not isinstance(data, dict):
        raise LLMError(f"Gemini response must be an object, got {type(data).__name__}")
    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        raise LLMError("Gemini response missing candidates")
    candidate = candidates[0]
    if not isinstance(candidate, dict):
        raise LLMError("Gemini candidate is not an object")
    content = candidate.get("content")
    if not isinstance(content, dict):
        raise LLMError("Gemini candidate missing content")
    parts = content.get("parts")
    if not isinstance(parts, list):
        raise LLMError("Gemini content missing parts")
    for part in parts:
        if not isinstance(part, dict):
            raise LLMError("Gemini content part is not an object")
        text = part.get("text")
        if isinstance(text, str) and text.strip():
            return text
    raise LLMError("Gemini response did not include text output")
