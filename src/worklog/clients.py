"""Fail-soft LLM clients for tag suggestion and range analysis.

Both clients degrade to an empty result on any failure: the error is logged
and never reaches the caller, so a missing suggestion or analysis cannot
block editing.
"""

import logging

from .core.entries import AnalysisResult, Entry
from .ports.llm_service import LLMError, LLMService
from .prompts import (
    ANALYSIS_SCHEMA,
    MAX_SUGGESTED_TAGS,
    SUGGEST_SCHEMA,
    analysis_prompt,
    suggest_prompt,
)

logger = logging.getLogger(__name__)


class SuggestionClient:
    """Suggest up to five tags for free-text content."""

    def __init__(self, llm: LLMService, model: str | None = None, language: str = "Korean"):
        self.llm = llm
        self.model = model
        self.language = language

    def suggest(self, content: str) -> list[str]:
        if not content.strip():
            return []

        try:
            payload = self.llm.generate_json(
                suggest_prompt(content, self.language), SUGGEST_SCHEMA, model=self.model
            )
            return _normalize_tags(payload)
        except (LLMError, ValueError) as e:
            logger.error(f"Error suggesting tags: {e}")
            return []


class AnalysisClient:
    """Summarize a pre-filtered list of entries over a date range."""

    def __init__(self, llm: LLMService, model: str | None = None):
        self.llm = llm
        self.model = model

    def analyze(self, entries: list[Entry], start_date: str, end_date: str) -> AnalysisResult | None:
        if not entries:
            return None

        logger.info(f"Analyzing {len(entries)} entries from {start_date} to {end_date}")
        try:
            payload = self.llm.generate_json(
                analysis_prompt(entries, start_date, end_date), ANALYSIS_SCHEMA, model=self.model
            )
            return AnalysisResult.from_dict(payload)
        except (LLMError, ValueError) as e:
            logger.error(f"Error analyzing entries: {e}")
            return None


def _normalize_tags(payload) -> list[str]:
    """Pull a clean, bounded tag list out of a {"tags": [...]} payload."""
    if not isinstance(payload, dict):
        raise ValueError(f"Expected an object with 'tags', got {type(payload).__name__}")
    raw = payload.get("tags") or []
    if not isinstance(raw, list):
        raise ValueError("'tags' must be a list")

    tags: list[str] = []
    for item in raw:
        if not isinstance(item, str):
            continue
        tag = item.strip()
        if tag and tag not in tags:
            tags.append(tag)
    return tags[:MAX_SUGGESTED_TAGS]
