"""Tests for the shared wiring layer."""

from unittest.mock import MagicMock

from worklog.adapters.claude_cli import ClaudeCLIService
from worklog.adapters.gemini_api import GeminiAPIService
from worklog.config import Config
from worklog.workflows import (
    build_analysis_client,
    build_session,
    build_suggestion_client,
    get_llm,
    get_store,
)


class TestGetLLM:
    def test_gemini_by_default(self):
        llm = get_llm(Config(gemini_api_key="k", request_timeout=42))
        assert isinstance(llm, GeminiAPIService)
        assert llm.api_key == "k"
        assert llm.timeout == 42

    def test_claude_backend(self):
        llm = get_llm(Config(llm_backend="claude", claude_model="haiku", request_timeout=42))
        assert isinstance(llm, ClaudeCLIService)
        assert llm.model == "haiku"
        assert llm.timeout == 42


class TestGetStore:
    def test_seeded_by_default(self):
        assert len(get_store(Config())) == 5

    def test_empty_when_disabled(self):
        assert len(get_store(Config(sample_entries=False))) == 0


class TestBuildClients:
    def test_suggestion_client_uses_suggest_model(self):
        llm = MagicMock()
        client = build_suggestion_client(Config(suggest_model="flash", tag_language="English"), llm)
        assert client.llm is llm
        assert client.model == "flash"
        assert client.language == "English"

    def test_analysis_client_uses_analysis_model(self):
        client = build_analysis_client(Config(analysis_model="pro"), MagicMock())
        assert client.model == "pro"

    def test_claude_backend_leaves_model_to_adapter(self):
        config = Config(llm_backend="claude")
        assert build_suggestion_client(config, MagicMock()).model is None
        assert build_analysis_client(config, MagicMock()).model is None

    def test_session_guard_from_config(self):
        config = Config(guard_stale_results=True)
        session = build_session(config, get_store(config), MagicMock())
        assert session.guard_stale is True
