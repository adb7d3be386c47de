"""Shared wiring layer between the CLI and the interactive shell.

Each get_*/build_* function resolves config into a ready-to-use component.
"""

from .adapters.claude_cli import ClaudeCLIService
from .adapters.gemini_api import GeminiAPIService
from .adapters.memory_store import InMemoryEntryStore
from .clients import AnalysisClient, SuggestionClient
from .config import WORKLOG_HOME, Config
from .ports.llm_service import LLMService
from .session import AnalysisSession


def get_llm(config: Config) -> LLMService:
    """LLM adapter for the configured backend."""
    if config.llm_backend == "claude":
        return ClaudeCLIService(
            cwd=WORKLOG_HOME if WORKLOG_HOME.exists() else None,
            model=config.claude_model or None,
            timeout=config.request_timeout,
        )
    return GeminiAPIService(
        api_key=config.gemini_api_key,
        model=config.suggest_model,
        timeout=config.request_timeout,
    )


def get_store(config: Config) -> InMemoryEntryStore:
    """Fresh session store, seeded unless sample entries are disabled."""
    if config.sample_entries:
        return InMemoryEntryStore.with_sample_entries()
    return InMemoryEntryStore()


def _model_for(config: Config, gemini_model: str) -> str | None:
    # Claude model choice is owned by the adapter
    if config.llm_backend == "claude":
        return None
    return gemini_model


def build_suggestion_client(config: Config, llm: LLMService | None = None) -> SuggestionClient:
    return SuggestionClient(
        llm or get_llm(config),
        model=_model_for(config, config.suggest_model),
        language=config.tag_language,
    )


def build_analysis_client(config: Config, llm: LLMService | None = None) -> AnalysisClient:
    return AnalysisClient(llm or get_llm(config), model=_model_for(config, config.analysis_model))


def build_session(config: Config, store: InMemoryEntryStore, llm: LLMService | None = None) -> AnalysisSession:
    return AnalysisSession(
        store,
        build_analysis_client(config, llm),
        guard_stale=config.guard_stale_results,
    )
