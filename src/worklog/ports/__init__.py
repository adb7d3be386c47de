"""Ports - interfaces/protocols for external dependencies."""

from .entry_store import EntryStore
from .llm_service import LLMError, LLMService

__all__ = [
    "EntryStore",
    "LLMError",
    "LLMService",
]
