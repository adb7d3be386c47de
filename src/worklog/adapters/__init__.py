"""Adapters - I/O implementations of ports."""

from .memory_store import InMemoryEntryStore
from .gemini_api import GeminiAPIService
from .claude_cli import ClaudeCLIService

__all__ = [
    "InMemoryEntryStore",
    "GeminiAPIService",
    "ClaudeCLIService",
]
