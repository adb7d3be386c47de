"""LLM service interface."""

from typing import Any, Protocol


class LLMError(Exception):
    """Raised when an LLM call fails for any reason."""


class LLMService(Protocol):
    """Interface for schema-constrained LLM generation."""

    def generate_json(self, prompt: str, schema: dict[str, Any], *, model: str | None = None) -> Any:
        """Generate a JSON value matching schema. Raises LLMError on failure."""
        ...
