"""Claude CLI adapter - subprocess wrapper for Claude Code."""

import json
import logging
import re
import subprocess
from pathlib import Path
from typing import Any

from ..ports.llm_service import LLMError

logger = logging.getLogger(__name__)

_JSON_FENCE_RE = re.compile(r"```(?:json)?\s*\n?(.*?)\n?```", re.DOTALL)


class ClaudeCLIService:
    """
    Claude CLI subprocess adapter.

    Implements LLMService protocol. The CLI has no structured-output mode,
    so the schema is appended to the prompt and the reply is parsed as JSON.
    """

    def __init__(
        self,
        cwd: Path | str | None = None,
        model: str | None = None,
        timeout: int = 300,  # 5 minutes default
    ):
        self.cwd = Path(cwd) if cwd else None
        self.model = model
        self.timeout = timeout

    def generate(self, prompt: str, model: str | None = None) -> str:
        """Generate text from a prompt. Returns complete response."""
        cmd = ["claude", "-p"]
        model = model or self.model
        if model:
            cmd.extend(["--model", model])

        try:
            proc = subprocess.run(
                cmd,
                input=prompt,
                cwd=self.cwd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError:
            raise LLMError("Claude CLI not found. Install with: npm install -g @anthropic-ai/claude-code")
        except subprocess.TimeoutExpired:
            raise LLMError(f"Claude CLI timed out after {self.timeout}s")
        except OSError as e:
            raise LLMError(f"Claude CLI could not be started: {e}") from e

        if proc.returncode != 0:
            logger.error(f"Claude CLI failed: {proc.stderr}")
            raise LLMError(f"Claude CLI failed: {proc.stderr[:500]}")
        return proc.stdout

    def generate_json(self, prompt: str, schema: dict[str, Any], *, model: str | None = None) -> Any:
        """Generate a JSON value matching schema. Raises LLMError on failure."""
        full_prompt = (
            f"{prompt}\n\n"
            "Respond with JSON only, no prose, matching this schema:\n"
            f"{json.dumps(schema, indent=2)}"
        )
        text = strip_json_fences(self.generate(full_prompt, model=model))
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise LLMError(f"Claude output was not valid JSON: {text[:200]}") from e


def strip_json_fences(text: str) -> str:
    """Strip markdown code fences (```json ... ```) from LLM JSON output."""
    text = text.strip()
    match = _JSON_FENCE_RE.search(text)
    if match:
        return match.group(1).strip()
    start = text.find("{")
    end = text.rfind("}")
    if start != -1 and end > start:
        return text[start : end + 1]
    return text
