"""Configuration management for Worklog."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

WORKLOG_HOME = Path(os.environ.get("WORKLOG_HOME", Path.home() / "worklog"))
CONFIG_FILE = WORKLOG_HOME / "config" / "worklog.conf"
PREFS_FILE = WORKLOG_HOME / "config" / "prefs.json"

LLM_BACKENDS = ("gemini", "claude")


@dataclass
class Config:
    """Worklog configuration."""

    llm_backend: str = "gemini"
    gemini_api_key: str = ""
    suggest_model: str = "gemini-2.5-flash"
    analysis_model: str = "gemini-2.5-pro"
    claude_model: str = ""
    request_timeout: int = 120
    tag_language: str = "Korean"
    guard_stale_results: bool = False
    sample_entries: bool = True


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from unquoted values."""
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from worklog.conf, then fill the API key from env."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if config_file.exists():
        for line in config_file.read_text().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if "=" not in line:
                continue

            key, _, value = line.partition("=")
            key = key.strip().lower()
            value = _unquote(value.strip())

            match key:
                case "llm_backend":
                    if value.lower() in LLM_BACKENDS:
                        config.llm_backend = value.lower()
                    else:
                        logger.warning(f"Unknown LLM_BACKEND {value!r}, using {config.llm_backend}")
                case "gemini_api_key":
                    config.gemini_api_key = value
                case "suggest_model":
                    config.suggest_model = value
                case "analysis_model":
                    config.analysis_model = value
                case "claude_model":
                    config.claude_model = value
                case "request_timeout":
                    try:
                        config.request_timeout = int(value)
                    except ValueError:
                        logger.warning(f"Invalid REQUEST_TIMEOUT {value!r}, using {config.request_timeout}")
                case "tag_language":
                    config.tag_language = value
                case "guard_stale_results":
                    config.guard_stale_results = _parse_bool(value)
                case "sample_entries":
                    config.sample_entries = _parse_bool(value)

    if not config.gemini_api_key:
        config.gemini_api_key = os.environ.get("GEMINI_API_KEY") or os.environ.get("API_KEY", "")

    return config
