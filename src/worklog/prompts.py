"""Prompt templates and response schemas for the LLM calls."""

from .core.entries import Entry

MAX_SUGGESTED_TAGS = 5

SUGGEST_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "tags": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
        }
    },
}

ANALYSIS_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "summary": {"type": "STRING"},
        "topics": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "topic": {"type": "STRING"},
                    "frequency": {"type": "INTEGER"},
                },
                "required": ["topic", "frequency"],
            },
        },
        "trend": {"type": "STRING"},
    },
    "required": ["summary", "topics", "trend"],
}


def suggest_prompt(content: str, language: str = "Korean") -> str:
    """Prompt asking for up to five short tags for one entry."""
    return (
        "Analyze the following diary / work-log entry and suggest up to "
        f"{MAX_SUGGESTED_TAGS} highly relevant tags in {language}. "
        "Each tag should be a one- or two-word keyword or main topic.\n"
        f'Content: "{content}"'
    )


def render_entries(entries: list[Entry]) -> str:
    """Entries as Date/Content/Tags blocks separated by rules."""
    return "\n\n---\n\n".join(
        f"Date: {e.date}\nContent: {e.content}\nTags: {', '.join(e.tags)}" for e in entries
    )


def analysis_prompt(entries: list[Entry], start_date: str, end_date: str) -> str:
    """Prompt asking for summary, topics and trend over a date range."""
    return f"""You are an AI assistant analyzing a user's work logs and diary entries. Based on the following entries from {start_date} to {end_date}, provide a detailed analysis.

Entries:
{render_entries(entries)}

Your analysis should include:
1. "summary": A concise paragraph summarizing the main activities, themes, and potential insights.
2. "topics": An array of objects for the top 5-7 topics, each with a "topic" (a key theme or subject) and its "frequency" (how many entries it was mentioned or alluded to).
3. "trend": A brief sentence describing any noticeable trend or shift in focus over the period."""
