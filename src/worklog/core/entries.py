"""Pure entry domain logic - no I/O dependencies."""

from dataclasses import dataclass, field
from datetime import date

from .tags import unique_tags


@dataclass
class Entry:
    """One day's diary/work-log record."""

    date: str
    content: str = ""
    tags: list[str] = field(default_factory=list)

    def copy(self) -> "Entry":
        return Entry(date=self.date, content=self.content, tags=list(self.tags))

    def to_dict(self) -> dict:
        return {"date": self.date, "content": self.content, "tags": list(self.tags)}

    @classmethod
    def from_dict(cls, data: dict) -> "Entry":
        return cls(
            date=data["date"],
            content=data.get("content", ""),
            tags=unique_tags(data.get("tags", [])),
        )


@dataclass(frozen=True)
class Topic:
    """A topic label and how many entries touched it."""

    topic: str
    frequency: int

    @classmethod
    def from_dict(cls, data: dict) -> "Topic":
        if not isinstance(data, dict):
            raise ValueError(f"Topic must be an object, got {type(data).__name__}")
        if "topic" not in data or "frequency" not in data:
            raise ValueError("Topic is missing 'topic' or 'frequency'")

        frequency = data["frequency"]
        # bool is an int subclass
        if isinstance(frequency, bool) or not isinstance(frequency, int):
            raise ValueError(f"Topic frequency must be an integer, got {frequency!r}")
        if frequency < 0:
            raise ValueError(f"Topic frequency must be non-negative, got {frequency}")

        return cls(topic=str(data["topic"]), frequency=frequency)


@dataclass(frozen=True)
class AnalysisResult:
    """Summary, topic breakdown and trend for a range of entries."""

    summary: str
    topics: tuple[Topic, ...]
    trend: str

    def to_dict(self) -> dict:
        return {
            "summary": self.summary,
            "topics": [{"topic": t.topic, "frequency": t.frequency} for t in self.topics],
            "trend": self.trend,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AnalysisResult":
        """Build from a model payload. Raises ValueError on shape mismatch."""
        if not isinstance(data, dict):
            raise ValueError(f"Analysis must be an object, got {type(data).__name__}")

        missing = [k for k in ("summary", "topics", "trend") if k not in data]
        if missing:
            raise ValueError(f"Analysis is missing required fields: {', '.join(missing)}")

        if not isinstance(data["topics"], list):
            raise ValueError("Analysis 'topics' must be a list")

        return cls(
            summary=str(data["summary"]),
            topics=tuple(Topic.from_dict(t) for t in data["topics"]),
            trend=str(data["trend"]),
        )


def filter_by_range(entries: list[Entry], start_date: str, end_date: str) -> list[Entry]:
    """Entries with start_date <= date <= end_date.

    ISO dates sort lexicographically in chronological order, so plain
    string comparison is enough.
    """
    return [e for e in entries if start_date <= e.date <= end_date]


def sort_by_date(entries: list[Entry]) -> list[Entry]:
    """Entries in chronological order."""
    return sorted(entries, key=lambda e: e.date)


def default_range(entries: list[Entry], today: date | None = None) -> tuple[str, str]:
    """Earliest and latest entry dates, or today twice if there are none."""
    dates = sorted(e.date for e in entries)
    if not dates:
        today_str = (today or date.today()).isoformat()
        return today_str, today_str
    return dates[0], dates[-1]
