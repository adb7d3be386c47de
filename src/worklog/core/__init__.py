"""Functional core - pure business logic with no I/O."""

from .entries import (
    AnalysisResult,
    Entry,
    Topic,
    default_range,
    filter_by_range,
    sort_by_date,
)
from .tags import add_tag, merge_suggested, remove_tag, unique_tags
from .calendar import DayCell, format_month, month_grid, shift_month

__all__ = [
    # Entries
    "Entry",
    "Topic",
    "AnalysisResult",
    "filter_by_range",
    "sort_by_date",
    "default_range",
    # Tags
    "add_tag",
    "remove_tag",
    "merge_suggested",
    "unique_tags",
    # Calendar
    "DayCell",
    "month_grid",
    "format_month",
    "shift_month",
]
