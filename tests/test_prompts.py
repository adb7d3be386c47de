"""Tests for prompt rendering."""

from worklog.core.entries import Entry
from worklog.prompts import analysis_prompt, render_entries, suggest_prompt


class TestRenderEntries:
    def test_blocks_separated_by_rules(self):
        text = render_entries(
            [
                Entry("2024-07-20", "Kickoff", ["planning", "react"]),
                Entry("2024-07-21", "Calendar UI", []),
            ]
        )
        assert text == (
            "Date: 2024-07-20\nContent: Kickoff\nTags: planning, react"
            "\n\n---\n\n"
            "Date: 2024-07-21\nContent: Calendar UI\nTags: "
        )


class TestPrompts:
    def test_suggest_prompt(self):
        prompt = suggest_prompt("Fixed the build", "Korean")
        assert '"Fixed the build"' in prompt
        assert "up to 5" in prompt
        assert "Korean" in prompt

    def test_analysis_prompt_mentions_fields(self, sample_entries):
        prompt = analysis_prompt(sample_entries, "2024-07-20", "2024-07-24")
        for field in ('"summary"', '"topics"', '"trend"'):
            assert field in prompt
        assert "from 2024-07-20 to 2024-07-24" in prompt
