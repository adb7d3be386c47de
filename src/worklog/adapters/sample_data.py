"""Seed entries shown on first launch."""

from ..core.entries import Entry

SAMPLE_ENTRIES = [
    Entry(
        date="2024-07-20",
        content=(
            "Started working on the new dashboard project. Focused on setting up the initial "
            "file structure and component planning. AI analysis features will be the core challenge."
        ),
        tags=["project-kickoff", "react", "planning"],
    ),
    Entry(
        date="2024-07-21",
        content=(
            "Developed the Calendar and Entry Editor components. Implemented state management "
            "for daily entries. The UI is coming together with TailwindCSS."
        ),
        tags=["frontend", "react", "ui-dev"],
    ),
    Entry(
        date="2024-07-22",
        content=(
            "Integrated Gemini API for tag suggestions. The AI is surprisingly accurate at "
            "identifying keywords. Also drafted the prompt for the main analysis feature."
        ),
        tags=["ai", "gemini-api", "nlp"],
    ),
    Entry(
        date="2024-07-23",
        content=(
            "Worked on the analysis dashboard visualization. Used Recharts for a bar chart to "
            "show topic frequency. This will be a key part of the user experience."
        ),
        tags=["data-viz", "recharts", "dashboard"],
    ),
    Entry(
        date="2024-07-24",
        content=(
            "Refined the overall UI/UX, focusing on a clean, dark-mode theme. Added loading states "
            "and empty states to improve user feedback. The dashboard project is making good progress."
        ),
        tags=["ui-ux", "design", "refinement"],
    ),
]
