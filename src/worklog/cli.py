"""Worklog CLI - AI diary and work-log analysis."""

import asyncio
import json
import logging
import sys
from datetime import date, timedelta

import click

from .config import load_config
from .core.calendar import format_month
from .core.entries import AnalysisResult, Entry, default_range
from .editor import EntryEditor
from .preferences import THEMES, Preferences
from .session import AnalysisSession, AnalysisState
from .workflows import build_session, build_suggestion_client, get_llm, get_store


def _parse_date(ctx, param, value: str | None) -> str | None:
    """click callback: accept YYYY-MM-DD, return it normalized."""
    if value is None:
        return None
    try:
        return date.fromisoformat(value).isoformat()
    except ValueError:
        raise click.BadParameter(f"expected YYYY-MM-DD, got {value!r}")


def _parse_month(ctx, param, value: str | None) -> tuple[int, int] | None:
    if value is None:
        return None
    try:
        year, month = value.split("-")
        return date(int(year), int(month), 1).year, int(month)
    except ValueError:
        raise click.BadParameter(f"expected YYYY-MM, got {value!r}")


def _format_entry(entry: Entry | None, entry_date: str) -> str:
    if entry is None:
        return f"### {entry_date}\n\n(no entry)"
    tags = " ".join(f"#{t}" for t in entry.tags) or "(no tags)"
    return f"### {entry.date}\n\n{entry.content or '(empty)'}\n\n{tags}"


def _format_analysis(result: AnalysisResult, width: int = 30) -> str:
    """Summary, trend and a text bar chart of topic frequencies."""
    lines = ["## Summary", "", result.summary, "", "## Trend", "", result.trend]
    if result.topics:
        lines += ["", "## Topics", ""]
        label_width = max(len(t.topic) for t in result.topics)
        peak = max(t.frequency for t in result.topics) or 1
        for t in result.topics:
            bar = "█" * max(1, round(t.frequency / peak * width)) if t.frequency else ""
            lines.append(f"{t.topic:<{label_width}}  {bar} {t.frequency}")
    return "\n".join(lines)


def _show_session(session: AnalysisSession) -> None:
    """Render the analysis panel for the session's current state."""
    if session.state is AnalysisState.LOADING:
        click.echo(f"AI is analyzing your entries ({session.start_date} to {session.end_date})...")
    elif session.state is AnalysisState.SUCCEEDED and session.result:
        click.echo(_format_analysis(session.result))
    elif session.state is AnalysisState.EMPTY:
        click.echo(f"No analysis available for {session.start_date} to {session.end_date}.")
    else:
        click.echo('Select a date range and run "analyze" to see AI-powered insights.')


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """Worklog - AI diary and work-log analysis."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


@main.command()
@click.option("--month", "month", callback=_parse_month, default=None, help="Month to show (YYYY-MM)")
@click.option("--select", "selected", callback=_parse_date, default=None, help="Highlight a date")
def calendar(month: tuple[int, int] | None, selected: str | None):
    """Show a month with entry days marked."""
    store = get_store(load_config())
    today = date.today()
    year, mon = month or (today.year, today.month)
    click.echo(format_month(year, mon, store.list_dates(), selected=selected, today=today))
    click.echo("\n* entry  [] selected  . today")


@main.command()
@click.argument("entry_date", callback=_parse_date)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def show(entry_date: str, as_json: bool):
    """Show the entry for a date."""
    entry = get_store(load_config()).get(entry_date)
    if as_json:
        click.echo(json.dumps(entry.to_dict() if entry else None, indent=2, ensure_ascii=False))
    else:
        click.echo(_format_entry(entry, entry_date))


@main.command()
@click.argument("text")
def suggest(text: str):
    """Suggest tags for a piece of text."""
    client = build_suggestion_client(load_config())
    tags = client.suggest(text)
    if not tags:
        click.echo("No suggestions.")
        return
    for tag in tags:
        click.echo(f"#{tag}")


@main.command()
@click.option("--start", "start_date", callback=_parse_date, default=None, help="First day (YYYY-MM-DD)")
@click.option("--end", "end_date", callback=_parse_date, default=None, help="Last day (YYYY-MM-DD)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def analyze(start_date: str | None, end_date: str | None, as_json: bool):
    """Summarize entries in a date range."""
    if start_date and end_date and start_date > end_date:
        click.echo("Error: --start must not be after --end", err=True)
        sys.exit(1)

    config = load_config()
    session = build_session(config, get_store(config))

    asyncio.run(session.request(start_date, end_date))

    if as_json:
        click.echo(json.dumps(session.result.to_dict() if session.result else None, indent=2, ensure_ascii=False))
    else:
        _show_session(session)


@main.command()
@click.argument("choice", required=False, type=click.Choice([*THEMES, "toggle"]))
def theme(choice: str | None):
    """Show or change the light/dark theme."""
    prefs = Preferences.load()
    if choice == "toggle":
        prefs.toggle()
    elif choice:
        prefs.set_theme(choice)
    click.echo(prefs.theme)


SHELL_HELP = """Commands:
  date YYYY-MM-DD     Select a day (also: today, next, prev)
  cal [YYYY-MM]       Show the calendar
  show                Show the draft for the selected day
  write TEXT          Replace the draft content
  tag TAG / untag TAG Add or remove a tag
  suggest             Merge AI-suggested tags into the draft
  save                Save the draft
  analyze [START END] Analyze a date range (default: all entries)
  theme [light|dark]  Set or toggle the theme
  quit                Exit"""


class Shell:
    """Interactive session over one in-memory store."""

    def __init__(self, config=None):
        self.config = config or load_config()
        self.store = get_store(self.config)
        llm = get_llm(self.config)
        self.suggestions = build_suggestion_client(self.config, llm)
        self.session = build_session(self.config, self.store, llm)
        self.session.subscribe(_show_session)
        self.prefs = Preferences.load()
        self.editor = EntryEditor(self.store, date.today().isoformat(), self.suggestions)

    def select(self, entry_date: str) -> None:
        if self.editor.is_dirty and not click.confirm(f"Discard unsaved changes to {self.editor.date}?"):
            return
        self.editor = EntryEditor(self.store, entry_date, self.suggestions)
        self.show()

    def show(self) -> None:
        e = self.editor
        click.echo(_format_entry(Entry(e.date, e.content, e.tags), e.date))
        if e.is_dirty:
            click.echo("(unsaved)")

    def handle(self, line: str) -> bool:
        """Run one command line. Returns False when the shell should exit."""
        head, _, rest = line.strip().partition(" ")
        if not head:
            return True
        cmd, rest = head.lower(), rest.strip()
        args = rest.split()

        match cmd:
            case "quit" | "exit":
                return False
            case "help" | "?":
                click.echo(SHELL_HELP)
            case "date":
                self._select_command(args)
            case "today":
                self.select(date.today().isoformat())
            case "next" | "prev":
                step = 1 if cmd == "next" else -1
                self.select((date.fromisoformat(self.editor.date) + timedelta(days=step)).isoformat())
            case "cal":
                self._calendar_command(args)
            case "show":
                self.show()
            case "write":
                self.editor.content = rest
                self.show()
            case "tag":
                self.editor.add_tag(rest)
                self.show()
            case "untag":
                self.editor.remove_tag(rest)
                self.show()
            case "suggest":
                if not self.editor.content.strip():
                    click.echo("Write something first.")
                    return True
                click.echo("Suggesting tags...")
                suggested = asyncio.run(self.editor.suggest_tags())
                click.echo(f"Suggested: {', '.join(suggested)}" if suggested else "No suggestions.")
                self.show()
            case "save":
                entry = self.editor.save()
                click.echo(f"✓ Saved {entry.date}")
            case "analyze":
                self._analyze_command(args)
            case "theme":
                if args and args[0] in THEMES:
                    self.prefs.set_theme(args[0])
                else:
                    self.prefs.toggle()
                click.echo(f"Theme: {self.prefs.theme}")
            case _:
                click.echo(f"Unknown command {cmd!r}. Type 'help' for commands.")
        return True

    def _select_command(self, args: list[str]) -> None:
        if not args:
            click.echo(self.editor.date)
            return
        try:
            self.select(date.fromisoformat(args[0]).isoformat())
        except ValueError:
            click.echo(f"Invalid date {args[0]!r}, expected YYYY-MM-DD", err=True)

    def _calendar_command(self, args: list[str]) -> None:
        if args:
            try:
                year, month = _parse_month(None, None, args[0])
            except click.BadParameter as e:
                click.echo(f"Error: {e.message}", err=True)
                return
        else:
            selected = date.fromisoformat(self.editor.date)
            year, month = selected.year, selected.month
        click.echo(format_month(year, month, self.store.list_dates(), selected=self.editor.date))

    def _analyze_command(self, args: list[str]) -> None:
        start_date, end_date = default_range(self.store.list_all())
        if len(args) == 2:
            try:
                start_date, end_date = (date.fromisoformat(a).isoformat() for a in args)
            except ValueError:
                click.echo("Usage: analyze YYYY-MM-DD YYYY-MM-DD", err=True)
                return
        elif args:
            click.echo("Usage: analyze [START END]", err=True)
            return
        asyncio.run(self.session.request(start_date, end_date))

    def run(self) -> None:
        click.echo(f"Worklog shell ({self.prefs.theme} theme). Type 'help' for commands.")
        self.show()
        while True:
            try:
                line = click.prompt(f"{self.editor.date}>", default="", show_default=False, prompt_suffix=" ")
            except (EOFError, click.Abort):
                click.echo()
                break
            if not self.handle(line):
                break


@main.command()
def shell():
    """Interactive editing and analysis session."""
    Shell().run()


if __name__ == "__main__":
    main()
