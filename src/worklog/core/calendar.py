"""Pure calendar month-grid logic - no I/O dependencies."""

import calendar as _calendar
from dataclasses import dataclass
from datetime import date

WEEKDAY_LABELS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


@dataclass(frozen=True)
class DayCell:
    """A single day in the month grid."""

    day: int
    date: str
    has_entry: bool
    is_selected: bool
    is_today: bool

    def format(self) -> str:
        """Fixed-width label: [dd] selected, dd* has entry, dd. today."""
        if self.is_selected:
            return f"[{self.day:2d}]"
        marker = "*" if self.has_entry else "." if self.is_today else " "
        return f" {self.day:2d}{marker}"


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move (year, month) by delta months."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def month_grid(
    year: int,
    month: int,
    entry_dates: set[str],
    selected: str | None = None,
    today: date | None = None,
) -> list[list[DayCell | None]]:
    """
    Week rows for a month, Sunday first.

    Leading cells before the 1st are None; the last row is padded with None
    to a full week.
    """
    today_str = (today or date.today()).isoformat()
    # calendar.monthrange weekday: Monday == 0; shift so Sunday == 0
    first_weekday, days_in_month = _calendar.monthrange(year, month)
    leading = (first_weekday + 1) % 7

    cells: list[DayCell | None] = [None] * leading
    for day in range(1, days_in_month + 1):
        date_str = f"{year:04d}-{month:02d}-{day:02d}"
        cells.append(
            DayCell(
                day=day,
                date=date_str,
                has_entry=date_str in entry_dates,
                is_selected=date_str == selected,
                is_today=date_str == today_str,
            )
        )

    while len(cells) % 7:
        cells.append(None)

    return [cells[i : i + 7] for i in range(0, len(cells), 7)]


def format_month(
    year: int,
    month: int,
    entry_dates: set[str],
    selected: str | None = None,
    today: date | None = None,
) -> str:
    """Render the month grid as text."""
    title = date(year, month, 1).strftime("%B %Y")
    lines = [title.center(7 * 4).rstrip(), "".join(f"{d:>4}" for d in WEEKDAY_LABELS)]
    for week in month_grid(year, month, entry_dates, selected, today):
        lines.append("".join(cell.format() if cell else "    " for cell in week).rstrip())
    return "\n".join(lines)
