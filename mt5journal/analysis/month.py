"""Month calendar grid for the journal."""

from datetime import date, timedelta
from typing import Optional

from mt5journal.models import CalendarDay, JournalData

# Six Sunday-first weeks, enough for any month.
GRID_SIZE = 42


def generate_calendar_days(year: int, month: int, journal: JournalData) -> list[CalendarDay]:
    """Build the 42-cell grid for a month.

    The grid starts on the Sunday on or before the 1st and spills into the
    neighbouring months. Each cell carries that day's profit and trade
    count when the journal has trades for it.

    Args:
        year: Calendar year.
        month: Month number (1-12).
        journal: Journal to read day totals from.

    Returns:
        Exactly 42 calendar days in date order.
    """
    first = date(year, month, 1)
    # date.weekday() is Monday=0; shift so Sunday starts the week.
    start = first - timedelta(days=(first.weekday() + 1) % 7)

    cells = []
    for offset in range(GRID_SIZE):
        day = start + timedelta(days=offset)
        key = day.isoformat()
        day_journal = journal.get_day(key)
        cells.append(
            CalendarDay(
                date=key,
                day_of_month=day.day,
                is_current_month=(day.year, day.month) == (year, month),
                has_trading=day_journal is not None,
                profit=day_journal.total_profit if day_journal else 0.0,
                trade_count=day_journal.trade_count if day_journal else 0,
            )
        )
    return cells


def month_of_latest_day(journal: JournalData) -> Optional[tuple[int, int]]:
    """(year, month) of the most recent trading day, or None if empty."""
    dates = journal.sorted_dates(reverse=True)
    if not dates:
        return None
    latest = date.fromisoformat(dates[0])
    return latest.year, latest.month
