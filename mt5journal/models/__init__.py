"""Data models for MT5 Journal."""

from mt5journal.models.trade import OpenPosition, Trade
from mt5journal.models.journal import DayJournal, JournalData
from mt5journal.models.statistics import Statistics
from mt5journal.models.report import ImportReport, ImportResult
from mt5journal.models.calendar import CalendarDay

__all__ = [
    "OpenPosition",
    "Trade",
    "DayJournal",
    "JournalData",
    "Statistics",
    "ImportReport",
    "ImportResult",
    "CalendarDay",
]
