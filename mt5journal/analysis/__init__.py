"""Analysis helpers built on top of an imported journal."""

from mt5journal.analysis.month import generate_calendar_days, month_of_latest_day
from mt5journal.analysis.patterns import (
    PatternBucket,
    TimeAnalysis,
    analyze_time_patterns,
    best_trading_days,
    best_trading_hours,
)

__all__ = [
    "generate_calendar_days",
    "month_of_latest_day",
    "PatternBucket",
    "TimeAnalysis",
    "analyze_time_patterns",
    "best_trading_days",
    "best_trading_hours",
]
