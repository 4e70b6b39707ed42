"""Win-rate patterns by time of day and day of week."""

import calendar
from datetime import datetime

from pydantic import BaseModel, Field

from mt5journal.engine.aggregator import to_utc
from mt5journal.models import Trade

# Buckets with fewer trades than this are too small to rank.
DEFAULT_MIN_TRADES = 5
DEFAULT_TOP = 3


class PatternBucket(BaseModel):
    """Win/loss counts for one hour of the day or one weekday."""

    key: int = Field(..., ge=0, description="Hour (0-23) or weekday (0=Monday)")
    wins: int = Field(default=0, ge=0)
    losses: int = Field(default=0, ge=0)

    @property
    def total(self) -> int:
        """Number of trades in the bucket."""
        return self.wins + self.losses

    @property
    def win_rate(self) -> float:
        """Win percentage, 0 for an empty bucket."""
        return self.wins / self.total * 100 if self.total else 0.0

    @property
    def label(self) -> str:
        """Display name, the raw key by default."""
        return str(self.key)


class HourBucket(PatternBucket):
    @property
    def label(self) -> str:
        """12-hour clock label such as "9 AM"."""
        return datetime(2024, 1, 1, self.key).strftime("%I %p").lstrip("0")


class WeekdayBucket(PatternBucket):
    @property
    def label(self) -> str:
        """English weekday name."""
        return calendar.day_name[self.key]


class TimeAnalysis(BaseModel):
    """Hourly and weekday buckets for a set of trades."""

    hourly: list[HourBucket]
    weekday: list[WeekdayBucket]


def analyze_time_patterns(trades: list[Trade]) -> TimeAnalysis:
    """Count wins and losses per close hour and close weekday.

    Aware close times are taken in UTC, matching the day a trade is
    grouped under; naive ones are used as written.
    """
    hourly = [HourBucket(key=hour) for hour in range(24)]
    weekday = [WeekdayBucket(key=day) for day in range(7)]

    for trade in trades:
        closed = to_utc(trade.close_time)
        for bucket in (hourly[closed.hour], weekday[closed.weekday()]):
            if trade.profit > 0:
                bucket.wins += 1
            else:
                bucket.losses += 1

    return TimeAnalysis(hourly=hourly, weekday=weekday)


def _best(
    buckets: list[PatternBucket], min_trades: int, limit: int
) -> list[PatternBucket]:
    eligible = [b for b in buckets if b.total >= min_trades]
    return sorted(eligible, key=lambda b: b.win_rate, reverse=True)[:limit]


def best_trading_hours(
    analysis: TimeAnalysis,
    min_trades: int = DEFAULT_MIN_TRADES,
    limit: int = DEFAULT_TOP,
) -> list[PatternBucket]:
    """Hours with the highest win rate among those with enough trades.

    Args:
        analysis: Result of analyze_time_patterns.
        min_trades: Minimum trades for an hour to be ranked.
        limit: Maximum number of hours returned.

    Returns:
        Buckets sorted by win rate, best first; ties keep hour order.
    """
    return _best(analysis.hourly, min_trades, limit)


def best_trading_days(
    analysis: TimeAnalysis,
    min_trades: int = DEFAULT_MIN_TRADES,
    limit: int = DEFAULT_TOP,
) -> list[PatternBucket]:
    """Weekdays with the highest win rate among those with enough trades."""
    return _best(analysis.weekday, min_trades, limit)
