"""Aggregation of trades into day journals and statistics."""

from datetime import datetime, timezone
from typing import Iterable

from mt5journal.models import DayJournal, Statistics, Trade


def to_utc(timestamp: datetime) -> datetime:
    """Convert an aware timestamp to UTC; naive ones are returned as written."""
    if timestamp.tzinfo is not None:
        return timestamp.astimezone(timezone.utc)
    return timestamp


def trade_date(timestamp: datetime) -> str:
    """ISO calendar date a timestamp falls on.

    Aware timestamps are taken in UTC; naive ones are used as written.
    """
    return to_utc(timestamp).date().isoformat()


def group_by_day(trades: Iterable[Trade]) -> dict[str, DayJournal]:
    """Group trades by the date they closed, keeping arrival order.

    Days appear in the order they are first encountered.
    """
    days: dict[str, DayJournal] = {}
    for trade in trades:
        key = trade_date(trade.close_time)
        if key not in days:
            days[key] = DayJournal(date=key)
        days[key].add_trade(trade)
    return days


def calculate_statistics(trades: list[Trade]) -> Statistics:
    """Calculate performance statistics over a full set of trades.

    A trade wins when its profit is above zero; everything else, including
    break-even trades, counts as a loss.

    Args:
        trades: All trades to summarize.

    Returns:
        Statistics, all zeros when there are no trades.
    """
    if not trades:
        return Statistics()

    wins = [t.profit for t in trades if t.profit > 0]
    losses = [t.profit for t in trades if t.profit <= 0]
    total_trades = len(trades)

    return Statistics(
        total_trades=total_trades,
        winning_trades=len(wins),
        losing_trades=len(losses),
        total_profit=sum(t.profit for t in trades),
        win_rate=len(wins) / total_trades * 100,
        average_win=sum(wins) / len(wins) if wins else 0.0,
        average_loss=sum(losses) / len(losses) if losses else 0.0,
        largest_win=max(wins) if wins else 0.0,
        largest_loss=min(losses) if losses else 0.0,
    )


def aggregate(trades: list[Trade]) -> tuple[dict[str, DayJournal], Statistics]:
    """Fold trades into day journals plus statistics over all of them."""
    return group_by_day(trades), calculate_statistics(trades)
