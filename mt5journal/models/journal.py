"""DayJournal and JournalData data models."""

from pydantic import BaseModel, Field

from mt5journal.models.statistics import Statistics
from mt5journal.models.trade import Trade


class DayJournal(BaseModel):
    """Trades closed on one calendar day plus the trader's notes.

    ``total_profit`` and ``trade_count`` are running totals kept in step
    with ``trades``; add trades through :meth:`add_trade` only.
    """

    date: str = Field(..., description="ISO date (YYYY-MM-DD)")
    trades: list[Trade] = Field(default_factory=list, description="Trades closed this day")
    observations: str = Field(default="", description="Free-text notes")
    total_profit: float = Field(default=0.0, description="Sum of trade profits")
    trade_count: int = Field(default=0, ge=0, description="Number of trades")

    def add_trade(self, trade: Trade) -> None:
        """Append a trade and update the running totals."""
        self.trades.append(trade)
        self.total_profit += trade.profit
        self.trade_count += 1


class JournalData(BaseModel):
    """Root aggregate: day journals keyed by date plus overall statistics."""

    days: dict[str, DayJournal] = Field(default_factory=dict, description="Day journals by date")
    statistics: Statistics = Field(default_factory=Statistics, description="Overall statistics")

    def all_trades(self) -> list[Trade]:
        """Return every trade, days in stored order then trades within each day."""
        return [trade for day in self.days.values() for trade in day.trades]

    def get_day(self, date: str) -> DayJournal | None:
        """Get the journal for a date, or None if nothing closed that day."""
        return self.days.get(date)

    def sorted_dates(self, reverse: bool = False) -> list[str]:
        """Return the trading dates in calendar order."""
        return sorted(self.days, reverse=reverse)

    def update_observations(self, date: str, observations: str) -> None:
        """Replace the notes for a trading day.

        Args:
            date: ISO date of an existing day journal.
            observations: New note text.

        Raises:
            KeyError: If there is no journal for that date.
        """
        if date not in self.days:
            raise KeyError(date)
        self.days[date].observations = observations
