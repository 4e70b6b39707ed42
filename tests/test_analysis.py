"""Tests for trading-pattern analysis and the calendar grid.

**Feature: mt5-journal**
"""

from datetime import date, datetime, timedelta, timezone

from hypothesis import given, settings
from hypothesis import strategies as st

from mt5journal.analysis import (
    analyze_time_patterns,
    best_trading_days,
    best_trading_hours,
    generate_calendar_days,
    month_of_latest_day,
)
from mt5journal.engine.aggregator import aggregate, trade_date
from mt5journal.models import JournalData, Trade


def make_trade(close_time: datetime, profit: float) -> Trade:
    return Trade(
        id="1",
        symbol="EURUSD",
        type="buy",
        open_time=close_time - timedelta(minutes=30),
        close_time=close_time,
        open_price=1.1,
        close_price=1.2,
        volume=1.0,
        profit=profit,
    )


def make_journal(trades: list[Trade]) -> JournalData:
    days, statistics = aggregate(trades)
    return JournalData(days=days, statistics=statistics)


class TestTimePatterns:
    """Win/loss buckets by hour and weekday."""

    def test_bucket_counts(self):
        # 2024-01-01 is a Monday
        trades = [
            make_trade(datetime(2024, 1, 1, 9, 15), 10.0),
            make_trade(datetime(2024, 1, 1, 9, 45), -5.0),
            make_trade(datetime(2024, 1, 3, 14, 0), 0.0),
        ]
        analysis = analyze_time_patterns(trades)

        assert len(analysis.hourly) == 24
        assert len(analysis.weekday) == 7
        assert analysis.hourly[9].wins == 1
        assert analysis.hourly[9].losses == 1
        assert analysis.hourly[9].win_rate == 50.0
        assert analysis.hourly[14].losses == 1
        assert analysis.weekday[0].total == 2
        assert analysis.weekday[2].total == 1
        assert analysis.weekday[6].win_rate == 0.0

    def test_aware_close_bucketed_on_its_journal_day(self):
        eastern = timezone(timedelta(hours=-5))
        closed = datetime(2024, 1, 1, 23, 30, tzinfo=eastern)
        analysis = analyze_time_patterns([make_trade(closed, 10.0)])

        # 04:30 UTC on Tuesday 2024-01-02, the day the trade is grouped under
        assert trade_date(closed) == "2024-01-02"
        assert analysis.hourly[4].wins == 1
        assert analysis.hourly[23].total == 0
        assert analysis.weekday[1].wins == 1
        assert analysis.weekday[0].total == 0

    def test_labels(self):
        analysis = analyze_time_patterns([])

        assert analysis.hourly[0].label == "12 AM"
        assert analysis.hourly[9].label == "9 AM"
        assert analysis.hourly[15].label == "3 PM"
        assert analysis.weekday[0].label == "Monday"
        assert analysis.weekday[6].label == "Sunday"

    def test_best_hours_require_minimum_trades(self):
        trades = [make_trade(datetime(2024, 1, 1, 10, i), 1.0) for i in range(4)]
        trades += [make_trade(datetime(2024, 1, 1, 11, i), 1.0 if i < 3 else -1.0) for i in range(5)]
        trades += [make_trade(datetime(2024, 1, 1, 12, i), 1.0 if i < 4 else -1.0) for i in range(5)]
        analysis = analyze_time_patterns(trades)

        best = best_trading_hours(analysis, min_trades=5, limit=3)

        # Hour 10 has a perfect record but only four trades
        assert [b.key for b in best] == [12, 11]
        assert best[0].win_rate == 80.0

    def test_best_days_limit(self):
        trades = [
            make_trade(datetime(2024, 1, day, 10, i), 1.0 if i < day else -1.0)
            for day in range(1, 6)
            for i in range(5)
        ]
        analysis = analyze_time_patterns(trades)

        best = best_trading_days(analysis, min_trades=5, limit=2)

        assert len(best) == 2
        assert best[0].win_rate >= best[1].win_rate
        assert best[0].label == "Friday"

    @given(profits=st.lists(st.integers(min_value=-100, max_value=100), max_size=60))
    @settings(max_examples=50)
    def test_every_trade_counted_once_per_dimension(self, profits: list[int]):
        start = datetime(2024, 1, 1)
        trades = [make_trade(start + timedelta(hours=7 * i), p) for i, p in enumerate(profits)]
        analysis = analyze_time_patterns(trades)

        assert sum(b.total for b in analysis.hourly) == len(trades)
        assert sum(b.total for b in analysis.weekday) == len(trades)
        assert sum(b.wins for b in analysis.hourly) == sum(1 for p in profits if p > 0)


class TestCalendarGrid:
    """
    **Feature: mt5-journal, Property: Calendar Grid**

    *For any* month, the grid has 42 consecutive days starting on a Sunday
    and covering the whole month.
    """

    @given(year=st.integers(min_value=2000, max_value=2100), month=st.integers(min_value=1, max_value=12))
    @settings(max_examples=100)
    def test_grid_shape(self, year: int, month: int):
        cells = generate_calendar_days(year, month, JournalData())

        assert len(cells) == 42
        first = date.fromisoformat(cells[0].date)
        assert first.weekday() == 6
        assert first <= date(year, month, 1)
        for offset, cell in enumerate(cells):
            assert cell.date == (first + timedelta(days=offset)).isoformat()
        current = [c for c in cells if c.is_current_month]
        assert current[0].day_of_month == 1
        assert [c.day_of_month for c in current] == list(range(1, len(current) + 1))

    def test_month_starting_on_monday(self):
        cells = generate_calendar_days(2024, 1, JournalData())

        assert cells[0].date == "2023-12-31"
        assert not cells[0].is_current_month
        assert cells[1].date == "2024-01-01"
        assert cells[1].is_current_month

    def test_month_starting_on_sunday(self):
        cells = generate_calendar_days(2024, 9, JournalData())

        assert cells[0].date == "2024-09-01"
        assert cells[-1].date == "2024-10-12"

    def test_cells_carry_day_totals(self):
        journal = make_journal([
            make_trade(datetime(2024, 1, 15, 10), 50.0),
            make_trade(datetime(2024, 1, 15, 11), -20.0),
            make_trade(datetime(2024, 2, 1, 11), 5.0),
        ])
        cells = {c.date: c for c in generate_calendar_days(2024, 1, journal)}

        assert cells["2024-01-15"].has_trading
        assert cells["2024-01-15"].profit == 30.0
        assert cells["2024-01-15"].trade_count == 2
        assert not cells["2024-01-16"].has_trading
        # Spill-over days from the next month still show their trading
        assert cells["2024-02-01"].has_trading
        assert not cells["2024-02-01"].is_current_month

    def test_month_of_latest_day(self):
        journal = make_journal([
            make_trade(datetime(2024, 3, 5, 10), 1.0),
            make_trade(datetime(2023, 12, 5, 10), 1.0),
        ])

        assert month_of_latest_day(journal) == (2024, 3)
        assert month_of_latest_day(JournalData()) is None
