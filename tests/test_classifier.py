"""Tests for deal classification.

**Feature: mt5-journal**
"""

from datetime import datetime, timedelta, timezone

import pytest

from mt5journal.engine.classifier import (
    DealKind,
    classify,
    direction,
    parse_number,
    parse_timestamp,
)


def make_record(**fields) -> dict[str, str]:
    record = {
        "type": "buy",
        "direction": "",
        "symbol": "EURUSD",
        "time": "2024-01-01T10:00:00Z",
        "volume": "1.0",
        "price": "100",
        "order": "1",
        "commission": "0",
        "swap": "0",
        "profit": "0",
    }
    record.update(fields)
    return record


class TestClassify:
    """
    **Feature: mt5-journal, Property: Deal Classification**

    buy/sell open positions, close closes them, anything else is ignored.
    """

    @pytest.mark.parametrize("deal_type", ["buy", "BUY", " Buy ", "sell", "SELL"])
    def test_open_types(self, deal_type: str):
        assert classify(make_record(type=deal_type)) is DealKind.OPEN

    @pytest.mark.parametrize("deal_type", ["close", "CLOSE", " Close"])
    def test_close_type(self, deal_type: str):
        assert classify(make_record(type=deal_type)) is DealKind.CLOSE

    @pytest.mark.parametrize("deal_type", ["balance", "deposit", "withdrawal", "credit", ""])
    def test_other_types_unrecognized(self, deal_type: str):
        assert classify(make_record(type=deal_type)) is DealKind.UNRECOGNIZED

    def test_missing_order_unrecognized(self):
        assert classify(make_record(order="")) is DealKind.UNRECOGNIZED
        assert classify(make_record(order="   ")) is DealKind.UNRECOGNIZED

    @pytest.mark.parametrize("time", ["", "yesterday", "2024-13-01T00:00:00Z"])
    def test_invalid_time_unrecognized(self, time: str):
        assert classify(make_record(type="close", time=time)) is DealKind.UNRECOGNIZED


class TestDirection:
    """Direction of the opened position."""

    def test_from_type(self):
        assert direction(make_record(type="buy")) == "buy"
        assert direction(make_record(type="sell")) == "sell"

    def test_direction_column_takes_precedence(self):
        assert direction(make_record(type="buy", direction="short")) == "sell"
        assert direction(make_record(type="sell", direction="Long")) == "buy"

    def test_unknown_direction_falls_back_to_type(self):
        assert direction(make_record(type="sell", direction="in")) == "sell"
        assert direction(make_record(type="buy", direction="out")) == "buy"


class TestParseTimestamp:
    """Timestamp parsing."""

    def test_iso_with_z(self):
        assert parse_timestamp("2024-01-01T10:00:00Z") == datetime(
            2024, 1, 1, 10, 0, tzinfo=timezone.utc
        )

    def test_iso_with_offset(self):
        parsed = parse_timestamp("2024-01-01T10:00:00+02:00")
        assert parsed.utcoffset() == timedelta(hours=2)

    def test_naive_iso(self):
        assert parse_timestamp("2024-01-01 10:00:00") == datetime(2024, 1, 1, 10, 0)

    def test_metatrader_format(self):
        assert parse_timestamp("2024.01.31 10:15:30") == datetime(2024, 1, 31, 10, 15, 30)
        assert parse_timestamp("2024.01.31 10:15") == datetime(2024, 1, 31, 10, 15)

    @pytest.mark.parametrize("value", ["", "   ", "not a date", "2024.02.30 10:00:00"])
    def test_invalid(self, value: str):
        assert parse_timestamp(value) is None


class TestParseNumber:
    """Numeric cell parsing."""

    def test_plain(self):
        assert parse_number("1.5") == 1.5
        assert parse_number("-20") == -20.0

    def test_thousands_spaces(self):
        assert parse_number("1 234.50") == 1234.5

    def test_empty_is_none(self):
        assert parse_number("") is None
        assert parse_number("  ") is None

    @pytest.mark.parametrize("value", ["abc", "1,5", "nan", "inf"])
    def test_invalid_raises(self, value: str):
        with pytest.raises(ValueError):
            parse_number(value)
