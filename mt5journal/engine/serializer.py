"""CSV export of a journal."""

from datetime import datetime, timezone

from mt5journal.models import JournalData

EXPORT_HEADER = (
    "Date,Symbol,Type,Open Time,Close Time,Open Price,Close Price,Volume,Profit,Observations"
)


def format_instant(timestamp: datetime) -> str:
    """Render a timestamp as UTC ISO 8601 with milliseconds.

    Naive timestamps are assumed to already be UTC.

    >>> format_instant(datetime(2024, 1, 1, 10, 0))
    '2024-01-01T10:00:00.000Z'
    """
    if timestamp.tzinfo is not None:
        timestamp = timestamp.astimezone(timezone.utc).replace(tzinfo=None)
    return timestamp.isoformat(timespec="milliseconds") + "Z"


def format_number(value: float) -> str:
    """Render a number without a trailing '.0' for whole values."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def quote(text: str) -> str:
    """Wrap text in double quotes, doubling any embedded quotes."""
    return '"' + text.replace('"', '""') + '"'


def serialize(journal: JournalData) -> str:
    """Render a journal as CSV, one line per trade.

    Days are written in stored order and trades in their order within
    each day. The output is for export only and is not read back.
    """
    lines = [EXPORT_HEADER]
    for day in journal.days.values():
        for trade in day.trades:
            lines.append(
                ",".join(
                    [
                        day.date,
                        trade.symbol,
                        trade.type,
                        format_instant(trade.open_time),
                        format_instant(trade.close_time),
                        format_number(trade.open_price),
                        format_number(trade.close_price),
                        format_number(trade.volume),
                        format_number(trade.profit),
                        quote(day.observations),
                    ]
                )
            )
    return "\n".join(lines) + "\n"
