"""Position matching: pair closing deals with the positions they close."""

import logging
from typing import Iterable, Optional

from mt5journal.engine.classifier import (
    DealKind,
    classify,
    direction,
    parse_number,
    parse_timestamp,
)
from mt5journal.engine.decoder import Record
from mt5journal.models import ImportReport, OpenPosition, Trade

logger = logging.getLogger(__name__)


class PositionMatcher:
    """Turns classified deal records into completed trades.

    Keeps one open position per order identifier. Closes consume the
    matching position fully or partially; costs are apportioned by the
    share of remaining volume closed. Closes without a position are
    dropped and closes larger than the position are clamped.

    A matcher is meant for one pass over one report; its working set and
    report are not reset between calls to :meth:`match`.
    """

    # Absolute tolerance for volume comparisons so float remainders such as
    # 0.3 - 0.1 - 0.1 still match a final 0.1 close exactly.
    VOLUME_TOLERANCE = 1e-9

    def __init__(self):
        """Initialize an empty working set and report."""
        self._positions: dict[str, OpenPosition] = {}
        self.report = ImportReport()

    @property
    def open_positions(self) -> list[OpenPosition]:
        """Positions not yet fully closed, in the order they were opened."""
        return list(self._positions.values())

    def match(self, records: Iterable[Record]) -> list[Trade]:
        """Process records in file order and return the trades they complete.

        Args:
            records: Decoded records in file order.

        Returns:
            Trades in the order of the close records that produced them.
        """
        trades: list[Trade] = []
        for row, record in enumerate(records, start=1):
            self.report.rows_total += 1
            trade = self.process(record, row)
            if trade is not None:
                trades.append(trade)

        self.report.open_positions = len(self._positions)
        if self._positions:
            logger.debug(
                "%d position(s) still open at end of report: %s",
                len(self._positions),
                ", ".join(self._positions),
            )
        return trades

    def process(self, record: Record, row: int = 0) -> Optional[Trade]:
        """Process one record.

        Args:
            record: Decoded record.
            row: Data row number used in diagnostics.

        Returns:
            The completed trade if the record closed (part of) a position.
        """
        kind = classify(record)
        if kind is DealKind.UNRECOGNIZED:
            self._skip(row, f"unrecognized deal (type={record.get('type', '')!r})")
            return None

        try:
            if kind is DealKind.OPEN:
                self._open(record, row)
                return None
            return self._close(record, row)
        except ValueError as e:
            self._skip(row, f"invalid number: {e}")
            return None

    def _open(self, record: Record, row: int) -> None:
        """Insert or replace the open position for the record's order."""
        volume = parse_number(record.get("volume", ""))
        price = parse_number(record.get("price", ""))
        commission = parse_number(record.get("commission", "")) or 0.0
        swap = parse_number(record.get("swap", "")) or 0.0
        if volume is None or volume <= 0:
            self._skip(row, "opening deal without a positive volume")
            return
        if price is None:
            self._skip(row, "opening deal without a price")
            return

        order_id = record["order"].strip()
        if order_id in self._positions:
            self.report.replaced_opens += 1
            message = (
                f"Row {row}: order {order_id} opened again; "
                f"discarding {self._positions[order_id].remaining_volume:g} unclosed volume"
            )
            self.report.warnings.append(message)
            logger.warning(message)

        self._positions[order_id] = OpenPosition(
            order_id=order_id,
            symbol=_symbol(record),
            type=direction(record),
            open_time=parse_timestamp(record["time"]),
            open_price=price,
            remaining_volume=volume,
            commission=commission,
            swap=swap,
        )
        self.report.opens += 1

    def _close(self, record: Record, row: int) -> Optional[Trade]:
        """Close (part of) the matching position and emit the trade."""
        order_id = record["order"].strip()
        position = self._positions.get(order_id)
        if position is None:
            self.report.unmatched_closes += 1
            logger.debug("Row %d: close for order %s has no open position, dropped", row, order_id)
            return None

        price = parse_number(record.get("price", ""))
        if price is None:
            self._skip(row, "closing deal without a price")
            return None
        volume = parse_number(record.get("volume", ""))
        if volume is not None and volume <= 0:
            self._skip(row, "closing deal with a non-positive volume")
            return None
        profit = parse_number(record.get("profit", "")) or 0.0
        commission = parse_number(record.get("commission", "")) or 0.0
        swap = parse_number(record.get("swap", "")) or 0.0

        remaining = position.remaining_volume
        if volume is None:
            volume = remaining
        elif volume > remaining + self.VOLUME_TOLERANCE:
            self.report.over_closes += 1
            message = (
                f"Row {row}: close volume {volume:g} for order {order_id} exceeds "
                f"open volume {remaining:g}; clamped, {volume - remaining:g} unaccounted"
            )
            self.report.warnings.append(message)
            logger.warning(message)

        fully_closed = volume >= remaining - self.VOLUME_TOLERANCE
        closed = remaining if fully_closed else volume
        ratio = closed / remaining

        trade = Trade(
            id=order_id,
            symbol=position.symbol or _symbol(record),
            type=position.type,
            open_time=position.open_time,
            close_time=parse_timestamp(record["time"]),
            open_price=position.open_price,
            close_price=price,
            volume=closed,
            profit=profit,
            commission=position.commission * ratio + commission,
            swap=position.swap * ratio + swap,
        )

        if fully_closed:
            del self._positions[order_id]
        else:
            position.remaining_volume = remaining - closed
            position.commission *= 1 - ratio
            position.swap *= 1 - ratio
        self.report.closes += 1
        return trade

    def _skip(self, row: int, reason: str) -> None:
        self.report.rows_skipped += 1
        logger.debug("Row %d skipped: %s", row, reason)


def _symbol(record: Record) -> str:
    """First word of the symbol column ("EURUSD buy 1.00" -> "EURUSD")."""
    words = record.get("symbol", "").split()
    return words[0] if words else ""
