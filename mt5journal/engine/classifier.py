"""Deal classification: decide what role a decoded record plays."""

import math
import re
from datetime import datetime
from enum import Enum
from typing import Literal, Optional

from mt5journal.engine.decoder import Record

Direction = Literal["buy", "sell"]


class DealKind(str, Enum):
    """Role of a deal row in position matching."""

    OPEN = "open"
    CLOSE = "close"
    UNRECOGNIZED = "unrecognized"


OPEN_TYPES = {"buy", "sell"}
CLOSE_TYPES = {"close"}

DIRECTION_ALIASES: dict[str, Direction] = {
    "long": "buy",
    "buy": "buy",
    "short": "sell",
    "sell": "sell",
}

# MetaTrader terminals write "2024.01.31 10:15:00"
MT5_TIME_FORMATS = ("%Y.%m.%d %H:%M:%S", "%Y.%m.%d %H:%M")

_THOUSANDS = re.compile(r"\s")


def parse_timestamp(value: str) -> Optional[datetime]:
    """Parse an ISO 8601 or MetaTrader timestamp.

    Returns:
        The parsed datetime, or None if the value is not a valid instant.
    """
    value = value.strip()
    if not value:
        return None
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        pass
    for fmt in MT5_TIME_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None


def parse_number(value: str) -> Optional[float]:
    """Parse a decimal cell, tolerating spaces as thousands separators.

    Returns:
        The value, or None when the cell is empty.

    Raises:
        ValueError: If the cell is not empty and not a number.
    """
    cleaned = _THOUSANDS.sub("", value)
    if not cleaned:
        return None
    number = float(cleaned)
    if not math.isfinite(number):
        raise ValueError(f"Not a finite number: {value!r}")
    return number


def classify(record: Record) -> DealKind:
    """Classify a record as an opening deal, a closing deal or neither.

    Rows without an order identifier or a parseable time are never
    matched, whatever their type.
    """
    if not record.get("order", "").strip():
        return DealKind.UNRECOGNIZED
    if parse_timestamp(record.get("time", "")) is None:
        return DealKind.UNRECOGNIZED

    deal_type = record.get("type", "").strip().lower()
    if deal_type in OPEN_TYPES:
        return DealKind.OPEN
    if deal_type in CLOSE_TYPES:
        return DealKind.CLOSE
    return DealKind.UNRECOGNIZED


def direction(record: Record) -> Direction:
    """Direction of the position a record opens.

    An explicit ``direction`` column (long/short) wins over the type value.
    """
    explicit = record.get("direction", "").strip().lower()
    if explicit in DIRECTION_ALIASES:
        return DIRECTION_ALIASES[explicit]
    if record.get("type", "").strip().lower() == "sell":
        return "sell"
    return "buy"
