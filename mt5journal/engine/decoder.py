"""Delimited-text decoding for MT5 deal reports.

Turns raw report text into an ordered list of records keyed by normalized
column name. Columns that match a known role are renamed to the canonical
role so later stages never deal with header spelling.
"""

import logging
import re

from mt5journal.errors import FormatError

logger = logging.getLogger(__name__)

Record = dict[str, str]

# Normalized header name -> canonical role. Earlier entries win when a
# report carries more than one synonym for the same role.
ROLE_SYNONYMS: dict[str, tuple[str, ...]] = {
    "type": ("type",),
    "direction": ("direction",),
    "symbol": ("symbol", "deal"),
    "time": ("time",),
    "volume": ("volume",),
    "price": ("price",),
    "order": ("order", "ticket"),
    "profit": ("profit",),
    "commission": ("commission", "commissions"),
    "swap": ("swap",),
}

REQUIRED_ROLES = ("type", "order", "time", "price")

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def detect_delimiter(header: str) -> str:
    """Pick the delimiter from the header line: ';', then tab, then ','."""
    if ";" in header:
        return ";"
    if "\t" in header:
        return "\t"
    return ","


def normalize_header(name: str) -> str:
    """Lowercase a header cell and drop everything outside [a-z0-9].

    >>> normalize_header("Commission ($)")
    'commission'
    """
    return _NON_ALNUM.sub("", name.lower())


def resolve_columns(headers: list[str]) -> list[str]:
    """Map normalized headers to record keys.

    Headers matching a role synonym become the canonical role name; the
    highest-priority synonym claims the role and lower-priority ones keep
    their normalized name. A repeated key keeps the first column and later
    copies get a numbered suffix (``time``, ``time_2``, ...).

    >>> resolve_columns(["time", "type", "order", "price", "time"])
    ['time', 'type', 'order', 'price', 'time_2']

    Raises:
        FormatError: If a required role has no matching column.
    """
    keys = list(headers)
    for role, synonyms in ROLE_SYNONYMS.items():
        for synonym in synonyms:
            if synonym in headers:
                keys[headers.index(synonym)] = role
                break

    seen: dict[str, int] = {}
    for i, key in enumerate(keys):
        seen[key] = seen.get(key, 0) + 1
        if seen[key] > 1:
            keys[i] = f"{key}_{seen[key]}"

    missing = [role for role in REQUIRED_ROLES if role not in keys]
    if missing:
        raise FormatError(
            "File not recognized as an MT5 deals report: "
            f"missing column(s) {', '.join(missing)}"
        )
    return keys


def decode(text: str) -> list[Record]:
    """Decode report text into records, one per data row.

    Args:
        text: Raw delimited text; the first non-blank line is the header.

    Returns:
        Records in file order. Missing trailing cells resolve to "".

    Raises:
        FormatError: If there are no data rows or required columns are absent.
    """
    lines = [line.rstrip("\r") for line in text.split("\n")]
    lines = [line for line in lines if line.strip()]
    if len(lines) < 2:
        raise FormatError("File contains no data rows")

    header, *rows = lines
    delimiter = detect_delimiter(header)
    keys = resolve_columns([normalize_header(cell) for cell in header.split(delimiter)])
    logger.debug("Decoding %d rows with delimiter %r, columns %s", len(rows), delimiter, keys)

    records: list[Record] = []
    for row in rows:
        cells = [cell.strip() for cell in row.split(delimiter)]
        records.append(
            {key: cells[i] if i < len(cells) else "" for i, key in enumerate(keys)}
        )
    return records
