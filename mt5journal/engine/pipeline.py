"""End-to-end import: report text in, journal out."""

import logging

from mt5journal.engine.aggregator import aggregate
from mt5journal.engine.decoder import decode
from mt5journal.engine.matcher import PositionMatcher
from mt5journal.errors import FormatError
from mt5journal.models import ImportResult, JournalData

logger = logging.getLogger(__name__)


def parse_mt5_report(text: str) -> ImportResult:
    """Decode, match and aggregate an MT5 deals report.

    Args:
        text: Full report text.

    Returns:
        The journal together with the import diagnostics.

    Raises:
        FormatError: If the text is not a deals report or contains no
            complete trades.
    """
    records = decode(text)
    matcher = PositionMatcher()
    trades = matcher.match(records)
    report = matcher.report

    if not trades:
        raise FormatError("No complete trades found in file")

    days, statistics = aggregate(trades)
    logger.info(
        "Imported %d trades over %d days (%d rows skipped, %d unmatched closes)",
        len(trades),
        len(days),
        report.rows_skipped,
        report.unmatched_closes,
    )
    return ImportResult(
        journal=JournalData(days=days, statistics=statistics),
        report=report,
    )


def parse_mt5_data(text: str) -> JournalData:
    """Decode an MT5 deals report straight to a journal."""
    return parse_mt5_report(text).journal
