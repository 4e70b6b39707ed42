"""Trade-reconciliation engine for MT5 deal reports.

Data flows one way: text -> records -> classified deals -> trades ->
day journals and statistics -> (optionally) export text.
"""

from mt5journal.engine.aggregator import aggregate, calculate_statistics, group_by_day
from mt5journal.engine.classifier import DealKind, classify, direction
from mt5journal.engine.decoder import decode
from mt5journal.engine.matcher import PositionMatcher
from mt5journal.engine.pipeline import parse_mt5_data, parse_mt5_report
from mt5journal.engine.serializer import serialize

__all__ = [
    "aggregate",
    "calculate_statistics",
    "group_by_day",
    "DealKind",
    "classify",
    "direction",
    "decode",
    "PositionMatcher",
    "parse_mt5_data",
    "parse_mt5_report",
    "serialize",
]
