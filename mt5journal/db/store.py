"""SQLite data store for MT5 Journal."""

import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Optional

from mt5journal.engine.aggregator import aggregate
from mt5journal.models import JournalData, Trade


class DataStore:
    """SQLite-based store holding the imported journal.

    Only trades and day notes are stored; day totals and statistics are
    rebuilt from the trades on load.
    """

    REQUIRED_TABLES = [
        "trades",
        "days",
    ]

    def __init__(self, db_path: Path):
        """Initialize the data store.

        Args:
            db_path: Path to the SQLite database file.
        """
        self.db_path = db_path
        self._ensure_db_dir()
        self._init_schema()

    def _ensure_db_dir(self) -> None:
        """Ensure the database directory exists."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    def _get_connection(self) -> sqlite3.Connection:
        """Get a database connection."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_schema(self) -> None:
        """Initialize database schema on first run."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()

            # Trades in import order; seq preserves it across reloads
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS trades (
                    seq INTEGER PRIMARY KEY AUTOINCREMENT,
                    trade_id TEXT NOT NULL,
                    symbol TEXT NOT NULL,
                    type TEXT NOT NULL,
                    open_time TEXT NOT NULL,
                    close_time TEXT NOT NULL,
                    open_price REAL NOT NULL,
                    close_price REAL NOT NULL,
                    volume REAL NOT NULL,
                    profit REAL NOT NULL,
                    commission REAL NOT NULL,
                    swap REAL NOT NULL
                )
            """)

            # Day notes
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS days (
                    date TEXT PRIMARY KEY,
                    observations TEXT NOT NULL DEFAULT ''
                )
            """)

            conn.commit()
        finally:
            conn.close()

    def get_tables(self) -> list[str]:
        """Get list of all tables in the database."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%'"
            )
            return [row["name"] for row in cursor.fetchall()]
        finally:
            conn.close()

    # ==================== Journal ====================

    def save_journal(self, journal: JournalData) -> None:
        """Replace the stored journal with a new one.

        Args:
            journal: Journal to store.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM trades")
            cursor.execute("DELETE FROM days")
            for day in journal.days.values():
                cursor.execute(
                    "INSERT INTO days (date, observations) VALUES (?, ?)",
                    (day.date, day.observations),
                )
                for trade in day.trades:
                    cursor.execute(
                        """
                        INSERT INTO trades
                        (trade_id, symbol, type, open_time, close_time, open_price,
                         close_price, volume, profit, commission, swap)
                        VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                        """,
                        (
                            trade.id,
                            trade.symbol,
                            trade.type,
                            trade.open_time.isoformat(),
                            trade.close_time.isoformat(),
                            trade.open_price,
                            trade.close_price,
                            trade.volume,
                            trade.profit,
                            trade.commission,
                            trade.swap,
                        ),
                    )
            conn.commit()
        finally:
            conn.close()

    def get_trades(self) -> list[Trade]:
        """Get all stored trades in import order."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                SELECT trade_id, symbol, type, open_time, close_time, open_price,
                       close_price, volume, profit, commission, swap
                FROM trades
                ORDER BY seq
                """
            )
            return [
                Trade(
                    id=row["trade_id"],
                    symbol=row["symbol"],
                    type=row["type"],
                    open_time=datetime.fromisoformat(row["open_time"]),
                    close_time=datetime.fromisoformat(row["close_time"]),
                    open_price=row["open_price"],
                    close_price=row["close_price"],
                    volume=row["volume"],
                    profit=row["profit"],
                    commission=row["commission"],
                    swap=row["swap"],
                )
                for row in cursor.fetchall()
            ]
        finally:
            conn.close()

    def load_journal(self) -> Optional[JournalData]:
        """Rebuild the stored journal.

        Returns:
            The journal, or None if nothing has been imported.
        """
        trades = self.get_trades()
        if not trades:
            return None

        days, statistics = aggregate(trades)
        for date, observations in self.get_observations().items():
            if date in days:
                days[date].observations = observations
        return JournalData(days=days, statistics=statistics)

    def get_observations(self) -> dict[str, str]:
        """Get the notes for every stored day."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("SELECT date, observations FROM days ORDER BY date")
            return {row["date"]: row["observations"] for row in cursor.fetchall()}
        finally:
            conn.close()

    def update_observations(self, date: str, observations: str) -> bool:
        """Set the notes for a stored trading day.

        Args:
            date: ISO date of the day.
            observations: New note text.

        Returns:
            True if the day exists and was updated.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "UPDATE days SET observations = ? WHERE date = ?",
                (observations, date),
            )
            conn.commit()
            return cursor.rowcount > 0
        finally:
            conn.close()

    # ==================== Stats ====================

    def get_stats(self) -> dict:
        """Get database statistics.

        Returns:
            Dictionary with table record counts.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            stats = {}
            for table in self.REQUIRED_TABLES:
                cursor.execute(f"SELECT COUNT(*) as count FROM {table}")
                stats[table] = cursor.fetchone()["count"]
            return stats
        finally:
            conn.close()
