"""SQLite data store for Micro Diary."""

import logging
import sqlite3
from datetime import date, datetime
from pathlib import Path
from typing import Optional

from microdiary.db.base import BadgeStore, EntryStore
from microdiary.models import Badge, Entry

logger = logging.getLogger(__name__)

_ENTRY_COLUMNS = "id, date, text, satisfaction_score, created_at, updated_at, is_edited"


class DataStore(EntryStore, BadgeStore):
    """SQLite-based data store for Micro Diary."""

    REQUIRED_TABLES = [
        "entries",
        "badges",
    ]

    def __init__(self, db_path: Path):
        """Initialize the data store.

        Args:
            db_path: Path to the SQLite database file.
        """
        self.db_path = Path(db_path)
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

            # Entries table. No uniqueness on date: one entry per day is a
            # convention of the write flow. seq keeps arrival order.
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS entries (
                    seq INTEGER PRIMARY KEY AUTOINCREMENT,
                    id TEXT NOT NULL UNIQUE,
                    date TEXT,
                    text TEXT NOT NULL DEFAULT '',
                    satisfaction_score INTEGER NOT NULL
                        CHECK (satisfaction_score BETWEEN 0 AND 100),
                    created_at TEXT NOT NULL,
                    updated_at TEXT,
                    is_edited INTEGER NOT NULL DEFAULT 0
                )
            """)
            cursor.execute(
                "CREATE INDEX IF NOT EXISTS idx_entries_date ON entries (date)"
            )

            # Badges table
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS badges (
                    id TEXT PRIMARY KEY,
                    type TEXT NOT NULL UNIQUE,
                    earned_at TEXT NOT NULL
                )
            """)

            conn.commit()
            logger.debug("Schema ready at %s", self.db_path)
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

    # ==================== Entries ====================

    @staticmethod
    def _row_to_entry(row: sqlite3.Row) -> Entry:
        return Entry(
            id=row["id"],
            date=date.fromisoformat(row["date"]) if row["date"] else None,
            text=row["text"],
            satisfaction_score=row["satisfaction_score"],
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=(
                datetime.fromisoformat(row["updated_at"]) if row["updated_at"] else None
            ),
            is_edited=bool(row["is_edited"]),
        )

    def query_all(self) -> list[Entry]:
        """Get every entry in arrival order."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(f"SELECT {_ENTRY_COLUMNS} FROM entries ORDER BY seq")
            return [self._row_to_entry(row) for row in cursor.fetchall()]
        finally:
            conn.close()

    def query_by_date_range(self, start: date, end: date) -> list[Entry]:
        """Get entries dated from start to end inclusive.

        Args:
            start: First day.
            end: Last day.

        Returns:
            Matching entries in arrival order.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                f"""
                SELECT {_ENTRY_COLUMNS}
                FROM entries
                WHERE date IS NOT NULL AND date >= ? AND date <= ?
                ORDER BY seq
                """,
                (start.isoformat(), end.isoformat()),
            )
            return [self._row_to_entry(row) for row in cursor.fetchall()]
        finally:
            conn.close()

    def get_entry(self, entry_id: str) -> Optional[Entry]:
        """Get an entry by ID.

        Args:
            entry_id: Entry ID.

        Returns:
            Entry if found, None otherwise.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                f"SELECT {_ENTRY_COLUMNS} FROM entries WHERE id = ?",
                (entry_id,),
            )
            row = cursor.fetchone()
            if row:
                return self._row_to_entry(row)
            return None
        finally:
            conn.close()

    def create_entry(self, entry: Entry) -> None:
        """Save a new entry.

        Args:
            entry: Entry to save.

        Raises:
            ValueError: If the entry ID is already taken.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            try:
                cursor.execute(
                    f"""
                    INSERT INTO entries ({_ENTRY_COLUMNS})
                    VALUES (?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        entry.id,
                        entry.date.isoformat() if entry.date else None,
                        entry.text,
                        entry.satisfaction_score,
                        entry.created_at.isoformat(),
                        entry.updated_at.isoformat() if entry.updated_at else None,
                        1 if entry.is_edited else 0,
                    ),
                )
            except sqlite3.IntegrityError as e:
                raise ValueError(f"Entry {entry.id} already exists") from e
            conn.commit()
        finally:
            conn.close()

    def update_entry(self, entry: Entry) -> None:
        """Update text, score and edit markers of an entry.

        ``date``, ``created_at`` and ``id`` are never rewritten, and
        ``is_edited`` can only be switched on.

        Args:
            entry: Entry carrying the new values.

        Raises:
            LookupError: If no entry has this ID.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                UPDATE entries
                SET text = ?, satisfaction_score = ?, updated_at = ?,
                    is_edited = MAX(is_edited, ?)
                WHERE id = ?
                """,
                (
                    entry.text,
                    entry.satisfaction_score,
                    entry.updated_at.isoformat() if entry.updated_at else None,
                    1 if entry.is_edited else 0,
                    entry.id,
                ),
            )
            if cursor.rowcount == 0:
                raise LookupError(f"Entry {entry.id} not found")
            conn.commit()
        finally:
            conn.close()

    # ==================== Badges ====================

    def query_badges(self) -> list[Badge]:
        """Get all earned badges, most recent first."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                SELECT id, type, earned_at
                FROM badges
                ORDER BY earned_at DESC
                """
            )
            return [
                Badge(
                    id=row["id"],
                    type=row["type"],
                    earned_at=datetime.fromisoformat(row["earned_at"]),
                )
                for row in cursor.fetchall()
            ]
        finally:
            conn.close()

    def create_badge(self, badge: Badge) -> bool:
        """Save a badge unless its type is already earned.

        The UNIQUE constraint on ``type`` makes check-then-create a single
        atomic statement.

        Args:
            badge: Badge to save.

        Returns:
            True if stored, False if the type was already earned.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT OR IGNORE INTO badges (id, type, earned_at)
                VALUES (?, ?, ?)
                """,
                (badge.id, badge.type, badge.earned_at.isoformat()),
            )
            conn.commit()
            created = cursor.rowcount == 1
            if not created:
                logger.debug("Badge %s already earned, ignored", badge.type)
            return created
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
