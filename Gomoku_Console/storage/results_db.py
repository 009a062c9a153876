"""SQLite storage for completed-game results and the history listing."""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path

try:
    from ..utils.logger import log_error
except ImportError:
    from utils.logger import log_error

MEMORY_PATH = ":memory:"

CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS game_results (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    winner VARCHAR(10) NOT NULL,
    board_size INTEGER NOT NULL,
    move_count INTEGER NOT NULL,
    played_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
)
"""

INSERT_SQL = "INSERT INTO game_results (winner, board_size, move_count) VALUES (?, ?, ?)"

HISTORY_SQL = (
    "SELECT winner, board_size, move_count, played_at FROM game_results "
    "ORDER BY played_at DESC, id DESC"
)

_database = None


def format_entry(winner, board_size, move_count, played_at):
    return f"Winner: {winner} | Board: {board_size}x{board_size} | Moves: {move_count} | {played_at}"


class ResultsDatabase:
    def __init__(self, path: str | Path, logger=log_error):
        self.path = str(path)
        self.logger = logger
        self._memory_conn = None

    def _connect(self) -> sqlite3.Connection:
        if self.path == MEMORY_PATH:
            # An in-memory database only lives as long as its connection.
            if self._memory_conn is None:
                self._memory_conn = sqlite3.connect(MEMORY_PATH)
            return self._memory_conn
        return sqlite3.connect(self.path)

    @contextmanager
    def _connection(self):
        conn = self._connect()
        try:
            with conn:
                yield conn
        finally:
            if conn is not self._memory_conn:
                conn.close()

    def initialize(self) -> None:
        """Create the results table (and its directory) if missing."""
        if self.path != MEMORY_PATH:
            Path(self.path).parent.mkdir(parents=True, exist_ok=True)
        with self._connection() as conn:
            conn.execute(CREATE_TABLE_SQL)

    def record_result(self, winner: str, board_size: int, move_count: int) -> None:
        """Append one finished game. Database errors are logged, never raised."""
        try:
            with self._connection() as conn:
                conn.execute(INSERT_SQL, (winner, board_size, move_count))
        except sqlite3.Error as exc:
            self.logger(f"Error saving game result: {exc}")

    def fetch_history(self, limit: int | None = None) -> list[str]:
        """Return formatted results, most recent first."""
        sql = HISTORY_SQL
        params: tuple = ()
        if limit is not None:
            sql += " LIMIT ?"
            params = (limit,)
        try:
            with self._connection() as conn:
                rows = conn.execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            self.logger(f"Error retrieving game history: {exc}")
            return []
        return [format_entry(*row) for row in rows]

    def close(self) -> None:
        if self._memory_conn is not None:
            self._memory_conn.close()
            self._memory_conn = None


def initialize(path: str | Path, logger=log_error) -> ResultsDatabase:
    """Set up the process-wide results database. Call once at startup."""
    global _database
    database = ResultsDatabase(path, logger=logger)
    database.initialize()
    _database = database
    return database


def get_database() -> ResultsDatabase:
    if _database is None:
        raise RuntimeError("results database not initialized; call initialize() first")
    return _database
