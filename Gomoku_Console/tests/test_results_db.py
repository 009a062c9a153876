"""SQLite result sink and history listing."""

import sqlite3

import pytest

from Gomoku_Console.storage import results_db
from Gomoku_Console.storage.results_db import ResultsDatabase, format_entry


def test_empty_history(tmp_path):
    db = ResultsDatabase(tmp_path / "games.db")
    db.initialize()
    assert db.fetch_history() == []


def test_initialize_creates_directory_and_is_idempotent(tmp_path):
    path = tmp_path / "nested" / "dir" / "games.db"
    db = ResultsDatabase(path)
    db.initialize()
    db.initialize()
    assert path.exists()


def test_record_and_fetch_most_recent_first(tmp_path):
    db = ResultsDatabase(tmp_path / "games.db")
    db.initialize()
    db.record_result("Human", 7, 9)
    db.record_result("Computer", 7, 20)
    db.record_result("Draw", 3, 9)

    history = db.fetch_history()
    assert len(history) == 3
    assert history[0].startswith("Winner: Draw | Board: 3x3 | Moves: 9 | ")
    assert history[1].startswith("Winner: Computer | Board: 7x7 | Moves: 20 | ")
    assert history[2].startswith("Winner: Human | Board: 7x7 | Moves: 9 | ")
    assert db.fetch_history(limit=1) == history[:1]


def test_rows_match_schema(tmp_path):
    path = tmp_path / "games.db"
    db = ResultsDatabase(path)
    db.initialize()
    db.record_result("Human", 9, 17)
    with sqlite3.connect(path) as conn:
        row = conn.execute(
            "SELECT id, winner, board_size, move_count, played_at FROM game_results"
        ).fetchone()
    assert row[0] == 1
    assert row[1:4] == ("Human", 9, 17)
    assert row[4] is not None


def test_format_entry():
    assert (
        format_entry("Human", 7, 11, "2025-11-24 10:00:00")
        == "Winner: Human | Board: 7x7 | Moves: 11 | 2025-11-24 10:00:00"
    )


def test_memory_database_keeps_rows():
    db = ResultsDatabase(":memory:")
    db.initialize()
    db.record_result("Draw", 7, 49)
    assert len(db.fetch_history()) == 1
    db.close()


def test_errors_are_logged_not_raised(tmp_path):
    errors = []
    db = ResultsDatabase(tmp_path / "games.db", logger=errors.append)
    # No initialize(): the table does not exist.
    db.record_result("Human", 7, 9)
    assert db.fetch_history() == []
    assert errors[0].startswith("Error saving game result:")
    assert errors[1].startswith("Error retrieving game history:")


def test_module_level_initialize(tmp_path, monkeypatch):
    monkeypatch.setattr(results_db, "_database", None)
    with pytest.raises(RuntimeError):
        results_db.get_database()
    db = results_db.initialize(tmp_path / "games.db")
    assert results_db.get_database() is db
    db.record_result("Computer", 7, 12)
    assert len(results_db.get_database().fetch_history()) == 1
