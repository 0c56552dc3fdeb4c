"""SQLite storage layer for connection profiles and persisted settings.

Design:
 - SQLite stores profile display attributes (name, user, host, port) only.
   Passwords and tokens never reach this database.
 - The app_state table holds key/value settings such as the configured
   profile name.
 - Each call opens a short-lived connection (thread-safe, WAL mode).
"""
from __future__ import annotations

import contextlib
import os
import sqlite3
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator

def _db_path() -> Path:
    """Resolve SQLite DB path from environment or default."""
    return Path(os.environ.get("APP_DB_PATH", Path("Data") / "app.db"))


@dataclass(frozen=True)
class ProfileRecord:
    id: int
    name: str
    user: str
    host: str
    port: int | None
    is_default: int
    created_at: str


def init_db() -> None:
    """Initialize SQLite schema and enable WAL mode."""
    db_path = _db_path()
    db_path.parent.mkdir(parents=True, exist_ok=True)
    with connect() as conn:
        conn.execute("PRAGMA journal_mode=WAL")
        conn.executescript(
            """
            CREATE TABLE IF NOT EXISTS profiles (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT UNIQUE NOT NULL,
                user TEXT NOT NULL DEFAULT '',
                host TEXT NOT NULL DEFAULT '',
                port INTEGER,
                is_default INTEGER NOT NULL DEFAULT 0,
                created_at TEXT NOT NULL
            );
            CREATE TABLE IF NOT EXISTS app_state (
                key TEXT PRIMARY KEY,
                value TEXT
            );
            """
        )


@contextlib.contextmanager
def connect() -> Iterator[sqlite3.Connection]:
    """Yield a short-lived SQLite connection (thread-safe)."""
    conn = sqlite3.connect(_db_path(), timeout=10, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    try:
        yield conn
        conn.commit()
    finally:
        conn.close()


def _now() -> str:
    """Return UTC timestamp string."""
    return datetime.now(timezone.utc).isoformat()


def list_profiles() -> list[ProfileRecord]:
    """Return profile records in insertion order."""
    init_db()
    with connect() as conn:
        rows = conn.execute("SELECT * FROM profiles ORDER BY id").fetchall()
    return [ProfileRecord(**dict(row)) for row in rows]


def get_profile(name: str) -> ProfileRecord | None:
    """Return profile record by name."""
    init_db()
    with connect() as conn:
        row = conn.execute(
            "SELECT * FROM profiles WHERE name = ?",
            (name,),
        ).fetchone()
    if not row:
        return None
    return ProfileRecord(**dict(row))


def create_profile(name: str, user: str, host: str, port: int | None) -> None:
    """Create a profile record."""
    init_db()
    with connect() as conn:
        conn.execute(
            "INSERT INTO profiles (name, user, host, port, created_at) VALUES (?, ?, ?, ?, ?)",
            (name, user, host, port, _now()),
        )


def delete_profile(name: str) -> None:
    """Delete a profile record."""
    init_db()
    with connect() as conn:
        conn.execute("DELETE FROM profiles WHERE name = ?", (name,))


def set_default_profile(name: str | None) -> None:
    """Flag one profile as the default (None clears the flag)."""
    init_db()
    with connect() as conn:
        conn.execute("UPDATE profiles SET is_default = 0 WHERE is_default != 0")
        if name is not None:
            conn.execute("UPDATE profiles SET is_default = 1 WHERE name = ?", (name,))


def get_default_profile() -> str | None:
    """Return the name of the profile flagged as default."""
    init_db()
    with connect() as conn:
        row = conn.execute(
            "SELECT name FROM profiles WHERE is_default = 1 ORDER BY id LIMIT 1"
        ).fetchone()
    return row["name"] if row else None


def set_app_state(key: str, value: str | None) -> None:
    """Persist a single app state value."""
    init_db()
    with connect() as conn:
        if value is None:
            conn.execute("DELETE FROM app_state WHERE key = ?", (key,))
        else:
            conn.execute(
                "INSERT INTO app_state (key, value) VALUES (?, ?)"
                " ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                (key, value),
            )


def get_app_state(key: str) -> str | None:
    """Fetch a stored app state value."""
    init_db()
    with connect() as conn:
        row = conn.execute("SELECT value FROM app_state WHERE key = ?", (key,)).fetchone()
    return row["value"] if row else None
