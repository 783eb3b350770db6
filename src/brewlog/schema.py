"""Table definitions for the BrewLog database."""

import sqlite3

SCHEMA = """
    -- Logged consumption events
    CREATE TABLE IF NOT EXISTS beer_entries (
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        alcohol_percentage REAL NOT NULL,
        volume_ml REAL NOT NULL,
        date TEXT NOT NULL,
        notes TEXT,
        created_at TEXT NOT NULL
    );

    -- Range queries filter and sort on date
    CREATE INDEX IF NOT EXISTS idx_beer_entries_date
        ON beer_entries(date, created_at);

    -- Current goal (at most one row)
    CREATE TABLE IF NOT EXISTS consumption_goals (
        id TEXT PRIMARY KEY,
        daily_target REAL NOT NULL,
        weekly_target REAL NOT NULL,
        start_date TEXT NOT NULL,
        end_date TEXT NOT NULL,
        created_at TEXT NOT NULL
    );
"""


def create_tables(conn: sqlite3.Connection) -> None:
    """Create both tables if they do not exist yet."""
    conn.executescript(SCHEMA)
