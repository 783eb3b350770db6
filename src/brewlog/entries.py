"""Consumption entry persistence."""

import logging
import sqlite3

from .dates import today_iso
from .errors import NotFoundError
from .models import BeerEntry, EntryFields, new_id
from .store import Store
from .validation import build_model, require_iso_date

logger = logging.getLogger(__name__)

ENTRY_COLUMNS = "id, name, alcohol_percentage, volume_ml, date, notes, created_at"


def _row_to_entry(row: sqlite3.Row) -> BeerEntry:
    return BeerEntry(
        id=row["id"],
        name=row["name"],
        alcohol_percentage=row["alcohol_percentage"],
        volume_ml=row["volume_ml"],
        date=row["date"],
        notes=row["notes"] or "",
        created_at=row["created_at"],
    )


class EntryRepository:
    """CRUD operations over logged beer entries."""

    def __init__(self, store: Store):
        self.store = store

    def add(
        self,
        name: str,
        alcohol_percentage: float,
        volume_ml: float,
        notes: str = "",
    ) -> BeerEntry:
        """Log a new entry dated today.

        Args:
            name: Drink name, must be non-empty
            alcohol_percentage: ABV in the range [0, 100]
            volume_ml: Volume, must be positive
            notes: Free text

        Returns:
            The persisted BeerEntry

        Raises:
            InvalidInputError: If any field fails validation
        """
        entry = build_model(
            BeerEntry,
            name=name,
            alcohol_percentage=alcohol_percentage,
            volume_ml=volume_ml,
            date=today_iso(),
            notes=notes,
        )
        with self.store.connection() as conn:
            conn.execute(
                f"INSERT INTO beer_entries ({ENTRY_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?)",
                (
                    entry.id,
                    entry.name,
                    entry.alcohol_percentage,
                    entry.volume_ml,
                    entry.date,
                    entry.notes,
                    entry.created_at,
                ),
            )

        logger.debug("Added entry %s (%s, %.1f ml)", entry.id, entry.name, entry.volume_ml)
        return entry

    def add_full(
        self,
        name: str,
        alcohol_percentage: float,
        volume_ml: float,
        date: str,
        notes: str = "",
        entry_id: str | None = None,
    ) -> BeerEntry:
        """Insert or fully replace an entry with a caller-supplied date.

        An existing row with the same id keeps its original created_at;
        every other field is overwritten.

        Args:
            name: Drink name, must be non-empty
            alcohol_percentage: ABV in the range [0, 100]
            volume_ml: Volume, must be positive
            date: Calendar day as YYYY-MM-DD
            notes: Free text
            entry_id: Id to upsert. A fresh id is generated when omitted or empty.

        Returns:
            The persisted BeerEntry

        Raises:
            InvalidInputError: If any field or the date fails validation
        """
        entry = build_model(
            BeerEntry,
            id=entry_id or new_id(),
            name=name,
            alcohol_percentage=alcohol_percentage,
            volume_ml=volume_ml,
            date=date,
            notes=notes,
        )
        with self.store.connection() as conn:
            conn.execute(
                f"""
                INSERT INTO beer_entries ({ENTRY_COLUMNS})
                VALUES (?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    name = excluded.name,
                    alcohol_percentage = excluded.alcohol_percentage,
                    volume_ml = excluded.volume_ml,
                    date = excluded.date,
                    notes = excluded.notes
                """,
                (
                    entry.id,
                    entry.name,
                    entry.alcohol_percentage,
                    entry.volume_ml,
                    entry.date,
                    entry.notes,
                    entry.created_at,
                ),
            )
            row = conn.execute(
                f"SELECT {ENTRY_COLUMNS} FROM beer_entries WHERE id = ?",
                (entry.id,),
            ).fetchone()

        logger.debug("Upserted entry %s dated %s", entry.id, entry.date)
        return _row_to_entry(row)

    def get(self, start_date: str, end_date: str) -> list[BeerEntry]:
        """Get entries dated within [start_date, end_date], newest first.

        Dates compare as strings, which matches calendar order for
        YYYY-MM-DD values.

        Returns:
            Entries ordered by date, then creation time, both descending
        """
        with self.store.connection() as conn:
            rows = conn.execute(
                f"""
                SELECT {ENTRY_COLUMNS}
                FROM beer_entries
                WHERE date BETWEEN ? AND ?
                ORDER BY date DESC, created_at DESC, rowid DESC
                """,
                (start_date, end_date),
            ).fetchall()

        return [_row_to_entry(row) for row in rows]

    def get_by_id(self, entry_id: str) -> BeerEntry:
        """Get a single entry.

        Raises:
            NotFoundError: If no entry has that id
        """
        with self.store.connection() as conn:
            row = conn.execute(
                f"SELECT {ENTRY_COLUMNS} FROM beer_entries WHERE id = ?",
                (entry_id,),
            ).fetchone()

        if row is None:
            raise NotFoundError(f"Beer entry with id {entry_id} not found")
        return _row_to_entry(row)

    def update(
        self,
        entry_id: str,
        name: str,
        alcohol_percentage: float,
        volume_ml: float,
        notes: str = "",
    ) -> None:
        """Update the editable fields of an entry, leaving its date alone.

        Raises:
            InvalidInputError: If any field fails validation
            NotFoundError: If no entry has that id
        """
        fields = build_model(
            EntryFields,
            name=name,
            alcohol_percentage=alcohol_percentage,
            volume_ml=volume_ml,
            notes=notes,
        )

        with self.store.connection() as conn:
            cursor = conn.execute(
                """
                UPDATE beer_entries
                SET name = ?, alcohol_percentage = ?, volume_ml = ?, notes = ?
                WHERE id = ?
                """,
                (fields.name, fields.alcohol_percentage, fields.volume_ml, fields.notes, entry_id),
            )
            if cursor.rowcount == 0:
                raise NotFoundError(f"Beer entry with id {entry_id} not found")

        logger.debug("Updated entry %s", entry_id)

    def update_date(self, entry_id: str, date: str) -> None:
        """Move an entry to another calendar day.

        Raises:
            InvalidInputError: If the date is not YYYY-MM-DD
            NotFoundError: If no entry has that id
        """
        require_iso_date(date)

        with self.store.connection() as conn:
            cursor = conn.execute(
                "UPDATE beer_entries SET date = ? WHERE id = ?",
                (date, entry_id),
            )
            if cursor.rowcount == 0:
                raise NotFoundError(f"Beer entry with id {entry_id} not found")

        logger.debug("Moved entry %s to %s", entry_id, date)

    def delete(self, entry_id: str) -> None:
        """Delete an entry.

        Raises:
            NotFoundError: If no entry has that id
        """
        with self.store.connection() as conn:
            cursor = conn.execute("DELETE FROM beer_entries WHERE id = ?", (entry_id,))
            if cursor.rowcount == 0:
                raise NotFoundError(f"Beer entry with id {entry_id} not found")

        logger.debug("Deleted entry %s", entry_id)

    def clear(self) -> None:
        """Delete every entry and every goal. Irreversible."""
        with self.store.connection() as conn:
            conn.execute("DELETE FROM beer_entries")
            conn.execute("DELETE FROM consumption_goals")

        logger.info("Cleared all entries and goals")
