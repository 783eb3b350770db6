"""Tests for the entry repository."""

import pytest

from brewlog.errors import InvalidInputError, NotFoundError


def _all(entries):
    return entries.get("0000-01-01", "9999-12-31")


class TestAddEntry:
    """Tests for logging entries dated today."""

    def test_add_and_get(self, entries, today):
        """Added entry is returned for today's date."""
        entries.add("Test Beer", 5.0, 330.0, "Test notes")

        result = entries.get(today, today)
        assert len(result) == 1
        assert result[0].name == "Test Beer"
        assert result[0].alcohol_percentage == 5.0
        assert result[0].volume_ml == 330.0
        assert result[0].notes == "Test notes"
        assert result[0].date == today

    def test_add_returns_entry(self, entries, today):
        """add returns the persisted entry with generated fields."""
        entry = entries.add("Pale Ale", 5.0, 330.0, "")
        assert entry.id
        assert entry.date == today
        assert entry.created_at

    def test_add_generates_unique_ids(self, entries):
        """Every added entry gets its own id."""
        ids = {entries.add("Lager", 4.5, 500.0).id for _ in range(5)}
        assert len(ids) == 5

    def test_boundary_percentages_accepted(self, entries):
        """0 and 100 percent are both valid."""
        entries.add("Alcohol-free", 0.0, 330.0)
        entries.add("Pure", 100.0, 10.0)
        assert len(_all(entries)) == 2

    @pytest.mark.parametrize(
        "name,pct,volume,message",
        [
            ("", 5.0, 330.0, "Name cannot be empty"),
            ("Beer", -1.0, 330.0, "between 0 and 100"),
            ("Beer", 101.0, 330.0, "between 0 and 100"),
            ("Beer", 5.0, 0.0, "Volume must be positive"),
            ("Beer", 5.0, -1.0, "Volume must be positive"),
            ("Beer", float("nan"), 330.0, "between 0 and 100"),
            ("Beer", float("inf"), 330.0, "between 0 and 100"),
            ("Beer", 5.0, float("inf"), "Volume must be positive"),
        ],
    )
    def test_invalid_input_persists_nothing(self, entries, name, pct, volume, message):
        """Invalid fields raise InvalidInputError and write no row."""
        with pytest.raises(InvalidInputError) as exc_info:
            entries.add(name, pct, volume, "x")
        assert message in str(exc_info.value)
        assert _all(entries) == []


class TestAddFull:
    """Tests for upserting entries with explicit dates."""

    def test_add_full_with_date(self, entries):
        """Entry is stored under the supplied date."""
        entry = entries.add_full("Stout", 6.0, 440.0, "2026-03-01", "backdated")
        result = entries.get("2026-03-01", "2026-03-01")
        assert [e.id for e in result] == [entry.id]
        assert result[0].notes == "backdated"

    def test_add_full_with_id(self, entries):
        """Supplied id is used as-is."""
        entries.add_full("Stout", 6.0, 440.0, "2026-03-01", entry_id="my-id")
        assert entries.get_by_id("my-id").name == "Stout"

    def test_add_full_empty_id_generates(self, entries):
        """An empty id is treated as missing."""
        entry = entries.add_full("Stout", 6.0, 440.0, "2026-03-01", entry_id="")
        assert entry.id

    def test_add_full_replaces_existing(self, entries):
        """Upserting an existing id replaces its fields."""
        original = entries.add_full("Stout", 6.0, 440.0, "2026-03-01", "a", entry_id="e1")
        replaced = entries.add_full("IPA", 7.0, 500.0, "2026-03-05", "b", entry_id="e1")

        assert len(_all(entries)) == 1
        assert replaced.name == "IPA"
        assert replaced.alcohol_percentage == 7.0
        assert replaced.volume_ml == 500.0
        assert replaced.date == "2026-03-05"
        assert replaced.notes == "b"
        assert replaced.created_at == original.created_at

    def test_add_full_validates_fields(self, entries):
        """add_full applies the same validation as add."""
        with pytest.raises(InvalidInputError):
            entries.add_full("", 5.0, 330.0, "2026-03-01")
        with pytest.raises(InvalidInputError):
            entries.add_full("Beer", 5.0, 0.0, "2026-03-01")
        assert _all(entries) == []

    @pytest.mark.parametrize("bad_date", ["", "not-a-date", "2026-1-5", "2026-02-30"])
    def test_add_full_rejects_bad_date(self, entries, bad_date):
        """Malformed dates are rejected."""
        with pytest.raises(InvalidInputError):
            entries.add_full("Beer", 5.0, 330.0, bad_date)


class TestGetEntries:
    """Tests for range queries."""

    def test_empty_range(self, entries):
        """No matches returns an empty list."""
        assert entries.get("2026-01-01", "2026-01-31") == []

    def test_inclusive_bounds(self, entries):
        """Both range endpoints are included."""
        entries.add_full("A", 5.0, 100.0, "2026-01-01")
        entries.add_full("B", 5.0, 100.0, "2026-01-15")
        entries.add_full("C", 5.0, 100.0, "2026-01-31")
        entries.add_full("D", 5.0, 100.0, "2026-02-01")

        names = [e.name for e in entries.get("2026-01-01", "2026-01-31")]
        assert names == ["C", "B", "A"]

    def test_ordered_by_date_then_creation(self, entries):
        """Newest date first, then newest creation first."""
        entries.add_full("old-day", 5.0, 100.0, "2026-01-01")
        entries.add_full("first", 5.0, 100.0, "2026-01-02")
        entries.add_full("second", 5.0, 100.0, "2026-01-02")
        entries.add_full("third", 5.0, 100.0, "2026-01-02")

        names = [e.name for e in entries.get("2026-01-01", "2026-01-02")]
        assert names == ["third", "second", "first", "old-day"]

    def test_get_is_idempotent(self, entries):
        """Repeated reads without mutation return identical results."""
        entries.add_full("A", 5.0, 100.0, "2026-01-01")
        entries.add_full("B", 4.0, 200.0, "2026-01-02")

        first = entries.get("2026-01-01", "2026-01-31")
        second = entries.get("2026-01-01", "2026-01-31")
        assert first == second

    def test_reversed_range_is_empty(self, entries):
        """A start after the end matches nothing."""
        entries.add_full("A", 5.0, 100.0, "2026-01-10")
        assert entries.get("2026-01-31", "2026-01-01") == []


class TestGetById:
    """Tests for single-entry lookup."""

    def test_get_by_id(self, entries):
        """Existing entry is returned."""
        entry = entries.add("Pilsner", 4.8, 500.0)
        assert entries.get_by_id(entry.id) == entry

    def test_get_by_id_not_found(self, entries):
        """Missing id raises NotFoundError."""
        with pytest.raises(NotFoundError):
            entries.get_by_id("missing")


class TestUpdateEntry:
    """Tests for updating entries."""

    def test_update_fields(self, entries):
        """Editable fields change and the date does not."""
        entry = entries.add_full("Stout", 6.0, 440.0, "2026-03-01", "a")
        entries.update(entry.id, "Porter", 5.5, 500.0, "b")

        updated = entries.get_by_id(entry.id)
        assert updated.name == "Porter"
        assert updated.alcohol_percentage == 5.5
        assert updated.volume_ml == 500.0
        assert updated.notes == "b"
        assert updated.date == "2026-03-01"
        assert updated.created_at == entry.created_at

    def test_update_not_found(self, entries):
        """Updating a missing id raises NotFoundError."""
        with pytest.raises(NotFoundError) as exc_info:
            entries.update("missing", "Beer", 5.0, 330.0, "")
        assert "missing" in str(exc_info.value)

    def test_update_invalid_leaves_row(self, entries):
        """Invalid update raises and keeps the stored values."""
        entry = entries.add("Stout", 6.0, 440.0)
        with pytest.raises(InvalidInputError):
            entries.update(entry.id, "Stout", 150.0, 440.0, "")
        assert entries.get_by_id(entry.id).alcohol_percentage == 6.0

    def test_update_rejects_infinite_volume(self, entries):
        """Infinite volumes are rejected on update too."""
        entry = entries.add("Stout", 6.0, 440.0)
        with pytest.raises(InvalidInputError):
            entries.update(entry.id, "Stout", 6.0, float("inf"), "")
        assert entries.get_by_id(entry.id).volume_ml == 440.0

    def test_update_date(self, entries):
        """update_date moves only the date."""
        entry = entries.add_full("Stout", 6.0, 440.0, "2026-03-01", "a")
        entries.update_date(entry.id, "2026-02-14")

        moved = entries.get_by_id(entry.id)
        assert moved.date == "2026-02-14"
        assert moved.name == "Stout"
        assert entries.get("2026-03-01", "2026-03-01") == []

    def test_update_date_not_found(self, entries):
        """Moving a missing id raises NotFoundError."""
        with pytest.raises(NotFoundError):
            entries.update_date("missing", "2026-02-14")

    def test_update_date_rejects_bad_date(self, entries):
        """Malformed dates are rejected before touching the row."""
        entry = entries.add_full("Stout", 6.0, 440.0, "2026-03-01")
        with pytest.raises(InvalidInputError):
            entries.update_date(entry.id, "yesterday")
        assert entries.get_by_id(entry.id).date == "2026-03-01"


class TestDeleteEntry:
    """Tests for deleting entries."""

    def test_delete(self, entries):
        """Deleted entry no longer appears."""
        entry = entries.add("Stout", 6.0, 440.0)
        entries.delete(entry.id)
        assert _all(entries) == []

    def test_delete_not_found_leaves_data(self, entries):
        """Deleting a missing id raises and changes nothing."""
        entries.add("Stout", 6.0, 440.0)
        before = _all(entries)

        with pytest.raises(NotFoundError):
            entries.delete("missing")
        assert _all(entries) == before

    def test_delete_twice(self, entries):
        """The second delete of the same id raises NotFoundError."""
        entry = entries.add("Stout", 6.0, 440.0)
        entries.delete(entry.id)
        with pytest.raises(NotFoundError):
            entries.delete(entry.id)


class TestClear:
    """Tests for wiping all data."""

    def test_clear_removes_entries_and_goals(self, entries, goals):
        """clear empties both tables."""
        entries.add("Stout", 6.0, 440.0)
        entries.add_full("IPA", 7.0, 500.0, "2026-01-01")
        goals.set(500.0, 3500.0, "2026-01-01", "2026-01-31")

        entries.clear()

        assert _all(entries) == []
        with pytest.raises(NotFoundError):
            goals.get_current()

    def test_clear_empty_store(self, entries):
        """Clearing an empty store is fine."""
        entries.clear()
        assert _all(entries) == []
