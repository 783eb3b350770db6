"""Shared test fixtures for BrewLog."""

from datetime import date

import pytest

from brewlog.bridge import BrewLogBridge
from brewlog.entries import EntryRepository
from brewlog.goals import GoalRepository
from brewlog.stats import StatsEngine
from brewlog.store import Store
from brewlog.tracker import BrewLog


@pytest.fixture
def store():
    """Create an opened in-memory store."""
    s = Store().open()
    yield s
    s.close()


@pytest.fixture
def file_store(tmp_path):
    """Create an opened store backed by a temporary file."""
    s = Store(db_path=tmp_path / "brewlog.db").open()
    yield s
    s.close()


@pytest.fixture
def entries(store):
    """Create an EntryRepository over the in-memory store."""
    return EntryRepository(store)


@pytest.fixture
def goals(store):
    """Create a GoalRepository over the in-memory store."""
    return GoalRepository(store)


@pytest.fixture
def stats(entries):
    """Create a StatsEngine over the entry repository."""
    return StatsEngine(entries)


@pytest.fixture
def tracker():
    """Create an in-memory BrewLog handle."""
    t = BrewLog.open()
    yield t
    t.close()


@pytest.fixture
def bridge():
    """Create an initialized in-memory bridge."""
    b = BrewLogBridge()
    assert b.init_brew_log() == "OK"
    yield b
    b.tracker.close()


@pytest.fixture
def today():
    """Today's date as YYYY-MM-DD."""
    return date.today().isoformat()
