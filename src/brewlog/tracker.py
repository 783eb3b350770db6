"""The BrewLog handle: one store shared by both repositories and stats."""

from pathlib import Path

from .app_logging import configure_logging
from .config import ConfigManager
from .entries import EntryRepository
from .goals import GoalRepository
from .stats import StatsEngine
from .store import Store


class BrewLog:
    """Composes the store, repositories, and stats engine.

    Construct one per process and pass it to every call site.
    """

    def __init__(self, store: Store):
        """Initialize from an already opened store.

        Args:
            store: Opened Store
        """
        self.store = store
        self.entries = EntryRepository(store)
        self.goals = GoalRepository(store)
        self.stats = StatsEngine(self.entries)

    @classmethod
    def open(cls, db_path: Path | str | None = None) -> "BrewLog":
        """Open a tracker on a file path, or in memory when db_path is None.

        Raises:
            DatabaseError: If the database cannot be opened
        """
        return cls(Store(db_path).open())

    @classmethod
    def from_config(cls, config: ConfigManager | None = None) -> "BrewLog":
        """Open a tracker using configuration file settings."""
        config = config or ConfigManager()
        configure_logging(config.get("logging.level", "INFO"))
        return cls.open(config.get("database.path"))

    def close(self) -> None:
        self.store.close()
