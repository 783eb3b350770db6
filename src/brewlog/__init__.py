"""BrewLog - Local consumption logging and goal tracking."""

from .app_logging import configure_logging
from .bridge import BrewLogBridge
from .config import ConfigManager
from .entries import EntryRepository
from .errors import BrewLogError, DatabaseError, InvalidInputError, NotFoundError
from .goals import GoalRepository
from .models import Baseline, BeerEntry, ConsumptionGoal, ProgressStats
from .stats import StatsEngine
from .store import Store
from .tracker import BrewLog

__version__ = "0.1.0"

__all__ = [
    "Baseline",
    "BeerEntry",
    "BrewLog",
    "BrewLogBridge",
    "BrewLogError",
    "ConfigManager",
    "configure_logging",
    "ConsumptionGoal",
    "DatabaseError",
    "EntryRepository",
    "GoalRepository",
    "InvalidInputError",
    "NotFoundError",
    "ProgressStats",
    "StatsEngine",
    "Store",
]
