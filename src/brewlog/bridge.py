"""Flat call surface for host bindings.

Host bindings can only pass primitives across the language boundary, so
every call here returns plain text or a float:

* mutating calls return ``"OK"`` or ``"Error: <message>"``
* numeric reads return the value, or ``-1.0`` on failure
* bulk reads return JSON text, or ``"Error: <message>"`` on failure

Typed errors are only flattened here. Python callers should use
``BrewLog`` directly and handle ``BrewLogError`` subclasses.
"""

import json
import logging
import threading
from collections.abc import Callable
from typing import Any

from .errors import BrewLogError
from .tracker import BrewLog

logger = logging.getLogger(__name__)

OK = "OK"
ERROR_PREFIX = "Error: "
FAILURE_SENTINEL = -1.0
NOT_INITIALIZED = "Tracker not initialized"


class BrewLogBridge:
    """Boundary adapter over a single, once-initialized BrewLog handle."""

    def __init__(self):
        self._tracker: BrewLog | None = None
        self._init_lock = threading.Lock()

    @property
    def tracker(self) -> BrewLog | None:
        return self._tracker

    # --- Lifecycle ---

    def init_brew_log(self) -> str:
        """Initialize a non-durable in-memory tracker."""
        return self._init(None)

    def init_brew_log_with_path(self, path: str) -> str:
        """Initialize a tracker backed by the database file at path."""
        return self._init(path or None)

    def _init(self, path: str | None) -> str:
        with self._init_lock:
            if self._tracker is not None:
                logger.warning("Rejected second tracker initialization")
                return f"{ERROR_PREFIX}Tracker already initialized"
            try:
                self._tracker = BrewLog.open(path)
            except BrewLogError as e:
                logger.warning("Tracker initialization failed: %s", e)
                return f"{ERROR_PREFIX}{e}"
        return OK

    # --- Mutations ---

    def add_beer_entry(
        self, name: str, alcohol_percentage: float, volume_ml: float, notes: str
    ) -> str:
        return self._status(
            "add_beer_entry",
            lambda t: t.entries.add(name, alcohol_percentage, volume_ml, notes),
        )

    def add_beer_entry_full(
        self,
        entry_id: str,
        name: str,
        alcohol_percentage: float,
        volume_ml: float,
        date: str,
        notes: str,
    ) -> str:
        return self._status(
            "add_beer_entry_full",
            lambda t: t.entries.add_full(
                name, alcohol_percentage, volume_ml, date, notes, entry_id=entry_id or None
            ),
        )

    def update_beer_entry(
        self,
        entry_id: str,
        name: str,
        alcohol_percentage: float,
        volume_ml: float,
        notes: str,
    ) -> str:
        return self._status(
            "update_beer_entry",
            lambda t: t.entries.update(entry_id, name, alcohol_percentage, volume_ml, notes),
        )

    def update_beer_entry_date(self, entry_id: str, date: str) -> str:
        return self._status(
            "update_beer_entry_date", lambda t: t.entries.update_date(entry_id, date)
        )

    def delete_beer_entry(self, entry_id: str) -> str:
        return self._status("delete_beer_entry", lambda t: t.entries.delete(entry_id))

    def delete_all_data(self) -> str:
        return self._status("delete_all_data", lambda t: t.entries.clear())

    def set_consumption_goal(
        self, daily_target: float, weekly_target: float, start_date: str, end_date: str
    ) -> str:
        return self._status(
            "set_consumption_goal",
            lambda t: t.goals.set(daily_target, weekly_target, start_date, end_date),
        )

    # --- Numeric reads ---

    def get_daily_consumption(self, date: str) -> float:
        return self._number("get_daily_consumption", lambda t: t.stats.daily_consumption(date))

    def get_weekly_consumption(self, week_start_date: str) -> float:
        return self._number(
            "get_weekly_consumption", lambda t: t.stats.weekly_consumption(week_start_date)
        )

    # --- JSON reads ---

    def get_beer_entries_json(self, start_date: str, end_date: str) -> str:
        return self._json(
            "get_beer_entries_json",
            lambda t: [e.to_export() for e in t.entries.get(start_date, end_date)],
        )

    def get_current_goal_json(self) -> str:
        return self._json(
            "get_current_goal_json",
            lambda t: t.goals.get_current().model_dump(exclude={"created_at"}),
        )

    def calculate_baseline_json(self, start_date: str, end_date: str) -> str:
        return self._json(
            "calculate_baseline_json",
            lambda t: t.stats.baseline(start_date, end_date).model_dump(),
        )

    def get_progress_stats_json(self, period_start: str, period_end: str) -> str:
        return self._json(
            "get_progress_stats_json",
            lambda t: t.stats.progress(period_start, period_end).model_dump(),
        )

    # --- Flattening ---

    def _call(self, action: Callable[[BrewLog], Any]) -> Any:
        if self._tracker is None:
            raise _NotInitialized()
        return action(self._tracker)

    def _status(self, op: str, action: Callable[[BrewLog], Any]) -> str:
        try:
            self._call(action)
        except _NotInitialized:
            return f"{ERROR_PREFIX}{NOT_INITIALIZED}"
        except BrewLogError as e:
            logger.warning("%s failed: %s", op, e)
            return f"{ERROR_PREFIX}{e}"
        return OK

    def _number(self, op: str, action: Callable[[BrewLog], float]) -> float:
        try:
            return float(self._call(action))
        except _NotInitialized:
            return FAILURE_SENTINEL
        except BrewLogError as e:
            logger.warning("%s failed: %s", op, e)
            return FAILURE_SENTINEL

    def _json(self, op: str, action: Callable[[BrewLog], Any]) -> str:
        try:
            payload = self._call(action)
        except _NotInitialized:
            return f"{ERROR_PREFIX}{NOT_INITIALIZED}"
        except BrewLogError as e:
            logger.warning("%s failed: %s", op, e)
            return f"{ERROR_PREFIX}{e}"
        return json.dumps(payload)


class _NotInitialized(Exception):
    pass
