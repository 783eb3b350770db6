"""Consumption statistics derived from logged entries."""

from .dates import add_days
from .entries import EntryRepository
from .errors import NotFoundError
from .models import Baseline, BeerEntry, ProgressStats
from .validation import require_iso_date

DAYS_PER_WEEK = 7


class StatsEngine:
    """Computes totals, baselines, and progress from entry reads.

    Nothing is cached; every call re-reads the store.
    """

    def __init__(self, entries: EntryRepository):
        self.entries = entries

    def daily_consumption(self, date: str) -> float:
        """Total volume logged on a single day, 0.0 if nothing was."""
        return self._total_volume(self.entries.get(date, date))

    def weekly_consumption(self, week_start: str) -> float:
        """Total volume over the 7 days starting at week_start.

        Raises:
            InvalidInputError: If week_start is not YYYY-MM-DD
        """
        start = require_iso_date(week_start)
        end = add_days(start, DAYS_PER_WEEK - 1)
        return self._total_volume(self.entries.get(start.isoformat(), end.isoformat()))

    def baseline(self, start_date: str, end_date: str) -> Baseline:
        """Average consumption over a historical range.

        The daily average divides by the number of entries, not by the
        number of calendar days in the range.

        Raises:
            NotFoundError: If the range holds no entries
        """
        entries = self.entries.get(start_date, end_date)
        if not entries:
            raise NotFoundError("No entries found for baseline calculation")

        average_daily = self._per_entry_average(entries)
        return Baseline(
            average_daily=average_daily,
            average_weekly=average_daily * DAYS_PER_WEEK,
        )

    def progress(self, period_start: str, period_end: str) -> ProgressStats:
        """Average consumption over a period.

        Averages the same way as baseline(). The reduction percentage is
        not yet compared against a stored baseline and is always 0.0.

        Raises:
            NotFoundError: If the period holds no entries
        """
        entries = self.entries.get(period_start, period_end)
        if not entries:
            raise NotFoundError("No entries found for progress calculation")

        current_daily_average = self._per_entry_average(entries)
        return ProgressStats(
            current_daily_average=current_daily_average,
            current_weekly_average=current_daily_average * DAYS_PER_WEEK,
            reduction_percentage=0.0,
            period_start=period_start,
            period_end=period_end,
        )

    @staticmethod
    def _total_volume(entries: list[BeerEntry]) -> float:
        return float(sum(e.volume_ml for e in entries))

    def _per_entry_average(self, entries: list[BeerEntry]) -> float:
        return self._total_volume(entries) / len(entries)
