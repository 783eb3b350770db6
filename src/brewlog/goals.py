"""Consumption goal persistence."""

import logging

from .errors import NotFoundError
from .models import ConsumptionGoal
from .store import Store
from .validation import build_model

logger = logging.getLogger(__name__)


class GoalRepository:
    """Manages the single active consumption goal."""

    def __init__(self, store: Store):
        self.store = store

    def set(
        self,
        daily_target: float,
        weekly_target: float,
        start_date: str,
        end_date: str,
    ) -> ConsumptionGoal:
        """Replace the current goal with a new one.

        Existing goals are deleted and the new goal inserted in one
        transaction, so readers see either the old goal or the new one.

        Args:
            daily_target: Daily volume target in ml, non-negative
            weekly_target: Weekly volume target in ml, non-negative
            start_date: First day of the goal as YYYY-MM-DD
            end_date: Last day of the goal as YYYY-MM-DD

        Returns:
            The new current goal

        Raises:
            InvalidInputError: If a target is negative or a date is malformed
        """
        goal = build_model(
            ConsumptionGoal,
            daily_target=daily_target,
            weekly_target=weekly_target,
            start_date=start_date,
            end_date=end_date,
        )
        with self.store.connection() as conn:
            conn.execute("DELETE FROM consumption_goals")
            conn.execute(
                """
                INSERT INTO consumption_goals
                (id, daily_target, weekly_target, start_date, end_date, created_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    goal.id,
                    goal.daily_target,
                    goal.weekly_target,
                    goal.start_date,
                    goal.end_date,
                    goal.created_at,
                ),
            )

        logger.info(
            "Set goal %s: %.1f ml/day, %.1f ml/week (%s to %s)",
            goal.id,
            daily_target,
            weekly_target,
            start_date,
            end_date,
        )
        return goal

    def get_current(self) -> ConsumptionGoal:
        """Get the most recently created goal.

        Raises:
            NotFoundError: If no goal has been set
        """
        with self.store.connection() as conn:
            row = conn.execute(
                """
                SELECT id, daily_target, weekly_target, start_date, end_date, created_at
                FROM consumption_goals
                ORDER BY created_at DESC, rowid DESC
                LIMIT 1
                """
            ).fetchone()

        if row is None:
            raise NotFoundError("No consumption goal set")

        return ConsumptionGoal(
            id=row["id"],
            daily_target=row["daily_target"],
            weekly_target=row["weekly_target"],
            start_date=row["start_date"],
            end_date=row["end_date"],
            created_at=row["created_at"],
        )
