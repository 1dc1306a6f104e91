"""Daily habit check-in service."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from meal_tracker.domain.habits import DailyHabits
from meal_tracker.domain.results import ActionResult
from meal_tracker.errors import MealTrackerError, StoreError
from meal_tracker.services.boundary import failure
from meal_tracker.services.validation import validate_habits

_logger = logging.getLogger(__name__)


class HabitRepository(Protocol):
    """Persistence interface for daily habits."""

    def get_habits(self, day: date) -> DailyHabits | None:
        """Return the habits recorded for a day, if any."""

    def upsert_habits(self, habits: DailyHabits) -> DailyHabits:
        """Create or replace the habits record for its day."""


@dataclass
class HabitService:
    """Service for reading and updating daily habits."""

    repository: HabitRepository

    def get_habits(self, day: date) -> DailyHabits:
        """Return a day's habits, defaulting to nothing done."""
        try:
            habits = self.repository.get_habits(day)
        except StoreError:
            _logger.exception("Failed to load habits for %s", day)
            return DailyHabits(date=day)
        return habits or DailyHabits(date=day)

    def update_habits(
        self, day: date, workout_done: object, fruits_count: object
    ) -> ActionResult:
        """Record the habit check-ins for a day."""
        try:
            data = validate_habits(workout_done, fruits_count)
            self.repository.upsert_habits(
                DailyHabits(
                    date=day,
                    workout_done=data.workout_done,
                    fruits_count=data.fruits_count,
                )
            )
        except MealTrackerError as exc:
            return failure(_logger, "update habits", exc)
        return ActionResult(success=True)
