"""Aggregation of logged meals into daily statistics."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import UTC, date, datetime, tzinfo
from typing import Protocol

from meal_tracker.domain.meals import MEAL_TIMES, Meal
from meal_tracker.domain.stats import DailyStats, GoalProgress
from meal_tracker.errors import StoreError
from meal_tracker.services.days import current_day, day_key, day_window
from meal_tracker.services.habits import HabitRepository

_logger = logging.getLogger(__name__)

_MEAL_TIME_ORDER = {meal_time: index for index, meal_time in enumerate(MEAL_TIMES)}

FULL_PERCENT = 100.0


class StatsRepository(Protocol):
    """Read interface over logged meals."""

    def list_meals(self, start: datetime, end: datetime) -> list[Meal]:
        """Return meals with ``start <= date < end``."""

    def list_all_meals(self) -> list[Meal]:
        """Return every logged meal."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class StatsService:
    """Service computing daily totals in the configured day zone."""

    repository: StatsRepository
    habit_repository: HabitRepository | None = None
    day_zone: tzinfo = UTC
    calorie_goal: int = 2000
    protein_goal: int = 150
    clock: Callable[[], datetime] = _utc_now

    def get_today_meals(self) -> DailyStats:
        """Return today's meals and totals; empty when the store fails."""
        day = current_day(self.day_zone, self.clock())
        start, end = day_window(day, self.day_zone)
        try:
            meals = self.repository.list_meals(start, end)
        except StoreError:
            _logger.exception("Failed to load meals for %s", day)
            return DailyStats(date=day.isoformat())
        key = day.isoformat()
        todays = [meal for meal in meals if day_key(meal.date, self.day_zone) == key]
        return self._with_habits(day, _summarize(key, todays))

    def get_history_meals(self) -> list[DailyStats]:
        """Return one summary per logged day, newest first."""
        try:
            meals = self.repository.list_all_meals()
        except StoreError:
            _logger.exception("Failed to load meal history")
            return []
        groups: dict[str, list[Meal]] = {}
        for meal in meals:
            groups.setdefault(day_key(meal.date, self.day_zone), []).append(meal)
        return [_summarize(key, groups[key]) for key in sorted(groups, reverse=True)]

    def get_goal_progress(self, stats: DailyStats) -> GoalProgress:
        """Measure a day's totals against the calorie and protein goals."""
        return GoalProgress(
            calorie_goal=self.calorie_goal,
            protein_goal=self.protein_goal,
            calories_percent=_percent(stats.total_calories, self.calorie_goal),
            protein_percent=_percent(stats.total_protein, self.protein_goal),
        )

    def _with_habits(self, day: date, stats: DailyStats) -> DailyStats:
        if self.habit_repository is None:
            return stats
        try:
            habits = self.habit_repository.get_habits(day)
        except StoreError:
            _logger.exception("Failed to load habits for %s", day)
            return stats
        if habits is None:
            return replace(stats, workout_done=False, fruits_count=0)
        return replace(
            stats, workout_done=habits.workout_done, fruits_count=habits.fruits_count
        )


def sort_meals(meals: list[Meal]) -> list[Meal]:
    """Order meals by meal-time slot, then by name."""
    return sorted(
        meals,
        key=lambda meal: (
            _MEAL_TIME_ORDER.get(meal.meal_time, len(MEAL_TIMES)),
            meal.name,
        ),
    )


def _summarize(key: str, meals: list[Meal]) -> DailyStats:
    return DailyStats(
        date=key,
        total_calories=sum(meal.calories for meal in meals),
        total_protein=sum(meal.protein for meal in meals),
        meals=sort_meals(meals),
    )


def _percent(total: int, goal: int) -> float:
    if goal <= 0:
        return 0.0
    return min(total / goal * 100, FULL_PERCENT)
