"""Meal logging service."""

import logging
from dataclasses import dataclass
from datetime import UTC, tzinfo
from typing import Protocol

from meal_tracker.domain.meals import Meal, NewMeal
from meal_tracker.domain.results import ActionResult
from meal_tracker.errors import MealTrackerError, NotFoundError
from meal_tracker.services.boundary import failure
from meal_tracker.services.days import start_of_day
from meal_tracker.services.foods import FoodRepository
from meal_tracker.services.serving import adjust_nutrition
from meal_tracker.services.validation import validate_meal

_logger = logging.getLogger(__name__)


class MealLogRepository(Protocol):
    """Persistence interface for meal writes."""

    def create_meal(self, meal: NewMeal) -> Meal:
        """Insert a meal and return it with its assigned id."""

    def delete_meal(self, meal_id: str) -> None:
        """Delete a meal by id."""


@dataclass
class MealLogService:
    """Service that scales food macros and persists meals."""

    food_repository: FoodRepository
    repository: MealLogRepository
    day_zone: tzinfo = UTC

    def create_meal(
        self, food_id: object, meal_time: object, serving_size: object, date: object
    ) -> ActionResult:
        """Log a serving of a catalog food on a calendar day."""
        try:
            meal = self._create_meal(food_id, meal_time, serving_size, date)
        except MealTrackerError as exc:
            return failure(_logger, "create meal", exc)
        _logger.info(
            "Logged meal: id=%s food_id=%s calories=%s",
            meal.id,
            meal.food_id,
            meal.calories,
        )
        return ActionResult(success=True, message="Meal logged")

    def delete_meal(self, meal_id: str) -> ActionResult:
        """Delete a meal unconditionally."""
        try:
            self.repository.delete_meal(meal_id)
        except MealTrackerError as exc:
            return failure(_logger, "delete meal", exc)
        return ActionResult(success=True)

    def _create_meal(
        self, food_id: object, meal_time: object, serving_size: object, date: object
    ) -> Meal:
        data = validate_meal(food_id, meal_time, serving_size, date)
        food = self.food_repository.get_food(data.food_id)
        if food is None:
            raise NotFoundError("Food not found")
        calories, protein = adjust_nutrition(
            food.calories, food.protein, data.serving_size
        )
        return self.repository.create_meal(
            NewMeal(
                name=food.name,
                icon=food.icon,
                calories=calories,
                protein=protein,
                serving_size=data.serving_size,
                meal_time=data.meal_time,
                food_id=food.id,
                date=start_of_day(data.day, self.day_zone),
            )
        )
