"""Services for managing the food catalog."""

import logging
from dataclasses import dataclass
from typing import Protocol

from meal_tracker.domain.foods import Food, FoodListing
from meal_tracker.domain.results import ActionResult
from meal_tracker.errors import DuplicateError, MealTrackerError, StoreError
from meal_tracker.services.boundary import failure
from meal_tracker.services.validation import validate_food

_logger = logging.getLogger(__name__)


class FoodRepository(Protocol):
    """Persistence interface for the food catalog."""

    def create_food(self, payload: dict[str, object]) -> Food:
        """Create a food entry and return it."""

    def get_food(self, food_id: str) -> Food | None:
        """Return a food entry by id, if present."""

    def find_by_name(self, name: str) -> Food | None:
        """Return the food with exactly this name, if present."""

    def list_foods(self, favorite: bool) -> list[Food]:
        """Return foods with the given favorite flag ordered by name."""

    def set_favorite(self, food_id: str, favorite: bool) -> None:
        """Update the favorite flag of a food entry."""


@dataclass
class FoodCatalogService:
    """Application service for catalog operations."""

    repository: FoodRepository

    def create_food(
        self, name: object, calories: object, protein: object, icon: object
    ) -> ActionResult:
        """Validate and add a new food to the catalog."""
        try:
            food = self._create_food(name, calories, protein, icon)
        except MealTrackerError as exc:
            return failure(_logger, "create food", exc)
        _logger.info("Created food: id=%s name=%s", food.id, food.name)
        return ActionResult(success=True, message="Food created")

    def get_foods(self) -> FoodListing:
        """Return favorites and regular foods, each sorted by name."""
        try:
            favorites = self.repository.list_foods(favorite=True)
            regular = self.repository.list_foods(favorite=False)
        except StoreError:
            _logger.exception("Failed to list foods")
            return FoodListing(favorite_foods=[], regular_foods=[])
        return FoodListing(
            favorite_foods=_by_name(favorites),
            regular_foods=_by_name(regular),
        )

    def get_food_by_id(self, food_id: str) -> Food | None:
        """Return a food by id, or None when absent or unreadable."""
        if not food_id:
            return None
        try:
            return self.repository.get_food(food_id)
        except StoreError:
            _logger.exception("Failed to load food: id=%s", food_id)
            return None

    def toggle_food_favorite(self, food_id: str, new_value: bool) -> ActionResult:
        """Set the favorite flag of a food."""
        try:
            self.repository.set_favorite(food_id, new_value)
        except MealTrackerError as exc:
            return failure(_logger, "update favorite", exc)
        return ActionResult(success=True)

    def _create_food(
        self, name: object, calories: object, protein: object, icon: object
    ) -> Food:
        data = validate_food(name, calories, protein, icon)
        if self.repository.find_by_name(data.name) is not None:
            raise DuplicateError("A food with this name already exists")
        return self.repository.create_food(
            {
                "name": data.name,
                "calories": data.calories,
                "protein": data.protein,
                "icon": data.icon,
                "favorite": False,
            }
        )


def _by_name(foods: list[Food]) -> list[Food]:
    return sorted(foods, key=lambda food: food.name)
