"""Pydantic models for API request bodies.

Fields are loosely typed so that the services report the first violated rule
instead of FastAPI rejecting the payload up front.
"""

from typing import Any

from pydantic import BaseModel


class FoodCreateRequest(BaseModel):
    """Payload for adding a catalog food."""

    name: Any = None
    calories: Any = None
    protein: Any = None
    icon: Any = None


class FavoriteRequest(BaseModel):
    """Payload for setting a food's favorite flag."""

    favorite: bool


class MealCreateRequest(BaseModel):
    """Payload for logging a meal."""

    food_id: Any = None
    meal_time: Any = None
    serving_size: Any = None
    date: Any = None


class HabitsUpdateRequest(BaseModel):
    """Payload for a day's habit check-ins."""

    workout_done: Any = False
    fruits_count: Any = 0
