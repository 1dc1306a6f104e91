"""Domain models for meal logging."""

from dataclasses import dataclass
from datetime import datetime

MEAL_TIMES = ("breakfast", "lunch", "dinner", "snack")
SERVING_SIZES = ("1/4", "1/3", "1/2", "2/3", "3/4", "1")


@dataclass(frozen=True)
class Meal:
    """Logged consumption of a food with serving-adjusted macros."""

    id: str
    name: str
    icon: str
    calories: int
    protein: int
    serving_size: str
    meal_time: str
    food_id: str
    date: datetime


@dataclass(frozen=True)
class NewMeal:
    """Meal values ready to be inserted; the store assigns the id."""

    name: str
    icon: str
    calories: int
    protein: int
    serving_size: str
    meal_time: str
    food_id: str
    date: datetime
