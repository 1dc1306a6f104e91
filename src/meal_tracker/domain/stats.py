"""Domain models for daily statistics."""

from dataclasses import dataclass, field

from meal_tracker.domain.meals import Meal


@dataclass(frozen=True)
class DailyStats:
    """Totals and meals for one calendar day."""

    date: str
    total_calories: int = 0
    total_protein: int = 0
    meals: list[Meal] = field(default_factory=list)
    workout_done: bool | None = None
    fruits_count: int | None = None


@dataclass(frozen=True)
class GoalProgress:
    """Daily totals measured against the configured goals."""

    calorie_goal: int
    protein_goal: int
    calories_percent: float
    protein_percent: float
