"""Domain models for daily habit check-ins."""

from dataclasses import dataclass
from datetime import date

MAX_FRUITS = 2


@dataclass(frozen=True)
class DailyHabits:
    """Habit check-ins recorded for one calendar day."""

    date: date
    workout_done: bool = False
    fruits_count: int = 0
