"""Supabase repository for daily habits."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

from meal_tracker.adapters.supabase_errors import store_errors
from meal_tracker.domain.habits import DailyHabits
from meal_tracker.errors import StoreError
from meal_tracker.services.habits import HabitRepository


@dataclass
class SupabaseHabitRepository(HabitRepository):
    """Supabase implementation keyed by calendar day."""

    client: Client

    def get_habits(self, day: date) -> DailyHabits | None:
        """Return the habits row for a day, if present."""
        with store_errors():
            response = (
                self.client.table("habits")
                .select("date, workout_done, fruits_count")
                .eq("date", day.isoformat())
                .limit(1)
                .execute()
            )
        if not response.data:
            return None
        return _parse_habits(response.data[0])

    def upsert_habits(self, habits: DailyHabits) -> DailyHabits:
        """Create or replace the habits row for its day."""
        with store_errors():
            response = (
                self.client.table("habits")
                .upsert(
                    {
                        "date": habits.date.isoformat(),
                        "workout_done": habits.workout_done,
                        "fruits_count": habits.fruits_count,
                    },
                    on_conflict="date",
                )
                .execute()
            )
        if not response.data:
            raise StoreError("Failed to save habits")
        return _parse_habits(response.data[0])


def _parse_habits(row: dict[str, object]) -> DailyHabits:
    return DailyHabits(
        date=date.fromisoformat(str(row["date"])[:10]),
        workout_done=bool(row.get("workout_done", False)),
        fruits_count=int(row.get("fruits_count", 0)),
    )
