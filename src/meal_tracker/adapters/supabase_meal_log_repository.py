"""Supabase repository for meal writes."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from meal_tracker.adapters.supabase_errors import store_errors
from meal_tracker.domain.meals import Meal, NewMeal
from meal_tracker.errors import StoreError
from meal_tracker.services.meals import MealLogRepository

MEAL_COLUMNS = (
    "id, name, icon, calories, protein, serving_size, meal_time, food_id, date"
)


@dataclass
class SupabaseMealLogRepository(MealLogRepository):
    """Supabase implementation for meal writes."""

    client: Client

    def create_meal(self, meal: NewMeal) -> Meal:
        """Insert a meal row and return it."""
        with store_errors():
            response = (
                self.client.table("meals")
                .insert(
                    {
                        "name": meal.name,
                        "icon": meal.icon,
                        "calories": meal.calories,
                        "protein": meal.protein,
                        "serving_size": meal.serving_size,
                        "meal_time": meal.meal_time,
                        "food_id": meal.food_id,
                        "date": meal.date.isoformat(),
                    }
                )
                .execute()
            )
        if not response.data:
            raise StoreError("Failed to create meal")
        return parse_meal(response.data[0])

    def delete_meal(self, meal_id: str) -> None:
        """Delete a meal row by id."""
        with store_errors():
            self.client.table("meals").delete().eq("id", meal_id).execute()


def parse_meal(row: dict[str, object]) -> Meal:
    """Parse a meal row into a domain model."""
    date_raw = row.get("date")
    if not isinstance(date_raw, str) or not date_raw:
        raise StoreError(f"Meal {row.get('id')} has no date")
    try:
        date = datetime.fromisoformat(date_raw)
    except ValueError as exc:
        raise StoreError(f"Meal {row.get('id')} has an invalid date") from exc
    if date.tzinfo is None:
        date = date.replace(tzinfo=UTC)
    return Meal(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        icon=str(row.get("icon", "")),
        calories=int(row.get("calories", 0)),
        protein=int(row.get("protein", 0)),
        serving_size=str(row.get("serving_size", "1")),
        meal_time=str(row.get("meal_time", "")),
        food_id=str(row.get("food_id") or ""),
        date=date,
    )
