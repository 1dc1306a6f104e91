"""Supabase implementation for the food catalog."""

from dataclasses import dataclass

from supabase import Client

from meal_tracker.adapters.supabase_errors import store_errors
from meal_tracker.domain.foods import Food
from meal_tracker.errors import NotFoundError, StoreError
from meal_tracker.services.foods import FoodRepository

_COLUMNS = "id, name, calories, protein, icon, favorite"


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository for catalog foods."""

    client: Client

    def create_food(self, payload: dict[str, object]) -> Food:
        """Create a food entry and return it."""
        with store_errors():
            response = self.client.table("foods").insert(payload).execute()
        if not response.data:
            raise StoreError("Failed to create food entry")
        return _parse_food(response.data[0])

    def get_food(self, food_id: str) -> Food | None:
        """Return a food entry by id, if present."""
        with store_errors():
            response = (
                self.client.table("foods")
                .select(_COLUMNS)
                .eq("id", food_id)
                .limit(1)
                .execute()
            )
        if not response.data:
            return None
        return _parse_food(response.data[0])

    def find_by_name(self, name: str) -> Food | None:
        """Return the food with exactly this name, if present."""
        with store_errors():
            response = (
                self.client.table("foods")
                .select(_COLUMNS)
                .eq("name", name)
                .limit(1)
                .execute()
            )
        if not response.data:
            return None
        return _parse_food(response.data[0])

    def list_foods(self, favorite: bool) -> list[Food]:
        """Return foods with the given favorite flag ordered by name."""
        with store_errors():
            response = (
                self.client.table("foods")
                .select(_COLUMNS)
                .eq("favorite", str(favorite).lower())
                .order("name", desc=False)
                .execute()
            )
        return [_parse_food(row) for row in response.data or []]

    def set_favorite(self, food_id: str, favorite: bool) -> None:
        """Update the favorite flag of a food entry."""
        with store_errors():
            response = (
                self.client.table("foods")
                .update({"favorite": favorite})
                .eq("id", food_id)
                .execute()
            )
        if not response.data:
            raise NotFoundError("Food not found")


def _parse_food(row: dict[str, object]) -> Food:
    """Parse a food row into a domain model."""
    return Food(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        calories=int(row.get("calories", 0)),
        protein=int(row.get("protein", 0)),
        icon=str(row.get("icon", "")),
        favorite=bool(row.get("favorite", False)),
    )
