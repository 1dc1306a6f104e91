"""Domain models for the food catalog."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Food:
    """Reusable food definition with base nutrition."""

    id: str
    name: str
    calories: int
    protein: int
    icon: str
    favorite: bool = False


@dataclass(frozen=True)
class FoodListing:
    """Catalog split into favorites and the rest, each sorted by name."""

    favorite_foods: list[Food]
    regular_foods: list[Food]
