"""Food catalog endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from meal_tracker.api.models import FavoriteRequest, FoodCreateRequest
from meal_tracker.api.serializers import (
    serialize_food,
    serialize_listing,
    serialize_result,
)

if TYPE_CHECKING:
    from meal_tracker.containers import AppContainer

router = APIRouter(prefix="/foods", tags=["foods"])


@router.get("")
async def list_foods(request: Request) -> dict[str, object]:
    """Return favorite and regular foods."""
    container: AppContainer = request.app.state.container
    return serialize_listing(container.food_service.get_foods())


@router.post("")
async def create_food(body: FoodCreateRequest, request: Request) -> dict[str, object]:
    """Add a food to the catalog."""
    container: AppContainer = request.app.state.container
    result = container.food_service.create_food(
        name=body.name,
        calories=body.calories,
        protein=body.protein,
        icon=body.icon,
    )
    return serialize_result(result)


@router.get("/{food_id}")
async def get_food(food_id: str, request: Request) -> dict[str, object]:
    """Return a single food."""
    container: AppContainer = request.app.state.container
    food = container.food_service.get_food_by_id(food_id)
    if food is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return serialize_food(food)


@router.put("/{food_id}/favorite")
async def set_favorite(
    food_id: str, body: FavoriteRequest, request: Request
) -> dict[str, object]:
    """Set or clear a food's favorite flag."""
    container: AppContainer = request.app.state.container
    result = container.food_service.toggle_food_favorite(food_id, body.favorite)
    return serialize_result(result)
