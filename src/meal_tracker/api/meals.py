"""Meal logging and statistics endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from meal_tracker.api.models import MealCreateRequest
from meal_tracker.api.serializers import (
    serialize_goals,
    serialize_result,
    serialize_stats,
)

if TYPE_CHECKING:
    from meal_tracker.containers import AppContainer

router = APIRouter(prefix="/meals", tags=["meals"])


@router.post("")
async def create_meal(body: MealCreateRequest, request: Request) -> dict[str, object]:
    """Log a serving of a catalog food."""
    container: AppContainer = request.app.state.container
    result = container.meal_log_service.create_meal(
        food_id=body.food_id,
        meal_time=body.meal_time,
        serving_size=body.serving_size,
        date=body.date,
    )
    return serialize_result(result)


@router.delete("/{meal_id}")
async def delete_meal(meal_id: str, request: Request) -> dict[str, object]:
    """Remove a logged meal."""
    container: AppContainer = request.app.state.container
    result = container.meal_log_service.delete_meal(meal_id)
    return serialize_result(result)


@router.get("/today")
async def today(request: Request) -> dict[str, object]:
    """Return today's meals, totals and goal progress."""
    container: AppContainer = request.app.state.container
    stats = container.stats_service.get_today_meals()
    payload = serialize_stats(stats)
    payload["goals"] = serialize_goals(container.stats_service.get_goal_progress(stats))
    return payload


@router.get("/history")
async def history(request: Request) -> dict[str, object]:
    """Return per-day summaries, newest first."""
    container: AppContainer = request.app.state.container
    days = container.stats_service.get_history_meals()
    return {"days": [serialize_stats(stats) for stats in days]}
