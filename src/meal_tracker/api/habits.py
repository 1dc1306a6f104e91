"""Daily habit endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from meal_tracker.api.models import HabitsUpdateRequest
from meal_tracker.api.serializers import serialize_habits, serialize_result

if TYPE_CHECKING:
    from meal_tracker.containers import AppContainer

router = APIRouter(prefix="/habits", tags=["habits"])


@router.get("/{day}")
async def get_habits(day: date, request: Request) -> dict[str, object]:
    """Return the habit check-ins for a day."""
    container: AppContainer = request.app.state.container
    return serialize_habits(container.habit_service.get_habits(day))


@router.put("/{day}")
async def update_habits(
    day: date, body: HabitsUpdateRequest, request: Request
) -> dict[str, object]:
    """Record the habit check-ins for a day."""
    container: AppContainer = request.app.state.container
    result = container.habit_service.update_habits(
        day, workout_done=body.workout_done, fruits_count=body.fruits_count
    )
    return serialize_result(result)
