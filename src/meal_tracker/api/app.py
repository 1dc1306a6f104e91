"""FastAPI application factory."""

import logging

from fastapi import FastAPI

from meal_tracker.api.foods import router as foods_router
from meal_tracker.api.habits import router as habits_router
from meal_tracker.api.meals import router as meals_router
from meal_tracker.app_logging import configure_logging
from meal_tracker.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Meal Tracker")
    app.state.container = container

    app.include_router(foods_router)
    app.include_router(meals_router)
    app.include_router(habits_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    logger.info(
        "Meal tracker ready: environment=%s day_timezone=%s",
        container.settings.environment,
        container.settings.day_timezone,
    )
    return app
