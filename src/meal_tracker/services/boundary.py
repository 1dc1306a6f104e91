"""Conversion of service errors into structured results."""

import logging

from meal_tracker.domain.results import ActionResult
from meal_tracker.errors import MealTrackerError, StoreError


def failure(logger: logging.Logger, action: str, exc: MealTrackerError) -> ActionResult:
    """Log a failed write and return it as a structured result."""
    if isinstance(exc, StoreError):
        logger.error("Failed to %s: %s", action, exc.message, exc_info=exc)
    else:
        logger.info("Rejected %s: %s", action, exc.message)
    return ActionResult(success=False, message=exc.message)
