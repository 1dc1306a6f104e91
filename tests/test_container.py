"""Tests for container wiring."""

from meal_tracker.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.food_service is not None
    assert container.stats_service.habit_repository is not None
    assert container.meal_log_service.day_zone == settings.day_zone
    assert container.stats_service.calorie_goal == 2000
