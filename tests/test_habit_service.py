"""Tests for habit service."""

from datetime import date

import pytest

from meal_tracker.domain.habits import DailyHabits
from meal_tracker.services.habits import HabitService
from tests.conftest import InMemoryHabitRepository

DAY = date(2026, 10, 19)


def test_get_habits_defaults_when_missing() -> None:
    service = HabitService(InMemoryHabitRepository())

    assert service.get_habits(DAY) == DailyHabits(date=DAY)


def test_update_habits_upserts_single_record() -> None:
    repository = InMemoryHabitRepository()
    service = HabitService(repository)

    assert service.update_habits(DAY, workout_done=True, fruits_count=1).success
    assert service.update_habits(DAY, workout_done=False, fruits_count=2).success

    assert repository.habits == {
        DAY: DailyHabits(date=DAY, workout_done=False, fruits_count=2)
    }
    assert service.get_habits(DAY).fruits_count == 2


@pytest.mark.parametrize(
    ("workout_done", "fruits_count", "message"),
    [
        ("yes", 1, "Workout flag must be true or false"),
        (True, 3, "Fruits count must be between 0 and 2"),
        (True, -1, "Fruits count must be between 0 and 2"),
        (True, 1.5, "Fruits count must be between 0 and 2"),
    ],
)
def test_update_habits_validation(
    workout_done: object, fruits_count: object, message: str
) -> None:
    repository = InMemoryHabitRepository()
    service = HabitService(repository)

    result = service.update_habits(DAY, workout_done, fruits_count)

    assert not result.success
    assert result.message == message
    assert not repository.habits


def test_habits_fail_soft_on_read_and_report_on_write() -> None:
    service = HabitService(InMemoryHabitRepository(fail=True))

    assert service.get_habits(DAY) == DailyHabits(date=DAY)
    result = service.update_habits(DAY, True, 1)
    assert not result.success
    assert result.message == "database unavailable"
