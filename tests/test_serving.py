"""Tests for serving size adjustment."""

import pytest

from meal_tracker.services.serving import (
    SERVING_MULTIPLIERS,
    adjust_nutrition,
    round_half_up,
    serving_multiplier,
)


@pytest.mark.parametrize(
    ("serving_size", "expected"),
    [
        ("1/4", (41, 8)),
        ("1/3", (55, 10)),
        ("1/2", (83, 16)),
        ("2/3", (110, 21)),
        ("3/4", (124, 23)),
        ("1", (165, 31)),
    ],
)
def test_adjust_nutrition_for_each_serving(
    serving_size: str, expected: tuple[int, int]
) -> None:
    assert adjust_nutrition(165, 31, serving_size) == expected


def test_thirds_use_truncated_multipliers() -> None:
    assert SERVING_MULTIPLIERS["1/3"] == 0.333
    assert SERVING_MULTIPLIERS["2/3"] == 0.667
    assert adjust_nutrition(1000, 3000, "1/3") == (333, 999)


def test_halves_round_up() -> None:
    assert round_half_up(82.5) == 83
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2
    assert adjust_nutrition(5, 1, "1/2") == (3, 1)


def test_unknown_serving_falls_back_to_full() -> None:
    assert serving_multiplier("5/4") == 1.0
    assert adjust_nutrition(200, 10, "") == (200, 10)
