"""Serving size adjustment of base nutrition."""

import math

SERVING_MULTIPLIERS: dict[str, float] = {
    "1/4": 0.25,
    "1/3": 0.333,
    "1/2": 0.5,
    "2/3": 0.667,
    "3/4": 0.75,
    "1": 1.0,
}


def serving_multiplier(serving_size: str) -> float:
    """Return the multiplier for a serving token; unknown tokens count as 1."""
    return SERVING_MULTIPLIERS.get(serving_size, 1.0)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return math.floor(value + 0.5)


def adjust_nutrition(
    calories: float, protein: float, serving_size: str
) -> tuple[int, int]:
    """Scale base calories and protein to the chosen serving size."""
    multiplier = serving_multiplier(serving_size)
    return (
        round_half_up(calories * multiplier),
        round_half_up(protein * multiplier),
    )
