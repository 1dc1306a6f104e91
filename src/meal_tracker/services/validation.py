"""Input schemas for catalog, meal and habit writes.

Each schema reports problems in field order so the caller can surface the
first violated rule.
"""

from datetime import date, datetime

from pydantic import BaseModel, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from meal_tracker.domain.habits import MAX_FRUITS
from meal_tracker.domain.meals import MEAL_TIMES, SERVING_SIZES
from meal_tracker.errors import ValidationError
from meal_tracker.services.days import parse_day

MAX_ICON_LENGTH = 2


def _fail(kind: str, message: str) -> PydanticCustomError:
    return PydanticCustomError(kind, message)


def _whole_number(value: object, kind: str, message: str) -> int:
    if isinstance(value, bool):
        raise _fail(kind, message)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            value = float(text)
        except ValueError:
            raise _fail(kind, message) from None
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise _fail(kind, message)


class FoodInput(BaseModel):
    """Validated values for a new catalog food."""

    name: str
    calories: int
    protein: int
    icon: str

    @field_validator("name", mode="before")
    @classmethod
    def _check_name(cls, value: object) -> str:
        if not isinstance(value, str) or not value.strip():
            raise _fail("name_required", "Food name is required")
        return value.strip()

    @field_validator("calories", mode="before")
    @classmethod
    def _check_calories(cls, value: object) -> int:
        calories = _whole_number(
            value, "calories_whole", "Calories must be a whole number"
        )
        if calories <= 0:
            raise _fail("calories_positive", "Calories must be a positive number")
        return calories

    @field_validator("protein", mode="before")
    @classmethod
    def _check_protein(cls, value: object) -> int:
        protein = _whole_number(
            value, "protein_whole", "Protein must be a whole number"
        )
        if protein < 0:
            raise _fail("protein_min", "Protein must be 0 or greater")
        return protein

    @field_validator("icon", mode="before")
    @classmethod
    def _check_icon(cls, value: object) -> str:
        icon = value.strip() if isinstance(value, str) else ""
        if not icon:
            raise _fail("icon_required", "Icon is required")
        if len(icon) > MAX_ICON_LENGTH:
            raise _fail("icon_length", "Icon should be 1-2 characters")
        return icon


class MealInput(BaseModel):
    """Validated values for logging a meal."""

    food_id: str
    meal_time: str
    serving_size: str
    day: date

    @field_validator("food_id", mode="before")
    @classmethod
    def _check_food_id(cls, value: object) -> str:
        if not isinstance(value, str) or not value.strip():
            raise _fail("food_id_required", "Food ID is required")
        return value.strip()

    @field_validator("meal_time", mode="before")
    @classmethod
    def _check_meal_time(cls, value: object) -> str:
        if value not in MEAL_TIMES:
            raise _fail("meal_time", "Invalid meal type")
        return value

    @field_validator("serving_size", mode="before")
    @classmethod
    def _check_serving_size(cls, value: object) -> str:
        if value not in SERVING_SIZES:
            raise _fail("serving_size", "Invalid serving size")
        return value

    @field_validator("day", mode="before")
    @classmethod
    def _check_day(cls, value: object) -> date:
        if isinstance(value, date) and not isinstance(value, datetime):
            return value
        if not isinstance(value, str) or not value.strip():
            raise _fail("date_required", "Date is required")
        try:
            return parse_day(value)
        except ValueError:
            raise _fail(
                "date_format", "Date must be a calendar day (YYYY-MM-DD)"
            ) from None


class HabitInput(BaseModel):
    """Validated habit check-ins for one day."""

    workout_done: bool
    fruits_count: int

    @field_validator("workout_done", mode="before")
    @classmethod
    def _check_workout(cls, value: object) -> bool:
        if not isinstance(value, bool):
            raise _fail("workout_done", "Workout flag must be true or false")
        return value

    @field_validator("fruits_count", mode="before")
    @classmethod
    def _check_fruits(cls, value: object) -> int:
        message = f"Fruits count must be between 0 and {MAX_FRUITS}"
        count = _whole_number(value, "fruits_count", message)
        if not 0 <= count <= MAX_FRUITS:
            raise _fail("fruits_count", message)
        return count


def validate_food(
    name: object, calories: object, protein: object, icon: object
) -> FoodInput:
    """Validate catalog input, raising ``ValidationError`` on the first problem."""
    try:
        return FoodInput(name=name, calories=calories, protein=protein, icon=icon)
    except PydanticValidationError as exc:
        raise ValidationError(_first_message(exc)) from exc


def validate_meal(
    food_id: object, meal_time: object, serving_size: object, day: object
) -> MealInput:
    """Validate meal input, raising ``ValidationError`` on the first problem."""
    try:
        return MealInput(
            food_id=food_id, meal_time=meal_time, serving_size=serving_size, day=day
        )
    except PydanticValidationError as exc:
        raise ValidationError(_first_message(exc)) from exc


def validate_habits(workout_done: object, fruits_count: object) -> HabitInput:
    """Validate habit input, raising ``ValidationError`` on the first problem."""
    try:
        return HabitInput(workout_done=workout_done, fruits_count=fruits_count)
    except PydanticValidationError as exc:
        raise ValidationError(_first_message(exc)) from exc


def _first_message(exc: PydanticValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Validation failed"
    return str(errors[0]["msg"])
