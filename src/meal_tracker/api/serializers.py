"""JSON serialization of domain objects for API responses."""

from meal_tracker.domain.foods import Food, FoodListing
from meal_tracker.domain.habits import DailyHabits
from meal_tracker.domain.meals import Meal
from meal_tracker.domain.results import ActionResult
from meal_tracker.domain.stats import DailyStats, GoalProgress


def serialize_food(food: Food) -> dict[str, object]:
    return {
        "id": food.id,
        "name": food.name,
        "calories": food.calories,
        "protein": food.protein,
        "icon": food.icon,
        "favorite": food.favorite,
    }


def serialize_listing(listing: FoodListing) -> dict[str, object]:
    return {
        "favorite_foods": [serialize_food(food) for food in listing.favorite_foods],
        "regular_foods": [serialize_food(food) for food in listing.regular_foods],
    }


def serialize_meal(meal: Meal) -> dict[str, object]:
    return {
        "id": meal.id,
        "name": meal.name,
        "icon": meal.icon,
        "calories": meal.calories,
        "protein": meal.protein,
        "serving_size": meal.serving_size,
        "meal_time": meal.meal_time,
        "food_id": meal.food_id,
        "date": meal.date.isoformat(),
    }


def serialize_stats(stats: DailyStats) -> dict[str, object]:
    payload: dict[str, object] = {
        "date": stats.date,
        "total_calories": stats.total_calories,
        "total_protein": stats.total_protein,
        "meals": [serialize_meal(meal) for meal in stats.meals],
    }
    if stats.workout_done is not None:
        payload["workout_done"] = stats.workout_done
    if stats.fruits_count is not None:
        payload["fruits_count"] = stats.fruits_count
    return payload


def serialize_goals(progress: GoalProgress) -> dict[str, object]:
    return {
        "calorie_goal": progress.calorie_goal,
        "protein_goal": progress.protein_goal,
        "calories_percent": progress.calories_percent,
        "protein_percent": progress.protein_percent,
    }


def serialize_habits(habits: DailyHabits) -> dict[str, object]:
    return {
        "date": habits.date.isoformat(),
        "workout_done": habits.workout_done,
        "fruits_count": habits.fruits_count,
    }


def serialize_result(result: ActionResult) -> dict[str, object]:
    return {"success": result.success, "message": result.message}
