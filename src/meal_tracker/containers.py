"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from meal_tracker.adapters.supabase_food_repository import SupabaseFoodRepository
from meal_tracker.adapters.supabase_habit_repository import SupabaseHabitRepository
from meal_tracker.adapters.supabase_meal_log_repository import (
    SupabaseMealLogRepository,
)
from meal_tracker.adapters.supabase_stats_repository import SupabaseStatsRepository
from meal_tracker.config import Settings
from meal_tracker.services.foods import FoodCatalogService
from meal_tracker.services.habits import HabitService
from meal_tracker.services.meals import MealLogService
from meal_tracker.services.stats import StatsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    food_service: FoodCatalogService
    meal_log_service: MealLogService
    stats_service: StatsService
    habit_service: HabitService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    day_zone = resolved_settings.day_zone
    food_repository = SupabaseFoodRepository(supabase_client)
    meal_log_repository = SupabaseMealLogRepository(supabase_client)
    stats_repository = SupabaseStatsRepository(supabase_client)
    habit_repository = SupabaseHabitRepository(supabase_client)
    food_service = FoodCatalogService(food_repository)
    meal_log_service = MealLogService(
        food_repository=food_repository,
        repository=meal_log_repository,
        day_zone=day_zone,
    )
    stats_service = StatsService(
        repository=stats_repository,
        habit_repository=habit_repository,
        day_zone=day_zone,
        calorie_goal=resolved_settings.calorie_goal,
        protein_goal=resolved_settings.protein_goal,
    )
    habit_service = HabitService(habit_repository)

    return AppContainer(
        settings=resolved_settings,
        food_service=food_service,
        meal_log_service=meal_log_service,
        stats_service=stats_service,
        habit_service=habit_service,
    )
