"""Supabase repository for meal statistics."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from supabase import Client

from meal_tracker.adapters.supabase_errors import store_errors
from meal_tracker.adapters.supabase_meal_log_repository import MEAL_COLUMNS, parse_meal
from meal_tracker.domain.meals import Meal
from meal_tracker.services.stats import StatsRepository

# PostgREST's default max-rows; larger pages are truncated by the server.
DEFAULT_PAGE_SIZE = 1000


@dataclass
class SupabaseStatsRepository(StatsRepository):
    """Supabase implementation for stats queries."""

    client: Client
    page_size: int = DEFAULT_PAGE_SIZE

    def list_meals(self, start: datetime, end: datetime) -> list[Meal]:
        """Return meals in the half-open time range."""
        return self._fetch_pages(
            lambda: self.client.table("meals")
            .select(MEAL_COLUMNS)
            .gte("date", start.isoformat())
            .lt("date", end.isoformat())
            .order("date", desc=False)
            .order("id", desc=False)
        )

    def list_all_meals(self) -> list[Meal]:
        """Return every meal, newest day first."""
        return self._fetch_pages(
            lambda: self.client.table("meals")
            .select(MEAL_COLUMNS)
            .order("date", desc=True)
            .order("id", desc=False)
        )

    def _fetch_pages(self, build_query: Callable[[], Any]) -> list[Meal]:
        """Read page after page until the store returns a short one."""
        rows: list[dict[str, object]] = []
        offset = 0
        while True:
            with store_errors():
                response = (
                    build_query()
                    .range(offset, offset + self.page_size - 1)
                    .execute()
                )
            page = response.data or []
            rows.extend(page)
            if len(page) < self.page_size:
                break
            offset += self.page_size
        return [parse_meal(row) for row in rows]
