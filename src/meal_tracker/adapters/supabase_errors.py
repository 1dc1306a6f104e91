"""Translation of Supabase client failures into store errors."""

from collections.abc import Iterator
from contextlib import contextmanager

import httpx
from postgrest.exceptions import APIError

from meal_tracker.errors import StoreError


@contextmanager
def store_errors() -> Iterator[None]:
    """Re-raise PostgREST and transport failures as ``StoreError``."""
    try:
        yield
    except APIError as exc:
        raise StoreError(exc.message or str(exc)) from exc
    except httpx.HTTPError as exc:
        raise StoreError(str(exc) or type(exc).__name__) from exc
