"""Result objects returned across the service boundary."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ActionResult:
    """Outcome of a write operation."""

    success: bool
    message: str | None = None
