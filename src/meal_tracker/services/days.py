"""Calendar-day helpers shared by the write and read paths.

A meal's stored instant is the start of its calendar day in the configured
day zone. Reads derive the day back by viewing that instant in the same zone.
"""

from datetime import UTC, date, datetime, time, timedelta, tzinfo

DAY_FORMAT = "%Y-%m-%d"


def parse_day(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` string, raising ``ValueError`` when malformed."""
    return datetime.strptime(value.strip(), DAY_FORMAT).date()


def start_of_day(day: date, zone: tzinfo) -> datetime:
    """Return the UTC instant at which ``day`` begins in ``zone``."""
    return datetime.combine(day, time.min, tzinfo=zone).astimezone(UTC)


def day_window(day: date, zone: tzinfo) -> tuple[datetime, datetime]:
    """Return the half-open ``[start, end)`` UTC window covering ``day``."""
    return start_of_day(day, zone), start_of_day(day + timedelta(days=1), zone)


def day_key(instant: datetime, zone: tzinfo) -> str:
    """Return the ``YYYY-MM-DD`` day an instant falls on in ``zone``."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=UTC)
    return instant.astimezone(zone).date().isoformat()


def current_day(zone: tzinfo, now: datetime) -> date:
    """Return the calendar day of ``now`` in ``zone``."""
    return now.astimezone(zone).date()
