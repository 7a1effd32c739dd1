"""Shared service-layer helper functions."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

Clock = Callable[[], date]


def today_utc() -> date:
    """Today's date in UTC."""
    return datetime.now(UTC).date()


def clock_for(timezone: str) -> Clock:
    """Return a clock yielding today's date in *timezone* (IANA name)."""
    if timezone.upper() == "UTC":
        return today_utc
    tz = ZoneInfo(timezone)

    def _today() -> date:
        return datetime.now(tz).date()

    return _today


def format_fee(amount: float) -> str:
    """Render a fee as dollars with two decimals.

    Examples:
        >>> format_fee(2.5)
        '$2.50'
    """
    return f"${amount:.2f}"
