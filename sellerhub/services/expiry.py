"""Subscription expiry advisor.

Decides whether a seller's premium plan is close enough to expiry to surface
a renewal nudge in the admin panel. The reference time is always passed in;
nothing here reads the wall clock.
"""

from datetime import date, datetime, time, timezone
from enum import Enum
import math

DEFAULT_ALERT_WINDOW_DAYS = 14

_SECONDS_PER_DAY = 86400


class ExpiryStatus(Enum):
    """Classification of a seller's premium expiry."""

    NONE = "none"  # no expiry set
    ACTIVE = "active"  # more than the alert window remaining
    EXPIRING_SOON = "expiring_soon"  # within the alert window
    EXPIRED = "expired"  # zero or fewer days remaining


def _as_aware(value: date | datetime) -> datetime:
    # Date-only values mean midnight UTC; naive datetimes are read as UTC.
    if not isinstance(value, datetime):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def days_remaining(expiry: date | datetime | None, now: datetime) -> int | None:
    """Whole days until expiry, rounding partial days up.

    Returns:
        None when no expiry is set; zero or negative once expired.
    """
    if expiry is None:
        return None
    delta = _as_aware(expiry) - _as_aware(now)
    return math.ceil(delta.total_seconds() / _SECONDS_PER_DAY)


def is_expiring_soon(
    expiry: date | datetime | None,
    now: datetime,
    window_days: int = DEFAULT_ALERT_WINDOW_DAYS,
) -> bool:
    """True iff the plan expires within (0, window_days] days.

    Already-expired plans return False: this only signals upcoming expiry.
    """
    remaining = days_remaining(expiry, now)
    if remaining is None:
        return False
    return 0 < remaining <= window_days


def classify_expiry(
    expiry: date | datetime | None,
    now: datetime,
    window_days: int = DEFAULT_ALERT_WINDOW_DAYS,
) -> ExpiryStatus:
    remaining = days_remaining(expiry, now)
    if remaining is None:
        return ExpiryStatus.NONE
    if remaining <= 0:
        return ExpiryStatus.EXPIRED
    if remaining <= window_days:
        return ExpiryStatus.EXPIRING_SOON
    return ExpiryStatus.ACTIVE
