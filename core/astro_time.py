from __future__ import annotations
from datetime import datetime, timezone, timedelta

# Lightweight time utilities (no external deps).
# Everything is UTC internally; naive datetimes are taken as UTC.

# J2000.0 reference epoch = JD 2451545.0 (2000 Jan 1 12:00 UTC)
J2000 = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
J2000_JD = 2451545.0

SECONDS_PER_DAY = 86400.0
DAYS_PER_YEAR = 365.25


def as_utc(dt: datetime) -> datetime:
    """Return dt as an aware UTC datetime (naive values are assumed UTC)."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def days_since_j2000(dt: datetime) -> float:
    """Elapsed days (fractional, signed) between J2000.0 and dt."""
    return (as_utc(dt) - J2000).total_seconds() / SECONDS_PER_DAY


def datetime_to_jd(dt: datetime) -> float:
    """Convert a datetime to Julian Date."""
    return J2000_JD + days_since_j2000(dt)


def jd_to_datetime(jd: float) -> datetime:
    """Julian Date -> aware UTC datetime."""
    return J2000 + timedelta(days=jd - J2000_JD)
