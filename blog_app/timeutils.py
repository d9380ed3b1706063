"""
Clock helpers.

Every timestamp in the system comes from the application clock, in UTC,
stored as a naive datetime. Calendar days ("today", daily buckets) are UTC days.
"""

from datetime import datetime, timedelta, timezone


def utcnow() -> datetime:
    """Current UTC time as a naive datetime (the storage format)"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def start_of_day(moment: datetime) -> datetime:
    """Midnight of the UTC day containing `moment`"""
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def days_ago(moment: datetime, days: int) -> datetime:
    return moment - timedelta(days=days)


def isoformat_utc(moment: datetime) -> str:
    """ISO-8601 string with an explicit Z suffix"""
    return moment.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"
