"""
Visit analytics: dashboard rollup and retention cleanup.

All windows are computed in UTC from the application clock, never from the
database's notion of "now", so SQLite and PostgreSQL agree on what "today" is.
"""

import logging
from datetime import datetime, timedelta
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from blog_app.config import settings
from blog_app.exceptions import StorageError, ValidationError
from blog_app.models.visit import Visit
from blog_app.schemas.analytics import AnalyticsSummary, DailyCount, RecentVisit
from blog_app.timeutils import days_ago, start_of_day, utcnow

logger = logging.getLogger(__name__)


class AnalyticsService:
    """
    Aggregates over the visits table.

    summary() runs five independent queries in the same session. They are not
    one atomic snapshot: a visit inserted between them can skew the numbers
    slightly, which is fine for a dashboard.
    """

    def __init__(
        self,
        db: Session,
        recent_limit: int = settings.recent_visits_limit,
        max_days: int = settings.analytics_max_days,
        max_cleanup_days: int = settings.cleanup_max_days
    ):
        self.db = db
        self.recent_limit = recent_limit
        self.max_days = max_days
        self.max_cleanup_days = max_cleanup_days

    async def summary(self, days: int = settings.analytics_default_days, now: Optional[datetime] = None) -> AnalyticsSummary:
        """
        Build the analytics rollup.

        Args:
            days: Size of the trailing window for the daily series. The window
                  starts at midnight `days` days before today, so days=0 is
                  just today.
            now: Reference time (naive UTC). Defaults to the current time.

        Returns:
            AnalyticsSummary with total, unique, today, daily and recent
        """
        if days < 0 or days > self.max_days:
            raise ValidationError(f"days must be between 0 and {self.max_days}")

        now = now or utcnow()
        today_start = start_of_day(now)

        return AnalyticsSummary(
            total=self._total(),
            unique=self._unique(),
            today=self._count_between(today_start, today_start + timedelta(days=1)),
            daily=self._daily(days_ago(today_start, days)),
            recent=self._recent(),
        )

    def _total(self) -> int:
        return self.db.query(func.count(Visit.id)).scalar() or 0

    def _unique(self) -> int:
        return self.db.query(func.count(func.distinct(Visit.ip))).scalar() or 0

    def _count_between(self, start: datetime, end: datetime) -> int:
        return (
            self.db.query(func.count(Visit.id))
            .filter(Visit.timestamp >= start, Visit.timestamp < end)
            .scalar()
        ) or 0

    def _daily(self, window_start: datetime) -> List[DailyCount]:
        """Per-day counts since window_start, ascending; empty days are omitted"""
        day = func.date(Visit.timestamp)
        rows = (
            self.db.query(day.label("date"), func.count(Visit.id).label("count"))
            .filter(Visit.timestamp >= window_start)
            .group_by(day)
            .order_by(day)
            .all()
        )
        # SQLite returns the day as text, PostgreSQL as a date; str() covers both
        return [DailyCount(date=str(row.date), count=row.count) for row in rows]

    def _recent(self) -> List[RecentVisit]:
        visits = (
            self.db.query(Visit)
            .order_by(Visit.timestamp.desc(), Visit.id.desc())
            .limit(self.recent_limit)
            .all()
        )
        return [RecentVisit.model_validate(visit) for visit in visits]

    async def cleanup(self, older_than_days: int = settings.cleanup_default_days, now: Optional[datetime] = None) -> int:
        """
        Delete every visit strictly older than `now - older_than_days`.

        older_than_days=0 removes everything recorded before the call.
        Running it again right away deletes nothing.

        Returns:
            Number of rows removed
        """
        if older_than_days < 0 or older_than_days > self.max_cleanup_days:
            raise ValidationError(f"days must be between 0 and {self.max_cleanup_days}")

        cutoff = days_ago(now or utcnow(), older_than_days)
        try:
            deleted = (
                self.db.query(Visit)
                .filter(Visit.timestamp < cutoff)
                .delete(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Visit cleanup failed")
            raise StorageError("Failed to clean up visits") from exc

        logger.info("Removed %d visits older than %d days (cutoff %s)", deleted, older_than_days, cutoff.isoformat())
        return deleted
