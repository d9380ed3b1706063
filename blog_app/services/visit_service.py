import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from blog_app.exceptions import StorageError, ValidationError
from blog_app.models.visit import Visit
from blog_app.timeutils import utcnow

logger = logging.getLogger(__name__)


class VisitService:
    """
    Append-only visit recorder.

    No deduplication: every call stores a new row.
    """

    def __init__(self, db: Session):
        self.db = db

    async def record_visit(
        self,
        ip: Optional[str],
        user_agent: Optional[str] = None,
        page: Optional[str] = None
    ) -> Visit:
        if not ip or not ip.strip():
            raise ValidationError("IP address is required")

        visit = Visit(
            ip=ip.strip(),
            user_agent=user_agent or "",
            page=page or "",
            timestamp=utcnow(),
        )
        self.db.add(visit)
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to record visit")
            raise StorageError("Failed to record visit") from exc

        logger.debug("Recorded visit from %s to %r", visit.ip, visit.page)
        return visit
