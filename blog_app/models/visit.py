from sqlalchemy import Column, Integer, String, Text, DateTime
from blog_app.database.connection import Base
from blog_app.timeutils import utcnow


class Visit(Base):
    """
    One recorded page view.

    Append-only: rows are never updated, only removed in bulk by the
    retention cleanup.
    """
    __tablename__ = "visits"

    id = Column(Integer, primary_key=True, autoincrement=True)
    ip = Column(String(45), nullable=False, index=True)  # 45 chars fits IPv6
    user_agent = Column(Text, nullable=False, default="")
    page = Column(Text, nullable=False, default="")
    timestamp = Column(DateTime, nullable=False, default=utcnow, index=True)
