import uuid

from sqlalchemy import Column, String, Text, DateTime
from blog_app.database.connection import Base
from blog_app.timeutils import utcnow


def generate_post_id() -> str:
    return str(uuid.uuid4())


class Post(Base):
    """
    Blog post.

    The id is an opaque UUID assigned on insert and never changes.
    Timestamps are naive UTC, assigned by the application (not the database clock)
    so that created_at == updated_at right after creation.
    """
    __tablename__ = "posts"

    id = Column(String(36), primary_key=True, default=generate_post_id)
    title = Column(Text, nullable=False)
    video = Column(Text, nullable=False)  # URL of the embedded video
    description = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow, index=True)
    updated_at = Column(DateTime, nullable=False, default=utcnow)
