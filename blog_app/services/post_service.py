import logging
import math
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from blog_app.config import settings
from blog_app.exceptions import NotFoundError, StorageError, ValidationError
from blog_app.models.post import Post, generate_post_id
from blog_app.schemas.post import Pagination, PostListResponse, PostResponse
from blog_app.timeutils import utcnow

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "video", "description")


def validate_post_fields(title: Optional[str], video: Optional[str], description: Optional[str]) -> None:
    """Raise ValidationError naming every missing or blank field"""
    values = {"title": title, "video": video, "description": description}
    missing = [name for name in REQUIRED_FIELDS if not values[name] or not values[name].strip()]
    if missing:
        raise ValidationError(f"All fields are required: missing {', '.join(missing)}")


def build_pagination(page: int, limit: int, total: int) -> Pagination:
    """
    Pagination metadata computed from the true total.

    A page past the end is not an error: it just has no rows,
    and the metadata still describes the real collection.
    """
    return Pagination(
        current_page=page,
        total_pages=math.ceil(total / limit),
        total_posts=total,
        has_next=page * limit < total,
        has_prev=page > 1,
    )


class PostService:
    """
    Post store: CRUD over posts, newest first.

    The session is injected per request (see dependencies.get_post_service).
    Methods are async for interface consistency with the routes; the DB
    calls themselves are sync.
    """

    def __init__(self, db: Session, max_page_size: int = settings.posts_max_page_size):
        self.db = db
        self.max_page_size = max_page_size

    def _commit(self, action: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to %s post", action)
            raise StorageError(f"Failed to {action} post") from exc

    async def list_posts(self, page: int = 1, limit: int = settings.posts_page_size) -> PostListResponse:
        """Return one page of posts ordered by created_at descending"""
        if page < 1:
            raise ValidationError("page must be >= 1")
        if limit < 1 or limit > self.max_page_size:
            raise ValidationError(f"limit must be between 1 and {self.max_page_size}")

        total = self.db.query(Post).count()
        offset = (page - 1) * limit
        posts: List[Post] = []
        # Past the end: skip the query, the offset may not even fit in a DB integer
        if offset < total:
            posts = (
                self.db.query(Post)
                .order_by(Post.created_at.desc())
                .offset(offset)
                .limit(limit)
                .all()
            )

        return PostListResponse(
            posts=[PostResponse.model_validate(post) for post in posts],
            pagination=build_pagination(page, limit, total),
        )

    async def get_post(self, post_id: str) -> Post:
        post = self.db.get(Post, post_id)
        if post is None:
            raise NotFoundError("Post not found")
        return post

    async def create_post(self, title: str, video: str, description: str) -> Post:
        """Create a post with a fresh id; created_at and updated_at share one timestamp"""
        validate_post_fields(title, video, description)

        now = utcnow()
        post = Post(
            id=generate_post_id(),
            title=title,
            video=video,
            description=description,
            created_at=now,
            updated_at=now,
        )
        self.db.add(post)
        self._commit("create")
        self.db.refresh(post)

        logger.info("Created post %s", post.id)
        return post

    async def update_post(self, post_id: str, title: str, video: str, description: str) -> Post:
        """Overwrite the content fields and bump updated_at; id and created_at never change"""
        validate_post_fields(title, video, description)

        post = self.db.get(Post, post_id)
        if post is None:
            raise NotFoundError("Post not found")

        post.title = title
        post.video = video
        post.description = description
        post.updated_at = max(utcnow(), post.created_at)
        self._commit("update")
        self.db.refresh(post)

        logger.info("Updated post %s", post.id)
        return post

    async def delete_post(self, post_id: str) -> None:
        """Hard delete"""
        post = self.db.get(Post, post_id)
        if post is None:
            raise NotFoundError("Post not found")

        self.db.delete(post)
        self._commit("delete")
        logger.info("Deleted post %s", post_id)
