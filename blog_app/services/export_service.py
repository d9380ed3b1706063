from typing import Union

from sqlalchemy.orm import Session

from blog_app.exceptions import ValidationError
from blog_app.models.post import Post
from blog_app.models.visit import Visit
from blog_app.schemas.export import ExportResponse, ExportScope
from blog_app.schemas.post import PostResponse
from blog_app.schemas.visit import VisitResponse
from blog_app.timeutils import isoformat_utc, utcnow


class ExportService:
    """Read-only snapshot of posts and/or visits"""

    def __init__(self, db: Session):
        self.db = db

    async def export(self, scope: Union[ExportScope, str] = ExportScope.ALL) -> ExportResponse:
        try:
            scope = ExportScope(scope)
        except ValueError:
            allowed = ", ".join(s.value for s in ExportScope)
            raise ValidationError(f"type must be one of: {allowed}") from None

        posts = None
        visits = None

        if scope in (ExportScope.ALL, ExportScope.POSTS):
            posts = [
                PostResponse.model_validate(post)
                for post in self.db.query(Post).order_by(Post.created_at.desc()).all()
            ]

        if scope in (ExportScope.ALL, ExportScope.VISITS):
            visits = [
                VisitResponse.model_validate(visit)
                for visit in self.db.query(Visit).order_by(Visit.timestamp.desc(), Visit.id.desc()).all()
            ]

        return ExportResponse(posts=posts, visits=visits, export_date=isoformat_utc(utcnow()))
