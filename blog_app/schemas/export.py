from enum import Enum
from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional

from blog_app.schemas.post import PostResponse
from blog_app.schemas.visit import VisitResponse


class ExportScope(str, Enum):
    """Which tables an export includes"""
    ALL = "all"
    POSTS = "posts"
    VISITS = "visits"


class ExportResponse(BaseModel):
    posts: Optional[List[PostResponse]] = None
    visits: Optional[List[VisitResponse]] = None
    export_date: str = Field(..., alias="exportDate")

    model_config = ConfigDict(populate_by_name=True)
