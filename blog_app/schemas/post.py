from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List, Optional
from blog_app.schemas.types import UTCDateTime


class PostPayload(BaseModel):
    """Body for create and update.

    Fields are optional here so that a missing field reaches the service
    and is reported as a 400 with a readable message, same as an empty one.
    """
    title: Optional[str] = Field(None, description="Post title")
    video: Optional[str] = Field(None, description="URL of the video")
    description: Optional[str] = Field(None, description="Post body")


class PostResponse(BaseModel):
    id: str
    title: str
    video: str
    description: str
    created_at: UTCDateTime
    updated_at: UTCDateTime

    # Pydantic V2 style configuration
    model_config = ConfigDict(from_attributes=True)


class PostUpdateResponse(BaseModel):
    """What an update echoes back (no created_at)"""
    id: str
    title: str
    video: str
    description: str
    updated_at: UTCDateTime

    model_config = ConfigDict(from_attributes=True)


class Pagination(BaseModel):
    """Pagination metadata, serialized with camelCase keys (currentPage, hasNext, ...)"""
    current_page: int
    total_pages: int
    total_posts: int
    has_next: bool
    has_prev: bool

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PostListResponse(BaseModel):
    posts: List[PostResponse]
    pagination: Pagination


class MessageResponse(BaseModel):
    message: str
