from fastapi import APIRouter, Depends, Query, status
from blog_app.config import settings
from blog_app.schemas.post import (
    MessageResponse,
    PostListResponse,
    PostPayload,
    PostResponse,
    PostUpdateResponse,
)
from blog_app.services.post_service import PostService
from blog_app.dependencies import get_post_service, require_admin

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=PostListResponse)
async def list_posts(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.posts_page_size, ge=1, le=settings.posts_max_page_size),
    post_service: PostService = Depends(get_post_service)
):
    """List posts, newest first, with pagination metadata"""
    return await post_service.list_posts(page=page, limit=limit)


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: str,
    post_service: PostService = Depends(get_post_service)
):
    return await post_service.get_post(post_id)


@router.post(
    "",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)]
)
async def create_post(
    payload: PostPayload,
    post_service: PostService = Depends(get_post_service)
):
    """Create a post (admin only)"""
    return await post_service.create_post(payload.title, payload.video, payload.description)


@router.put("/{post_id}", response_model=PostUpdateResponse, dependencies=[Depends(require_admin)])
async def update_post(
    post_id: str,
    payload: PostPayload,
    post_service: PostService = Depends(get_post_service)
):
    """Replace the content fields of a post (admin only)"""
    return await post_service.update_post(post_id, payload.title, payload.video, payload.description)


@router.delete("/{post_id}", response_model=MessageResponse, dependencies=[Depends(require_admin)])
async def delete_post(
    post_id: str,
    post_service: PostService = Depends(get_post_service)
):
    """Delete a post permanently (admin only)"""
    await post_service.delete_post(post_id)
    return MessageResponse(message="Post deleted")
