from fastapi import APIRouter, Depends, status
from blog_app.schemas.post import MessageResponse
from blog_app.schemas.visit import VisitCreate
from blog_app.services.visit_service import VisitService
from blog_app.dependencies import get_visit_service

router = APIRouter(prefix="/visits", tags=["visits"])


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def record_visit(
    visit: VisitCreate,
    visit_service: VisitService = Depends(get_visit_service)
):
    """Record a page view reported by the public site (no auth)"""
    await visit_service.record_visit(visit.ip, visit.user_agent, visit.page)
    return MessageResponse(message="Visit recorded")
