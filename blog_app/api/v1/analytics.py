from fastapi import APIRouter, Depends, Query
from blog_app.config import settings
from blog_app.schemas.analytics import AnalyticsSummary, CleanupResponse
from blog_app.services.analytics_service import AnalyticsService
from blog_app.dependencies import get_analytics_service, require_admin

router = APIRouter(prefix="/analytics", tags=["analytics"], dependencies=[Depends(require_admin)])


@router.get("", response_model=AnalyticsSummary)
async def get_analytics(
    days: int = Query(settings.analytics_default_days, ge=0, le=settings.analytics_max_days),
    analytics_service: AnalyticsService = Depends(get_analytics_service)
):
    """Totals, uniques, today's count, daily series and the latest visits"""
    return await analytics_service.summary(days=days)


@router.delete("/cleanup", response_model=CleanupResponse)
async def cleanup_visits(
    days: int = Query(settings.cleanup_default_days, ge=0, le=settings.cleanup_max_days),
    analytics_service: AnalyticsService = Depends(get_analytics_service)
):
    """Delete visits older than `days` days"""
    deleted = await analytics_service.cleanup(older_than_days=days)
    return CleanupResponse(
        message=f"Removed {deleted} visits older than {days} days",
        deleted=deleted,
    )
