from fastapi import APIRouter, Depends, Query
from blog_app.schemas.export import ExportResponse
from blog_app.services.export_service import ExportService
from blog_app.dependencies import get_export_service, require_admin

router = APIRouter(prefix="/export", tags=["export"], dependencies=[Depends(require_admin)])


@router.get("", response_model=ExportResponse, response_model_exclude_none=True)
async def export_data(
    scope: str = Query("all", alias="type", description="all, posts or visits"),
    export_service: ExportService = Depends(get_export_service)
):
    """Snapshot of posts and/or visits with the export time"""
    return await export_service.export(scope)
