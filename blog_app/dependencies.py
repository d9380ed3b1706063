"""
FastAPI dependencies for dependency injection.

Services are built per request around the request's database session;
the token service is a singleton built from settings. Nothing here is an
ambient global that handlers reach for directly: tests swap any of these
through app.dependency_overrides.
"""

from functools import lru_cache
from typing import Any, Dict, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from blog_app.config import settings
from blog_app.database.connection import get_db
from blog_app.services.analytics_service import AnalyticsService
from blog_app.services.export_service import ExportService
from blog_app.services.post_service import PostService
from blog_app.services.token_service import TokenService
from blog_app.services.visit_service import VisitService

# auto_error=False so a missing header is reported by us as 401 {error}
bearer_scheme = HTTPBearer(auto_error=False)


@lru_cache()
def get_token_service() -> TokenService:
    """
    Get token service instance (singleton).

    @lru_cache ensures this is built only once.
    """
    return TokenService(
        secret_key=settings.secret_key,
        admin_password=settings.admin_password,
        ttl_seconds=settings.token_ttl_seconds,
    )


def require_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service)
) -> Dict[str, Any]:
    """Guard for admin routes: returns the token claims or raises AuthError"""
    token = credentials.credentials if credentials else None
    return tokens.verify(token)


def get_post_service(db: Session = Depends(get_db)) -> PostService:
    return PostService(db=db)


def get_visit_service(db: Session = Depends(get_db)) -> VisitService:
    return VisitService(db=db)


def get_analytics_service(db: Session = Depends(get_db)) -> AnalyticsService:
    return AnalyticsService(db=db)


def get_export_service(db: Session = Depends(get_db)) -> ExportService:
    return ExportService(db=db)
