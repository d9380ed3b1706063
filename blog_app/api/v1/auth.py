from typing import Any, Dict

from fastapi import APIRouter, Depends
from blog_app.schemas.auth import LoginRequest, LoginResponse, VerifyResponse
from blog_app.services.token_service import TokenService
from blog_app.dependencies import get_token_service, require_admin

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: LoginRequest,
    tokens: TokenService = Depends(get_token_service)
):
    """Exchange the admin password for a bearer token valid for 24h"""
    token = tokens.login(credentials.password)
    return LoginResponse(token=token, role="admin")


@router.get("/verify", response_model=VerifyResponse)
async def verify(user: Dict[str, Any] = Depends(require_admin)):
    return VerifyResponse(valid=True, user=user)
