from pydantic import BaseModel
from typing import Any, Dict, Optional


class LoginRequest(BaseModel):
    password: Optional[str] = None


class LoginResponse(BaseModel):
    token: str
    role: str


class VerifyResponse(BaseModel):
    valid: bool
    user: Dict[str, Any]
