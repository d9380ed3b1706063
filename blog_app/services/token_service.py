"""
Shared-secret login and bearer tokens.

Tokens are itsdangerous timed signatures over the claims dict, so expiry is
checked from the embedded timestamp without any server-side session table.
"""

import logging
import secrets
from typing import Any, Dict, Optional

from fastapi import status
from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

from blog_app.exceptions import AuthError

logger = logging.getLogger(__name__)

TOKEN_SALT = "admin-auth"
ADMIN_CLAIMS = {"role": "admin", "username": "admin"}


class TokenService:
    """Issues and checks admin bearer tokens"""

    def __init__(self, secret_key: str, admin_password: str, ttl_seconds: int):
        self.admin_password = admin_password
        self.ttl_seconds = ttl_seconds
        self._serializer = URLSafeTimedSerializer(secret_key, salt=TOKEN_SALT)

    def login(self, password: Optional[str]) -> str:
        """Return a fresh token when the password matches, else raise AuthError (401)"""
        if not password or not secrets.compare_digest(
            password.encode("utf-8"), self.admin_password.encode("utf-8")
        ):
            logger.warning("Rejected admin login attempt")
            raise AuthError("Invalid password")

        logger.info("Admin logged in")
        return self.issue(ADMIN_CLAIMS)

    def issue(self, claims: Dict[str, Any]) -> str:
        return self._serializer.dumps(claims)

    def verify(self, token: Optional[str]) -> Dict[str, Any]:
        """
        Check a token and return its claims.

        Raises:
            AuthError: 401 if no token was given, 403 if it is malformed,
                       tampered with or older than the TTL.
        """
        if not token:
            raise AuthError("Access token is missing")

        try:
            claims = self._serializer.loads(token, max_age=self.ttl_seconds)
        except SignatureExpired:
            logger.info("Rejected expired token")
            raise AuthError("Token has expired", status.HTTP_403_FORBIDDEN)
        except BadSignature:
            logger.warning("Rejected token with bad signature")
            raise AuthError("Invalid token", status.HTTP_403_FORBIDDEN)

        if not isinstance(claims, dict) or claims.get("role") != "admin":
            raise AuthError("Invalid token", status.HTTP_403_FORBIDDEN)
        return claims
