"""
Security and Authentication

JWT token creation/validation and the admin guard used by the mutating
company and job endpoints.
"""

from typing import Optional, Dict, Any
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from jobly.core.config import Settings
from jobly.core.exceptions import UnauthorizedException
from jobly.utils.logger import get_logger

logger = get_logger(__name__)

# HTTP Bearer token scheme
bearer_scheme = HTTPBearer(auto_error=False)


class SecurityManager:
    """Signs and verifies access tokens."""

    def __init__(self, settings: Settings) -> None:
        """Initialize security manager."""
        self.secret_key = settings.SECRET_KEY
        self.algorithm = settings.ALGORITHM
        self.access_token_expire_minutes = settings.ACCESS_TOKEN_EXPIRE_MINUTES

    def create_access_token(
        self,
        username: str,
        is_admin: bool = False,
        expires_delta: Optional[timedelta] = None
    ) -> str:
        """
        Create JWT access token.

        Args:
            username: Subject of the token
            is_admin: Whether the bearer may call admin endpoints
            expires_delta: Token lifetime (defaults to the configured value)

        Returns:
            str: Encoded JWT token
        """
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(minutes=self.access_token_expire_minutes))

        payload = {
            "sub": username,
            "username": username,
            "isAdmin": is_admin,
            "iat": now,
            "exp": expire,
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode JWT token.

        Raises:
            UnauthorizedException: If the token is malformed, forged or expired
        """
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            logger.warning(f"JWT verification error: {e}")
            raise UnauthorizedException("Could not validate credentials")


def get_security_manager(request: Request) -> SecurityManager:
    return request.app.state.security


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    security: SecurityManager = Depends(get_security_manager),
) -> Dict[str, Any]:
    """
    Dependency to get current authenticated user.

    Raises:
        UnauthorizedException: If the Authorization header is missing or invalid
    """
    if not credentials:
        raise UnauthorizedException("Authorization header missing")

    payload = security.verify_token(credentials.credentials)
    username = payload.get("username") or payload.get("sub")
    if not username:
        raise UnauthorizedException("Invalid token payload")

    return {
        "username": username,
        "is_admin": bool(payload.get("isAdmin", False)),
    }


async def require_admin(
    current_user: Dict[str, Any] = Depends(get_current_user)
) -> Dict[str, Any]:
    """
    Dependency that only lets administrators through.

    Raises:
        UnauthorizedException: If the caller is not an admin
    """
    if not current_user["is_admin"]:
        logger.warning("Admin access denied", username=current_user["username"])
        raise UnauthorizedException("Admin privileges required")
    return current_user
