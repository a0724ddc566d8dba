"""
Authentication Utility - JWT handling.

Provides:
- JWT token creation/verification
- FastAPI dependencies for protected routes

Users sign in with name + email + role (no passwords); the token subject
is the stored user id.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from jobportal.core.config import get_settings
from jobportal.schemas.schemas import UserRole
from jobportal.services.document_service import JobPortalDB, get_database

# Bearer token extractors
bearer_scheme = HTTPBearer()
optional_bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token."""
    settings = get_settings()
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.jwt_expire_minutes))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> Optional[dict]:
    """Decode and verify JWT token."""
    settings = get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


def _user_from_token(token: str, db: JobPortalDB) -> Optional[dict]:
    payload = decode_token(token)
    if not payload or not payload.get("sub"):
        return None
    return db.users.find_by_id(payload["sub"])


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    db: JobPortalDB = Depends(get_database),
) -> dict:
    """
    FastAPI dependency - Get current authenticated user.

    Usage:
        @app.get("/protected")
        async def route(user: dict = Depends(get_current_user)):
            return user
    """
    user = _user_from_token(credentials.credentials, db)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(optional_bearer_scheme),
    db: JobPortalDB = Depends(get_database),
) -> Optional[dict]:
    """Dependency - Current user if a valid token was sent, else None."""
    if credentials is None:
        return None
    return _user_from_token(credentials.credentials, db)


async def get_current_candidate(user: dict = Depends(get_current_user)) -> dict:
    """Dependency - Require candidate role."""
    if user["role"] != UserRole.candidate.value:
        raise HTTPException(status_code=403, detail="Candidates only")
    return user


async def get_current_recruiter(user: dict = Depends(get_current_user)) -> dict:
    """Dependency - Require recruiter role."""
    if user["role"] != UserRole.recruiter.value:
        raise HTTPException(status_code=403, detail="Recruiters only")
    return user
