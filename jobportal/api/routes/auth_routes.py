"""
Authentication Routes

POST /auth/login - Sign in (registers the user on first login) and get JWT token
GET /auth/me - Get current user info
"""

import secrets
import string

from fastapi import APIRouter, Depends

from jobportal.core.auth import create_access_token, get_current_user
from jobportal.core.log import get_logger
from jobportal.schemas.schemas import LoginRequest, TokenResponse, User
from jobportal.services.document_service import JobPortalDB, get_database

router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = get_logger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits


def new_user_id() -> str:
    """Random 9-character base-36 id."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))


@router.post("/login", response_model=TokenResponse)
async def login(request: LoginRequest, db: JobPortalDB = Depends(get_database)):
    """
    Sign in with name, email and role.

    A new account is created the first time an email signs in; returning
    users keep their stored name and role.

    Include token in requests: Authorization: Bearer <token>
    """
    user = db.users.find_one(request.email)

    if not user:
        user = db.users.insert_one({
            "id": new_user_id(),
            "name": request.name,
            "email": request.email,
            "role": request.role.value,
            "profile_pic": f"https://picsum.photos/seed/{request.name}/200/200",
            "saved_job_ids": [],
        })
        logger.info("Registered %s user %s", request.role.value, user["id"])

    token = create_access_token(data={"sub": user["id"], "role": user["role"]})
    return TokenResponse(access_token=token, user=User.model_validate(user))


@router.get("/me", response_model=User)
async def get_me(user: dict = Depends(get_current_user)):
    """Get current authenticated user's info."""
    return User.model_validate(user)
