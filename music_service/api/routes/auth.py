"""
Authentication routes: registration, login and logout.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from music_service.core.exceptions import InvalidCredentialsError, NotFoundError
from music_service.core.security import get_password_hash, verify_password
from music_service.db.models import User
from music_service.dependencies import get_auth_service, get_current_user_id
from music_service.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from music_service.services.auth_service import AuthService

router = APIRouter(prefix="/api/v1", tags=["auth"])

logger = logging.getLogger(__name__)


@router.post("/register")
def register(data: RegisterRequest, auth: AuthService = Depends(get_auth_service)):
    """Register a new user with a bcrypt-hashed password."""
    try:
        auth.find_user_by_email(data.email)
    except NotFoundError:
        pass
    else:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"User with email {data.email} already exists",
        )

    auth.create_user(
        User(
            username=data.username,
            email=data.email,
            password=get_password_hash(data.password),
        )
    )

    logger.info(f"Registered user {data.username}")
    return {"status": "success"}


@router.post("/login", response_model=TokenResponse)
def login(data: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    """
    Log in with email and password.

    The plain password is checked against the stored hash here; the service
    then issues and persists the token.
    """
    try:
        user = auth.find_user_by_email(data.email)
    except NotFoundError:
        raise InvalidCredentialsError("invalid credentials")

    if not verify_password(data.password, user.password):
        logger.warning(f"Wrong password for user {user.id}")
        raise InvalidCredentialsError("invalid credentials")

    token = auth.create_token(user.username, user.password)
    return {"token": token}


@router.post("/logout")
def logout(
    user_id: int = Depends(get_current_user_id),
    auth: AuthService = Depends(get_auth_service),
):
    """Revoke the caller's active token."""
    auth.invalidate_token(user_id)
    return {"status": "successfully logged out", "id": user_id}


@router.get("/ping")
def ping(user_id: int = Depends(get_current_user_id)):
    """Check that the caller's token is accepted."""
    return "pong"
