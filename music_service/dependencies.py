"""
Dependency injection functions for the API.
"""

import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from music_service.core.config import Settings
from music_service.core.exceptions import InvalidTokenError
from music_service.db.session import get_db
from music_service.repositories import (
    SQLCredentialStore,
    SQLPlaylistStore,
    SQLTokenStore,
    SQLTrackStore,
)
from music_service.services.auth_service import AuthService
from music_service.services.catalog import CatalogClient
from music_service.services.playlist_service import PlaylistService
from music_service.services.track_service import TrackService

# Database dependency
db_dependency = get_db

# OAuth2 scheme for token extraction from the Authorization header
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/v1/login", auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_logger(request: Request) -> logging.Logger:
    return request.app.state.logger


def get_catalog(request: Request) -> CatalogClient:
    return request.app.state.catalog


def get_auth_service(
    db: Session = Depends(db_dependency),
    settings: Settings = Depends(get_settings),
    logger: logging.Logger = Depends(get_logger),
) -> AuthService:
    return AuthService(
        SQLCredentialStore(db, logger.getChild("credentials")),
        SQLTokenStore(db, logger.getChild("tokens")),
        settings,
        logger.getChild("auth"),
    )


def get_playlist_service(
    db: Session = Depends(db_dependency),
    logger: logging.Logger = Depends(get_logger),
) -> PlaylistService:
    return PlaylistService(SQLPlaylistStore(db, logger.getChild("playlists")))


def get_track_service(
    db: Session = Depends(db_dependency),
    catalog: CatalogClient = Depends(get_catalog),
    logger: logging.Logger = Depends(get_logger),
) -> TrackService:
    return TrackService(
        SQLTrackStore(db, logger.getChild("tracks")),
        catalog,
        logger.getChild("track_service"),
    )


async def get_token(token: Optional[str] = Depends(oauth2_scheme)) -> str:
    """Extract the bearer token from the Authorization header."""
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return token


def get_current_user_id(
    token: str = Depends(get_token),
    auth: AuthService = Depends(get_auth_service),
) -> int:
    """
    Resolve the bearer token to a user id.

    The signature and expiry are checked first, then the stored token status,
    so a token revoked by logout is rejected before it expires.
    """
    try:
        user_id = auth.parse_token(token)
    except InvalidTokenError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not auth.is_token_valid(token):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has been revoked",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user_id
