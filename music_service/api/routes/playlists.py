"""
Playlist routes. Every operation is scoped to the authenticated user.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from music_service.dependencies import get_current_user_id, get_playlist_service
from music_service.schemas.playlist import (
    PlaylistCreate,
    PlaylistCreated,
    PlaylistResponse,
    PlaylistUpdate,
)
from music_service.services.playlist_service import PlaylistService

router = APIRouter(prefix="/api/v1/playlist", tags=["playlist"])

logger = logging.getLogger(__name__)


@router.post("", response_model=PlaylistCreated)
def create_playlist(
    data: PlaylistCreate,
    user_id: int = Depends(get_current_user_id),
    playlists: PlaylistService = Depends(get_playlist_service),
):
    """Create a playlist for the current user."""
    playlist_id = playlists.create_playlist(user_id, data.name)
    return {"status": "ok", "id": playlist_id}


@router.get("", response_model=List[PlaylistResponse])
def get_all_playlists(
    user_id: int = Depends(get_current_user_id),
    playlists: PlaylistService = Depends(get_playlist_service),
):
    """List the current user's playlists."""
    return playlists.get_all_playlists(user_id)


@router.get("/{playlist_id}", response_model=PlaylistResponse)
def get_playlist(
    playlist_id: int,
    user_id: int = Depends(get_current_user_id),
    playlists: PlaylistService = Depends(get_playlist_service),
):
    """Get one of the current user's playlists with its songs."""
    return playlists.get_playlist_by_id(user_id, playlist_id)


@router.put("/{playlist_id}", response_model=PlaylistResponse)
def update_playlist(
    playlist_id: int,
    data: PlaylistUpdate,
    user_id: int = Depends(get_current_user_id),
    playlists: PlaylistService = Depends(get_playlist_service),
):
    """Rename one of the current user's playlists."""
    return playlists.update_playlist_by_id(user_id, playlist_id, data.name)


@router.delete("/{playlist_id}")
def delete_playlist(
    playlist_id: int,
    user_id: int = Depends(get_current_user_id),
    playlists: PlaylistService = Depends(get_playlist_service),
):
    """Delete one of the current user's playlists."""
    playlists.delete_playlist_by_id(user_id, playlist_id)
    logger.info(f"Playlist {playlist_id} deleted by user {user_id}")
    return {"message": "playlist deleted"}
