"""
Track routes: catalog lookups and playlist membership.
"""

from typing import List

from fastapi import APIRouter, Depends

from music_service.dependencies import get_current_user_id, get_track_service
from music_service.schemas.song import SongSchema
from music_service.services.track_service import TrackService

router = APIRouter(prefix="/api/v1/tracks", tags=["tracks"])


@router.get("/playlist/{playlist_id}", response_model=List[SongSchema])
def get_tracks_from_playlist(
    playlist_id: int,
    user_id: int = Depends(get_current_user_id),
    tracks: TrackService = Depends(get_track_service),
):
    """List the songs on one of the current user's playlists."""
    return tracks.get_songs_from_playlist(user_id, playlist_id)


@router.get("/{track_id}", response_model=SongSchema)
async def get_track(
    track_id: str,
    user_id: int = Depends(get_current_user_id),
    tracks: TrackService = Depends(get_track_service),
):
    """Look up a track in the catalog."""
    return await tracks.get_track_by_id(track_id)


@router.post("/{track_id}/playlist/{playlist_id}")
async def add_track_to_playlist(
    track_id: str,
    playlist_id: int,
    user_id: int = Depends(get_current_user_id),
    tracks: TrackService = Depends(get_track_service),
):
    """Attach a catalog track to one of the current user's playlists."""
    song = await tracks.add_track_to_playlist(user_id, playlist_id, track_id)
    return {"song": SongSchema.model_validate(song)}


@router.delete("/{track_id}/playlist/{playlist_id}")
def remove_track_from_playlist(
    track_id: str,
    playlist_id: int,
    user_id: int = Depends(get_current_user_id),
    tracks: TrackService = Depends(get_track_service),
):
    """Remove a song from one of the current user's playlists."""
    tracks.remove_song(user_id, playlist_id, track_id)
    return "Track removed from playlist"
