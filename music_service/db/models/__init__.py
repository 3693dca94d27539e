from music_service.db.models.user import User
from music_service.db.models.token import Token, TOKEN_ACTIVE, TOKEN_INACTIVE
from music_service.db.models.playlist import Playlist
from music_service.db.models.song import Song
from music_service.db.models.playlist_song import PlaylistSong

__all__ = [
    "User",
    "Token",
    "TOKEN_ACTIVE",
    "TOKEN_INACTIVE",
    "Playlist",
    "Song",
    "PlaylistSong",
]
