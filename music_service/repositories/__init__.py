from music_service.repositories.base import (
    CredentialStore,
    PlaylistStore,
    TokenStore,
    TrackStore,
)
from music_service.repositories.credential_store import SQLCredentialStore
from music_service.repositories.playlist_store import SQLPlaylistStore
from music_service.repositories.token_store import SQLTokenStore
from music_service.repositories.track_store import SQLTrackStore

__all__ = [
    "CredentialStore",
    "PlaylistStore",
    "TokenStore",
    "TrackStore",
    "SQLCredentialStore",
    "SQLPlaylistStore",
    "SQLTokenStore",
    "SQLTrackStore",
]
