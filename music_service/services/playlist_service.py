from typing import List

from music_service.db.models import Playlist
from music_service.repositories.base import PlaylistStore


class PlaylistService:
    """Owner-scoped playlist operations."""

    def __init__(self, store: PlaylistStore):
        self.store = store

    def create_playlist(self, owner_id: int, name: str) -> int:
        return self.store.create(Playlist(name=name, user_id=owner_id))

    def get_all_playlists(self, owner_id: int) -> List[Playlist]:
        return self.store.list_by_owner(owner_id)

    def get_playlist_by_id(self, owner_id: int, playlist_id: int) -> Playlist:
        return self.store.get_by_id(owner_id, playlist_id)

    def update_playlist_by_id(self, owner_id: int, playlist_id: int, name: str) -> Playlist:
        """Rename the playlist and return it as stored, songs included."""
        self.store.update_by_id(
            owner_id, Playlist(id=playlist_id, name=name, user_id=owner_id)
        )
        return self.store.get_by_id(owner_id, playlist_id)

    def delete_playlist_by_id(self, owner_id: int, playlist_id: int) -> None:
        self.store.delete_by_id(owner_id, playlist_id)
