"""
Track service: catalog lookups and playlist track membership.
"""

import asyncio
import logging
from typing import List, Optional

from music_service.db.models import Song
from music_service.repositories.base import TrackStore
from music_service.services.catalog import CatalogClient
from music_service.utils.mapper import map_track_to_song


class TrackService:
    """Combines the catalog with the track-association store."""

    def __init__(
        self,
        store: TrackStore,
        catalog: CatalogClient,
        logger: Optional[logging.Logger] = None,
    ):
        self.store = store
        self.catalog = catalog
        self.logger = logger or logging.getLogger(__name__)

    def get_songs_from_playlist(self, owner_id: int, playlist_id: int) -> List[Song]:
        return self.store.list_songs_for_playlist(owner_id, playlist_id)

    def add_song(self, owner_id: int, playlist_id: int, song: Song) -> str:
        return self.store.attach(owner_id, playlist_id, song)

    def remove_song(self, owner_id: int, playlist_id: int, song_id: str) -> None:
        self.store.detach(owner_id, playlist_id, song_id)

    async def get_track_by_id(self, catalog_id: str) -> Song:
        """Look up a catalog track and map it to an unsaved Song."""
        track = await self.catalog.get_track_by_id(catalog_id)
        return map_track_to_song(track)

    async def add_track_to_playlist(
        self, owner_id: int, playlist_id: int, catalog_id: str
    ) -> Song:
        """
        Look up a catalog track and attach it to the owner's playlist.

        Returns:
            The song that was attached

        Raises:
            UpstreamNotFoundError: If the catalog has no such track
            PlaylistNotFoundError: If the playlist does not exist
            PermissionDeniedError: If the playlist belongs to another user
        """
        song = await self.get_track_by_id(catalog_id)
        # Store calls are blocking; run them in the default executor
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self.add_song, owner_id, playlist_id, song)
        self.logger.info(f"Added catalog track {catalog_id} to playlist {playlist_id}")
        return song
