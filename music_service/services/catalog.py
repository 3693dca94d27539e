"""
Catalog lookup capability.

The track service depends on this interface only; the Spotify client in
``music_service.services.spotify`` is the shipped implementation.
"""

from abc import ABC, abstractmethod

from music_service.schemas.catalog import CatalogTrack


class CatalogClient(ABC):
    """Looks up tracks in the external music catalog."""

    @abstractmethod
    async def get_track_by_id(self, catalog_id: str) -> CatalogTrack:
        """Return the track or raise UpstreamNotFoundError."""

    async def close(self) -> None:
        """Release any resources held by the client."""
