"""
Domain errors raised by the stores and services.

The HTTP layer maps each class to a status code; see ``music_service.main``.
"""

from typing import Optional


class MusicServiceError(Exception):
    """Base class for all music service errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class NotFoundError(MusicServiceError):
    """Entity is absent, or is not owned by the caller."""


class PlaylistNotFoundError(NotFoundError):
    """Playlist row does not exist."""

    def __init__(self, playlist_id: int):
        super().__init__("playlist not found", details=f"id={playlist_id}")
        self.playlist_id = playlist_id


class AlreadyExistsError(MusicServiceError):
    """Uniqueness constraint violated on create."""


class PermissionDeniedError(MusicServiceError):
    """Caller does not own the resource."""


class InvalidCredentialsError(MusicServiceError):
    """Password does not match the stored hash."""


class InvalidTokenError(MusicServiceError):
    """Token signature, algorithm or expiry check failed."""


class StorageError(MusicServiceError):
    """Opaque failure from the persistence layer."""


class UpstreamError(MusicServiceError):
    """Catalog provider request failed."""


class UpstreamNotFoundError(UpstreamError):
    """Catalog returned no track for the given id."""

    def __init__(self, catalog_id: str):
        super().__init__("track not found", details=f"id={catalog_id}")
        self.catalog_id = catalog_id
