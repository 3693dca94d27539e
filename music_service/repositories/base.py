"""
Store interfaces.

Each capability has one SQL implementation in this package; services depend
on these interfaces only.
"""

from abc import ABC, abstractmethod
from typing import List

from music_service.db.models import Playlist, Song, Token, User


class CredentialStore(ABC):
    """Data access for user records."""

    @abstractmethod
    def find_by_email(self, email: str) -> User:
        """Return the user with this email or raise NotFoundError."""

    @abstractmethod
    def find_by_id(self, user_id: int) -> User:
        """Return the user with this id or raise NotFoundError."""

    @abstractmethod
    def find_by_username_and_password(self, username: str, password_hash: str) -> User:
        """Return the user matching both fields or raise NotFoundError."""

    @abstractmethod
    def create(self, user: User) -> None:
        """Insert a user, raising AlreadyExistsError on a duplicate."""


class TokenStore(ABC):
    """Persisted session token lifecycle."""

    @abstractmethod
    def save_token(self, token: Token) -> None:
        """Replace the user's token row, or insert one if there is none."""

    @abstractmethod
    def invalidate(self, user_id: int) -> None:
        """Mark the user's active token inactive."""

    @abstractmethod
    def is_valid(self, token: str) -> bool:
        """Return True if the token string is stored and active."""


class PlaylistStore(ABC):
    """Playlist CRUD scoped by owner."""

    @abstractmethod
    def create(self, playlist: Playlist) -> int:
        """Insert a playlist and return its id."""

    @abstractmethod
    def list_by_owner(self, owner_id: int) -> List[Playlist]:
        """Return all playlists of the owner."""

    @abstractmethod
    def get_by_id(self, owner_id: int, playlist_id: int) -> Playlist:
        """Return the owner's playlist or raise NotFoundError."""

    @abstractmethod
    def update_by_id(self, owner_id: int, playlist: Playlist) -> None:
        """Rename the owner's playlist or raise NotFoundError."""

    @abstractmethod
    def delete_by_id(self, owner_id: int, playlist_id: int) -> None:
        """Delete the owner's playlist or raise NotFoundError."""


class TrackStore(ABC):
    """Attach and detach catalog tracks on playlists."""

    @abstractmethod
    def list_songs_for_playlist(self, owner_id: int, playlist_id: int) -> List[Song]:
        """Return the songs on the owner's playlist."""

    @abstractmethod
    def attach(self, owner_id: int, playlist_id: int, song: Song) -> str:
        """Add a song to the owner's playlist and return the song id."""

    @abstractmethod
    def detach(self, owner_id: int, playlist_id: int, song_id: str) -> None:
        """Remove a song from the owner's playlist."""
