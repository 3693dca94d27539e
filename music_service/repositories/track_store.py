"""
SQL implementation of the track-association store.

Attach and detach re-verify playlist ownership on every call. The ownership
check and the writes that follow run in one transaction, with the playlist
row locked where the backend supports ``SELECT ... FOR UPDATE``.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, insert, select
from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from music_service.core.exceptions import (
    PermissionDeniedError,
    PlaylistNotFoundError,
    StorageError,
)
from music_service.db.models import Playlist, PlaylistSong, Song
from music_service.repositories.base import TrackStore

SONG_COLUMNS = (
    "id",
    "title",
    "artist",
    "album",
    "album_cover",
    "duration",
    "release_date",
    "popularity",
    "preview_url",
    "external_url",
)


class SQLTrackStore(TrackStore):
    """Links catalog songs to playlists through ``playlist_songs``."""

    def __init__(self, db: Session, logger: Optional[logging.Logger] = None):
        self.db = db
        self.logger = logger or logging.getLogger(__name__)

    def list_songs_for_playlist(self, owner_id: int, playlist_id: int) -> List[Song]:
        query = (
            select(Song)
            .join(PlaylistSong, PlaylistSong.song_id == Song.id)
            .join(Playlist, Playlist.id == PlaylistSong.playlist_id)
            .where(Playlist.id == playlist_id, Playlist.user_id == owner_id)
        )
        try:
            songs = self.db.execute(query).scalars().all()
        except SQLAlchemyError as exc:
            self.db.rollback()
            self.logger.error(f"Failed to list tracks of playlist {playlist_id}: {exc}")
            raise StorageError("failed to list tracks", details=str(exc)) from exc

        self.logger.debug(f"Found {len(songs)} tracks in playlist {playlist_id}")
        return list(songs)

    def attach(self, owner_id: int, playlist_id: int, song: Song) -> str:
        """
        Add a song to a playlist.

        The song row is inserted only if no row with its id exists; the
        association is inserted only if the song is not already on the
        playlist, so attaching twice is a no-op.

        Raises:
            PlaylistNotFoundError: If the playlist does not exist
            PermissionDeniedError: If the playlist belongs to another user
            StorageError: If any statement fails
        """
        try:
            self._check_owner(owner_id, playlist_id)
            values = {column: getattr(song, column) for column in SONG_COLUMNS}
            self._insert_ignore(
                Song, {key: value for key, value in values.items() if value is not None}
            )
            self._insert_ignore(
                PlaylistSong, {"playlist_id": playlist_id, "song_id": song.id}
            )
            self.db.commit()
        except (PlaylistNotFoundError, PermissionDeniedError):
            self.db.rollback()
            raise
        except SQLAlchemyError as exc:
            self.db.rollback()
            self.logger.error(f"Track {song.id} not added to playlist {playlist_id}: {exc}")
            raise StorageError("failed to add track", details=str(exc)) from exc

        self.logger.info(f"Track {song.id} added to playlist {playlist_id}")
        return song.id

    def detach(self, owner_id: int, playlist_id: int, song_id: str) -> None:
        try:
            self._check_owner(owner_id, playlist_id)
            self.db.execute(
                delete(PlaylistSong)
                .where(
                    PlaylistSong.playlist_id == playlist_id,
                    PlaylistSong.song_id == song_id,
                )
                .execution_options(synchronize_session=False)
            )
            self.db.commit()
        except (PlaylistNotFoundError, PermissionDeniedError):
            self.db.rollback()
            raise
        except SQLAlchemyError as exc:
            self.db.rollback()
            self.logger.error(
                f"Track {song_id} not removed from playlist {playlist_id}: {exc}"
            )
            raise StorageError("failed to remove track", details=str(exc)) from exc

        self.logger.info(f"Track {song_id} removed from playlist {playlist_id}")

    def _check_owner(self, owner_id: int, playlist_id: int) -> None:
        owner = self.db.execute(
            select(Playlist.user_id)
            .where(Playlist.id == playlist_id)
            .with_for_update()
        ).scalar_one_or_none()

        if owner is None:
            self.logger.warning(f"Playlist {playlist_id} not found")
            raise PlaylistNotFoundError(playlist_id)

        if owner != owner_id:
            self.logger.warning(
                f"User {owner_id} does not own playlist {playlist_id}"
            )
            raise PermissionDeniedError("user does not own this playlist")

    def _insert_ignore(self, model, values: Dict[str, Any]) -> None:
        """Insert a row unless one with the same primary key exists."""
        dialect = self.db.get_bind().dialect.name
        keys = [column.name for column in model.__table__.primary_key.columns]

        if dialect == "postgresql":
            stmt = postgresql.insert(model).values(**values).on_conflict_do_nothing(
                index_elements=keys
            )
        elif dialect == "sqlite":
            stmt = sqlite.insert(model).values(**values).on_conflict_do_nothing(
                index_elements=keys
            )
        elif dialect in ("mysql", "mariadb"):
            stmt = mysql.insert(model).values(**values)
            stmt = stmt.on_duplicate_key_update({keys[0]: stmt.inserted[keys[0]]})
        else:
            criteria = [getattr(model, key) == values[key] for key in keys]
            existing = self.db.execute(
                select(getattr(model, keys[0])).where(*criteria)
            ).first()
            if existing is not None:
                return
            stmt = insert(model).values(**values)

        self.db.execute(stmt)
