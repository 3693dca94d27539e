"""
SQL implementation of the playlist store.

Every statement filters by owner id, and update/delete rely on the affected
row count alone: zero rows means the playlist does not exist or belongs to
another user, and both cases are reported as NotFoundError.
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from music_service.core.exceptions import NotFoundError, StorageError
from music_service.db.models import Playlist, PlaylistSong
from music_service.repositories.base import PlaylistStore


class SQLPlaylistStore(PlaylistStore):
    """Owner-scoped access to the ``playlists`` table."""

    def __init__(self, db: Session, logger: Optional[logging.Logger] = None):
        self.db = db
        self.logger = logger or logging.getLogger(__name__)

    def _fail(self, action: str, exc: SQLAlchemyError) -> StorageError:
        self.db.rollback()
        self.logger.error(f"Unsuccessful {action}: {exc}")
        return StorageError(f"failed to {action}", details=str(exc))

    def create(self, playlist: Playlist) -> int:
        try:
            self.db.add(playlist)
            self.db.commit()
            playlist_id = playlist.id
        except SQLAlchemyError as exc:
            raise self._fail("create playlist", exc) from exc

        self.logger.info(f"Created playlist {playlist_id} for user {playlist.user_id}")
        return playlist_id

    def list_by_owner(self, owner_id: int) -> List[Playlist]:
        try:
            playlists = (
                self.db.execute(
                    select(Playlist)
                    .options(selectinload(Playlist.songs))
                    .where(Playlist.user_id == owner_id)
                    .order_by(Playlist.id)
                )
                .scalars()
                .all()
            )
        except SQLAlchemyError as exc:
            raise self._fail("list playlists", exc) from exc

        self.logger.debug(f"Found {len(playlists)} playlists for user {owner_id}")
        return list(playlists)

    def get_by_id(self, owner_id: int, playlist_id: int) -> Playlist:
        try:
            playlist = (
                self.db.execute(
                    select(Playlist)
                    .options(selectinload(Playlist.songs))
                    .where(Playlist.user_id == owner_id, Playlist.id == playlist_id)
                )
                .scalars()
                .first()
            )
        except SQLAlchemyError as exc:
            raise self._fail("get playlist", exc) from exc

        if playlist is None:
            self.logger.warning(
                f"Playlist {playlist_id} not found for user {owner_id}"
            )
            raise NotFoundError("playlist not found", details=f"id={playlist_id}")
        return playlist

    def update_by_id(self, owner_id: int, playlist: Playlist) -> None:
        try:
            result = self.db.execute(
                update(Playlist)
                .where(Playlist.user_id == owner_id, Playlist.id == playlist.id)
                .values(name=playlist.name)
                .execution_options(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._fail("update playlist", exc) from exc

        if result.rowcount == 0:
            self.logger.warning(
                f"Playlist {playlist.id} not updated for user {owner_id}: no rows"
            )
            raise NotFoundError("playlist not found", details=f"id={playlist.id}")

        self.logger.info(f"Updated playlist {playlist.id}")

    def delete_by_id(self, owner_id: int, playlist_id: int) -> None:
        owned = select(Playlist.id).where(
            Playlist.user_id == owner_id, Playlist.id == playlist_id
        )
        try:
            self.db.execute(
                delete(PlaylistSong)
                .where(PlaylistSong.playlist_id.in_(owned))
                .execution_options(synchronize_session=False)
            )
            result = self.db.execute(
                delete(Playlist)
                .where(Playlist.user_id == owner_id, Playlist.id == playlist_id)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                self.db.rollback()
            else:
                self.db.commit()
        except SQLAlchemyError as exc:
            raise self._fail("delete playlist", exc) from exc

        if result.rowcount == 0:
            self.logger.warning(
                f"Playlist {playlist_id} not deleted for user {owner_id}: no rows"
            )
            raise NotFoundError("playlist not found", details=f"id={playlist_id}")

        self.logger.info(f"Deleted playlist {playlist_id}")
