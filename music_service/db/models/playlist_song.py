from sqlalchemy import Column, ForeignKey, Integer, String

from music_service.db.base import Base


class PlaylistSong(Base):
    """Association between a playlist and a song."""

    __tablename__ = "playlist_songs"

    playlist_id = Column(
        Integer, ForeignKey("playlists.id", ondelete="CASCADE"), primary_key=True
    )
    song_id = Column(String(64), ForeignKey("songs.id"), primary_key=True)
