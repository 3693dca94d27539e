from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from music_service.db.base import Base


class Playlist(Base):
    """Playlist owned by a single user."""

    __tablename__ = "playlists"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    name = Column(String(100), nullable=False)

    # Relationships
    user = relationship("User", back_populates="playlists")
    songs = relationship("Song", secondary="playlist_songs", viewonly=True)
