from sqlalchemy import Column, Integer, String

from music_service.db.base import Base


class Song(Base):
    """Catalog track cached locally, keyed by the catalog id."""

    __tablename__ = "songs"

    id = Column(String(64), primary_key=True)
    title = Column(String(255), nullable=False)
    artist = Column(String(255), nullable=False)
    album = Column(String(255), nullable=False, default="")
    album_cover = Column(String(512), nullable=False, default="")
    duration = Column(Integer, nullable=False, default=0)  # seconds
    release_date = Column(String(20), nullable=False, default="")
    popularity = Column(Integer, nullable=False, default=0)
    preview_url = Column(String(512), nullable=False, default="")
    external_url = Column(String(512), nullable=False, default="")
