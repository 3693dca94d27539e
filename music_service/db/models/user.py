from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from music_service.db.base import Base, TimestampMixin


class User(Base, TimestampMixin):
    """Registered user. ``password`` holds the bcrypt hash."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), unique=True, index=True, nullable=False)
    email = Column(String(100), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)

    # Relationships
    playlists = relationship("Playlist", back_populates="user")
    token = relationship("Token", back_populates="user", uselist=False)

    def __repr__(self) -> str:
        return f"<User id={self.id} username={self.username!r}>"
