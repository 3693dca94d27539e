from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from music_service.db.base import Base, TimestampMixin

TOKEN_ACTIVE = "active"
TOKEN_INACTIVE = "inactive"


class Token(Base, TimestampMixin):
    """Persisted session token, one row per user."""

    __tablename__ = "tokens"

    id = Column(Integer, primary_key=True, autoincrement=True)
    token = Column(Text, nullable=False)
    expires_at = Column(DateTime, nullable=False)
    status = Column(String(10), default=TOKEN_ACTIVE, nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)

    # Relationships
    user = relationship("User", back_populates="token")
