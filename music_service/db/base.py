from sqlalchemy import Column, DateTime
from sqlalchemy.orm import DeclarativeBase

from music_service.utils.datetime_helper import utc_now


class Base(DeclarativeBase):
    """Base class for all models."""


class TimestampMixin:
    """Mixin to add a created_at timestamp."""

    created_at = Column(DateTime, default=utc_now, nullable=False)
