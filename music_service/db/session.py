"""
Database engine and session management.
"""

from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from music_service.core.config import Settings
from music_service.db.base import Base


def create_engine_from_settings(settings: Settings) -> Engine:
    """
    Create the process-wide SQLAlchemy engine.

    SQLite connections are shared across the worker threads FastAPI runs sync
    dependencies in, and an in-memory database is pinned to one connection so
    every session sees the same data.
    """
    url = settings.database_url
    kwargs = {"echo": settings.database_echo, "pool_pre_ping": True}

    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in url or url in ("sqlite://", "sqlite+pysqlite://"):
            kwargs["poolclass"] = StaticPool

    return create_engine(url, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker:
    """Return a session factory bound to the engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine: Engine) -> None:
    """Create all tables that don't exist yet."""
    # Import models so they register on the metadata
    from music_service.db import models  # noqa: F401

    Base.metadata.create_all(engine)


def get_db(request: Request) -> Iterator[Session]:
    """
    Yield a database session for the current request.

    The session is closed after the response, even if the handler raised.
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
