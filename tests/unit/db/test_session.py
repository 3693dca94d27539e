"""Tests for engine and session helpers."""

from unittest.mock import MagicMock

from sqlalchemy import inspect
from sqlalchemy.pool import StaticPool

from music_service.core.config import Settings
from music_service.db.session import (
    create_engine_from_settings,
    create_session_factory,
    get_db,
    init_db,
)


def test_memory_database_uses_static_pool(settings):
    engine = create_engine_from_settings(settings)
    try:
        assert isinstance(engine.pool, StaticPool)
    finally:
        engine.dispose()


def test_file_database_uses_regular_pool(tmp_path):
    settings = Settings(_env_file=None, database_url=f"sqlite:///{tmp_path}/music.db")
    engine = create_engine_from_settings(settings)
    try:
        assert not isinstance(engine.pool, StaticPool)
    finally:
        engine.dispose()


def test_init_db_creates_tables(engine):
    tables = set(inspect(engine).get_table_names())
    assert {"users", "tokens", "playlists", "songs", "playlist_songs"} <= tables


def test_get_db_closes_session(engine):
    session = MagicMock()
    request = MagicMock()
    request.app.state.session_factory.return_value = session

    dependency = get_db(request)
    assert next(dependency) is session
    dependency.close()

    session.close.assert_called_once()


def test_session_factory_binds_engine(engine):
    session = create_session_factory(engine)()
    try:
        assert session.get_bind() is engine
    finally:
        session.close()
