"""
Test configuration and fixtures for pytest.
"""

import pytest
from fastapi.testclient import TestClient

from music_service.core.config import Settings
from music_service.core.exceptions import UpstreamNotFoundError
from music_service.core.security import get_password_hash
from music_service.db.models import Playlist, Song, User
from music_service.db.session import (
    create_engine_from_settings,
    create_session_factory,
    init_db,
)
from music_service.main import create_app
from music_service.repositories import (
    SQLCredentialStore,
    SQLPlaylistStore,
    SQLTokenStore,
    SQLTrackStore,
)
from music_service.schemas.catalog import CatalogTrack
from music_service.services.catalog import CatalogClient

TEST_SECRET = "test-secret-key"


class FakeCatalogClient(CatalogClient):
    """In-memory catalog keyed by track id."""

    def __init__(self, tracks=None):
        self.tracks = {track.id: track for track in tracks or []}
        self.lookups = []
        self.closed = False

    async def get_track_by_id(self, catalog_id: str) -> CatalogTrack:
        self.lookups.append(catalog_id)
        if catalog_id not in self.tracks:
            raise UpstreamNotFoundError(catalog_id)
        return self.tracks[catalog_id]

    async def close(self) -> None:
        self.closed = True


def make_catalog_track(track_id="T1", name="Test Track", artist="Test Artist"):
    """Build a catalog track shaped like a Spotify ``/tracks/{id}`` response."""
    return CatalogTrack(
        id=track_id,
        name=name,
        artists=[{"id": "artist1", "name": artist}],
        album={
            "id": "album1",
            "name": "Test Album",
            "images": [{"url": "https://example.com/cover.jpg", "height": 640, "width": 640}],
            "release_date": "2020-01-31",
        },
        duration_ms=215000,
        popularity=71,
        preview_url="https://example.com/preview.mp3",
        external_urls={"spotify": f"https://open.spotify.com/track/{track_id}"},
    )


def make_song(song_id="T1", title="Test Track"):
    """Build an unsaved Song with every column filled in."""
    return Song(
        id=song_id,
        title=title,
        artist="Test Artist",
        album="Test Album",
        album_cover="https://example.com/cover.jpg",
        duration=215,
        release_date="2020-01-31",
        popularity=71,
        preview_url="https://example.com/preview.mp3",
        external_url=f"https://open.spotify.com/track/{song_id}",
    )


@pytest.fixture
def settings():
    """Settings pointing at an in-memory SQLite database."""
    return Settings(
        _env_file=None,
        database_url="sqlite://",
        jwt_secret=TEST_SECRET,
        jwt_expiration=3600,
        log_level="WARNING",
    )


@pytest.fixture
def engine(settings):
    """Create a fresh in-memory database for a test."""
    engine = create_engine_from_settings(settings)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """Create a new database session for a test."""
    session = create_session_factory(engine)()
    yield session
    session.close()


@pytest.fixture
def credential_store(db_session):
    return SQLCredentialStore(db_session)


@pytest.fixture
def token_store(db_session):
    return SQLTokenStore(db_session)


@pytest.fixture
def playlist_store(db_session):
    return SQLPlaylistStore(db_session)


@pytest.fixture
def track_store(db_session):
    return SQLTrackStore(db_session)


@pytest.fixture
def create_user(db_session):
    """Factory inserting a user with a plain (unhashed) password value."""

    def _create_user(username="alice", email=None, password="hashed_password"):
        user = User(
            username=username,
            email=email or f"{username}@example.com",
            password=password,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _create_user


@pytest.fixture
def test_user(create_user):
    """Create a test user."""
    return create_user("testuser", "test@example.com")


@pytest.fixture
def other_user(create_user):
    """Create a second user who owns nothing of the first."""
    return create_user("otheruser", "other@example.com")


@pytest.fixture
def create_playlist(db_session):
    """Factory inserting a playlist for a user."""

    def _create_playlist(owner, name="Road Trip"):
        playlist = Playlist(name=name, user_id=owner.id)
        db_session.add(playlist)
        db_session.commit()
        db_session.refresh(playlist)
        return playlist

    return _create_playlist


@pytest.fixture
def catalog():
    return FakeCatalogClient(
        [
            make_catalog_track("T1", "Highway Song"),
            make_catalog_track("T2", "Desert Song", artist="Other Artist"),
        ]
    )


@pytest.fixture
def app(settings, catalog):
    return create_app(settings, catalog=catalog)


@pytest.fixture
def client(app):
    """Create a test client; entering it runs the app lifespan."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def register_and_login(client):
    """Factory registering a user through the API and returning auth headers."""

    def _register_and_login(username="alice", email="a@x.com", password="pw1"):
        response = client.post(
            "/api/v1/register",
            json={"username": username, "email": email, "password": password},
        )
        assert response.status_code == 200, response.text

        response = client.post(
            "/api/v1/login", json={"email": email, "password": password}
        )
        assert response.status_code == 200, response.text
        token = response.json()["token"]
        return {"Authorization": f"Bearer {token}"}

    return _register_and_login


@pytest.fixture
def hashed_user(create_user):
    """User whose stored password is a real bcrypt hash of ``secret-pw``."""
    return create_user("hashed", "hashed@example.com", get_password_hash("secret-pw"))
