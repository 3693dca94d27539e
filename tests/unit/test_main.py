"""Tests for application assembly."""

import pytest
from fastapi.testclient import TestClient

from music_service.core.exceptions import (
    AlreadyExistsError,
    InvalidCredentialsError,
    InvalidTokenError,
    MusicServiceError,
    NotFoundError,
    PermissionDeniedError,
    PlaylistNotFoundError,
    StorageError,
    UpstreamError,
    UpstreamNotFoundError,
)
from music_service.main import create_app, status_code_for


@pytest.mark.parametrize(
    "error, status_code",
    [
        (NotFoundError("missing"), 404),
        (PlaylistNotFoundError(3), 404),
        (AlreadyExistsError("duplicate"), 409),
        (PermissionDeniedError("not yours"), 403),
        (InvalidCredentialsError("bad password"), 400),
        (InvalidTokenError("bad token"), 401),
        (StorageError("db down"), 500),
        (UpstreamNotFoundError("T1"), 404),
        (UpstreamError("catalog down"), 502),
        (MusicServiceError("anything"), 500),
    ],
)
def test_status_code_for(error, status_code):
    assert status_code_for(error) == status_code


def test_routes_registered(app):
    routes = {
        (path, method.upper())
        for path, operations in app.openapi()["paths"].items()
        for method in operations
    }

    expected = {
        ("/api/v1/register", "POST"),
        ("/api/v1/login", "POST"),
        ("/api/v1/logout", "POST"),
        ("/api/v1/ping", "GET"),
        ("/api/v1/playlist", "POST"),
        ("/api/v1/playlist", "GET"),
        ("/api/v1/playlist/{playlist_id}", "GET"),
        ("/api/v1/playlist/{playlist_id}", "PUT"),
        ("/api/v1/playlist/{playlist_id}", "DELETE"),
        ("/api/v1/tracks/playlist/{playlist_id}", "GET"),
        ("/api/v1/tracks/{track_id}", "GET"),
        ("/api/v1/tracks/{track_id}/playlist/{playlist_id}", "POST"),
        ("/api/v1/tracks/{track_id}/playlist/{playlist_id}", "DELETE"),
        ("/health", "GET"),
    }
    assert expected <= routes


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "services": {"api": "online", "database": "online"},
    }


def test_cors_preflight(client):
    response = client.options(
        "/api/v1/ping",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "GET",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"


def test_app_state(app, settings, catalog):
    assert app.state.settings is settings
    assert app.state.catalog is catalog
    assert app.title == settings.app_name


def test_shutdown_closes_catalog(app, catalog):
    with TestClient(app):
        assert not catalog.closed
    assert catalog.closed
