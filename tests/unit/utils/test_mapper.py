"""Tests for mapping catalog tracks to songs."""

from music_service.schemas.catalog import CatalogTrack
from music_service.utils.mapper import UNKNOWN_ARTIST, map_track_to_song
from tests.conftest import make_catalog_track


def test_full_track():
    song = map_track_to_song(make_catalog_track("T1", "Highway Song"))

    assert song.id == "T1"
    assert song.title == "Highway Song"
    assert song.artist == "Test Artist"
    assert song.album == "Test Album"
    assert song.album_cover == "https://example.com/cover.jpg"
    assert song.duration == 215
    assert song.release_date == "2020-01-31"
    assert song.popularity == 71
    assert song.preview_url == "https://example.com/preview.mp3"
    assert song.external_url == "https://open.spotify.com/track/T1"


def test_first_artist_wins():
    track = CatalogTrack(
        id="T9",
        name="Duet",
        artists=[{"name": "Lead"}, {"name": "Feature"}],
    )
    assert map_track_to_song(track).artist == "Lead"


def test_sparse_track():
    track = CatalogTrack(id="T9", name="Bare", duration_ms=1999)
    song = map_track_to_song(track)

    assert song.artist == UNKNOWN_ARTIST
    assert song.album_cover == ""
    assert song.preview_url == ""
    assert song.external_url == ""
    assert song.duration == 1
