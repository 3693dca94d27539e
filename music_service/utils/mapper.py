"""Conversion of catalog tracks into local song records."""

from music_service.db.models import Song
from music_service.schemas.catalog import CatalogTrack

UNKNOWN_ARTIST = "Unknown Artist"
EXTERNAL_URL_PROVIDER = "spotify"


def map_track_to_song(track: CatalogTrack) -> Song:
    """Build an unsaved Song from a catalog track."""
    artist = track.artists[0].name if track.artists else UNKNOWN_ARTIST
    album_cover = track.album.images[0].url if track.album.images else ""

    return Song(
        id=track.id,
        title=track.name,
        artist=artist,
        album=track.album.name,
        album_cover=album_cover,
        duration=track.duration_ms // 1000,
        release_date=track.album.release_date,
        popularity=track.popularity,
        preview_url=track.preview_url or "",
        external_url=track.external_urls.get(EXTERNAL_URL_PROVIDER, ""),
    )
