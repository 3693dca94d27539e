import logging
from typing import Any, Dict, Optional

import httpx

from music_service.core.exceptions import UpstreamError, UpstreamNotFoundError
from music_service.schemas.catalog import CatalogTrack
from music_service.services.catalog import CatalogClient
from music_service.services.spotify.auth import SpotifyAuthService

BASE_URL = "https://api.spotify.com/v1"


class SpotifyCatalogClient(CatalogClient):
    """Track lookups against the Spotify Web API."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.timeout = timeout
        self.transport = transport
        self.logger = logger or logging.getLogger(__name__)
        self.auth = SpotifyAuthService(
            client_id, client_secret, timeout=timeout, transport=transport
        )

    async def _request(
        self,
        method: str,
        endpoint: str,
        params: Dict[str, Any] = None,
    ) -> httpx.Response:
        """Send an authenticated request to the Spotify API."""
        access_token = await self.auth.get_access_token()
        headers = {"Authorization": f"Bearer {access_token}"}

        try:
            async with httpx.AsyncClient(
                transport=self.transport, timeout=self.timeout
            ) as client:
                return await client.request(
                    method=method,
                    url=f"{BASE_URL}{endpoint}",
                    params=params,
                    headers=headers,
                )
        except httpx.HTTPError as exc:
            self.logger.error(f"Spotify request {method} {endpoint} failed: {exc}")
            raise UpstreamError("catalog request failed", details=str(exc)) from exc

    async def get_track_by_id(self, catalog_id: str) -> CatalogTrack:
        """Get a track from the catalog by its Spotify id."""
        if not catalog_id:
            raise UpstreamNotFoundError(catalog_id)

        response = await self._request("GET", f"/tracks/{catalog_id}")

        # Spotify answers 400 for malformed ids and 404 for unknown ones
        if response.status_code in (400, 404):
            self.logger.warning(f"Track {catalog_id} not found in catalog")
            raise UpstreamNotFoundError(catalog_id)

        if response.status_code == 401:
            self.auth.clear()
            raise UpstreamError("catalog rejected the access token")

        if response.status_code == 429:
            retry_after = response.headers.get("Retry-After", "1")
            raise UpstreamError(
                "catalog rate limit exceeded", details=f"retry after {retry_after}s"
            )

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise UpstreamError("catalog request failed", details=str(exc)) from exc

        try:
            track = CatalogTrack.model_validate(response.json())
        except ValueError as exc:
            self.logger.error(f"Unreadable catalog reply for track {catalog_id}: {exc}")
            raise UpstreamError(
                "catalog returned an invalid response", details=str(exc)
            ) from exc

        self.logger.debug(f"Fetched track {track.id} from catalog")
        return track
