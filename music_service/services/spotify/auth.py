import base64
import logging
from datetime import timedelta
from typing import Optional

import httpx

from music_service.core.exceptions import UpstreamError
from music_service.schemas.catalog import CatalogTokenSchema
from music_service.utils.datetime_helper import utc_now

TOKEN_URL = "https://accounts.spotify.com/api/token"

# Refresh the app token this long before Spotify expires it
EXPIRY_MARGIN = timedelta(seconds=60)

logger = logging.getLogger(__name__)


class SpotifyAuthService:
    """Client-credentials flow for app-level Spotify access."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.timeout = timeout
        self.transport = transport
        self._token: Optional[CatalogTokenSchema] = None
        self._expires_at = None

    def clear(self) -> None:
        """Forget the cached token so the next call fetches a new one."""
        self._token = None
        self._expires_at = None

    async def get_access_token(self) -> str:
        """Return a cached app token, fetching a new one when it is about to expire."""
        if self._token and self._expires_at and utc_now() < self._expires_at:
            return self._token.access_token

        token = await self.request_token()
        self._token = token
        self._expires_at = utc_now() + timedelta(seconds=token.expires_in) - EXPIRY_MARGIN
        return token.access_token

    async def request_token(self) -> CatalogTokenSchema:
        """Exchange the client id and secret for an app access token."""
        auth_header = base64.b64encode(
            f"{self.client_id}:{self.client_secret}".encode()
        ).decode()

        headers = {
            "Authorization": f"Basic {auth_header}",
            "Content-Type": "application/x-www-form-urlencoded",
        }

        data = {"grant_type": "client_credentials"}

        try:
            async with httpx.AsyncClient(
                transport=self.transport, timeout=self.timeout
            ) as client:
                response = await client.post(TOKEN_URL, headers=headers, data=data)
                response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error(f"Spotify token request failed: {exc}")
            raise UpstreamError("catalog authentication failed", details=str(exc)) from exc

        try:
            token = CatalogTokenSchema.model_validate(response.json())
        except ValueError as exc:
            logger.error(f"Unreadable Spotify token reply: {exc}")
            raise UpstreamError(
                "catalog returned an invalid response", details=str(exc)
            ) from exc

        logger.info("Obtained Spotify app access token")
        return token
