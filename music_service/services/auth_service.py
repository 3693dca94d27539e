"""
Authentication service: user registration lookups and session tokens.

Tokens are signed JWTs, but every issued token is also stored server-side so
that logout can revoke it before it expires. A token is only handed out once
it has been persisted.
"""

import logging
from datetime import timedelta
from typing import Optional

from music_service.core.config import Settings
from music_service.core.security import create_access_token, decode_access_token
from music_service.db.models import Token, User
from music_service.repositories.base import CredentialStore, TokenStore
from music_service.utils.datetime_helper import utc_now


class AuthService:
    """Orchestrates credential checks and the token lifecycle."""

    def __init__(
        self,
        credentials: CredentialStore,
        tokens: TokenStore,
        settings: Settings,
        logger: Optional[logging.Logger] = None,
    ):
        self.credentials = credentials
        self.tokens = tokens
        self.secret = settings.jwt_secret
        self.algorithm = settings.jwt_algorithm
        self.expiration = settings.jwt_expiration
        self.logger = logger or logging.getLogger(__name__)

    def create_user(self, user: User) -> None:
        self.credentials.create(user)

    def find_user_by_email(self, email: str) -> User:
        return self.credentials.find_by_email(email)

    def create_token(self, username: str, password: str) -> str:
        """
        Issue a session token for a user.

        Args:
            username: Username of the user
            password: Stored password hash; the caller has already verified
                the plain password against it

        Returns:
            Signed JWT, already persisted as the user's active token

        Raises:
            NotFoundError: If no user matches
            StorageError: If the token could not be persisted
        """
        user = self.credentials.find_by_username_and_password(username, password)

        issued_at = utc_now()
        signed = create_access_token(
            user.id,
            self.secret,
            self.expiration,
            algorithm=self.algorithm,
            now=issued_at,
        )

        self.tokens.save_token(
            Token(
                token=signed,
                expires_at=issued_at + timedelta(seconds=self.expiration),
                user_id=user.id,
            )
        )

        self.logger.info(f"Issued token for user {user.id}")
        return signed

    def parse_token(self, token: str) -> int:
        """Verify a token and return the user id it was issued for."""
        payload = decode_access_token(token, self.secret)
        return payload["user_id"]

    def invalidate_token(self, user_id: int) -> None:
        self.tokens.invalidate(user_id)
        self.logger.info(f"Invalidated token for user {user_id}")

    def is_token_valid(self, token: str) -> bool:
        return self.tokens.is_valid(token)
