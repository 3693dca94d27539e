"""
SQL implementation of the session token store.
"""

import logging
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from music_service.core.exceptions import StorageError
from music_service.db.models import TOKEN_ACTIVE, TOKEN_INACTIVE, Token
from music_service.repositories.base import TokenStore


class SQLTokenStore(TokenStore):
    """Keeps at most one token row per user in the ``tokens`` table."""

    def __init__(self, db: Session, logger: Optional[logging.Logger] = None):
        self.db = db
        self.logger = logger or logging.getLogger(__name__)

    def save_token(self, token: Token) -> None:
        """
        Upsert the user's token row.

        An existing row gets the new token value and expiry and is forced back
        to active. The update and the fallback insert commit together.
        """
        try:
            result = self.db.execute(
                update(Token)
                .where(Token.user_id == token.user_id)
                .values(
                    token=token.token,
                    expires_at=token.expires_at,
                    status=TOKEN_ACTIVE,
                )
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                token.status = TOKEN_ACTIVE
                self.db.add(token)
                action = "saved"
            else:
                action = "updated"
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            self.logger.error(f"Error saving token for user_id {token.user_id}: {exc}")
            raise StorageError("failed to save token", details=str(exc)) from exc

        self.logger.info(f"Token {action} for user_id {token.user_id}")

    def invalidate(self, user_id: int) -> None:
        try:
            result = self.db.execute(
                update(Token)
                .where(Token.user_id == user_id, Token.status == TOKEN_ACTIVE)
                .values(status=TOKEN_INACTIVE)
                .execution_options(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            self.logger.error(f"Error invalidating tokens for user_id {user_id}: {exc}")
            raise StorageError("failed to invalidate token", details=str(exc)) from exc

        self.logger.info(
            f"Invalidated {result.rowcount} active token(s) for user_id {user_id}"
        )

    def is_valid(self, token: str) -> bool:
        try:
            status = self.db.execute(
                select(Token.status).where(Token.token == token)
            ).scalars().first()
        except SQLAlchemyError as exc:
            self.logger.error(f"Error checking token status: {exc}")
            raise StorageError("failed to check token", details=str(exc)) from exc

        return status == TOKEN_ACTIVE
