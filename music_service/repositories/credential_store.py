"""
SQL implementation of the credential store.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from music_service.core.exceptions import AlreadyExistsError, NotFoundError, StorageError
from music_service.db.models import User
from music_service.repositories.base import CredentialStore


class SQLCredentialStore(CredentialStore):
    """Looks up and creates users in the ``users`` table."""

    def __init__(self, db: Session, logger: Optional[logging.Logger] = None):
        self.db = db
        self.logger = logger or logging.getLogger(__name__)

    def _find_one(self, *criteria) -> User:
        try:
            user = self.db.execute(select(User).where(*criteria)).scalars().first()
        except SQLAlchemyError as exc:
            self.logger.error(f"User lookup failed: {exc}")
            raise StorageError("user lookup failed", details=str(exc)) from exc

        if user is None:
            raise NotFoundError("user not found")
        return user

    def find_by_email(self, email: str) -> User:
        user = self._find_one(User.email == email)
        self.logger.debug(f"Found user {user.id} by email")
        return user

    def find_by_id(self, user_id: int) -> User:
        return self._find_one(User.id == user_id)

    def find_by_username_and_password(self, username: str, password_hash: str) -> User:
        user = self._find_one(User.username == username, User.password == password_hash)
        self.logger.debug(f"Found user {user.id} by username and password")
        return user

    def create(self, user: User) -> None:
        """
        Insert a new user.

        Only an integrity violation (duplicate username or email) is reported
        as AlreadyExistsError; any other failure is a StorageError.
        """
        try:
            self.db.add(user)
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            self.logger.warning(f"User {user.username!r} already exists")
            raise AlreadyExistsError("user already exists") from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            self.logger.error(f"Failed to create user: {exc}")
            raise StorageError("failed to create user", details=str(exc)) from exc

        self.db.refresh(user)
        self.logger.info(f"Created user {user.id}")
