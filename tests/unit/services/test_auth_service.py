"""Tests for the authentication service."""

import pytest
from unittest.mock import MagicMock

from music_service.core.exceptions import (
    AlreadyExistsError,
    InvalidTokenError,
    NotFoundError,
    StorageError,
)
from music_service.db.models import User
from music_service.services.auth_service import AuthService


@pytest.fixture
def auth_service(credential_store, token_store, settings):
    return AuthService(credential_store, token_store, settings)


class TestUsers:
    """Tests for user creation and lookup."""

    def test_create_and_find(self, auth_service):
        auth_service.create_user(
            User(username="bob", email="bob@example.com", password="hash")
        )
        assert auth_service.find_user_by_email("bob@example.com").username == "bob"

    def test_create_duplicate(self, auth_service, test_user):
        with pytest.raises(AlreadyExistsError):
            auth_service.create_user(
                User(username="testuser", email="test@example.com", password="hash")
            )

    def test_find_unknown(self, auth_service):
        with pytest.raises(NotFoundError):
            auth_service.find_user_by_email("ghost@example.com")


class TestTokens:
    """Tests for the token lifecycle."""

    def test_create_token_is_persisted(self, auth_service, hashed_user):
        token = auth_service.create_token(hashed_user.username, hashed_user.password)

        assert auth_service.parse_token(token) == hashed_user.id
        assert auth_service.is_token_valid(token)

    def test_create_token_unknown_user(self, auth_service, hashed_user):
        with pytest.raises(NotFoundError):
            auth_service.create_token(hashed_user.username, "not-the-stored-hash")

    def test_new_login_supersedes_previous(self, auth_service, hashed_user):
        first = auth_service.create_token(hashed_user.username, hashed_user.password)
        second = auth_service.create_token(hashed_user.username, hashed_user.password)

        assert not auth_service.is_token_valid(first)
        assert auth_service.is_token_valid(second)

    def test_invalidate(self, auth_service, hashed_user):
        token = auth_service.create_token(hashed_user.username, hashed_user.password)

        auth_service.invalidate_token(hashed_user.id)

        assert not auth_service.is_token_valid(token)
        # The signature stays valid; only the stored status changes
        assert auth_service.parse_token(token) == hashed_user.id

    def test_parse_token_wrong_secret(self, auth_service, credential_store, token_store, settings, hashed_user):
        token = auth_service.create_token(hashed_user.username, hashed_user.password)
        other = AuthService(
            credential_store,
            token_store,
            settings.model_copy(update={"jwt_secret": "different"}),
        )

        with pytest.raises(InvalidTokenError):
            other.parse_token(token)

    def test_token_not_returned_when_save_fails(self, settings, hashed_user):
        credentials = MagicMock()
        credentials.find_by_username_and_password.return_value = hashed_user
        tokens = MagicMock()
        tokens.save_token.side_effect = StorageError("failed to save token")
        service = AuthService(credentials, tokens, settings)

        with pytest.raises(StorageError):
            service.create_token(hashed_user.username, hashed_user.password)

    def test_saved_token_fields(self, settings, hashed_user):
        credentials = MagicMock()
        credentials.find_by_username_and_password.return_value = hashed_user
        tokens = MagicMock()
        service = AuthService(credentials, tokens, settings)

        signed = service.create_token(hashed_user.username, hashed_user.password)

        saved = tokens.save_token.call_args.args[0]
        assert saved.token == signed
        assert saved.user_id == hashed_user.id
        assert saved.expires_at is not None
