"""
Security utilities for JWT signing and password hashing.
"""

import uuid
from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from jose import jwt
from jose.exceptions import JWTError
from passlib.context import CryptContext

from music_service.core.exceptions import InvalidTokenError
from music_service.utils.datetime_helper import utc_now

# Only symmetric HMAC signatures are accepted
HMAC_ALGORITHMS = ("HS256", "HS384", "HS512")

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def create_access_token(
    user_id: int,
    secret: str,
    expires_in: int,
    algorithm: str = "HS256",
    now: Optional[datetime] = None,
) -> str:
    """
    Create a signed JWT access token for a user.

    Args:
        user_id: Id of the user the token belongs to
        secret: HMAC signing secret
        expires_in: Lifetime of the token in seconds
        algorithm: HMAC algorithm to sign with
        now: Issue time, defaults to the current UTC time

    Returns:
        Encoded JWT access token
    """
    if algorithm not in HMAC_ALGORITHMS:
        raise ValueError(f"Unsupported signing algorithm: {algorithm}")

    issued_at = now or utc_now()
    claims = {
        "user_id": user_id,
        "iat": issued_at,
        "exp": issued_at + timedelta(seconds=expires_in),
        "jti": uuid.uuid4().hex,
    }
    return jwt.encode(claims, secret, algorithm=algorithm)


def decode_access_token(token: str, secret: str) -> Dict[str, Any]:
    """
    Decode and verify a JWT access token.

    The header algorithm is checked before the signature so that tokens signed
    with anything other than an HMAC algorithm are rejected outright.

    Args:
        token: JWT token to verify
        secret: HMAC signing secret

    Returns:
        Token payload if valid

    Raises:
        InvalidTokenError: If the algorithm, signature or expiry check fails
    """
    try:
        header = jwt.get_unverified_header(token)
    except JWTError as exc:
        raise InvalidTokenError("Invalid token", details=str(exc)) from exc

    if header.get("alg") not in HMAC_ALGORITHMS:
        raise InvalidTokenError("Invalid signing method")

    try:
        payload = jwt.decode(token, secret, algorithms=list(HMAC_ALGORITHMS))
    except JWTError as exc:
        raise InvalidTokenError("Invalid token", details=str(exc)) from exc

    if not isinstance(payload.get("user_id"), int):
        raise InvalidTokenError("Token claims do not carry a user id")

    return payload


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a password against its hash.

    Args:
        plain_password: Plain text password
        hashed_password: Hashed password to compare against

    Returns:
        True if password matches hash, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """
    Hash a password for secure storage.

    Args:
        password: Plain text password to hash

    Returns:
        Securely hashed password
    """
    return pwd_context.hash(password)
