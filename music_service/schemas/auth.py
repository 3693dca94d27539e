"""
Authentication schema models using Pydantic.
"""

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Schema for user registration."""

    username: str = Field(min_length=1, max_length=50)
    email: str = Field(min_length=3, max_length=100, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(min_length=1, max_length=72)


class LoginRequest(BaseModel):
    """Schema for user login."""

    email: str = Field(min_length=3, max_length=100)
    password: str = Field(min_length=1, max_length=72)


class TokenResponse(BaseModel):
    """Schema for the token returned on login."""

    token: str

