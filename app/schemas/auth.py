"""Request/response schemas for auth endpoints."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

UserRole = Literal["admin", "designer", "developer"]


class RegisterRequest(BaseModel):
    """Registration body. Presence of username/email/password is checked by the service."""

    username: str | None = Field(default=None, max_length=255)
    email: str | None = Field(default=None, max_length=320)
    password: str | None = Field(default=None, max_length=128)
    role: UserRole | None = Field(default=None, description="Defaults to 'designer'")


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str | None = None
    password: str | None = None


class UserPublic(BaseModel):
    """User as returned to clients (never includes the password hash)."""

    id: str
    username: str
    email: str
    role: UserRole

    model_config = ConfigDict(from_attributes=True)


class AuthResponse(BaseModel):
    """Session token and user returned after register or login."""

    message: str
    token: str = Field(..., description="JWT session token; send as 'Authorization: Bearer <token>'")
    user: UserPublic


class UserResponse(BaseModel):
    user: UserPublic


class VerifiedUser(BaseModel):
    """User for GET /verify; the id is exposed under '_id'."""

    id: str = Field(..., alias="_id")
    username: str
    email: str
    role: UserRole

    model_config = ConfigDict(populate_by_name=True)


class VerifyResponse(BaseModel):
    user: VerifiedUser


class CurrentUser(BaseModel):
    """Authenticated user (id, username, email, role) for dependency injection."""

    id: str
    username: str
    email: str
    role: str

    model_config = ConfigDict(from_attributes=True)
