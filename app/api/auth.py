"""Register/login/me/verify routes and auth dependencies (get_current_user, require_role)."""

from collections.abc import Callable
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import PermissionDeniedError
from app.schemas.auth import (
    AuthResponse,
    CurrentUser,
    LoginRequest,
    RegisterRequest,
    UserPublic,
    UserResponse,
    VerifiedUser,
    VerifyResponse,
)
from app.services.auth import authenticate, register_user, resolve_token

router = APIRouter()
security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> CurrentUser:
    """Dependency: require a valid Bearer JWT for an existing user. Raises 401 otherwise."""
    token = credentials.credentials if credentials is not None else None
    user = resolve_token(db, token)
    return CurrentUser.model_validate(user)


def require_role(*roles: str) -> Callable[..., CurrentUser]:
    """Dependency factory: require an authenticated user whose role is one of ``roles`` (403 otherwise)."""

    def dependency(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        if current_user.role not in roles:
            raise PermissionDeniedError("Insufficient permissions")
        return current_user

    return dependency


require_admin = require_role("admin")


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> AuthResponse:
    """
    Create an account (role defaults to 'designer') and return a 24h session token.
    Include the token in the Authorization header as: Bearer <token>
    """
    user, token = register_user(db, body)
    return AuthResponse(
        message="User created successfully",
        token=token,
        user=UserPublic.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> AuthResponse:
    """Authenticate with email and password; returns a session token."""
    user, token = authenticate(db, body)
    return AuthResponse(
        message="Login successful",
        token=token,
        user=UserPublic.model_validate(user),
    )


@router.get("/me", response_model=UserResponse)
def me(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> UserResponse:
    return UserResponse(user=UserPublic.model_validate(current_user.model_dump()))


@router.get("/verify", response_model=VerifyResponse, response_model_by_alias=True)
def verify(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> VerifyResponse:
    """Same check as /me; the user id is returned under '_id'."""
    return VerifyResponse(
        user=VerifiedUser(
            id=current_user.id,
            username=current_user.username,
            email=current_user.email,
            role=current_user.role,
        )
    )
