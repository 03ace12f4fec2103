"""Auth service: registration, login and session-token resolution against the users table."""

import logging

import jwt
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import AuthenticationError, ConflictError, ValidationError
from app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from app.models.base import is_object_id
from app.models.user import DEFAULT_ROLE, User
from app.schemas.auth import LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)

# Same message for unknown email and wrong password, so callers cannot enumerate accounts.
INVALID_CREDENTIALS = "Invalid credentials"


def issue_token(user: User) -> str:
    return create_access_token(user.id, user.username, user.role)


def register_user(db: Session, body: RegisterRequest) -> tuple[User, str]:
    """
    Create a user with a bcrypt-hashed password and return (user, session token).

    Raises ValidationError when username/email/password is missing and
    ConflictError when the username or email is already taken.
    """
    if not body.username or not body.email or not body.password:
        raise ValidationError("Username, email, and password are required")

    existing = (
        db.query(User)
        .filter(or_(User.email == body.email, User.username == body.username))
        .first()
    )
    if existing is not None:
        raise ConflictError("User already exists")

    user = User(
        username=body.username,
        email=body.email,
        password_hash=hash_password(body.password),
        role=body.role or DEFAULT_ROLE,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        # A concurrent registration won the unique index.
        db.rollback()
        raise ConflictError("User already exists") from e
    db.refresh(user)

    logger.info("User registered", extra={"user_id": user.id, "role": user.role})
    return user, issue_token(user)


def authenticate(db: Session, body: LoginRequest) -> tuple[User, str]:
    """Check email and password; return (user, session token) or raise AuthenticationError."""
    if not body.email or not body.password:
        raise ValidationError("Email and password are required")

    user = db.query(User).filter(User.email == body.email).first()
    if user is None:
        logger.info("Login failed: unknown email")
        raise AuthenticationError(INVALID_CREDENTIALS)
    if not verify_password(body.password, user.password_hash):
        logger.info("Login failed: bad password", extra={"user_id": user.id})
        raise AuthenticationError(INVALID_CREDENTIALS)
    return user, issue_token(user)


def resolve_token(db: Session, token: str | None) -> User:
    """
    Return the user a session token belongs to.

    Raises AuthenticationError if the token is absent, malformed, expired or
    badly signed, or if the user it names no longer exists.
    """
    if not token:
        raise AuthenticationError("Access token required")
    try:
        payload = decode_access_token(token)
    except jwt.PyJWTError as e:
        raise AuthenticationError("Invalid or expired token") from e

    user_id = payload.get("id") or payload.get("sub")
    if not is_object_id(user_id):
        raise AuthenticationError("Invalid or expired token")
    user = db.get(User, user_id)
    if user is None:
        raise AuthenticationError("User not found")
    return user
