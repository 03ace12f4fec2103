"""ORM model for application users (auth and RBAC)."""

from sqlalchemy import Column, String

from app.models.base import Base, UTCDateTime, generate_object_id, utcnow

USER_ROLES = ("admin", "designer", "developer")
DEFAULT_ROLE = "designer"


class User(Base):
    """
    User account for JWT authentication and role-based access control.

    role: 'admin', 'designer' or 'developer'
    """

    __tablename__ = "users"

    id = Column(String(24), primary_key=True, default=generate_object_id)
    username = Column(String(255), nullable=False, unique=True, index=True)
    email = Column(String(320), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default=DEFAULT_ROLE)
    created_at = Column(UTCDateTime, nullable=False, default=utcnow)
