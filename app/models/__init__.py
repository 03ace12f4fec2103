"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.component import Component
from app.models.design_token import DesignToken
from app.models.user import User

__all__ = ["Base", "Component", "DesignToken", "User"]
