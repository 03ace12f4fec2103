"""Core app configuration, database handle and error types."""

from app.core.config import get_settings, settings
from app.core.database import Database, get_db

__all__ = ["Database", "get_settings", "settings", "get_db"]
