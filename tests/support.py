"""Shared setup for API tests: fresh in-memory SQLite app per test, plus user/token helpers."""

import unittest
from typing import Any

from fastapi.testclient import TestClient

from app.core.database import Database
from app.core.security import create_access_token, hash_password
from app.main import create_app
from app.models import Base, Component, DesignToken, User
from app.models.base import utcnow


class ApiTestCase(unittest.TestCase):
    """Builds an isolated database and TestClient for every test method."""

    def setUp(self) -> None:
        self.database = Database("sqlite://")
        Base.metadata.create_all(self.database.engine)
        self.app = create_app(database=self.database)
        self.client = TestClient(self.app, raise_server_exceptions=False)

    def tearDown(self) -> None:
        self.client.close()
        self.database.dispose()

    def add_user(self, username: str, role: str = "designer", password: str = "password123") -> tuple[User, str]:
        """Insert a user directly and return (user, bearer token)."""
        with self.database.session() as db:
            user = User(
                username=username,
                email=f"{username}@example.com",
                password_hash=hash_password(password),
                role=role,
            )
            db.add(user)
            db.commit()
            db.refresh(user)
            db.expunge(user)
        return user, create_access_token(user.id, user.username, user.role)

    def add_token(self, created_by: str, name: str, category: str = "color", value: str = "#000000", **fields: Any) -> str:
        with self.database.session() as db:
            now = utcnow()
            token = DesignToken(
                name=name,
                category=category,
                value=value,
                description=fields.get("description"),
                tags=fields.get("tags", []),
                theme=fields.get("theme", "all"),
                status=fields.get("status", "active"),
                created_by=created_by,
                created_at=now,
                updated_at=now,
            )
            token.refresh_search_document()
            db.add(token)
            db.commit()
            return token.id

    def add_component(self, created_by: str, name: str, type: str = "button", **fields: Any) -> str:
        with self.database.session() as db:
            now = utcnow()
            component = Component(
                name=name,
                type=type,
                description=fields.get("description"),
                styles=fields.get("styles", {}),
                code=fields.get("code", {}),
                examples=fields.get("examples", []),
                tags=fields.get("tags", []),
                status=fields.get("status", "draft"),
                version=fields.get("version", "1.0.0"),
                dependencies=fields.get("dependencies", []),
                created_by=created_by,
                created_at=now,
                updated_at=now,
            )
            component.refresh_search_document()
            db.add(component)
            db.commit()
            return component.id

    def count(self, model: type) -> int:
        with self.database.session() as db:
            return db.query(model).count()

    @staticmethod
    def bearer(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}
