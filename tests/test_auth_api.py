"""API tests for /api/auth: register, login, me, verify."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt

from app.core.config import settings
from app.core.security import verify_password
from app.models import User
from tests.support import ApiTestCase

REGISTER_URL = "/api/auth/register"
LOGIN_URL = "/api/auth/login"


class TestRegister(ApiTestCase):
    def _register(self, **overrides: str):
        body = {"username": "testuser", "email": "test@example.com", "password": "password123"}
        body.update(overrides)
        return self.client.post(REGISTER_URL, json=body)

    def test_registers_user_and_returns_token(self) -> None:
        resp = self._register(role="designer")
        self.assertEqual(resp.status_code, 201)
        data = resp.json()
        self.assertEqual(data["message"], "User created successfully")
        self.assertEqual(len(data["token"].split(".")), 3)
        self.assertEqual(data["user"]["username"], "testuser")
        self.assertEqual(data["user"]["email"], "test@example.com")
        self.assertEqual(data["user"]["role"], "designer")
        self.assertNotIn("password", data["user"])
        self.assertNotIn("password_hash", data["user"])

    def test_token_carries_id_username_role(self) -> None:
        data = self._register(role="admin").json()
        payload = jwt.decode(
            data["token"],
            settings.JWT_SECRET.get_secret_value(),
            algorithms=[settings.JWT_ALGORITHM],
        )
        self.assertEqual(payload["id"], data["user"]["id"])
        self.assertEqual(payload["username"], "testuser")
        self.assertEqual(payload["role"], "admin")
        lifetime = payload["exp"] - payload["iat"]
        self.assertEqual(lifetime, 24 * 60 * 60)

    def test_missing_fields(self) -> None:
        resp = self.client.post(REGISTER_URL, json={"username": "testuser"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"error": "Username, email, and password are required"})

    def test_empty_password_counts_as_missing(self) -> None:
        resp = self._register(password="")
        self.assertEqual(resp.status_code, 400)

    def test_duplicate_email(self) -> None:
        self.assertEqual(self._register().status_code, 201)
        resp = self._register(username="other")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "User already exists")
        self.assertEqual(self.count(User), 1)

    def test_duplicate_username(self) -> None:
        self.assertEqual(self._register().status_code, 201)
        resp = self._register(email="other@example.com")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "User already exists")
        login = self.client.post(LOGIN_URL, json={"email": "test@example.com", "password": "password123"})
        self.assertEqual(login.status_code, 200)

    def test_defaults_to_designer_role(self) -> None:
        resp = self._register()
        self.assertEqual(resp.json()["user"]["role"], "designer")

    def test_unknown_role_rejected(self) -> None:
        resp = self._register(role="superuser")
        self.assertEqual(resp.status_code, 400)
        self.assertIn("role", resp.json()["error"])

    def test_password_is_hashed(self) -> None:
        self._register()
        with self.database.session() as db:
            user = db.query(User).filter(User.email == "test@example.com").one()
            self.assertNotEqual(user.password_hash, "password123")
            self.assertTrue(verify_password("password123", user.password_hash))


class TestLogin(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.user, _ = self.add_user("testuser", password="password123")

    def test_login_with_correct_credentials(self) -> None:
        resp = self.client.post(LOGIN_URL, json={"email": "testuser@example.com", "password": "password123"})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["message"], "Login successful")
        self.assertEqual(data["user"]["id"], self.user.id)
        self.assertEqual(len(data["token"].split(".")), 3)

    def test_wrong_password_and_unknown_email_look_the_same(self) -> None:
        wrong = self.client.post(LOGIN_URL, json={"email": "testuser@example.com", "password": "nope"})
        unknown = self.client.post(LOGIN_URL, json={"email": "ghost@example.com", "password": "password123"})
        self.assertEqual(wrong.status_code, 401)
        self.assertEqual(unknown.status_code, 401)
        self.assertEqual(wrong.json(), {"error": "Invalid credentials"})
        self.assertEqual(wrong.json(), unknown.json())

    def test_missing_fields(self) -> None:
        resp = self.client.post(LOGIN_URL, json={"email": "testuser@example.com"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"error": "Email and password are required"})

    def test_login_token_opens_me(self) -> None:
        token = self.client.post(
            LOGIN_URL, json={"email": "testuser@example.com", "password": "password123"}
        ).json()["token"]
        resp = self.client.get("/api/auth/me", headers=self.bearer(token))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["user"]["username"], "testuser")


class TestCurrentUser(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.user, self.token = self.add_user("designer1")

    def test_me_returns_user_without_password(self) -> None:
        resp = self.client.get("/api/auth/me", headers=self.bearer(self.token))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(
            resp.json(),
            {
                "user": {
                    "id": self.user.id,
                    "username": "designer1",
                    "email": "designer1@example.com",
                    "role": "designer",
                }
            },
        )

    def test_verify_exposes_underscore_id(self) -> None:
        resp = self.client.get("/api/auth/verify", headers=self.bearer(self.token))
        self.assertEqual(resp.status_code, 200)
        user = resp.json()["user"]
        self.assertEqual(user["_id"], self.user.id)
        self.assertNotIn("id", user)

    def test_missing_token(self) -> None:
        resp = self.client.get("/api/auth/me")
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"error": "Access token required"})
        self.assertEqual(resp.headers.get("www-authenticate"), "Bearer")

    def test_malformed_token(self) -> None:
        resp = self.client.get("/api/auth/verify", headers=self.bearer("invalid-token"))
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"error": "Invalid or expired token"})

    def test_expired_token(self) -> None:
        past = datetime.now(UTC) - timedelta(hours=25)
        token = jwt.encode(
            {"id": self.user.id, "username": "designer1", "role": "designer", "iat": past, "exp": past + timedelta(hours=24)},
            settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
        )
        resp = self.client.get("/api/auth/me", headers=self.bearer(token))
        self.assertEqual(resp.status_code, 401)

    def test_token_signed_with_other_secret(self) -> None:
        token = jwt.encode(
            {"id": self.user.id, "exp": datetime.now(UTC) + timedelta(hours=1)},
            "someone-elses-secret",
            algorithm="HS256",
        )
        resp = self.client.get("/api/auth/me", headers=self.bearer(token))
        self.assertEqual(resp.status_code, 401)

    def test_user_deleted_after_token_issued(self) -> None:
        with self.database.session() as db:
            db.query(User).filter(User.id == self.user.id).delete()
            db.commit()
        resp = self.client.get("/api/auth/me", headers=self.bearer(self.token))
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"error": "User not found"})


if __name__ == "__main__":
    unittest.main()
