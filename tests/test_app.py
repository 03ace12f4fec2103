"""Application wiring: root and health routes, error rendering for unknown routes, bad input and crashes."""

import unittest
from unittest.mock import patch

import app.main
from app.core.database import Database
from tests.support import ApiTestCase


class TestRoot(ApiTestCase):
    def test_root(self) -> None:
        resp = self.client.get("/")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"message": "Design System API"})


class TestCreateApp(unittest.TestCase):
    def test_configures_logging_at_creation(self) -> None:
        database = Database("sqlite://")
        try:
            with patch("app.main.logging.basicConfig") as basic_config:
                app.main.create_app(database=database)
            basic_config.assert_called_once()
            self.assertEqual(basic_config.call_args.kwargs["level"], app.main.settings.LOG_LEVEL)
        finally:
            database.dispose()


class TestHealth(ApiTestCase):
    def test_connected(self) -> None:
        resp = self.client.get("/api/health")
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["status"], "OK")
        self.assertEqual(data["database"], "connected")
        self.assertEqual(data["environment"], "dev")
        self.assertIn("timestamp", data)

    def test_disconnected_still_ok(self) -> None:
        with patch.object(Database, "check_connected", return_value=False):
            resp = self.client.get("/api/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["database"], "disconnected")


class TestErrorRendering(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()

        @self.app.get("/boom")
        def boom() -> None:
            raise RuntimeError("kaboom")

    def test_unknown_route(self) -> None:
        resp = self.client.get("/api/nope")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"error": "Not Found"})

    def test_wrong_method(self) -> None:
        resp = self.client.patch("/api/health")
        self.assertEqual(resp.status_code, 405)
        self.assertIn("error", resp.json())

    def test_malformed_query_is_400(self) -> None:
        resp = self.client.get("/api/components?page=abc")
        self.assertEqual(resp.status_code, 400)
        self.assertTrue(resp.json()["error"].startswith("page:"))

    def test_malformed_json_body_is_400(self) -> None:
        _, token = self.add_user("dev1", role="developer")
        resp = self.client.post(
            "/api/components",
            content="{not json",
            headers={**self.bearer(token), "Content-Type": "application/json"},
        )
        self.assertEqual(resp.status_code, 400)
        self.assertIn("error", resp.json())

    def test_unhandled_error_in_dev_shows_message(self) -> None:
        resp = self.client.get("/boom")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"error": "Something went wrong!", "message": "kaboom"})

    def test_unhandled_error_in_prod_hides_message(self) -> None:
        with patch.object(app.main.settings, "APP_ENV", "prod"):
            resp = self.client.get("/boom")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"error": "Something went wrong!", "message": "Internal server error"})


if __name__ == "__main__":
    unittest.main()
