"""Tests for application assembly: errors, CORS and isolation."""

import pytest
from fastapi.testclient import TestClient

from user_registry_api.app.core.config import Settings
from user_registry_api.app.main import create_app
from user_registry_api.app.services.user_store import UserStore


class TestErrorResponses:
    def test_malformed_json_is_400(self, client: TestClient) -> None:
        response = client.post(
            "/users",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Invalid request body"
        assert body["errors"]

    def test_wrongly_typed_field_is_400(self, client: TestClient) -> None:
        response = client.post("/users", json={"name": "Ana", "age": "thirty"})

        assert response.status_code == 400
        assert any("age" in error["field"] for error in response.json()["errors"])

    @pytest.mark.parametrize("age", [True, "30"])
    def test_non_numeric_age_is_not_coerced_on_create(self, client: TestClient, store: UserStore, age) -> None:
        response = client.post("/users", json={"name": "Ana", "age": age})

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request body"
        assert len(store) == 0

    @pytest.mark.parametrize("age", [True, "31"])
    def test_non_numeric_age_is_not_coerced_on_replace(self, client: TestClient, age) -> None:
        user = client.post("/users", json={"name": "Ana", "age": 30}).json()

        response = client.put(f"/users/{user['id']}", json={"name": "Ana", "age": age})

        assert response.status_code == 400
        assert client.get("/users").json() == [user]

    def test_non_string_name_is_rejected(self, client: TestClient) -> None:
        response = client.post("/users", json={"name": 5, "age": 30})

        assert response.status_code == 400

    def test_unknown_route_uses_message_shape(self, client: TestClient) -> None:
        response = client.get("/nowhere")

        assert response.status_code == 404
        assert response.json() == {"message": "Not Found"}

    def test_unsupported_method_is_405(self, client: TestClient) -> None:
        response = client.patch("/users/some-id", json={"name": "Ana"})

        assert response.status_code == 405
        assert "message" in response.json()

    def test_unexpected_error_is_500(self, app) -> None:
        @app.get("/boom")
        async def boom() -> None:
            raise RuntimeError("kaboom")

        client = TestClient(app, raise_server_exceptions=False)
        response = client.get("/boom")

        assert response.status_code == 500
        assert response.json() == {"message": "An internal server error occurred"}


class TestCors:
    def test_simple_request_allows_any_origin(self, client: TestClient) -> None:
        response = client.get("/users", headers={"Origin": "http://example.com"})

        assert response.headers["access-control-allow-origin"] == "*"

    def test_preflight_is_answered(self, client: TestClient) -> None:
        response = client.options(
            "/users/abc",
            headers={
                "Origin": "http://example.com",
                "Access-Control-Request-Method": "PUT",
            },
        )

        assert response.status_code == 200
        assert "PUT" in response.headers["access-control-allow-methods"]

    def test_configured_origins_are_enforced(self) -> None:
        app = create_app(settings=Settings(cors_origins="http://allowed.test"))
        client = TestClient(app)

        allowed = client.get("/users", headers={"Origin": "http://allowed.test"})
        other = client.get("/users", headers={"Origin": "http://other.test"})

        assert allowed.headers["access-control-allow-origin"] == "http://allowed.test"
        assert "access-control-allow-origin" not in other.headers


def test_each_app_gets_its_own_store() -> None:
    first = TestClient(create_app(settings=Settings()))
    second = TestClient(create_app(settings=Settings()))

    first.post("/users", json={"name": "Ana", "age": 30})

    assert len(first.get("/users").json()) == 1
    assert second.get("/users").json() == []


def test_api_prefix_moves_routes() -> None:
    client = TestClient(create_app(settings=Settings(api_prefix="/api/v1")))

    assert client.get("/api/v1/users").status_code == 200
    assert client.get("/users").status_code == 404
