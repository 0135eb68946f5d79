"""Tests for application wiring, greetings and framework-level errors."""

from fastapi.testclient import TestClient

from user_store_api.app.api.endpoints.greeting import HELLO_GREETING, ROOT_GREETING
from user_store_api.app.core.config import Settings
from user_store_api.app.main import build_store, create_app


def test_root_endpoint(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.text == ROOT_GREETING
    assert "simple Python http server" in response.text


def test_root_answers_every_method(client):
    for method in ("POST", "PUT", "PATCH", "DELETE"):
        response = client.request(method, "/")
        assert response.status_code == 200, method
        assert response.text == ROOT_GREETING


def test_hello_endpoint(client):
    response = client.get("/hello")

    assert response.status_code == 200
    assert response.text == HELLO_GREETING


def test_hello_rejects_other_methods(client):
    response = client.post("/hello")

    assert response.status_code == 405
    assert response.text == "Method not allowed\n"


def test_unknown_path_is_not_found(client):
    paths = (
        "/invalid",
        "/user/1",
        "/hello/there",
        "/user/",
        "/user/?id=1",
        "/hello/",
        "/docs",
        "/redoc",
        "/openapi.json",
    )
    for path in paths:
        response = client.get(path)
        assert response.status_code == 404, path
        assert response.text == "404 page not found\n"


def test_default_store_is_seeded_with_demo_user():
    app = create_app(Settings(log_level="WARNING", seed_demo_user=True))

    with TestClient(app) as client:
        assert client.get("/user?id=1").json() == {"id": 1, "name": "Test User1"}
        assert client.post("/user", json={"name": "Next"}).json()["id"] == 2


def test_store_can_start_empty():
    store = build_store(Settings(seed_demo_user=False))

    assert len(store) == 0
    assert store.next_id == 1


def test_each_app_gets_its_own_store():
    app_settings = Settings(log_level="WARNING", seed_demo_user=False)
    first = create_app(app_settings)
    second = create_app(app_settings)

    with TestClient(first) as client:
        client.post("/user", json={"name": "Only here"})

    assert len(first.state.store) == 1
    assert len(second.state.store) == 0


def test_settings_defaults():
    app_settings = Settings()

    assert isinstance(app_settings.port, int)
    assert app_settings.project_name
