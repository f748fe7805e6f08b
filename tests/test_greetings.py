"""Tests for the greeting routes."""
import anyio
import httpx
import pytest

from war_api.api.endpoints.greetings import HELLO_MESSAGE, WELCOME_MESSAGE
from war_api.main import app


def test_root_returns_welcome_message(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.text == "Welcome to Faisal's War Spring Boot API!"
    assert response.headers["content-type"].startswith("text/plain")


def test_hello_returns_hello_message(client):
    response = client.get("/hello")
    assert response.status_code == 200
    assert response.text == "Hello from WAR project!"
    assert response.headers["content-type"].startswith("text/plain")


def test_unknown_path_is_not_found(client):
    response = client.get("/unknown-path")
    assert response.status_code == 404
    # Server keeps serving after a miss
    assert client.get("/hello").status_code == 200


def test_wrong_method_is_not_allowed(client):
    assert client.post("/hello").status_code == 405
    assert client.delete("/").status_code == 405


@pytest.mark.parametrize("path", ["/docs", "/redoc", "/openapi.json"])
def test_documentation_routes_are_disabled(client, path):
    assert client.get(path).status_code == 404


def test_responses_are_byte_identical(client):
    bodies = {client.get("/").content for _ in range(5)}
    assert bodies == {WELCOME_MESSAGE.encode("utf-8")}

    bodies = {client.get("/hello").content for _ in range(5)}
    assert bodies == {HELLO_MESSAGE.encode("utf-8")}


@pytest.mark.anyio
async def test_concurrent_requests_get_unmixed_bodies():
    expected = {"/": WELCOME_MESSAGE, "/hello": HELLO_MESSAGE}
    paths = ["/", "/hello"] * 50
    results = []

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as ac:

        async def fetch(path):
            response = await ac.get(path)
            results.append((path, response.status_code, response.text))

        async with anyio.create_task_group() as tg:
            for path in paths:
                tg.start_soon(fetch, path)

    assert len(results) == 100
    for path, status_code, text in results:
        assert status_code == 200
        assert text == expected[path]
