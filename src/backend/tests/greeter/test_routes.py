# SPDX-FileCopyrightText: 2025 greeter
#
# SPDX-License-Identifier: MIT
import pytest
from fastapi.testclient import TestClient

from greeter.main import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def assert_hello(response) -> None:
    assert response.status_code == 200
    assert response.headers["content-type"] == "text/plain"
    assert response.content == b"Hello!"


def test_root_get_returns_hello(client: TestClient) -> None:
    assert_hello(client.get("/"))


@pytest.mark.parametrize("method", ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"])
def test_every_standard_method_returns_hello(client: TestClient, method: str) -> None:
    assert_hello(client.request(method, "/some/path?q=1"))


def test_delete_on_unknown_path_returns_hello(client: TestClient) -> None:
    assert_hello(client.delete("/does/not/exist"))


def test_non_standard_method_returns_hello(client: TestClient) -> None:
    """Methods outside the route table are not rejected with 405."""
    assert_hello(client.request("PURGE", "/cache"))


def test_request_body_and_headers_are_ignored(client: TestClient) -> None:
    response = client.post(
        "/submit",
        json={"name": "ignored"},
        headers={"Accept": "application/json", "X-Custom": "1"},
    )
    assert_hello(response)


@pytest.mark.parametrize("path", ["/docs", "/redoc", "/openapi.json"])
def test_framework_paths_are_not_special(client: TestClient, path: str) -> None:
    assert_hello(client.get(path))


def test_head_gets_success_without_body(client: TestClient) -> None:
    response = client.head("/")
    assert response.status_code == 200
    assert response.headers["content-type"] == "text/plain"
    assert response.content == b""


def test_repeated_requests_get_identical_responses(client: TestClient) -> None:
    first = client.get("/again")
    second = client.get("/again")
    assert (first.status_code, first.content) == (second.status_code, second.content)
