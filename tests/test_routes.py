"""API contract tests."""

import logging

import pytest
from httpx import AsyncClient

from hello_api.main import app
from hello_api.services.create_user import User, UserDescriptor, get_user_factory


class RecordingFactory:
    """Stand-in factory that records descriptors instead of building real users."""

    def __init__(self) -> None:
        self.calls: list[UserDescriptor] = []

    def __call__(self, descriptor: UserDescriptor) -> User:
        self.calls.append(descriptor)
        return User(email="double@example.com", password="x", techs=())


@pytest.mark.asyncio
async def test_health_endpoint(api_client: AsyncClient) -> None:
    response = await api_client.get("/health")
    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["service"] == "hello-api"


@pytest.mark.asyncio
async def test_readiness_endpoint(api_client: AsyncClient) -> None:
    response = await api_client.get("/readiness")
    assert response.status_code == 200
    assert response.json() == {"status": "ready"}


@pytest.mark.asyncio
async def test_hello_returns_greeting(api_client: AsyncClient) -> None:
    response = await api_client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Hello World"}


@pytest.mark.asyncio
async def test_hello_ignores_request_body(api_client: AsyncClient) -> None:
    response = await api_client.post(
        "/?email=someone@example.com",
        json={"email": "someone@example.com", "password": "hunter2", "techs": [1, 2]},
    )
    assert response.status_code == 200
    assert response.json() == {"message": "Hello World"}


@pytest.mark.asyncio
async def test_hello_uses_injected_factory(api_client: AsyncClient) -> None:
    factory = RecordingFactory()
    app.dependency_overrides[get_user_factory] = lambda: factory

    response = await api_client.get("/")

    assert response.status_code == 200
    assert response.json() == {"message": "Hello World"}
    assert len(factory.calls) == 1
    assert factory.calls[0].email == "cintiafumi@gmail.com"
    assert len(factory.calls[0].techs) == 4


@pytest.mark.asyncio
async def test_hello_never_logs_password(
    api_client: AsyncClient, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.INFO, logger="hello_api"):
        response = await api_client.get("/")

    assert response.status_code == 200
    assert "user.created" in caplog.text
    assert "123456" not in caplog.text


@pytest.mark.asyncio
async def test_request_id_is_echoed(api_client: AsyncClient) -> None:
    response = await api_client.get("/health", headers={"x-request-id": "abc-123"})
    assert response.headers["x-request-id"] == "abc-123"


@pytest.mark.asyncio
async def test_request_id_is_generated(api_client: AsyncClient) -> None:
    response = await api_client.get("/readiness")
    assert response.headers.get("x-request-id")
