from __future__ import annotations

import asyncio
from typing import Any, Callable, Iterator

import httpx
import pytest

from src.config.settings import Settings
from src.core.incode_client import IncodeClient
from src.core.onboarding_gateway import OnboardingGateway

Route = Callable[[httpx.Request], httpx.Response]


class FakeIncode:
    """In-memory Incode API keyed by path; records every request it sees."""

    def __init__(self) -> None:
        self.routes: dict[str, Route] = {}
        self.requests: list[httpx.Request] = []

    def json(self, path: str, body: Any, status_code: int = 200) -> None:
        self.routes[path] = lambda request: httpx.Response(status_code, json=body)

    def fail(self, path: str, exc_type: type[httpx.TransportError], message: str) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise exc_type(message, request=request)

        self.routes[path] = _raise

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"message": "not found"})
        return route(request)

    def last(self, path: str) -> httpx.Request:
        return [r for r in self.requests if r.url.path == path][-1]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        api_key="key-123",
        api_url="https://incode.test",
        flow_id="flow-1",
        client_id="client-9",
        admin_token="admin-tok",
    )


@pytest.fixture
def incode() -> FakeIncode:
    return FakeIncode()


@pytest.fixture
def incode_client(settings: Settings, incode: FakeIncode) -> Iterator[IncodeClient]:
    client = IncodeClient(settings, transport=httpx.MockTransport(incode.handler))
    yield client
    asyncio.run(client.close())


@pytest.fixture
def gateway(settings: Settings, incode_client: IncodeClient) -> OnboardingGateway:
    return OnboardingGateway(settings, incode_client)
