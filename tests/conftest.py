from __future__ import annotations

import json
from typing import Any, Dict, List, Tuple, Union

import httpx
import pytest

from appchains import AppChains, Settings
from appchains.transport import Transport
from appchains.urls import AppChainsUrls

HOST = "api.test"

Payload = Union[Dict[str, Any], List[Any], str, bytes]


# -----------------------------
# Test doubles
# -----------------------------
class FakeAppChainsServer:
    """Routes requests by path to queued (status, payload) answers.

    Each call pops the next answer; the last one keeps repeating.
    """

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._routes: Dict[str, List[Tuple[int, Payload]]] = {}
        self._errors: Dict[str, Exception] = {}

    def add(self, path: str, status: int, payload: Payload) -> None:
        self._routes.setdefault(path, []).append((status, payload))

    def fail(self, path: str, error: Exception) -> None:
        self._errors[path] = error

    def paths(self) -> List[str]:
        return [r.url.path for r in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path in self._errors:
            err = self._errors[path]
            raise type(err)(str(err), request=request)

        queue = self._routes.get(path)
        if not queue:
            return httpx.Response(404, text="not found")
        status, payload = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(payload, bytes):
            return httpx.Response(status, content=payload)
        if isinstance(payload, str):
            return httpx.Response(status, text=payload)
        return httpx.Response(status, content=json.dumps(payload).encode("utf-8"))


class SleepRecorder:
    def __init__(self) -> None:
        self.calls: List[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


def status_payload(status: str, succeeded: Any = None, props: Any = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"Status": {"Status": status}}
    if succeeded is not None:
        body["Status"]["CompletedSuccesfully"] = succeeded
    if props is not None:
        body["ResultProps"] = props
    return body


# -----------------------------
# Fixtures
# -----------------------------
@pytest.fixture
def server() -> FakeAppChainsServer:
    return FakeAppChainsServer()


@pytest.fixture
def http_client(server: FakeAppChainsServer):
    client = httpx.Client(transport=httpx.MockTransport(server.handler))
    try:
        yield client
    finally:
        client.close()


@pytest.fixture
def sleeps() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def urls() -> AppChainsUrls:
    return AppChainsUrls(HOST)


@pytest.fixture
def transport(http_client: httpx.Client) -> Transport:
    return Transport("secret-token", client=http_client)


@pytest.fixture
def config() -> Settings:
    return Settings(_env_file=None, token=None, hostname=HOST)


@pytest.fixture
def appchains(config: Settings, http_client: httpx.Client, sleeps: SleepRecorder):
    client = AppChains("secret-token", HOST, config=config, http_client=http_client, sleep=sleeps)
    try:
        yield client
    finally:
        client.close()
