from __future__ import annotations

from typing import Any

import httpx
import pytest

import openai_assistant.core.transport as transport_mod

_REAL_CLIENT = httpx.Client

NOT_JSON = object()


class _FakeResponse:
    def __init__(self, status_code: int, body: Any) -> None:
        self.status_code = status_code
        self._body = body

    def json(self) -> Any:
        if self._body is NOT_JSON:
            raise ValueError("Expecting value")
        return self._body


class FakeHTTP:
    """Records outgoing POSTs and answers with a canned reply."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.status_code = 200
        self.body: Any = {}
        self.error: Exception | None = None

    def reply(self, status_code: int, body: Any) -> None:
        self.status_code = status_code
        self.body = body

    def client(self, timeout: float | int | None = None) -> "_FakeClient":  # signature-compatible
        return _FakeClient(self, timeout)


class _FakeClient:
    def __init__(self, http: FakeHTTP, timeout: float | int | None) -> None:
        self.http = http
        self.timeout = timeout

    def __enter__(self) -> "_FakeClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        return None

    def post(self, url: str, headers: dict[str, str] | None = None, json: dict[str, Any] | None = None) -> _FakeResponse:  # noqa: A002
        self.http.calls.append({"url": url, "headers": headers, "json": json, "timeout": self.timeout})
        if self.http.error is not None:
            raise self.http.error
        return _FakeResponse(self.http.status_code, self.http.body)


@pytest.fixture
def fake_http(monkeypatch: pytest.MonkeyPatch) -> FakeHTTP:
    # Patch httpx.Client as seen by the transport module to avoid network calls
    http = FakeHTTP()
    monkeypatch.setattr(transport_mod.httpx, "Client", http.client)
    return http


@pytest.fixture
def strict_http(monkeypatch: pytest.MonkeyPatch) -> list[httpx.Request]:
    """Real httpx.Client (real header encoding) over a MockTransport that records what was sent."""
    sent: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        sent.append(request)
        return httpx.Response(200, json={"choices": [{"message": {"content": "ok"}}]})

    def client(timeout: float | int | None = None) -> httpx.Client:
        return _REAL_CLIENT(transport=httpx.MockTransport(handler), timeout=timeout)

    monkeypatch.setattr(transport_mod.httpx, "Client", client)
    return sent
