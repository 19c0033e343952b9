"""Shared pytest fixtures for the elevenlabs_ttd test suite."""

from __future__ import annotations

from typing import Callable

import pytest
import requests

from elevenlabs_ttd.client import ElevenLabsTTDClient


class FakeResponse:
    """Minimal stand-in for `requests.Response` used by transport tests."""

    def __init__(
        self,
        *,
        status_code: int = 200,
        content: bytes = b"",
        headers: dict[str, str] | None = None,
    ) -> None:
        self.status_code = status_code
        self.content = content
        self.headers = headers or {}

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


class UnreadableResponse(FakeResponse):
    """Response whose body cannot be decoded into text."""

    @property
    def text(self) -> str:
        raise requests.exceptions.ChunkedEncodingError("connection broken mid-body")


class RecordingSession:
    """Session stub recording every POST and replaying one canned outcome."""

    def __init__(
        self,
        response: FakeResponse | None = None,
        error: Exception | None = None,
    ) -> None:
        self.response = response if response is not None else FakeResponse(content=b"ID3audio")
        self.error = error
        self.calls: list[tuple[str, dict[str, object]]] = []

    def post(self, url: str, **kwargs: object) -> FakeResponse:
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


ClientFactory = Callable[..., tuple[ElevenLabsTTDClient, RecordingSession]]


@pytest.fixture
def make_client() -> ClientFactory:
    """Build a client wired to a `RecordingSession`."""

    def _factory(
        response: FakeResponse | None = None,
        error: Exception | None = None,
        *,
        api_key: str = "test-key",
        base_url: str = "https://api.example.test/v1",
    ) -> tuple[ElevenLabsTTDClient, RecordingSession]:
        session = RecordingSession(response=response, error=error)
        client = ElevenLabsTTDClient(api_key, base_url=base_url, session=session)  # type: ignore[arg-type]
        return client, session

    return _factory


@pytest.fixture
def fake_response() -> type[FakeResponse]:
    return FakeResponse


@pytest.fixture
def unreadable_response() -> type[UnreadableResponse]:
    return UnreadableResponse
