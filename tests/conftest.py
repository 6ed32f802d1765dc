from __future__ import annotations

import json
import sys
from pathlib import Path

import httpx
import pytest


def pytest_configure() -> None:
    src = Path(__file__).resolve().parents[1] / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


@pytest.fixture
def seen():
    """Requests received by the mock transport, as (path, json_body, headers)."""
    return []


@pytest.fixture
def engine_factory(seen):
    from lingo_engine.translation import LocalizationEngine

    def _factory(handler, **kwargs):
        def _recording(request: httpx.Request):
            body = json.loads(request.content) if request.content else None
            seen.append((request.url.path, body, request.headers))
            return handler(request)

        kwargs.setdefault("api_key", "test-key")
        return LocalizationEngine(transport=httpx.MockTransport(_recording), **kwargs)

    return _factory


def echo_prefix(prefix: str):
    """Handler that answers every /i18n chunk with its values prefixed."""

    def _handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        return httpx.Response(200, json={"data": {k: f"{prefix}{v}" for k, v in body["data"].items()}})

    return _handler


@pytest.fixture
def echo():
    return echo_prefix
