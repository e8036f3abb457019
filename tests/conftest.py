"""Shared test fixtures for zh.

Provides fixtures for isolating the ``ZENHUB_*`` environment, building
client configurations, and recording HTTP traffic through
:class:`httpx.MockTransport`. These fixtures are
automatically discovered by pytest.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import httpx
import pytest

from zh.models import ClientConfig
from zh.output import reset_output


ZENHUB_ENV_VARS = [
    "ZENHUB_TOKEN",
    "ZENHUB_WORKSPACE_ID",
    "ZENHUB_REPOSITORY_ID",
    "ZENHUB_LOG_LEVEL",
]


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches a reference to sys.stderr at creation time.
    When Typer's CliRunner redirects the streams and the test finishes,
    the cached reference becomes stale.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Clear ZENHUB_* variables and run the test from an empty directory.

    Changing into ``tmp_path`` keeps a developer's own ``.env`` from being
    picked up by the CLI. Each variable is set before being deleted so that
    monkeypatch also removes values a test loads from a ``.env`` file.

    Returns:
        The tmp_path working directory.
    """
    for var in ZENHUB_ENV_VARS:
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def zenhub_env(isolated_env: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A complete, valid ZenHub environment (token ``abc``, ws1, repo 42)."""
    monkeypatch.setenv("ZENHUB_TOKEN", "abc")
    monkeypatch.setenv("ZENHUB_WORKSPACE_ID", "ws1")
    monkeypatch.setenv("ZENHUB_REPOSITORY_ID", "42")
    return isolated_env


# ---------------------------------------------------------------------------
# Client fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def client_config() -> ClientConfig:
    """Client configuration matching :func:`zenhub_env`."""
    return ClientConfig(
        base_url="https://api.zenhub.com",
        workspace_id="ws1",
        repository_id=42,
        token="abc",
    )


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it was asked to send."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    """Factory for a :class:`RecordingTransport` answering with *status_code*."""

    def _make(status_code: int = 200, json: object = None) -> RecordingTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            if json is None:
                return httpx.Response(status_code)
            return httpx.Response(status_code, json=json)

        return RecordingTransport(handler)

    return _make
