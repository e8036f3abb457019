"""Synchronous ZenHub API client.

This module provides :class:`ZenHubClient`, the blocking client used by the
``zh issue`` commands. It wraps :class:`httpx.Client` and layers on:

- **Auth injection** -- every request goes through an
  :class:`~zh.client.transport.AuthenticationTransport`.
- **Status mapping** -- :func:`error_from_status_code` turns non-200
  responses into typed :class:`~zh.exceptions.ZhError` subclasses.
- **Debug logging** -- request URLs and bodies are logged at DEBUG level
  through an explicitly injected :class:`logging.Logger`.

Requests are never retried: a single network failure or error status is
surfaced immediately.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from zh.client.transport import AuthenticationTransport
from zh.config import ZENHUB_TOKEN_ENV_VAR
from zh.exceptions import (
    AuthenticationError,
    ConfigurationError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    SerializationError,
    UnknownStatusError,
    ZhError,
)
from zh.models import ClientConfig, MoveRequest

DEFAULT_TIMEOUT = 30.0
"""Timeout in seconds applied to connect, read, write, and pool acquisition."""

MOVE_ISSUE_PATH = (
    "/p2/workspaces/{workspace_id}/repositories/{repository_id}/issues/{issue_id}/moves"
)


def error_from_status_code(status_code: int) -> Optional[ZhError]:
    """Convert an HTTP status code into a more informative error.

    Args:
        status_code: Status code of the API response.

    Returns:
        ``None`` for ``200``, otherwise the error to raise.
    """
    if status_code == 200:
        return None
    if status_code == 401:
        return AuthenticationError(
            "authentication token is not valid. "
            f"Check that {ZENHUB_TOKEN_ENV_VAR} is set correctly"
        )
    if status_code == 403:
        return RateLimitError("ZenHub API request limit reached. Please try again later")
    if status_code == 404:
        return NotFoundError(
            "endpoint not found. This most likely is a bug in zh, please report it"
        )
    return UnknownStatusError(status_code)


class ZenHubClient:
    """Blocking client for the ZenHub REST API.

    Must be used as a context manager so that the underlying
    :class:`httpx.Client` is opened and closed.

    Args:
        config: Validated connection settings.
        logger: Logger for request diagnostics. Defaults to a silent logger.
        transport: Transport to send requests through. Defaults to
            :class:`httpx.HTTPTransport`. It is always wrapped in an
            :class:`~zh.client.transport.AuthenticationTransport`.
        timeout: Request timeout in seconds.

    Example::

        with ZenHubClient(config, logger=logger) as client:
            client.move_issue(7, "p9")
    """

    def __init__(
        self,
        config: ClientConfig,
        logger: Optional[logging.Logger] = None,
        transport: Optional[httpx.BaseTransport] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._config = config
        self._logger = logger or _null_logger()
        self._transport = transport
        self._timeout = timeout
        self._client: Optional[httpx.Client] = None

    # ------------------------------------------------------------------ #
    # Context manager
    # ------------------------------------------------------------------ #

    def __enter__(self) -> ZenHubClient:
        self._client = httpx.Client(
            transport=AuthenticationTransport(
                self._transport or httpx.HTTPTransport(),
                self._config.token,
            ),
            timeout=self._timeout,
        )
        return self

    def __exit__(self, *args: object) -> None:
        if self._client:
            self._client.close()
            self._client = None

    # ------------------------------------------------------------------ #
    # Operations
    # ------------------------------------------------------------------ #

    def move_issue_url(self, issue_id: int) -> str:
        """Build the absolute URL of the "move issue" endpoint for *issue_id*."""
        path = MOVE_ISSUE_PATH.format(
            workspace_id=self._config.workspace_id,
            repository_id=self._config.repository_id,
            issue_id=issue_id,
        )
        return f"{self._config.base_url}{path}"

    def move_issue(self, issue_id: int, pipeline_id: str) -> None:
        """Move an issue to the bottom of the pipeline *pipeline_id*.

        Args:
            issue_id: The issue number within the configured repository.
            pipeline_id: Opaque ID of the destination pipeline.

        Raises:
            SerializationError: If the request body cannot be encoded.
            ConfigurationError: If the base URL cannot be parsed.
            NetworkError: On any transport-level failure.
            AuthenticationError: On HTTP 401.
            RateLimitError: On HTTP 403.
            NotFoundError: On HTTP 404.
            UnknownStatusError: On any other non-200 status.
        """
        assert self._client is not None, "Client not initialised -- use as context manager"

        url = self.move_issue_url(issue_id)
        request = MoveRequest(pipeline_id=pipeline_id)
        try:
            body = request.model_dump_json()
        except ValueError as exc:
            raise SerializationError(
                f"failed to convert move issue request {request!r} to JSON: {exc}"
            ) from exc

        self._logger.debug("Sending move issue request url=%s body=%s", url, body)
        try:
            response = self._client.post(
                url,
                content=body,
                headers={"Content-Type": "application/json"},
            )
        except httpx.InvalidURL as exc:
            raise ConfigurationError(
                f"invalid base URL {self._config.base_url!r}: {exc}"
            ) from exc
        except httpx.TransportError as exc:
            raise NetworkError(f"failed to move issue between pipelines: {exc}") from exc

        self._logger.debug("Received HTTP %d from %s", response.status_code, url)
        err = error_from_status_code(response.status_code)
        if err is not None:
            raise err


def _null_logger() -> logging.Logger:
    """Return a standalone logger that discards every record."""
    logger = logging.Logger("zh.null")
    logger.addHandler(logging.NullHandler())
    logger.propagate = False
    return logger
