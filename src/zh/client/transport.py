"""Authenticating transport decorator for httpx.

:class:`AuthenticationTransport` wraps any :class:`httpx.BaseTransport`
(the default :class:`httpx.HTTPTransport`, a :class:`httpx.MockTransport`
in tests, or another decorator) and adds the ZenHub token header to every
request before delegating. It adds no retry, timeout, or pooling policy of
its own.
"""

from __future__ import annotations

import httpx

AUTHENTICATION_HEADER = "X-Authentication-Token"
"""Header the ZenHub API reads the authentication token from."""


class AuthenticationTransport(httpx.BaseTransport):
    """Transport that puts *token* in :data:`AUTHENTICATION_HEADER`.

    Every request made through an :class:`httpx.Client` built on this
    transport is authenticated, whatever its method or endpoint.

    Args:
        transport: The transport requests are delegated to.
        token: The ZenHub API token.

    Example::

        transport = AuthenticationTransport(httpx.HTTPTransport(), token)
        with httpx.Client(transport=transport) as client:
            client.post(url, content=body)
    """

    def __init__(self, transport: httpx.BaseTransport, token: str) -> None:
        self._transport = transport
        self._token = token

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        request.headers[AUTHENTICATION_HEADER] = self._token
        return self._transport.handle_request(request)

    def close(self) -> None:
        self._transport.close()
