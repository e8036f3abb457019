"""HTTP client layer for zh.

Re-exports:
    ZenHubClient: Blocking API client with auth injection and status mapping.
    AuthenticationTransport: httpx transport decorator adding the token header.
"""

from zh.client.sync_client import ZenHubClient, error_from_status_code
from zh.client.transport import AUTHENTICATION_HEADER, AuthenticationTransport

__all__ = [
    "AUTHENTICATION_HEADER",
    "AuthenticationTransport",
    "ZenHubClient",
    "error_from_status_code",
]
