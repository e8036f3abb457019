"""Exception hierarchy for zh.

All exceptions inherit from :class:`ZhError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`zh.exit_codes`.
The top-level error handler in :func:`zh.app.main` catches ``ZhError``
and exits with the appropriate code after printing the message to stderr.

None of these errors are retried: each one ends the current command.

Subclass hierarchy::

    ZhError (exit 1)
    +-- ConfigurationError   (exit 1)
    +-- ArgumentError        (exit 2)
    +-- SerializationError   (exit 1)
    +-- NetworkError         (exit 6)
    +-- AuthenticationError  (exit 3)
    +-- RateLimitError       (exit 7)
    +-- NotFoundError        (exit 4)
    +-- UnknownStatusError   (exit 5)
"""

from zh.exit_codes import (
    EXIT_AUTH_FAILURE,
    EXIT_CONNECTION_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_NOT_FOUND,
    EXIT_RATE_LIMITED,
    EXIT_UNKNOWN_STATUS,
)


class ZhError(Exception):
    """Base exception for all zh errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`zh.exit_codes`.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class ConfigurationError(ZhError):
    """Raised for a missing token, workspace, or repository ID."""

    exit_code = EXIT_GENERIC_FAILURE


class ArgumentError(ZhError):
    """Raised for the wrong number of positional arguments or a non-numeric issue ID."""

    exit_code = EXIT_INVALID_USAGE


class SerializationError(ZhError):
    """Raised when a request body cannot be encoded as JSON."""

    exit_code = EXIT_GENERIC_FAILURE


class NetworkError(ZhError):
    """Raised on transport-level failures (timeout, DNS resolution, connection refused)."""

    exit_code = EXIT_CONNECTION_ERROR


class AuthenticationError(ZhError):
    """Raised when the API returns HTTP 401 (token invalid or missing)."""

    exit_code = EXIT_AUTH_FAILURE


class RateLimitError(ZhError):
    """Raised when the API returns HTTP 403 (request limit reached)."""

    exit_code = EXIT_RATE_LIMITED


class NotFoundError(ZhError):
    """Raised when the API returns HTTP 404.

    The endpoints zh calls are fixed, so this almost always means zh built
    a wrong URL.
    """

    exit_code = EXIT_NOT_FOUND


class UnknownStatusError(ZhError):
    """Raised for any HTTP status code without a dedicated mapping.

    Args:
        status_code: The status code returned by the API.
        message: Optional override for the default message.
    """

    exit_code = EXIT_UNKNOWN_STATUS

    def __init__(self, status_code: int, message: str | None = None):
        self.status_code = status_code
        super().__init__(
            message
            or f"unknown status code {status_code}. "
            "This most likely is a bug in zh, please report it"
        )
