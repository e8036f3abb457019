"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~zh.exceptions.ZhError` subclass. Shell scripts
wrapping ``zh`` can inspect the exit code to tell a rejected token from a
rate limit without parsing stderr.

Example::

    $ zh issue mv 7 p9
    $ echo $?
    3   # EXIT_AUTH_FAILURE -- ZENHUB_TOKEN was rejected
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred (also used for configuration problems)."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments."""

EXIT_AUTH_FAILURE = 3
"""The API rejected the authentication token (HTTP 401)."""

EXIT_NOT_FOUND = 4
"""The API endpoint was not found (HTTP 404)."""

EXIT_UNKNOWN_STATUS = 5
"""The API answered with a status code zh does not know how to handle."""

EXIT_CONNECTION_ERROR = 6
"""A network-level error occurred (timeout, DNS failure, connection refused)."""

EXIT_RATE_LIMITED = 7
"""The API request limit was reached (HTTP 403)."""
