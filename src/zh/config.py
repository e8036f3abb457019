"""Configuration resolution for zh.

All inputs needed to move an issue are gathered and validated here, before
any network call is made:

* **Token** -- ``ZENHUB_TOKEN`` only. It is never accepted as a CLI flag so
  it does not end up in shell history. See :func:`get_zenhub_token`.
* **Workspace / repository** -- global CLI flags with ``ZENHUB_WORKSPACE_ID``
  and ``ZENHUB_REPOSITORY_ID`` as defaults. See :func:`resolve_workspace_id`
  and :func:`resolve_repository_id`.
* **Positional arguments** -- issue ID and pipeline ID for ``issue mv``.
  See :func:`parse_move_arguments`.
* **Environment file** -- an optional ``.env`` in the working directory,
  loaded with python-dotenv. See :func:`load_env_file`.
* **Log level** -- ``ZENHUB_LOG_LEVEL``. See :func:`resolve_log_level`.

Precedence (high to low): CLI flags, process environment, ``.env`` file,
built-in defaults.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

from zh.exceptions import ArgumentError, ConfigurationError
from zh.models import ClientConfig

DEFAULT_BASE_URL = "https://api.zenhub.com"
"""Base URL the API endpoints are built from. Overridable with ``--base-url``."""

ZENHUB_TOKEN_ENV_VAR = "ZENHUB_TOKEN"
ZENHUB_WORKSPACE_ID_ENV_VAR = "ZENHUB_WORKSPACE_ID"
ZENHUB_REPOSITORY_ID_ENV_VAR = "ZENHUB_REPOSITORY_ID"
ZENHUB_LOG_LEVEL_ENV_VAR = "ZENHUB_LOG_LEVEL"

_ENV_FILENAME = ".env"

# ASCII decimal integer with an optional sign; no underscores or padding.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# logrus level names are accepted alongside the standard logging ones.
_LOG_LEVELS = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "panic": logging.CRITICAL,
    "critical": logging.CRITICAL,
}


# --- Environment file ---


def load_env_file(path: Optional[Path] = None) -> bool:
    """Load variables from a ``.env`` file into the process environment.

    Variables already present in the environment are left untouched.

    Args:
        path: File to load. Defaults to ``./.env`` in the working directory.

    Returns:
        ``True`` if the file was found and loaded, ``False`` if it does
        not exist.
    """
    env_path = path if path is not None else Path.cwd() / _ENV_FILENAME
    if not env_path.is_file():
        return False
    load_dotenv(dotenv_path=env_path, override=False)
    return True


def resolve_log_level(value: Optional[str]) -> Optional[int]:
    """Translate a level name (e.g. ``"debug"``, ``"WARN"``) into a logging level.

    Returns:
        The numeric :mod:`logging` level, or ``None`` if *value* is empty
        or not a known level name.
    """
    if not value or not value.strip():
        return None
    return _LOG_LEVELS.get(value.strip().lower())


def _parse_int(raw: str) -> Optional[int]:
    """Parse *raw* as a plain decimal integer, or return ``None``.

    Stricter than :func:`int`: underscores, surrounding whitespace, and
    non-ASCII digits are rejected.
    """
    if not _INTEGER_RE.fullmatch(raw):
        return None
    return int(raw)


# --- Credentials and IDs ---


def get_zenhub_token() -> str:
    """Return the ZenHub token from ``ZENHUB_TOKEN``, stripped of whitespace.

    Raises:
        ConfigurationError: If the variable is unset or blank.
    """
    token = os.environ.get(ZENHUB_TOKEN_ENV_VAR, "").strip()
    if not token:
        raise ConfigurationError(
            f"missing credential: expected environment variable {ZENHUB_TOKEN_ENV_VAR}"
        )
    return token


def resolve_workspace_id(cli_value: Optional[str] = None) -> str:
    """Resolve the workspace ID from the ``--workspace-id`` flag or environment.

    Raises:
        ConfigurationError: If neither source provides a non-blank value.
    """
    value = cli_value if cli_value is not None else os.environ.get(ZENHUB_WORKSPACE_ID_ENV_VAR, "")
    value = value.strip()
    if not value:
        raise ConfigurationError(
            f"invalid workspace: workspace-id value of {value!r}. Pass --workspace-id "
            f"or set {ZENHUB_WORKSPACE_ID_ENV_VAR}"
        )
    return value


def resolve_repository_id(cli_value: Optional[int] = None) -> int:
    """Resolve the repository ID from the ``--repository-id`` flag or environment.

    The flag wins over ``ZENHUB_REPOSITORY_ID``. An unset or blank
    environment variable counts as ``0``.

    Raises:
        ConfigurationError: If the environment value is not an integer, or
            the resolved ID is not a positive number.
    """
    if cli_value is not None:
        repository_id = cli_value
    else:
        raw = os.environ.get(ZENHUB_REPOSITORY_ID_ENV_VAR, "")
        if not raw.strip():
            repository_id = 0
        else:
            parsed = _parse_int(raw)
            if parsed is None:
                raise ConfigurationError(
                    f"invalid value {raw!r} for {ZENHUB_REPOSITORY_ID_ENV_VAR}: "
                    "expected an integer repository ID"
                )
            repository_id = parsed

    if repository_id <= 0:
        raise ConfigurationError(
            f"invalid repository: repository-id value of {repository_id}. Pass "
            f"--repository-id or set {ZENHUB_REPOSITORY_ID_ENV_VAR}"
        )
    return repository_id


def build_client_config(
    base_url: Optional[str] = DEFAULT_BASE_URL,
    workspace_id: Optional[str] = None,
    repository_id: Optional[int] = None,
) -> ClientConfig:
    """Resolve and validate every connection setting.

    Checks run in a fixed order: token, workspace, repository.

    Args:
        base_url: API base URL (from ``--base-url``).
        workspace_id: ``--workspace-id`` flag value, or ``None`` to fall
            back to the environment.
        repository_id: ``--repository-id`` flag value, or ``None`` to fall
            back to the environment.

    Returns:
        A validated :class:`~zh.models.ClientConfig`.

    Raises:
        ConfigurationError: On the first invalid setting.
    """
    token = get_zenhub_token()
    resolved_workspace = resolve_workspace_id(workspace_id)
    resolved_repository = resolve_repository_id(repository_id)
    return ClientConfig(
        base_url=base_url or DEFAULT_BASE_URL,
        workspace_id=resolved_workspace,
        repository_id=resolved_repository,
        token=token,
    )


# --- Positional arguments ---


def parse_move_arguments(args: Optional[Sequence[str]]) -> tuple[int, str]:
    """Validate the positional arguments of ``issue mv``.

    Args:
        args: Raw positional arguments, expected to be ``[issue_id, pipeline_id]``.

    Returns:
        A ``(issue_id, pipeline_id)`` tuple.

    Raises:
        ArgumentError: If there are not exactly two arguments or the issue
            ID is not an integer.
    """
    args = list(args or [])
    if len(args) != 2:
        raise ArgumentError(
            "expected exactly two arguments, the issue ID and the pipeline ID. "
            f"Received {len(args)}"
        )

    raw_issue_id, pipeline_id = args
    issue_id = _parse_int(raw_issue_id)
    if issue_id is None:
        raise ArgumentError(f"expected issue ID to be an int, got {raw_issue_id}")

    return issue_id, pipeline_id
