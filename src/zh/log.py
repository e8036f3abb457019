"""Explicit logger construction for zh.

Rather than configuring the root logger, zh builds one standalone
:class:`logging.Logger` per invocation from ``ZENHUB_LOG_LEVEL`` and hands
it to the code that logs (see :class:`~zh.client.sync_client.ZenHubClient`).
The logger is not registered with :func:`logging.getLogger`, so nothing
process-wide is mutated.

Records are rendered to stderr through :class:`rich.logging.RichHandler`.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from zh.config import ZENHUB_LOG_LEVEL_ENV_VAR, resolve_log_level

LOGGER_NAME = "zh"
DEFAULT_LOG_LEVEL = logging.WARNING


def build_logger(
    level_name: Optional[str] = None,
    no_color: bool = False,
) -> logging.Logger:
    """Create a stderr logger at the level named by *level_name*.

    An unknown level name keeps :data:`DEFAULT_LOG_LEVEL` and emits a
    warning through the new logger.

    Args:
        level_name: Value of ``ZENHUB_LOG_LEVEL`` (e.g. ``"debug"``).
        no_color: Disable colour in rendered log records.

    Returns:
        A configured, non-propagating :class:`logging.Logger`.
    """
    level = resolve_log_level(level_name)

    logger = logging.Logger(LOGGER_NAME, level if level is not None else DEFAULT_LOG_LEVEL)
    logger.propagate = False

    handler = RichHandler(
        console=Console(stderr=True, no_color=no_color),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)

    if level is None and level_name and level_name.strip():
        logger.warning(
            "Invalid log level %r specified by %s", level_name, ZENHUB_LOG_LEVEL_ENV_VAR
        )
    return logger
