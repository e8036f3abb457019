"""Typer application and CLI entry point for zh.

This module wires together the top-level Typer application, its global
options (``--base-url``, ``--workspace-id``, ``--repository-id``), and the
``issue`` sub-command group.

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. It installs signal handlers, invokes the Typer app, and
turns :class:`~zh.exceptions.ZhError` instances into an ``Error:`` line on
stderr plus the error's exit code.

See Also:
    :mod:`zh.config`: Environment and flag resolution.
    :mod:`zh.log`: Logger built in :func:`main_callback`.
"""

from __future__ import annotations

import os
import signal
import sys
from typing import Any, Optional

import typer

from zh import __version__
from zh.config import DEFAULT_BASE_URL, ZENHUB_LOG_LEVEL_ENV_VAR
from zh.exit_codes import EXIT_GENERIC_FAILURE


app = typer.Typer(
    name="zh",
    help="Control ZenHub from the command line!",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

# ------------------------------------------------------------------ #
# Commands
# ------------------------------------------------------------------ #

from zh.commands.issue import issue_app  # noqa: E402

app.add_typer(issue_app, name="issue", help="Work with issues.")


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"zh {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    base_url: str = typer.Option(
        DEFAULT_BASE_URL, "--base-url", help="Base URL to build API endpoints from."
    ),
    workspace_id: Optional[str] = typer.Option(
        None,
        "--workspace-id",
        "-w",
        help="ID of the target workspace. [default: $ZENHUB_WORKSPACE_ID]",
        show_default=False,
    ),
    repository_id: Optional[int] = typer.Option(
        None,
        "--repository-id",
        "-r",
        help="ID of the target repository. [default: $ZENHUB_REPOSITORY_ID]",
        show_default=False,
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Loads ``./.env``, initialises the global
    :class:`~zh.output.OutputManager`, builds the logger from
    ``ZENHUB_LOG_LEVEL``, and stores the global options in ``ctx.obj`` so
    that sub-commands can read them.

    Args:
        ctx: Typer invocation context.
        version: If ``True``, print the version string and exit.
        base_url: Base URL of the ZenHub API.
        workspace_id: Workspace override (wins over ``ZENHUB_WORKSPACE_ID``).
        repository_id: Repository override (wins over ``ZENHUB_REPOSITORY_ID``).
        no_color: Disable all colour and Rich markup.
    """
    from zh.config import load_env_file
    from zh.log import build_logger
    from zh.output import OutputManager, set_output

    env_loaded = load_env_file()

    output = OutputManager(no_color=no_color)
    set_output(output)

    logger = build_logger(os.environ.get(ZENHUB_LOG_LEVEL_ENV_VAR), no_color=output.no_color)
    if not env_loaded:
        logger.warning("No .env file found in the working directory")

    obj = ctx.ensure_object(dict)
    obj["base_url"] = base_url
    obj["workspace_id"] = workspace_id
    obj["repository_id"] = repository_id
    obj["logger"] = logger
    obj.setdefault("transport", None)


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def main() -> None:
    """CLI entry point invoked by the ``zh`` console script.

    Unhandled :class:`~zh.exceptions.ZhError` instances cause a clean exit
    with the error's ``exit_code``. Any other exception is reported on
    stderr and exits with :data:`~zh.exit_codes.EXIT_GENERIC_FAILURE`.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        from zh.exceptions import ZhError
        from zh.output import error

        if isinstance(exc, ZhError):
            error(str(exc))
            sys.exit(exc.exit_code)
        else:
            error(f"Unexpected error: {exc!r}")
            sys.exit(EXIT_GENERIC_FAILURE)
