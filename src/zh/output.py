"""Output system with strict stdout/stderr discipline.

Follows `clig.dev <https://clig.dev/>`_ conventions:

* **stdout** -- primary results only (the confirmation of a successful
  move). This is what wrapper scripts capture.
* **stderr** -- diagnostics and errors. Never contaminates stdout.
* **Colour control** -- respects ``NO_COLOR``, ``TERM=dumb``, and the
  ``--no-color`` CLI flag.

The module exposes two layers:

1. :class:`OutputManager` -- holds the colour preference and a Rich
   console for stderr. Created once in :func:`~zh.app.main_callback` and
   installed via :func:`set_output`.
2. Module-level convenience functions (:func:`print_data`, :func:`error`)
   that delegate to the global ``OutputManager`` instance.
"""

from __future__ import annotations

import os
import sys
from typing import Optional

from rich.console import Console
from rich.markup import escape


class OutputManager:
    """Central manager for CLI output.

    Args:
        no_color: Disable all colour and Rich markup.
    """

    def __init__(self, no_color: bool = False) -> None:
        self._no_color = no_color or _should_disable_color()
        self._stderr = Console(
            file=sys.stderr,
            no_color=self._no_color,
            stderr=True,
        )

    @property
    def no_color(self) -> bool:
        """Whether colour output is disabled."""
        return self._no_color

    def print_data(self, text: str) -> None:
        """Print a result line to stdout."""
        print(text, file=sys.stdout, flush=True)

    def error(self, message: str) -> None:
        """Print a bold-red error to stderr. Never suppressed.

        Args:
            message: The error text.
        """
        if self._no_color:
            print(f"Error: {message}", file=sys.stderr, flush=True)
        else:
            self._stderr.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)


def _should_disable_color() -> bool:
    """Check if color should be disabled per clig.dev.

    Returns True when NO_COLOR env var is set (any value) or TERM=dumb.
    """
    if os.environ.get("NO_COLOR") is not None:
        return True
    if os.environ.get("TERM") == "dumb":
        return True
    return False


# ------------------------------------------------------------------ #
# Global output instance (set during app startup)
# ------------------------------------------------------------------ #

_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the global :class:`OutputManager`, creating a default one lazily."""
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    """Install *output* as the global :class:`OutputManager` instance."""
    global _output
    _output = output


def reset_output() -> None:
    """Reset the global :class:`OutputManager` to ``None``.

    Primarily useful in test suites to ensure a clean state between tests.
    """
    global _output
    _output = None


def print_data(text: str) -> None:
    """Print a result line to stdout via the global OutputManager."""
    get_output().print_data(text)


def error(message: str) -> None:
    """Print error to stderr via the global OutputManager."""
    get_output().error(message)
