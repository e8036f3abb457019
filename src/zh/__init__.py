"""zh -- Control ZenHub from the command line.

This package provides a small Typer CLI that talks to the ZenHub REST API.
The only supported operation is moving an issue between pipelines of a
workspace board::

    export ZENHUB_TOKEN=...
    zh -w <workspace> -r <repository> issue mv 7 <pipeline-id>

Configuration comes from ``ZENHUB_*`` environment variables (optionally
loaded from a ``.env`` file in the working directory) and global flags.

Modules:
    app: Typer application and CLI entry point.
    config: Environment/flag resolution and validation.
    models: Pydantic request and configuration models.
    client: Authenticated HTTP transport and the ZenHub API client.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    log: Explicit logger construction from ``ZENHUB_LOG_LEVEL``.
    output: stdout/stderr output discipline with Rich support.
"""

__version__ = "0.1.0"
