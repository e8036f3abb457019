"""Issue commands -- work with issues on a ZenHub workspace board.

Provides the ``zh issue`` sub-command group. The only command is
``zh issue mv``, which moves an issue to the bottom of another pipeline.
"""

from __future__ import annotations

from typing import List, Optional

import typer

from zh.output import print_data


issue_app = typer.Typer(no_args_is_help=True)


@issue_app.command("mv")
def issue_move(
    ctx: typer.Context,
    args: Optional[List[str]] = typer.Argument(
        None,
        metavar="ISSUE_ID PIPELINE_ID",
        help="Issue number and the ID of the destination pipeline.",
        show_default=False,
    ),
) -> None:
    """Move an issue between pipelines.

    Validates the arguments and configuration before any request is sent,
    then posts a move request placing the issue at the bottom of the
    target pipeline.

    Example::

        zh -w 5f1a... -r 123456 issue mv 7 Z2lkOi8v...

    Raises:
        ArgumentError: If the arguments are not an integer issue ID and a
            pipeline ID.
        ConfigurationError: If the token, workspace, or repository is
            missing or invalid.
    """
    from zh.client import ZenHubClient
    from zh.config import build_client_config, parse_move_arguments

    obj = ctx.ensure_object(dict)
    issue_id, pipeline_id = parse_move_arguments(args)
    config = build_client_config(
        base_url=obj.get("base_url"),
        workspace_id=obj.get("workspace_id"),
        repository_id=obj.get("repository_id"),
    )

    with ZenHubClient(
        config,
        logger=obj.get("logger"),
        transport=obj.get("transport"),
    ) as client:
        client.move_issue(issue_id, pipeline_id)

    print_data(f"Successfully moved issue {issue_id} to pipeline {pipeline_id}")
