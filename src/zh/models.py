"""Pydantic models shared across zh modules.

Both models are request-scoped: they are built once per command invocation,
used for a single API call, and discarded.

* :class:`MoveRequest` -- JSON body of the "move issue" endpoint.
* :class:`ClientConfig` -- validated connection settings consumed by
  :class:`~zh.client.sync_client.ZenHubClient`.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


BOTTOM_POSITION = "bottom"
"""Position value placing a moved issue at the end of the target pipeline."""


class MoveRequest(BaseModel):
    """Request body for moving an issue between pipelines.

    ``position`` is fixed to ``"bottom"``; zh never produces any other
    placement.

    Example::

        MoveRequest(pipeline_id="p9").model_dump_json()
        # '{"pipeline_id":"p9","position":"bottom"}'
    """

    model_config = ConfigDict(frozen=True)

    pipeline_id: str = Field(description="Opaque ID of the destination pipeline")
    position: Literal["bottom"] = BOTTOM_POSITION


class ClientConfig(BaseModel):
    """Connection settings for the ZenHub API.

    Built by :func:`zh.config.build_client_config`, which reports invalid
    values as :class:`~zh.exceptions.ConfigurationError` before this model
    is instantiated. The constraints below hold the same invariants.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str
    workspace_id: str = Field(min_length=1)
    repository_id: int = Field(gt=0)
    token: str = Field(min_length=1, repr=False)

    @field_validator("workspace_id", "token")
    @classmethod
    def _strip(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")
