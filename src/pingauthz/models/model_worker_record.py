# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Worker credential record."""

from pydantic import BaseModel, ConfigDict, Field


class ModelWorkerRecord(BaseModel):
    """A service-account style worker bound to one PingOne environment.

    Attributes:
        worker_id: Identifier the node configuration refers to
        api_url: API base URL of the worker's environment, including the
            version segment (e.g. ``https://api.pingone.com/v1``)
        environment_id: PingOne environment ID
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    worker_id: str = Field(min_length=1)
    api_url: str = Field(min_length=1)
    environment_id: str = Field(min_length=1)


__all__: list[str] = ["ModelWorkerRecord"]
