# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Resolved credential for one decision call."""

from pydantic import BaseModel, ConfigDict, Field, SecretStr


class ModelCredential(BaseModel):
    """Bearer token and target URL. Lives for one invocation, never cached."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    access_token: SecretStr = Field(description="Bearer token")
    target_url: str = Field(min_length=1, description="Decision endpoint URL")


__all__: list[str] = ["ModelCredential"]
