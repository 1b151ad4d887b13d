# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Session state input declared by a decision node."""

from pydantic import BaseModel, ConfigDict, Field


class ModelInputDeclaration(BaseModel):
    """A session state attribute the node reads."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(description="Session state attribute name")
    required: bool = Field(
        default=False,
        description="Whether the node cannot run without this attribute",
    )


__all__: list[str] = ["ModelInputDeclaration"]
