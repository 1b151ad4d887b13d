# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Outcome declaration rendered by the journey editor."""

from pydantic import BaseModel, ConfigDict, Field


class ModelOutcomeDeclaration(BaseModel):
    """A selectable outcome edge: id plus display label."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    outcome_id: str = Field(description="Outcome id routed on by the host")
    display_label: str = Field(description="Label shown in the journey editor")


__all__: list[str] = ["ModelOutcomeDeclaration"]
