# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Result of one decision node invocation."""

from pydantic import BaseModel, ConfigDict, Field

from pingauthz.models.model_outcome import ModelOutcome


class ModelNodeResult(BaseModel):
    """Resolved outcome plus the declared edge the host should follow.

    ``edge`` differs from ``outcome.outcome_id`` only in continue mode, where
    every concrete outcome except clientError is wired to ``continue``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    outcome: ModelOutcome = Field(description="Outcome computed from the decision")
    edge: str = Field(description="Declared outcome edge to route to")


__all__: list[str] = ["ModelNodeResult"]
