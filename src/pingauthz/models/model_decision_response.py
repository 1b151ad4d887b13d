# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Decision response model.

Parses the JSON object returned by PingAuthorize / PingOne Authorize. The
``statements`` array is optional: PingOne Authorize omits it for policies
without statements, and an empty array is equally valid.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from pingauthz.models.model_statement import ModelStatement


class ModelDecisionResponse(BaseModel):
    """Parsed decision document.

    Attributes:
        decision: Raw ``decision`` field (PERMIT, DENY, INDETERMINATE or other)
        statements: Ordered statements, None when the field is absent
        raw: The untouched JSON object, stored in transient session state
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    decision: Optional[str] = Field(default=None, description="Decision verdict")
    statements: Optional[list[ModelStatement]] = Field(
        default=None,
        description="Ordered statement objects",
    )
    raw: dict[str, object] = Field(
        default_factory=dict,
        description="Response JSON object as received",
    )

    @classmethod
    def from_json(cls, document: dict[str, object]) -> ModelDecisionResponse:
        """Build from a decoded JSON object, validating the interpreted fields.

        Raises:
            pydantic.ValidationError: If ``decision`` is not a string or
                ``statements`` is not an array of objects.
        """
        return cls(
            decision=document.get("decision"),
            statements=document.get("statements"),
            raw=document,
        )

    def first_statement_code(self) -> Optional[str]:
        """Return ``statements[0].code``, or None when there is no statement."""
        if not self.statements:
            return None
        return self.statements[0].code


__all__: list[str] = ["ModelDecisionResponse"]
