# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Outcome union emitted by a decision node invocation."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from pingauthz.enums import EnumOutcomeKind


class ModelOutcome(BaseModel):
    """One of Permit, Deny, Indeterminate, Continue, ClientError or Custom(code).

    Attributes:
        kind: Union tag
        code: Statement code, present only for CUSTOM outcomes

    Example:
        >>> ModelOutcome.custom("REVIEW").outcome_id
        'REVIEW'
        >>> ModelOutcome.deny().outcome_id
        'deny'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: EnumOutcomeKind = Field(description="Union tag")
    code: Optional[str] = Field(
        default=None,
        description="Statement code for CUSTOM outcomes",
    )

    @model_validator(mode="after")
    def _check_code(self) -> ModelOutcome:
        if self.kind is EnumOutcomeKind.CUSTOM:
            if not self.code:
                raise ValueError("custom outcomes require a non-empty code")
        elif self.code is not None:
            raise ValueError(f"{self.kind.value} outcomes do not carry a code")
        return self

    @property
    def outcome_id(self) -> str:
        """Outcome id the host journey engine routes on."""
        if self.kind is EnumOutcomeKind.CUSTOM:
            assert self.code is not None
            return self.code
        return self.kind.value

    @property
    def display_label(self) -> str:
        if self.kind is EnumOutcomeKind.CUSTOM:
            assert self.code is not None
            return self.code
        return self.kind.display_label

    @property
    def is_client_error(self) -> bool:
        return self.kind is EnumOutcomeKind.CLIENT_ERROR

    @classmethod
    def permit(cls) -> ModelOutcome:
        return cls(kind=EnumOutcomeKind.PERMIT)

    @classmethod
    def deny(cls) -> ModelOutcome:
        return cls(kind=EnumOutcomeKind.DENY)

    @classmethod
    def indeterminate(cls) -> ModelOutcome:
        return cls(kind=EnumOutcomeKind.INDETERMINATE)

    @classmethod
    def continue_(cls) -> ModelOutcome:
        return cls(kind=EnumOutcomeKind.CONTINUE)

    @classmethod
    def client_error(cls) -> ModelOutcome:
        return cls(kind=EnumOutcomeKind.CLIENT_ERROR)

    @classmethod
    def custom(cls, code: str) -> ModelOutcome:
        return cls(kind=EnumOutcomeKind.CUSTOM, code=code)

    def __str__(self) -> str:
        return self.outcome_id


__all__: list[str] = ["ModelOutcome"]
