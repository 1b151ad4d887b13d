# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Decision request model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from pingauthz.enums import EnumAuthorizeProvider


class ModelDecisionRequest(BaseModel):
    """A single POST to a decision endpoint.

    Security Note:
        The access token is a SecretStr; ``repr`` and logs never show it.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    target_url: str = Field(min_length=1, description="Fully composed decision URL")
    access_token: SecretStr = Field(description="Bearer token")
    provider: EnumAuthorizeProvider = Field(description="Request body variant")
    payload: dict[str, object] = Field(
        default_factory=dict,
        description="Collected session attributes",
    )

    @property
    def body_key(self) -> str:
        return self.provider.body_key

    def to_body(self) -> dict[str, object]:
        """JSON body ``{body_key: payload}``."""
        return {self.body_key: dict(self.payload)}


__all__: list[str] = ["ModelDecisionRequest"]
