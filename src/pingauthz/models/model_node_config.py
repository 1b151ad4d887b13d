# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Decision Node Configuration Model.

Immutable configuration of one decision node instance, supplied by the host
configuration store (or loaded from YAML by
``pingauthz.runtime.node_config_loader``).

Required fields depend on the credential source:

    static:         endpoint_url, access_token_attribute
    worker:         worker_id, decision_endpoint_id
    shared_config:  pingone_config_name, decision_endpoint_id

The provider (request body variant) defaults to PingAuthorize for the static
source and PingOne Authorize for the other two.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from pingauthz.enums import EnumAuthorizeProvider, EnumCredentialSource

DEFAULT_PINGONE_CONFIG_NAME = "Global Default"

_REQUIRED_FIELDS: dict[EnumCredentialSource, tuple[str, ...]] = {
    EnumCredentialSource.STATIC: ("endpoint_url", "access_token_attribute"),
    EnumCredentialSource.WORKER: ("worker_id", "decision_endpoint_id"),
    EnumCredentialSource.SHARED_CONFIG: (
        "pingone_config_name",
        "decision_endpoint_id",
    ),
}


class ModelNodeConfig(BaseModel):
    """Configuration for a PingAuthorize / PingOne Authorize decision node.

    Attributes:
        credential_source: Where the token and endpoint come from
        provider: Request body variant (derived from credential_source when None)
        endpoint_url: PingAuthorize base URL (static source)
        access_token_attribute: Session attribute holding the token (static source)
        worker_id: Worker credential identifier (worker source)
        pingone_config_name: Shared PingOne configuration name (shared_config source)
        decision_endpoint_id: PingOne Authorize decision endpoint ID
        attribute_map: Session attribute names sent to the policy
        statement_codes: Statement codes routed to their own outcome
        use_continue: Declare a single continue edge instead of the decision edges

    Example:
        >>> config = ModelNodeConfig(
        ...     credential_source=EnumCredentialSource.STATIC,
        ...     endpoint_url="https://pdp.example.com",
        ...     access_token_attribute="pazAccessToken",
        ...     attribute_map=("riskScore",),
        ... )
        >>> config.effective_provider.body_key
        'attributes'
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    credential_source: EnumCredentialSource = Field(
        default=EnumCredentialSource.STATIC,
        description="Token and endpoint source",
    )
    provider: Optional[EnumAuthorizeProvider] = Field(
        default=None,
        description="Request body variant; derived from credential_source when unset",
    )
    endpoint_url: Optional[str] = Field(
        default=None,
        description="PingAuthorize base URL (static source)",
    )
    access_token_attribute: Optional[str] = Field(
        default=None,
        description="Session attribute holding the bearer token (static source)",
    )
    worker_id: Optional[str] = Field(
        default=None,
        description="Worker credential identifier (worker source)",
    )
    pingone_config_name: Optional[str] = Field(
        default=DEFAULT_PINGONE_CONFIG_NAME,
        description="Shared PingOne configuration name (shared_config source)",
    )
    decision_endpoint_id: Optional[str] = Field(
        default=None,
        description="PingOne Authorize decision endpoint ID",
    )
    attribute_map: tuple[str, ...] = Field(
        default=(),
        description="Session attribute names sent to the policy",
    )
    statement_codes: tuple[str, ...] = Field(
        default=(),
        description="Statement codes routed to their own outcome",
    )
    use_continue: bool = Field(
        default=False,
        description="Declare a single continue edge",
    )

    @field_validator("attribute_map", "statement_codes")
    @classmethod
    def _reject_blank_entries(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if any(not entry.strip() for entry in value):
            raise ValueError("entries must be non-empty strings")
        return value

    @model_validator(mode="after")
    def _check_source_fields(self) -> ModelNodeConfig:
        missing = [
            name
            for name in _REQUIRED_FIELDS[self.credential_source]
            if not getattr(self, name)
        ]
        if missing:
            raise ValueError(
                f"credential source '{self.credential_source.value}' requires: "
                + ", ".join(missing)
            )
        return self

    @property
    def effective_provider(self) -> EnumAuthorizeProvider:
        """Provider in use, falling back to the source's natural provider."""
        if self.provider is not None:
            return self.provider
        if self.credential_source is EnumCredentialSource.STATIC:
            return EnumAuthorizeProvider.PING_AUTHORIZE
        return EnumAuthorizeProvider.PINGONE_AUTHORIZE


__all__: list[str] = ["DEFAULT_PINGONE_CONFIG_NAME", "ModelNodeConfig"]
