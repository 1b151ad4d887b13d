# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Decision Node Error Context Model.

This module defines the model bundling the structured fields every decision
node error carries, keeping error constructors small and strongly typed.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from pingauthz.enums import EnumTransportType


class ModelAuthorizeErrorContext(BaseModel):
    """Structured context attached to decision node errors.

    Attributes:
        transport_type: Layer the error originated from (HTTP, CREDENTIAL, ...)
        operation: Operation being performed (evaluate, resolve_credential, ...)
        target_name: Target endpoint or resource name (never a token)
        correlation_id: Invocation correlation ID for log correlation

    Example:
        >>> context = ModelAuthorizeErrorContext(
        ...     transport_type=EnumTransportType.HTTP,
        ...     operation="evaluate",
        ...     target_name="https://pdp.example.com/governance-engine",
        ...     correlation_id=uuid4(),
        ... )
        >>> raise DecisionTransportError("Failed to connect", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    transport_type: Optional[EnumTransportType] = Field(
        default=None,
        description="Layer the error originated from",
    )
    operation: Optional[str] = Field(
        default=None,
        description="Operation being performed",
    )
    target_name: Optional[str] = Field(
        default=None,
        description="Target endpoint or resource name",
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Invocation correlation ID",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: Optional[UUID] = None,
        **kwargs: object,
    ) -> ModelAuthorizeErrorContext:
        """Build a context, generating a correlation ID when none is given."""
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)


__all__ = ["ModelAuthorizeErrorContext"]
