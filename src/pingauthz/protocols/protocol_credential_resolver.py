# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol for credential resolution strategies."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable
from uuid import UUID

from pingauthz.models import ModelCredential, NodeState


@runtime_checkable
class ProtocolCredentialResolver(Protocol):
    """Resolves the bearer token and target decision URL for one invocation.

    Implementations raise CredentialError on every failure, never returning
    a credential without a token.
    """

    async def resolve(
        self,
        state: NodeState,
        correlation_id: Optional[UUID] = None,
    ) -> ModelCredential:
        ...


__all__ = ["ProtocolCredentialResolver"]
