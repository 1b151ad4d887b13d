# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocols for the host collaborators that issue tokens and hold credentials.

Token acquisition (client credentials grants, caching, refresh) belongs to
the host platform. The decision node only needs to ask for a token bound to a
worker record or a shared PingOne configuration, and to look those up by
name.

Protocol Verification:
    Conformance is checked by duck typing, not isinstance:

    ```python
    assert hasattr(issuer, "get_access_token") and callable(issuer.get_access_token)
    ```
"""

from __future__ import annotations

from typing import Optional, Protocol, Union, runtime_checkable

from pydantic import SecretStr

from pingauthz.models import ModelPingOneConfig, ModelWorkerRecord

TokenSubject = Union[ModelWorkerRecord, ModelPingOneConfig]


@runtime_checkable
class ProtocolAccessTokenIssuer(Protocol):
    """Issues bearer tokens for a worker or shared PingOne configuration."""

    async def get_access_token(
        self, subject: TokenSubject
    ) -> Optional[Union[str, SecretStr]]:
        """Return a token for ``subject``, or None when none can be issued.

        Implementations may cache tokens. Raising is allowed; the caller
        wraps any exception in CredentialError.
        """
        ...


@runtime_checkable
class ProtocolWorkerDirectory(Protocol):
    """Looks up worker credential records by identifier."""

    async def get_worker(self, worker_id: str) -> Optional[ModelWorkerRecord]:
        """Return the worker record, or None if it does not exist."""
        ...


@runtime_checkable
class ProtocolPingOneConfigDirectory(Protocol):
    """Looks up shared PingOne configurations by name."""

    def get_config(self, name: str) -> Optional[ModelPingOneConfig]:
        """Return the named configuration, or None if it does not exist."""
        ...


__all__ = [
    "TokenSubject",
    "ProtocolAccessTokenIssuer",
    "ProtocolWorkerDirectory",
    "ProtocolPingOneConfigDirectory",
]
