# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocols implemented by credential strategies and host collaborators."""

from pingauthz.protocols.protocol_credential_resolver import (
    ProtocolCredentialResolver,
)
from pingauthz.protocols.protocol_token_issuer import (
    ProtocolAccessTokenIssuer,
    ProtocolPingOneConfigDirectory,
    ProtocolWorkerDirectory,
    TokenSubject,
)

__all__ = [
    "ProtocolAccessTokenIssuer",
    "ProtocolCredentialResolver",
    "ProtocolPingOneConfigDirectory",
    "ProtocolWorkerDirectory",
    "TokenSubject",
]
