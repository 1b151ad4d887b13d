# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Decision service provider variants.

PingAuthorize (the self-hosted policy decision point) and PingOne Authorize
(the SaaS decision endpoint) accept the same request shape except for the
top-level key wrapping the attribute payload.
"""

from __future__ import annotations

from enum import Enum, unique


@unique
class EnumAuthorizeProvider(str, Enum):
    """Decision service flavour.

    Attributes:
        PING_AUTHORIZE: PingAuthorize governance engine, body key ``attributes``.
        PINGONE_AUTHORIZE: PingOne Authorize decision endpoint, body key ``parameters``.
    """

    PING_AUTHORIZE = "ping_authorize"
    PINGONE_AUTHORIZE = "pingone_authorize"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value

    @property
    def body_key(self) -> str:
        """Top-level JSON key wrapping the attribute payload."""
        if self is EnumAuthorizeProvider.PING_AUTHORIZE:
            return "attributes"
        return "parameters"


__all__: list[str] = ["EnumAuthorizeProvider"]
