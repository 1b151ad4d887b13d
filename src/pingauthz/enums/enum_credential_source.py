# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Credential source selection for decision node configuration."""

from enum import Enum


class EnumCredentialSource(str, Enum):
    """Where a decision node obtains its bearer token and target endpoint.

    Attributes:
        STATIC: Token read from a session state attribute, endpoint URL from config.
        WORKER: Token issued for a named worker credential, endpoint from the worker record.
        SHARED_CONFIG: Token issued for a shared PingOne configuration, endpoint from its region.
    """

    STATIC = "static"
    WORKER = "worker"
    SHARED_CONFIG = "shared_config"


__all__ = ["EnumCredentialSource"]
