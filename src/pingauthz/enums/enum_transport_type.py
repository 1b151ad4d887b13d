# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Transport Type Enumeration.

Identifies the layer an error originated from. Used for error context and
structured log fields.
"""

from enum import Enum


class EnumTransportType(str, Enum):
    """Transport types touched by a decision node invocation.

    Attributes:
        HTTP: Decision endpoint HTTP call
        CREDENTIAL: Token issuing and credential lookup
        CONFIG: Node configuration loading
    """

    HTTP = "http"
    CREDENTIAL = "credential"
    CONFIG = "config"


__all__ = ["EnumTransportType"]
