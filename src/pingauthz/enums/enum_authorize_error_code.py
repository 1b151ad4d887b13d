# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error codes attached to every AuthorizeNodeError."""

from enum import Enum


class EnumAuthorizeErrorCode(str, Enum):
    """Classification codes for decision node errors."""

    OPERATION_FAILED = "OPERATION_FAILED"
    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"
    CREDENTIAL_UNAVAILABLE = "CREDENTIAL_UNAVAILABLE"
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    TIMEOUT_ERROR = "TIMEOUT_ERROR"
    REMOTE_REJECTED = "REMOTE_REJECTED"
    INTERRUPTED = "INTERRUPTED"
    MALFORMED_RESPONSE = "MALFORMED_RESPONSE"


__all__ = ["EnumAuthorizeErrorCode"]
