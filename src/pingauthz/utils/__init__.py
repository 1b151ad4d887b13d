# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Utility modules for decision nodes.

    - util_error_sanitization: Credential masking for error messages
"""

from pingauthz.utils.util_error_sanitization import (
    REDACTED,
    sanitize_error_message,
    sanitize_error_string,
)

__all__: list[str] = [
    "REDACTED",
    "sanitize_error_message",
    "sanitize_error_string",
]
