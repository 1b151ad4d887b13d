# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Decision Node Errors Module.

Exports:
    ModelAuthorizeErrorContext: Bundled structured error context
    AuthorizeNodeError: Base error class
    ProtocolConfigurationError: Node/handler configuration errors
    CredentialError: Token or endpoint resolution errors
    DecisionClientError: Base class for decision endpoint call errors
    DecisionTransportError: Network, header and body read errors
    DecisionTimeoutError: Decision endpoint call timeouts
    RemoteRejectionError: Non-success HTTP status from the endpoint
    DecisionInterruptedError: Cancelled decision endpoint calls
    MalformedResponseError: Response body is not a decision document

Error Sanitization Guidelines:
    NEVER include in error messages or context:
        - Access tokens, bearer header values, client secrets
        - Session attribute values (they may carry PII)

    SAFE to include:
        - Target endpoint URLs, worker IDs, shared configuration names
        - HTTP status codes
        - Correlation IDs
"""

from pingauthz.errors.authorize_errors import (
    AuthorizeNodeError,
    CredentialError,
    DecisionClientError,
    DecisionInterruptedError,
    DecisionTimeoutError,
    DecisionTransportError,
    MalformedResponseError,
    ProtocolConfigurationError,
    RemoteRejectionError,
)
from pingauthz.errors.model_authorize_error_context import ModelAuthorizeErrorContext

__all__: list[str] = [
    "ModelAuthorizeErrorContext",
    "AuthorizeNodeError",
    "ProtocolConfigurationError",
    "CredentialError",
    "DecisionClientError",
    "DecisionTransportError",
    "DecisionTimeoutError",
    "RemoteRejectionError",
    "DecisionInterruptedError",
    "MalformedResponseError",
]
