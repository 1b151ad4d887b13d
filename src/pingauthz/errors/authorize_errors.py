# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Decision Node Error Classes.

Error Hierarchy:
    AuthorizeNodeError (base error)
    ├── ProtocolConfigurationError
    ├── CredentialError
    └── DecisionClientError
        ├── DecisionTransportError
        │   └── DecisionTimeoutError
        ├── RemoteRejectionError
        ├── DecisionInterruptedError
        └── MalformedResponseError

All errors:
    - Carry an EnumAuthorizeErrorCode classification
    - Support proper error chaining with `raise ... from e`
    - Accept ModelAuthorizeErrorContext for bundled context parameters
    - Never carry access tokens in their message or context

The decision node converts every one of these into the clientError outcome;
the distinction only matters for logs and the transient diagnostic entries.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from pingauthz.enums import EnumAuthorizeErrorCode
from pingauthz.errors.model_authorize_error_context import ModelAuthorizeErrorContext


class AuthorizeNodeError(Exception):
    """Base error class for decision node failures.

    Structured Fields (via ModelAuthorizeErrorContext):
        transport_type: Layer the error originated from
        operation: Operation being performed
        correlation_id: Invocation correlation ID
        target_name: Target endpoint or resource

    Example:
        >>> context = ModelAuthorizeErrorContext(
        ...     transport_type=EnumTransportType.HTTP,
        ...     operation="evaluate",
        ... )
        >>> raise AuthorizeNodeError("Operation failed", context=context, attempt=1)
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[EnumAuthorizeErrorCode] = None,
        context: Optional[ModelAuthorizeErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize AuthorizeNodeError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to OPERATION_FAILED)
            context: Bundled context (transport_type, operation, etc.)
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or EnumAuthorizeErrorCode.OPERATION_FAILED

        structured_context: dict[str, object] = dict(extra_context)
        correlation_id: Optional[UUID] = None
        if context is not None:
            if context.transport_type is not None:
                structured_context["transport_type"] = context.transport_type
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.target_name is not None:
                structured_context["target_name"] = context.target_name
            correlation_id = context.correlation_id

        self.correlation_id = correlation_id
        self.context = structured_context

    def __str__(self) -> str:
        return self.message


class ProtocolConfigurationError(AuthorizeNodeError):
    """Raised when node or handler configuration is invalid or missing.

    Example:
        >>> raise ProtocolConfigurationError(
        ...     "worker credential source requires a worker directory",
        ...     context=context,
        ... )
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelAuthorizeErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumAuthorizeErrorCode.INVALID_CONFIGURATION,
            context=context,
            **extra_context,
        )


class CredentialError(AuthorizeNodeError):
    """Raised when the bearer token or target endpoint cannot be resolved.

    Used for a missing token attribute, an unknown worker or shared
    configuration, and token issuers returning no token or failing.
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelAuthorizeErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumAuthorizeErrorCode.CREDENTIAL_UNAVAILABLE,
            context=context,
            **extra_context,
        )


class DecisionClientError(AuthorizeNodeError):
    """Base class for failures of the decision endpoint call."""


class DecisionTransportError(DecisionClientError):
    """Raised on connection, header construction or response read failures."""

    def __init__(
        self,
        message: str,
        context: Optional[ModelAuthorizeErrorContext] = None,
        error_code: Optional[EnumAuthorizeErrorCode] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code or EnumAuthorizeErrorCode.TRANSPORT_ERROR,
            context=context,
            **extra_context,
        )


class DecisionTimeoutError(DecisionTransportError):
    """Raised when the decision endpoint call exceeds the configured timeout."""

    def __init__(
        self,
        message: str,
        context: Optional[ModelAuthorizeErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            context=context,
            error_code=EnumAuthorizeErrorCode.TIMEOUT_ERROR,
            **extra_context,
        )


class RemoteRejectionError(DecisionClientError):
    """Raised when the decision endpoint answers with a status other than 200/201.

    Attributes:
        status_code: HTTP status returned by the endpoint
        body: Raw response body text
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        body: str,
        context: Optional[ModelAuthorizeErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumAuthorizeErrorCode.REMOTE_REJECTED,
            context=context,
            status_code=status_code,
            **extra_context,
        )
        self.status_code = status_code
        self.body = body


class DecisionInterruptedError(DecisionClientError):
    """Raised when the decision endpoint call is cancelled while in flight."""

    def __init__(
        self,
        message: str,
        context: Optional[ModelAuthorizeErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumAuthorizeErrorCode.INTERRUPTED,
            context=context,
            **extra_context,
        )


class MalformedResponseError(DecisionClientError):
    """Raised when a successful response body is not a decision document.

    Attributes:
        raw: The parsed JSON object when the body was an object of the wrong
            shape, otherwise None
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelAuthorizeErrorContext] = None,
        raw: Optional[dict[str, object]] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumAuthorizeErrorCode.MALFORMED_RESPONSE,
            context=context,
            **extra_context,
        )
        self.raw = raw


__all__ = [
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
