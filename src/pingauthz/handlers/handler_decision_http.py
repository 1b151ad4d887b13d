# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Decision endpoint HTTP handler using the httpx async client.

Sends one POST per decision request with a bearer token and JSON body, and
classifies every failure into the DecisionClientError family. The handler
never picks an outcome and never retries.

Lifecycle:
    The underlying ``httpx.AsyncClient`` is a process-wide resource: create
    the handler once, ``initialize()`` it at host startup, share it across
    concurrent node invocations, and ``shutdown()`` it from the host's
    lifecycle manager.
"""

from __future__ import annotations

import asyncio
import json
import logging
import re
from typing import Optional
from uuid import UUID, uuid4

import httpx
from pydantic import ValidationError

from pingauthz.enums import EnumTransportType
from pingauthz.errors import (
    DecisionClientError,
    DecisionInterruptedError,
    DecisionTimeoutError,
    DecisionTransportError,
    MalformedResponseError,
    ModelAuthorizeErrorContext,
    ProtocolConfigurationError,
    RemoteRejectionError,
)
from pingauthz.models import ModelDecisionRequest, ModelDecisionResponse

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT_SECONDS: float = 30.0
_DEFAULT_MAX_RESPONSE_SIZE: int = 1024 * 1024  # 1 MB
_STREAMING_CHUNK_SIZE: int = 8192
_SUCCESS_STATUSES: frozenset[int] = frozenset({200, 201})
# Visible ASCII only; rules out CR/LF header injection and non-encodable tokens
_TOKEN_PATTERN = re.compile(r"[\x21-\x7e]+")
# Rejection bodies kept on the error are capped
_MAX_ERROR_BODY_CHARS: int = 2000


def _is_positive_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return value > 0


class HandlerDecisionHttp:
    """POSTs decision requests to PingAuthorize / PingOne Authorize."""

    def __init__(self) -> None:
        """Initialize HandlerDecisionHttp in uninitialized state."""
        self._client: Optional[httpx.AsyncClient] = None
        self._timeout: float = _DEFAULT_TIMEOUT_SECONDS
        self._max_response_size: int = _DEFAULT_MAX_RESPONSE_SIZE
        self._initialized: bool = False

    async def initialize(
        self,
        config: dict[str, object],
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Create the shared HTTP client.

        Args:
            config: Configuration dict containing:
                - timeout_seconds: Optional request timeout (default: 30s)
                - max_response_size: Optional max response body size in bytes (default: 1 MB)
            transport: Optional httpx transport override (mock transports in tests,
                custom TLS or proxy transports in hosts)

        Raises:
            ProtocolConfigurationError: If client initialization fails.
        """
        timeout_raw = config.get("timeout_seconds")
        if timeout_raw is not None:
            if _is_positive_number(timeout_raw):
                self._timeout = float(timeout_raw)  # type: ignore[arg-type]
            else:
                logger.warning(
                    "Invalid timeout_seconds config value ignored, using default",
                    extra={"provided_value": timeout_raw, "default_value": self._timeout},
                )

        max_response_raw = config.get("max_response_size")
        if max_response_raw is not None:
            if _is_positive_number(max_response_raw) and isinstance(max_response_raw, int):
                self._max_response_size = max_response_raw
            else:
                logger.warning(
                    "Invalid max_response_size config value ignored, using default",
                    extra={
                        "provided_value": max_response_raw,
                        "default_value": self._max_response_size,
                    },
                )

        try:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                follow_redirects=True,
                transport=transport,
            )
        except Exception as e:
            ctx = ModelAuthorizeErrorContext(
                transport_type=EnumTransportType.HTTP,
                operation="initialize",
                target_name="decision_http_handler",
                correlation_id=uuid4(),
            )
            raise ProtocolConfigurationError(
                "Failed to initialize decision HTTP handler", context=ctx
            ) from e

        self._initialized = True
        logger.info(
            "HandlerDecisionHttp initialized",
            extra={
                "timeout_seconds": self._timeout,
                "max_response_size": self._max_response_size,
            },
        )

    async def shutdown(self) -> None:
        """Close HTTP client and release resources."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
        self._initialized = False
        logger.info("HandlerDecisionHttp shutdown complete")

    @property
    def is_initialized(self) -> bool:
        return self._initialized and self._client is not None

    async def evaluate(
        self,
        request: ModelDecisionRequest,
        correlation_id: Optional[UUID] = None,
    ) -> ModelDecisionResponse:
        """Send ``request`` and return the parsed decision document.

        Raises:
            DecisionClientError: Handler not initialized.
            DecisionTransportError: Connection, header or body read failure.
            DecisionTimeoutError: The call exceeded the configured timeout.
            RemoteRejectionError: Status other than 200 or 201.
            DecisionInterruptedError: The call was cancelled while in flight.
            MalformedResponseError: Body is not a decision JSON object.
        """
        correlation_id = correlation_id or uuid4()
        url = request.target_url
        ctx = ModelAuthorizeErrorContext(
            transport_type=EnumTransportType.HTTP,
            operation="evaluate",
            target_name=url,
            correlation_id=correlation_id,
        )

        if not self.is_initialized:
            raise DecisionClientError(
                "HandlerDecisionHttp not initialized. Call initialize() first.",
                context=ctx,
            )
        assert self._client is not None

        headers = self._build_headers(request, ctx)
        body_bytes = json.dumps(request.to_body(), default=str).encode("utf-8")

        logger.debug(
            "Sending decision request",
            extra={
                "target_url": url,
                "body_key": request.body_key,
                "attribute_names": sorted(request.payload),
                "correlation_id": str(correlation_id),
            },
        )

        try:
            async with self._client.stream(
                "POST",
                url,
                headers=headers,
                content=body_bytes,
            ) as response:
                response_bytes = await self._read_response_body_with_limit(
                    response, ctx
                )
                status_code = response.status_code
        except asyncio.CancelledError as e:
            # The task's cancellation request is left pending; only the error is surfaced.
            logger.warning(
                "Decision request cancelled",
                extra={"target_url": url, "correlation_id": str(correlation_id)},
            )
            raise DecisionInterruptedError(
                "Interrupted while sending decision request", context=ctx
            ) from e
        except httpx.TimeoutException as e:
            raise DecisionTimeoutError(
                f"Decision request timed out after {self._timeout}s",
                context=ctx,
                timeout_seconds=self._timeout,
            ) from e
        except httpx.ConnectError as e:
            raise DecisionTransportError(
                f"Failed to connect to {url}", context=ctx
            ) from e
        except httpx.HTTPError as e:
            raise DecisionTransportError(
                f"HTTP error during decision request: {type(e).__name__}", context=ctx
            ) from e

        body_text = self._decode_body(response_bytes)

        logger.debug(
            "Decision response received",
            extra={
                "status_code": status_code,
                "body_size": len(response_bytes),
                "correlation_id": str(correlation_id),
            },
        )

        if status_code not in _SUCCESS_STATUSES:
            raise RemoteRejectionError(
                f"Decision endpoint responded with error {status_code}",
                status_code=status_code,
                body=body_text[:_MAX_ERROR_BODY_CHARS],
                context=ctx,
            )

        return self._parse_decision(body_text, ctx)

    def _build_headers(
        self, request: ModelDecisionRequest, ctx: ModelAuthorizeErrorContext
    ) -> dict[str, str]:
        """Build request headers, rejecting tokens that cannot be sent as a header."""
        token = request.access_token.get_secret_value()
        if not _TOKEN_PATTERN.fullmatch(token):
            raise DecisionTransportError(
                "Access token contains characters not allowed in an Authorization header",
                context=ctx,
            )
        return {
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    async def _read_response_body_with_limit(
        self, response: httpx.Response, ctx: ModelAuthorizeErrorContext
    ) -> bytes:
        """Read the response body, stopping once it exceeds max_response_size."""
        chunks: list[bytes] = []
        total_size: int = 0

        async for chunk in response.aiter_bytes(chunk_size=_STREAMING_CHUNK_SIZE):
            total_size += len(chunk)
            if total_size > self._max_response_size:
                raise DecisionTransportError(
                    "Decision response body exceeds configured limit",
                    context=ctx,
                    limit=self._max_response_size,
                )
            chunks.append(chunk)

        return b"".join(chunks)

    @staticmethod
    def _decode_body(body_bytes: bytes) -> str:
        try:
            return body_bytes.decode("utf-8")
        except UnicodeDecodeError:
            return body_bytes.decode("latin-1")

    @staticmethod
    def _parse_decision(
        body_text: str, ctx: ModelAuthorizeErrorContext
    ) -> ModelDecisionResponse:
        try:
            document = json.loads(body_text)
        except json.JSONDecodeError as e:
            raise MalformedResponseError(
                "Decision response body is not valid JSON", context=ctx
            ) from e

        if not isinstance(document, dict):
            raise MalformedResponseError(
                f"Decision response must be a JSON object, got {type(document).__name__}",
                context=ctx,
            )

        try:
            return ModelDecisionResponse.from_json(document)
        except ValidationError as e:
            raise MalformedResponseError(
                f"Decision response has unexpected shape ({e.error_count()} errors)",
                context=ctx,
                raw=document,
            ) from e

    async def health_check(self) -> dict[str, object]:
        """Return handler health status."""
        return {
            "healthy": self.is_initialized,
            "initialized": self._initialized,
            "timeout_seconds": self._timeout,
            "max_response_size": self._max_response_size,
        }

    def describe(self) -> dict[str, object]:
        """Return handler metadata and capabilities."""
        return {
            "handler": "decision_http",
            "method": "POST",
            "success_statuses": sorted(_SUCCESS_STATUSES),
            "timeout_seconds": self._timeout,
            "max_response_size": self._max_response_size,
            "initialized": self._initialized,
        }


__all__: list[str] = ["HandlerDecisionHttp"]
