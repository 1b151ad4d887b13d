# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""PingAuthorize / PingOne Authorize decision node.

One invocation runs sequentially on the caller's task:

    collect attributes -> resolve credential -> POST decision request
    -> store raw response in transient state -> resolve outcome

Every failure is caught here, logged with its traceback, recorded in
transient state (timestamped message and stack trace) and turned into the
clientError outcome. Nothing is retried and no exception reaches the host.
"""

from __future__ import annotations

import asyncio
import logging
import traceback
from datetime import UTC, datetime
from typing import Optional
from uuid import UUID, uuid4

from pingauthz.enums import EnumCredentialSource
from pingauthz.errors import MalformedResponseError
from pingauthz.handlers import HandlerDecisionHttp
from pingauthz.models import (
    DECISION_KEY,
    EXCEPTION_KEY,
    STACK_TRACE_KEY,
    ModelDecisionRequest,
    ModelInputDeclaration,
    ModelNodeConfig,
    ModelNodeResult,
    ModelOutcome,
    ModelOutcomeDeclaration,
    NodeState,
)
from pingauthz.protocols import (
    ProtocolAccessTokenIssuer,
    ProtocolCredentialResolver,
    ProtocolPingOneConfigDirectory,
    ProtocolWorkerDirectory,
)
from pingauthz.services import (
    ServiceAttributeCollector,
    ServiceOutcomeResolver,
    build_credential_resolver,
    declare_outcomes,
    route_to_edge,
)
from pingauthz.utils import sanitize_error_message

logger = logging.getLogger(__name__)


def declare_inputs(config: ModelNodeConfig) -> list[ModelInputDeclaration]:
    """Session attributes read: the token attribute (static only), then the map."""
    inputs: list[ModelInputDeclaration] = []
    if (
        config.credential_source is EnumCredentialSource.STATIC
        and config.access_token_attribute
    ):
        inputs.append(
            ModelInputDeclaration(name=config.access_token_attribute, required=True)
        )
    inputs.extend(
        ModelInputDeclaration(name=name, required=False) for name in config.attribute_map
    )
    return inputs


class NodeAuthorizeDecision:
    """Routes a journey on a PingAuthorize / PingOne Authorize decision.

    Example:
        >>> handler = HandlerDecisionHttp()
        >>> await handler.initialize({})
        >>> node = NodeAuthorizeDecision(config, handler)
        >>> result = await node.process(NodeState(shared={"riskScore": "80", "token": "..."}))
        >>> result.outcome.outcome_id
        'deny'
    """

    def __init__(
        self,
        config: ModelNodeConfig,
        client: HandlerDecisionHttp,
        *,
        credential_resolver: Optional[ProtocolCredentialResolver] = None,
        worker_directory: Optional[ProtocolWorkerDirectory] = None,
        pingone_config_directory: Optional[ProtocolPingOneConfigDirectory] = None,
        token_issuer: Optional[ProtocolAccessTokenIssuer] = None,
    ) -> None:
        """Bind the node to its configuration and the shared HTTP handler.

        Args:
            config: Immutable node configuration
            client: Process-wide decision HTTP handler (lifecycle owned by the host)
            credential_resolver: Explicit strategy; built from ``config`` when None
            worker_directory: Worker lookup (worker source)
            pingone_config_directory: Shared configuration lookup (shared_config source)
            token_issuer: Token issuer (worker and shared_config sources)

        Raises:
            ProtocolConfigurationError: If the credential source lacks a collaborator.
        """
        self._config = config
        self._client = client
        self._collector = ServiceAttributeCollector(config.attribute_map)
        self._outcome_resolver = ServiceOutcomeResolver(config.statement_codes)
        self._credential_resolver = credential_resolver or build_credential_resolver(
            config,
            worker_directory=worker_directory,
            pingone_config_directory=pingone_config_directory,
            token_issuer=token_issuer,
        )

    @property
    def config(self) -> ModelNodeConfig:
        return self._config

    async def process(
        self,
        state: NodeState,
        correlation_id: Optional[UUID] = None,
    ) -> ModelNodeResult:
        """Run one decision and return the outcome and the edge to follow."""
        correlation_id = correlation_id or uuid4()
        try:
            outcome = await self._decide(state, correlation_id)
        except (Exception, asyncio.CancelledError) as e:
            # Cancellation from a custom resolver is recorded too; the task's
            # cancellation request stays pending.
            self._record_failure(state, e, correlation_id)
            outcome = ModelOutcome.client_error()

        edge = route_to_edge(outcome, self._config.use_continue)
        logger.info(
            "Decision node outcome resolved",
            extra={
                "outcome": outcome.outcome_id,
                "edge": edge,
                "correlation_id": str(correlation_id),
            },
        )
        return ModelNodeResult(outcome=outcome, edge=edge)

    async def _decide(self, state: NodeState, correlation_id: UUID) -> ModelOutcome:
        payload = self._collector.collect(state)
        credential = await self._credential_resolver.resolve(state, correlation_id)
        request = ModelDecisionRequest(
            target_url=credential.target_url,
            access_token=credential.access_token,
            provider=self._config.effective_provider,
            payload=payload,
        )
        response = await self._client.evaluate(request, correlation_id)
        state.put_transient(DECISION_KEY, response.raw)
        return self._outcome_resolver.resolve(response)

    def _record_failure(
        self, state: NodeState, error: BaseException, correlation_id: UUID
    ) -> None:
        logger.exception(
            "Decision node failed, routing to clientError",
            extra={
                "error_type": type(error).__name__,
                "correlation_id": str(correlation_id),
            },
        )
        if isinstance(error, MalformedResponseError) and error.raw is not None:
            state.put_transient(DECISION_KEY, error.raw)
        timestamp = datetime.now(UTC).isoformat()
        stack_trace = "".join(traceback.format_exception(error))
        state.put_transient(
            EXCEPTION_KEY, f"{timestamp}: {sanitize_error_message(error)}"
        )
        state.put_transient(STACK_TRACE_KEY, f"{timestamp}: {stack_trace}")

    def get_inputs(self) -> list[ModelInputDeclaration]:
        return declare_inputs(self._config)

    def get_outputs(self) -> list[str]:
        """Session state keys written."""
        return [DECISION_KEY]

    def get_outcomes(self) -> list[ModelOutcomeDeclaration]:
        return declare_outcomes(self._config.use_continue, self._config.statement_codes)


__all__: list[str] = ["NodeAuthorizeDecision", "declare_inputs"]
