# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Credential resolution strategies.

Each strategy produces the bearer token and fully composed decision URL for
one invocation:

    StaticCredentialResolver:
        token  <- session attribute named by ``access_token_attribute``
        url    <- ``endpoint_url`` + "/governance-engine"

    WorkerCredentialResolver:
        token  <- token issuer, bound to the worker record
        url    <- worker.api_url + "/environments/{env}/decisionEndpoints/{id}"

    SharedConfigCredentialResolver:
        token  <- token issuer, bound to the shared PingOne configuration
        url    <- "https://api.pingone{region}" + "/v1/environments/{env}/decisionEndpoints/{id}"

Every failure, including exceptions raised by host collaborators and
cancellation while one is awaited, surfaces as CredentialError. Credentials
are never cached here; token caching is the issuer's business.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional, Union
from urllib.parse import quote
from uuid import UUID

from pydantic import SecretStr

from pingauthz.enums import EnumCredentialSource, EnumTransportType
from pingauthz.errors import (
    CredentialError,
    ModelAuthorizeErrorContext,
    ProtocolConfigurationError,
)
from pingauthz.models import (
    ModelCredential,
    ModelNodeConfig,
    ModelPingOneConfig,
    ModelWorkerRecord,
    NodeState,
)
from pingauthz.protocols import (
    ProtocolAccessTokenIssuer,
    ProtocolCredentialResolver,
    ProtocolPingOneConfigDirectory,
    ProtocolWorkerDirectory,
    TokenSubject,
)

logger = logging.getLogger(__name__)

GOVERNANCE_ENGINE_PATH = "/governance-engine"


def _decision_endpoint_path(environment_id: str, decision_endpoint_id: str) -> str:
    return (
        f"/environments/{quote(environment_id, safe='')}"
        f"/decisionEndpoints/{quote(decision_endpoint_id, safe='')}"
    )


def _credential_context(
    operation: str,
    target_name: Optional[str],
    correlation_id: Optional[UUID],
) -> ModelAuthorizeErrorContext:
    return ModelAuthorizeErrorContext(
        transport_type=EnumTransportType.CREDENTIAL,
        operation=operation,
        target_name=target_name,
        correlation_id=correlation_id,
    )


def _coerce_token(raw: Optional[Union[str, SecretStr, object]]) -> Optional[SecretStr]:
    if isinstance(raw, SecretStr):
        value = raw.get_secret_value()
    elif isinstance(raw, str):
        value = raw
    else:
        return None
    value = value.strip()
    return SecretStr(value) if value else None


async def _issue_token(
    issuer: ProtocolAccessTokenIssuer,
    subject: TokenSubject,
    target_name: str,
    correlation_id: Optional[UUID],
) -> SecretStr:
    ctx = _credential_context("issue_token", target_name, correlation_id)
    try:
        raw = await issuer.get_access_token(subject)
    except asyncio.CancelledError as e:
        # The task's cancellation request is left pending; only the error is surfaced.
        raise CredentialError(
            f"Interrupted while issuing token for '{target_name}'", context=ctx
        ) from e
    except Exception as e:
        raise CredentialError(
            f"Token issuer failed for '{target_name}': {type(e).__name__}",
            context=ctx,
        ) from e
    token = _coerce_token(raw)
    if token is None:
        raise CredentialError(
            f"Token issuer returned no access token for '{target_name}'",
            context=ctx,
        )
    return token


class StaticCredentialResolver:
    """Token from a session attribute, URL from static configuration."""

    def __init__(self, endpoint_url: str, access_token_attribute: str) -> None:
        self._endpoint_url = endpoint_url
        self._access_token_attribute = access_token_attribute

    @property
    def target_url(self) -> str:
        return self._endpoint_url.rstrip("/") + GOVERNANCE_ENGINE_PATH

    async def resolve(
        self,
        state: NodeState,
        correlation_id: Optional[UUID] = None,
    ) -> ModelCredential:
        token = _coerce_token(state.get(self._access_token_attribute))
        if token is None:
            raise CredentialError(
                f"Session attribute '{self._access_token_attribute}' holds no access token",
                context=_credential_context(
                    "read_access_token", self._access_token_attribute, correlation_id
                ),
            )
        return ModelCredential(access_token=token, target_url=self.target_url)


class WorkerCredentialResolver:
    """Token issued for a worker credential, URL from the worker record."""

    def __init__(
        self,
        worker_id: str,
        decision_endpoint_id: str,
        worker_directory: ProtocolWorkerDirectory,
        token_issuer: ProtocolAccessTokenIssuer,
    ) -> None:
        self._worker_id = worker_id
        self._decision_endpoint_id = decision_endpoint_id
        self._worker_directory = worker_directory
        self._token_issuer = token_issuer

    async def _lookup_worker(self, correlation_id: Optional[UUID]) -> ModelWorkerRecord:
        ctx = _credential_context("lookup_worker", self._worker_id, correlation_id)
        try:
            worker = await self._worker_directory.get_worker(self._worker_id)
        except asyncio.CancelledError as e:
            raise CredentialError(
                f"Interrupted while looking up worker '{self._worker_id}'", context=ctx
            ) from e
        except Exception as e:
            raise CredentialError(
                f"Worker lookup failed for '{self._worker_id}': {type(e).__name__}",
                context=ctx,
            ) from e
        if worker is None:
            raise CredentialError(f"Unknown worker '{self._worker_id}'", context=ctx)
        return worker

    async def resolve(
        self,
        state: NodeState,
        correlation_id: Optional[UUID] = None,
    ) -> ModelCredential:
        worker = await self._lookup_worker(correlation_id)
        target_url = worker.api_url.rstrip("/") + _decision_endpoint_path(
            worker.environment_id, self._decision_endpoint_id
        )
        token = await _issue_token(
            self._token_issuer, worker, self._worker_id, correlation_id
        )
        return ModelCredential(access_token=token, target_url=target_url)


class SharedConfigCredentialResolver:
    """Token issued for a shared PingOne configuration, URL from its region."""

    def __init__(
        self,
        config_name: str,
        decision_endpoint_id: str,
        config_directory: ProtocolPingOneConfigDirectory,
        token_issuer: ProtocolAccessTokenIssuer,
    ) -> None:
        self._config_name = config_name
        self._decision_endpoint_id = decision_endpoint_id
        self._config_directory = config_directory
        self._token_issuer = token_issuer

    def _lookup_config(self, correlation_id: Optional[UUID]) -> ModelPingOneConfig:
        ctx = _credential_context("lookup_pingone_config", self._config_name, correlation_id)
        try:
            config = self._config_directory.get_config(self._config_name)
        except Exception as e:
            raise CredentialError(
                f"PingOne configuration lookup failed for '{self._config_name}': "
                f"{type(e).__name__}",
                context=ctx,
            ) from e
        if config is None:
            raise CredentialError(
                f"Unknown PingOne configuration '{self._config_name}'", context=ctx
            )
        return config

    async def resolve(
        self,
        state: NodeState,
        correlation_id: Optional[UUID] = None,
    ) -> ModelCredential:
        config = self._lookup_config(correlation_id)
        target_url = (
            config.api_base_url
            + "/v1"
            + _decision_endpoint_path(config.environment_id, self._decision_endpoint_id)
        )
        token = await _issue_token(
            self._token_issuer, config, self._config_name, correlation_id
        )
        return ModelCredential(access_token=token, target_url=target_url)


def build_credential_resolver(
    config: ModelNodeConfig,
    *,
    worker_directory: Optional[ProtocolWorkerDirectory] = None,
    pingone_config_directory: Optional[ProtocolPingOneConfigDirectory] = None,
    token_issuer: Optional[ProtocolAccessTokenIssuer] = None,
) -> ProtocolCredentialResolver:
    """Select the credential strategy named by ``config.credential_source``.

    Raises:
        ProtocolConfigurationError: If a collaborator the strategy needs is missing.
    """
    source = config.credential_source
    ctx = ModelAuthorizeErrorContext(
        transport_type=EnumTransportType.CONFIG,
        operation="build_credential_resolver",
        target_name=source.value,
    )

    if source is EnumCredentialSource.STATIC:
        assert config.endpoint_url is not None
        assert config.access_token_attribute is not None
        return StaticCredentialResolver(config.endpoint_url, config.access_token_attribute)

    if token_issuer is None:
        raise ProtocolConfigurationError(
            f"Credential source '{source.value}' requires a token issuer", context=ctx
        )
    assert config.decision_endpoint_id is not None

    if source is EnumCredentialSource.WORKER:
        if worker_directory is None:
            raise ProtocolConfigurationError(
                "Credential source 'worker' requires a worker directory", context=ctx
            )
        assert config.worker_id is not None
        return WorkerCredentialResolver(
            config.worker_id,
            config.decision_endpoint_id,
            worker_directory,
            token_issuer,
        )

    if pingone_config_directory is None:
        raise ProtocolConfigurationError(
            "Credential source 'shared_config' requires a PingOne configuration directory",
            context=ctx,
        )
    assert config.pingone_config_name is not None
    return SharedConfigCredentialResolver(
        config.pingone_config_name,
        config.decision_endpoint_id,
        pingone_config_directory,
        token_issuer,
    )


__all__: list[str] = [
    "GOVERNANCE_ENGINE_PATH",
    "SharedConfigCredentialResolver",
    "StaticCredentialResolver",
    "WorkerCredentialResolver",
    "build_credential_resolver",
]
