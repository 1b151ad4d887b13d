# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for ModelNodeConfig validation per credential source."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pingauthz.enums import EnumAuthorizeProvider, EnumCredentialSource
from pingauthz.models import DEFAULT_PINGONE_CONFIG_NAME, ModelNodeConfig


class TestModelNodeConfigStatic:
    """Static credential source."""

    def test_minimal_static_config(self) -> None:
        config = ModelNodeConfig(
            endpoint_url="https://pdp.example.com",
            access_token_attribute="pazAccessToken",
        )
        assert config.credential_source is EnumCredentialSource.STATIC
        assert config.attribute_map == ()
        assert config.statement_codes == ()
        assert config.use_continue is False
        assert config.effective_provider is EnumAuthorizeProvider.PING_AUTHORIZE

    def test_requires_endpoint_and_token_attribute(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ModelNodeConfig(credential_source=EnumCredentialSource.STATIC)
        message = str(exc_info.value)
        assert "credential source 'static' requires" in message
        assert "endpoint_url" in message
        assert "access_token_attribute" in message

    def test_lists_are_coerced_to_tuples(self) -> None:
        config = ModelNodeConfig.model_validate(
            {
                "endpoint_url": "https://pdp.example.com",
                "access_token_attribute": "token",
                "attribute_map": ["riskScore", "userType"],
                "statement_codes": ["REVIEW"],
            }
        )
        assert config.attribute_map == ("riskScore", "userType")
        assert config.statement_codes == ("REVIEW",)

    @pytest.mark.parametrize("field", ["attribute_map", "statement_codes"])
    def test_rejects_blank_entries(self, field: str) -> None:
        with pytest.raises(ValidationError, match="non-empty"):
            ModelNodeConfig.model_validate(
                {
                    "endpoint_url": "https://pdp.example.com",
                    "access_token_attribute": "token",
                    field: ["ok", "  "],
                }
            )

    def test_rejects_unknown_fields(self) -> None:
        with pytest.raises(ValidationError):
            ModelNodeConfig.model_validate(
                {
                    "endpoint_url": "https://pdp.example.com",
                    "access_token_attribute": "token",
                    "retries": 3,
                }
            )

    def test_explicit_provider_wins(self) -> None:
        config = ModelNodeConfig(
            endpoint_url="https://pdp.example.com",
            access_token_attribute="token",
            provider=EnumAuthorizeProvider.PINGONE_AUTHORIZE,
        )
        assert config.effective_provider is EnumAuthorizeProvider.PINGONE_AUTHORIZE


class TestModelNodeConfigPingOne:
    """Worker and shared_config credential sources."""

    def test_worker_config(self) -> None:
        config = ModelNodeConfig(
            credential_source=EnumCredentialSource.WORKER,
            worker_id="worker-1",
            decision_endpoint_id="dep-1",
        )
        assert config.effective_provider is EnumAuthorizeProvider.PINGONE_AUTHORIZE

    def test_worker_requires_worker_id_and_endpoint(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ModelNodeConfig(credential_source=EnumCredentialSource.WORKER)
        message = str(exc_info.value)
        assert "worker_id" in message
        assert "decision_endpoint_id" in message

    def test_shared_config_defaults_config_name(self) -> None:
        config = ModelNodeConfig(
            credential_source=EnumCredentialSource.SHARED_CONFIG,
            decision_endpoint_id="dep-1",
        )
        assert config.pingone_config_name == DEFAULT_PINGONE_CONFIG_NAME
        assert config.effective_provider is EnumAuthorizeProvider.PINGONE_AUTHORIZE

    def test_shared_config_requires_endpoint(self) -> None:
        with pytest.raises(ValidationError, match="decision_endpoint_id"):
            ModelNodeConfig(credential_source=EnumCredentialSource.SHARED_CONFIG)

    def test_shared_config_rejects_empty_config_name(self) -> None:
        with pytest.raises(ValidationError, match="pingone_config_name"):
            ModelNodeConfig(
                credential_source=EnumCredentialSource.SHARED_CONFIG,
                pingone_config_name="",
                decision_endpoint_id="dep-1",
            )

    def test_source_parsed_from_string(self) -> None:
        config = ModelNodeConfig.model_validate(
            {
                "credential_source": "shared_config",
                "decision_endpoint_id": "dep-1",
            }
        )
        assert config.credential_source is EnumCredentialSource.SHARED_CONFIG
