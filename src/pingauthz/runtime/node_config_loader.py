# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Decision Node Configuration Loader.

Loads a ``ModelNodeConfig`` from a YAML file. Hosts normally supply node
configuration from their own store; YAML files are used by the CLI and by
deployments that keep node definitions under version control.

Config File Structure:

    ```yaml
    credential_source: static
    endpoint_url: https://pdp.example.com
    access_token_attribute: pazAccessToken
    attribute_map:
      - riskScore
      - userType
    statement_codes:
      - REVIEW
    use_continue: false
    ```

Security:
    - Uses yaml.safe_load() to prevent arbitrary code execution
    - Files larger than MAX_CONFIG_SIZE_BYTES are rejected before reading
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from pingauthz.enums import EnumTransportType
from pingauthz.errors import ModelAuthorizeErrorContext, ProtocolConfigurationError
from pingauthz.models import ModelNodeConfig

logger = logging.getLogger(__name__)

MAX_CONFIG_SIZE_BYTES = 1024 * 1024


def _context(path: Path) -> ModelAuthorizeErrorContext:
    return ModelAuthorizeErrorContext.with_correlation(
        transport_type=EnumTransportType.CONFIG,
        operation="load_node_config",
        target_name=str(path),
    )


def load_node_config(config_path: str | Path) -> ModelNodeConfig:
    """Load and validate a node configuration YAML file.

    Raises:
        ProtocolConfigurationError: If the file is missing, too large, not
            valid YAML, not a mapping, or fails model validation.
    """
    path = Path(config_path)

    if not path.is_file():
        raise ProtocolConfigurationError(
            f"Node config file not found: {config_path}", context=_context(path)
        )

    file_size = path.stat().st_size
    if file_size > MAX_CONFIG_SIZE_BYTES:
        raise ProtocolConfigurationError(
            f"Node config file too large: {file_size} bytes (max {MAX_CONFIG_SIZE_BYTES})",
            context=_context(path),
        )

    try:
        with path.open(encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ProtocolConfigurationError(
            f"Invalid YAML in node config: {e}", context=_context(path)
        ) from e

    if not isinstance(raw, dict):
        raise ProtocolConfigurationError(
            f"Node config must be a mapping, got {type(raw).__name__}",
            context=_context(path),
        )

    try:
        config = ModelNodeConfig.model_validate(raw)
    except ValidationError as e:
        raise ProtocolConfigurationError(
            f"Invalid node config: {e.error_count()} validation errors",
            context=_context(path),
            errors=[err["msg"] for err in e.errors()],
        ) from e

    logger.debug(
        "Loaded node config",
        extra={
            "config_path": str(path),
            "credential_source": config.credential_source.value,
        },
    )
    return config


__all__: list[str] = ["MAX_CONFIG_SIZE_BYTES", "load_node_config"]
