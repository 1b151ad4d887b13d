# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for YAML node configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from pingauthz.enums import EnumCredentialSource, EnumTransportType
from pingauthz.errors import ProtocolConfigurationError
from pingauthz.runtime import MAX_CONFIG_SIZE_BYTES, load_node_config

VALID_YAML = """\
credential_source: static
endpoint_url: https://pdp.example.com
access_token_attribute: pazAccessToken
attribute_map:
  - riskScore
  - userType
statement_codes:
  - REVIEW
use_continue: false
"""


class TestLoadNodeConfig:
    """Tests for load_node_config."""

    def test_loads_valid_config(self, tmp_path: Path) -> None:
        path = tmp_path / "node.yaml"
        path.write_text(VALID_YAML, encoding="utf-8")

        config = load_node_config(path)

        assert config.credential_source is EnumCredentialSource.STATIC
        assert config.endpoint_url == "https://pdp.example.com"
        assert config.attribute_map == ("riskScore", "userType")
        assert config.statement_codes == ("REVIEW",)
        assert config.use_continue is False

    def test_accepts_string_path(self, tmp_path: Path) -> None:
        path = tmp_path / "node.yaml"
        path.write_text(VALID_YAML, encoding="utf-8")
        assert load_node_config(str(path)).access_token_attribute == "pazAccessToken"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ProtocolConfigurationError, match="not found") as exc_info:
            load_node_config(tmp_path / "missing.yaml")
        assert exc_info.value.context["transport_type"] is EnumTransportType.CONFIG
        assert exc_info.value.correlation_id is not None

    def test_directory_is_not_a_config(self, tmp_path: Path) -> None:
        with pytest.raises(ProtocolConfigurationError, match="not found"):
            load_node_config(tmp_path)

    def test_oversized_file(self, tmp_path: Path) -> None:
        path = tmp_path / "huge.yaml"
        path.write_text("#" * (MAX_CONFIG_SIZE_BYTES + 1), encoding="utf-8")

        with pytest.raises(ProtocolConfigurationError, match="too large"):
            load_node_config(path)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.yaml"
        path.write_text("attribute_map: [riskScore\n", encoding="utf-8")

        with pytest.raises(ProtocolConfigurationError, match="Invalid YAML"):
            load_node_config(path)

    @pytest.mark.parametrize("content", ["", "- a\n- b\n", "just a string\n"])
    def test_non_mapping(self, tmp_path: Path, content: str) -> None:
        path = tmp_path / "node.yaml"
        path.write_text(content, encoding="utf-8")

        with pytest.raises(ProtocolConfigurationError, match="must be a mapping"):
            load_node_config(path)

    def test_validation_errors_are_listed(self, tmp_path: Path) -> None:
        path = tmp_path / "node.yaml"
        path.write_text("credential_source: worker\nworker_id: w1\n", encoding="utf-8")

        with pytest.raises(ProtocolConfigurationError, match="Invalid node config") as exc_info:
            load_node_config(path)

        errors = exc_info.value.context["errors"]
        assert isinstance(errors, list)
        assert any("decision_endpoint_id" in message for message in errors)

    def test_yaml_tags_are_not_executed(self, tmp_path: Path) -> None:
        path = tmp_path / "node.yaml"
        path.write_text("!!python/object/apply:os.system ['true']\n", encoding="utf-8")

        with pytest.raises(ProtocolConfigurationError, match="Invalid YAML"):
            load_node_config(path)
