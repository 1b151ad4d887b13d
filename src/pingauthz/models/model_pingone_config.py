# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared PingOne configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from pingauthz.enums import EnumPingOneRegion

PINGONE_API_BASE = "https://api.pingone"


class ModelPingOneConfig(BaseModel):
    """Named PingOne environment configuration shared across nodes.

    Example:
        >>> config = ModelPingOneConfig(
        ...     name="Global Default",
        ...     environment_id="env-123",
        ...     region=EnumPingOneRegion.EU,
        ... )
        >>> config.api_base_url
        'https://api.pingone.eu'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    environment_id: str = Field(min_length=1)
    region: EnumPingOneRegion = Field(default=EnumPingOneRegion.NA)

    @property
    def api_base_url(self) -> str:
        return PINGONE_API_BASE + self.region.domain_suffix


__all__: list[str] = ["PINGONE_API_BASE", "ModelPingOneConfig"]
