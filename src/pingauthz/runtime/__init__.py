# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Runtime support: configuration loading."""

from pingauthz.runtime.node_config_loader import (
    MAX_CONFIG_SIZE_BYTES,
    load_node_config,
)

__all__: list[str] = ["MAX_CONFIG_SIZE_BYTES", "load_node_config"]
