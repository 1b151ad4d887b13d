# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Decision nodes exposed to the journey engine."""

from pingauthz.nodes.node_authorize_decision import (
    NodeAuthorizeDecision,
    declare_inputs,
)

__all__: list[str] = ["NodeAuthorizeDecision", "declare_inputs"]
