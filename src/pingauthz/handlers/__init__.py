# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Decision node handlers.

Exports:
    HandlerDecisionHttp: Decision endpoint HTTP handler (httpx async client)
"""

from pingauthz.handlers.handler_decision_http import HandlerDecisionHttp

__all__: list[str] = ["HandlerDecisionHttp"]
