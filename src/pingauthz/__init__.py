# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""PingAuthorize decision nodes for authentication journeys.

Nodes gather session attributes, ask PingAuthorize or PingOne Authorize for a
decision, and route the journey on the result:

- NodeAuthorizeDecision: the decision flow (process, inputs, outputs, outcomes)
- HandlerDecisionHttp: shared httpx handler for decision endpoint calls
- Credential strategies: static attribute, worker credential, shared PingOne config
- Outcome catalog and resolver: declared edges and decision-to-outcome mapping
"""

__all__: list[str] = []
