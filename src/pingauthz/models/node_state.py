# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Session state handed to a decision node by the journey engine.

The host keeps two regions per journey: ``shared`` survives between steps and
is persisted with the session, ``transient`` lives for the current request
only. Both mappings are passed by reference and mutated in place; the node
writes to ``transient`` only.

Keys written by the decision node:
    decision: Raw decision response JSON object (every successful call)
    pingAuthorizeException: "<timestamp>: <message>" (failures only)
    pingAuthorizeStackTrace: "<timestamp>: <traceback>" (failures only)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

DECISION_KEY = "decision"
EXCEPTION_KEY = "pingAuthorizeException"
STACK_TRACE_KEY = "pingAuthorizeStackTrace"


@dataclass
class NodeState:
    """Shared and transient session state regions."""

    shared: dict[str, object] = field(default_factory=dict)
    transient: dict[str, object] = field(default_factory=dict)

    def get(self, name: str) -> Optional[object]:
        """Read an attribute, transient region first, None when absent."""
        if name in self.transient:
            return self.transient[name]
        return self.shared.get(name)

    def is_defined(self, name: str) -> bool:
        return name in self.transient or name in self.shared

    def put_transient(self, name: str, value: object) -> None:
        self.transient[name] = value


__all__: list[str] = [
    "DECISION_KEY",
    "EXCEPTION_KEY",
    "STACK_TRACE_KEY",
    "NodeState",
]
