# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Outcome kinds a decision node can emit.

Static kinds carry a fixed outcome id and display label. ``CUSTOM`` stands
for a configured statement code and takes its id and label from the code
itself.
"""

from __future__ import annotations

from enum import Enum, unique


@unique
class EnumOutcomeKind(str, Enum):
    """Tag of the outcome union.

    The value of each static member is the outcome id the host journey
    engine routes on.
    """

    PERMIT = "permit"
    DENY = "deny"
    INDETERMINATE = "indeterminate"
    CONTINUE = "continue"
    CLIENT_ERROR = "clientError"
    CUSTOM = "custom"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value

    @property
    def display_label(self) -> str:
        """Default English label shown in the journey editor."""
        return _DISPLAY_LABELS[self]


_DISPLAY_LABELS: dict[EnumOutcomeKind, str] = {
    EnumOutcomeKind.PERMIT: "Permit",
    EnumOutcomeKind.DENY: "Deny",
    EnumOutcomeKind.INDETERMINATE: "Indeterminate",
    EnumOutcomeKind.CONTINUE: "Continue",
    EnumOutcomeKind.CLIENT_ERROR: "Error",
    EnumOutcomeKind.CUSTOM: "Custom",
}


__all__: list[str] = ["EnumOutcomeKind"]
