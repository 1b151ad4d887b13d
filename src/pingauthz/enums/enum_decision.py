# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Decision values returned by the PingAuthorize policy decision point."""

from __future__ import annotations

from enum import Enum, unique


@unique
class EnumDecision(str, Enum):
    """Coarse authorization verdict found in the ``decision`` response field.

    Attributes:
        PERMIT: The policy allows the request.
        DENY: The policy rejects the request.
        INDETERMINATE: The policy engine could not reach a verdict.
    """

    PERMIT = "PERMIT"
    DENY = "DENY"
    INDETERMINATE = "INDETERMINATE"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value

    @classmethod
    def parse(cls, raw: object) -> EnumDecision | None:
        """Return the matching decision, or None for absent/unknown values."""
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw)
        except ValueError:
            return None


__all__: list[str] = ["EnumDecision"]
