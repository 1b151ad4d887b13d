# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Statement entry of a decision response."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ModelStatement(BaseModel):
    """A structured reason attached to a decision.

    Only ``code`` is interpreted; every other statement field (name, payload,
    obligation flags, ...) is kept as an extra field.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    code: Optional[str] = Field(
        default=None,
        description="Short statement code usable as a custom outcome",
    )


__all__: list[str] = ["ModelStatement"]
