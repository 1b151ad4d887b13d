# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""PingOne tenant regions and their API domain suffixes."""

from __future__ import annotations

from enum import Enum, unique


@unique
class EnumPingOneRegion(str, Enum):
    """Region hosting a PingOne environment.

    The API base URL of an environment is ``https://api.pingone`` followed by
    the region's domain suffix.
    """

    NA = "NA"
    CA = "CA"
    EU = "EU"
    ASIA = "ASIA"
    AU = "AU"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value

    @property
    def domain_suffix(self) -> str:
        """Top-level domain suffix for this region's API host."""
        return _DOMAIN_SUFFIXES[self]


_DOMAIN_SUFFIXES: dict[EnumPingOneRegion, str] = {
    EnumPingOneRegion.NA: ".com",
    EnumPingOneRegion.CA: ".ca",
    EnumPingOneRegion.EU: ".eu",
    EnumPingOneRegion.ASIA: ".asia",
    EnumPingOneRegion.AU: ".com.au",
}


__all__: list[str] = ["EnumPingOneRegion"]
