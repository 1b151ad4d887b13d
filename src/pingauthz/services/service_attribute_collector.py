# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Collects policy attributes from session state."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from pingauthz.models import NodeState

logger = logging.getLogger(__name__)

AttributeLookup = Callable[[str], object]


def collect_attributes(
    attribute_map: Iterable[str],
    lookup: AttributeLookup,
) -> dict[str, object]:
    """Build the decision payload for the configured attribute names.

    Every configured name appears in the payload. Values missing from session
    state are passed through as None; collection itself never fails.
    """
    return {name: lookup(name) for name in attribute_map}


class ServiceAttributeCollector:
    """Reads the node's attribute map out of a NodeState."""

    def __init__(self, attribute_map: Iterable[str]) -> None:
        self._attribute_map: tuple[str, ...] = tuple(attribute_map)

    @property
    def attribute_map(self) -> tuple[str, ...]:
        return self._attribute_map

    def collect(self, state: NodeState) -> dict[str, object]:
        payload = collect_attributes(self._attribute_map, state.get)
        missing = [name for name in self._attribute_map if not state.is_defined(name)]
        if missing:
            logger.debug(
                "Policy attributes missing from session state",
                extra={"missing_attributes": missing},
            )
        return payload


__all__: list[str] = [
    "AttributeLookup",
    "ServiceAttributeCollector",
    "collect_attributes",
]
