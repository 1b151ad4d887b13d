# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Maps a decision response onto a node outcome.

Resolution order:
    1. ``statements[0].code``, when present and listed in the configured
       statement codes, is returned verbatim as a custom outcome.
    2. Otherwise the ``decision`` field maps PERMIT/DENY/INDETERMINATE to
       permit/deny/indeterminate.
    3. Anything else is clientError.

Only the first statement is inspected. Continue mode is not an input here:
the concrete outcome is always computed, and collapsing it onto the continue
edge is done by ``service_outcome_catalog.route_to_edge``.
"""

from __future__ import annotations

from collections.abc import Collection

from pingauthz.enums import EnumDecision
from pingauthz.models import ModelDecisionResponse, ModelOutcome

_DECISION_OUTCOMES: dict[EnumDecision, ModelOutcome] = {
    EnumDecision.PERMIT: ModelOutcome.permit(),
    EnumDecision.DENY: ModelOutcome.deny(),
    EnumDecision.INDETERMINATE: ModelOutcome.indeterminate(),
}


def resolve_outcome(
    response: ModelDecisionResponse,
    configured_codes: Collection[str],
) -> ModelOutcome:
    """Return exactly one outcome for ``response``."""
    code = response.first_statement_code()
    if code and code in configured_codes:
        return ModelOutcome.custom(code)

    decision = EnumDecision.parse(response.decision)
    if decision is None:
        return ModelOutcome.client_error()
    return _DECISION_OUTCOMES[decision]


class ServiceOutcomeResolver:
    """Outcome resolver bound to a node's configured statement codes."""

    def __init__(self, configured_codes: Collection[str]) -> None:
        self._configured_codes = frozenset(configured_codes)

    def resolve(self, response: ModelDecisionResponse) -> ModelOutcome:
        return resolve_outcome(response, self._configured_codes)


__all__: list[str] = ["ServiceOutcomeResolver", "resolve_outcome"]
