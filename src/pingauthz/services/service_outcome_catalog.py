# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Outcome declarations for the journey editor.

Pure functions, no I/O. The declared list drives which edges an administrator
can wire; it plays no part in resolving the runtime outcome.

Declared order:
    continue mode:  continue, clientError
    otherwise:      permit, deny, indeterminate, <statement codes...>, clientError
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Optional

from pingauthz.enums import EnumOutcomeKind
from pingauthz.models import ModelOutcome, ModelOutcomeDeclaration

USE_CONTINUE_ATTRIBUTE = "useContinue"
STATEMENT_CODES_ATTRIBUTE = "statementCodes"
STATEMENTS_ATTRIBUTE = "statements"


def _declare(kind: EnumOutcomeKind) -> ModelOutcomeDeclaration:
    return ModelOutcomeDeclaration(outcome_id=kind.value, display_label=kind.display_label)


def declare_outcomes(
    use_continue: bool,
    configured_codes: Iterable[str] = (),
) -> list[ModelOutcomeDeclaration]:
    """Return the selectable outcomes for the given configuration.

    Configured codes are ignored in continue mode.
    """
    if use_continue:
        return [
            _declare(EnumOutcomeKind.CONTINUE),
            _declare(EnumOutcomeKind.CLIENT_ERROR),
        ]

    outcomes = [
        _declare(EnumOutcomeKind.PERMIT),
        _declare(EnumOutcomeKind.DENY),
        _declare(EnumOutcomeKind.INDETERMINATE),
    ]
    outcomes.extend(
        ModelOutcomeDeclaration(outcome_id=code, display_label=code)
        for code in configured_codes
    )
    outcomes.append(_declare(EnumOutcomeKind.CLIENT_ERROR))
    return outcomes


def _as_bool(raw: object) -> bool:
    if isinstance(raw, bool):
        return raw
    return str(raw).strip().lower() == "true"


def declare_outcomes_from_attributes(
    node_attributes: Optional[Mapping[str, object]],
) -> list[ModelOutcomeDeclaration]:
    """Declare outcomes from the host's raw node attribute mapping.

    The host passes None while a node is being created; only the static
    outcomes are declared then. PingAuthorize nodes store their codes under
    ``statementCodes`` and PingOne Authorize nodes under ``statements``; the
    first key present wins.
    """
    if node_attributes is None:
        return declare_outcomes(use_continue=False)

    use_continue = _as_bool(node_attributes.get(USE_CONTINUE_ATTRIBUTE, False))
    key = STATEMENT_CODES_ATTRIBUTE
    if key not in node_attributes and STATEMENTS_ATTRIBUTE in node_attributes:
        key = STATEMENTS_ATTRIBUTE
    raw_codes = node_attributes.get(key) or []
    if isinstance(raw_codes, str) or not isinstance(raw_codes, Iterable):
        raise TypeError(f"'{key}' must be a list of strings")
    return declare_outcomes(use_continue, [str(code) for code in raw_codes])


def route_to_edge(outcome: ModelOutcome, use_continue: bool) -> str:
    """Return the declared edge the host wires ``outcome`` to.

    In continue mode every concrete outcome except clientError is wired to
    the continue edge.
    """
    if use_continue and not outcome.is_client_error:
        return EnumOutcomeKind.CONTINUE.value
    return outcome.outcome_id


__all__: list[str] = [
    "STATEMENTS_ATTRIBUTE",
    "STATEMENT_CODES_ATTRIBUTE",
    "USE_CONTINUE_ATTRIBUTE",
    "declare_outcomes",
    "declare_outcomes_from_attributes",
    "route_to_edge",
]
