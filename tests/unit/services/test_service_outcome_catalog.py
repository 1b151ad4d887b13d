# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for outcome declarations and continue-mode routing."""

from __future__ import annotations

import pytest

from pingauthz.models import ModelOutcome, ModelOutcomeDeclaration
from pingauthz.services import (
    declare_outcomes,
    declare_outcomes_from_attributes,
    route_to_edge,
)


def _ids(declarations: list[ModelOutcomeDeclaration]) -> list[str]:
    return [declaration.outcome_id for declaration in declarations]


class TestDeclareOutcomes:
    """Tests for declare_outcomes."""

    def test_continue_mode_ignores_codes(self) -> None:
        declarations = declare_outcomes(True, ["REVIEW", "DENIED"])
        assert _ids(declarations) == ["continue", "clientError"]
        assert [d.display_label for d in declarations] == ["Continue", "Error"]

    def test_codes_inserted_before_client_error(self) -> None:
        declarations = declare_outcomes(False, ["REVIEW", "DENIED"])
        assert _ids(declarations) == [
            "permit",
            "deny",
            "indeterminate",
            "REVIEW",
            "DENIED",
            "clientError",
        ]
        assert [d.display_label for d in declarations] == [
            "Permit",
            "Deny",
            "Indeterminate",
            "REVIEW",
            "DENIED",
            "Error",
        ]

    def test_no_codes(self) -> None:
        assert _ids(declare_outcomes(False)) == [
            "permit",
            "deny",
            "indeterminate",
            "clientError",
        ]


class TestDeclareOutcomesFromAttributes:
    """Tests for the raw host attribute mapping entry point."""

    def test_none_declares_static_outcomes(self) -> None:
        assert _ids(declare_outcomes_from_attributes(None)) == [
            "permit",
            "deny",
            "indeterminate",
            "clientError",
        ]

    def test_reads_codes(self) -> None:
        declarations = declare_outcomes_from_attributes(
            {"useContinue": False, "statementCodes": ["REVIEW"]}
        )
        assert _ids(declarations) == [
            "permit",
            "deny",
            "indeterminate",
            "REVIEW",
            "clientError",
        ]

    def test_reads_pingone_statements_key(self) -> None:
        declarations = declare_outcomes_from_attributes(
            {"useContinue": False, "statements": ["REVIEW", "MFA"]}
        )
        assert _ids(declarations) == [
            "permit",
            "deny",
            "indeterminate",
            "REVIEW",
            "MFA",
            "clientError",
        ]

    def test_statement_codes_key_wins(self) -> None:
        declarations = declare_outcomes_from_attributes(
            {"statementCodes": ["REVIEW"], "statements": ["MFA"]}
        )
        assert "REVIEW" in _ids(declarations)
        assert "MFA" not in _ids(declarations)

    def test_statements_must_be_a_list(self) -> None:
        with pytest.raises(TypeError, match="'statements'"):
            declare_outcomes_from_attributes({"statements": "REVIEW"})

    @pytest.mark.parametrize("raw", [True, "true", "TRUE", " True "])
    def test_use_continue_accepts_string_flags(self, raw: object) -> None:
        declarations = declare_outcomes_from_attributes(
            {"useContinue": raw, "statementCodes": ["REVIEW"]}
        )
        assert _ids(declarations) == ["continue", "clientError"]

    @pytest.mark.parametrize("raw", [False, "false", "yes", None])
    def test_use_continue_false_values(self, raw: object) -> None:
        declarations = declare_outcomes_from_attributes({"useContinue": raw})
        assert _ids(declarations)[0] == "permit"

    def test_missing_codes_attribute(self) -> None:
        assert len(declare_outcomes_from_attributes({})) == 4

    @pytest.mark.parametrize("raw", ["REVIEW", 5])
    def test_codes_must_be_a_list(self, raw: object) -> None:
        with pytest.raises(TypeError, match="statementCodes"):
            declare_outcomes_from_attributes({"statementCodes": raw})


class TestRouteToEdge:
    """Continue mode collapses every outcome except clientError."""

    @pytest.mark.parametrize(
        "outcome",
        [
            ModelOutcome.permit(),
            ModelOutcome.deny(),
            ModelOutcome.indeterminate(),
            ModelOutcome.custom("REVIEW"),
        ],
    )
    def test_continue_mode(self, outcome: ModelOutcome) -> None:
        assert route_to_edge(outcome, use_continue=True) == "continue"

    def test_continue_mode_keeps_client_error(self) -> None:
        assert route_to_edge(ModelOutcome.client_error(), use_continue=True) == "clientError"

    @pytest.mark.parametrize(
        ("outcome", "edge"),
        [
            (ModelOutcome.permit(), "permit"),
            (ModelOutcome.custom("REVIEW"), "REVIEW"),
            (ModelOutcome.client_error(), "clientError"),
        ],
    )
    def test_edge_is_outcome_id(self, outcome: ModelOutcome, edge: str) -> None:
        assert route_to_edge(outcome, use_continue=False) == edge
