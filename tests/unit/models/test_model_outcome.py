# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for the ModelOutcome tagged union."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pingauthz.enums import EnumOutcomeKind
from pingauthz.models import ModelOutcome


class TestModelOutcome:
    """Tests for ModelOutcome construction and derived properties."""

    @pytest.mark.parametrize(
        ("outcome", "outcome_id", "label"),
        [
            (ModelOutcome.permit(), "permit", "Permit"),
            (ModelOutcome.deny(), "deny", "Deny"),
            (ModelOutcome.indeterminate(), "indeterminate", "Indeterminate"),
            (ModelOutcome.continue_(), "continue", "Continue"),
            (ModelOutcome.client_error(), "clientError", "Error"),
        ],
    )
    def test_static_outcomes(
        self, outcome: ModelOutcome, outcome_id: str, label: str
    ) -> None:
        assert outcome.outcome_id == outcome_id
        assert outcome.display_label == label
        assert outcome.code is None
        assert str(outcome) == outcome_id

    def test_custom_outcome_uses_code_verbatim(self) -> None:
        outcome = ModelOutcome.custom("REVIEW")
        assert outcome.kind is EnumOutcomeKind.CUSTOM
        assert outcome.outcome_id == "REVIEW"
        assert outcome.display_label == "REVIEW"

    def test_custom_requires_code(self) -> None:
        with pytest.raises(ValidationError, match="custom outcomes require"):
            ModelOutcome(kind=EnumOutcomeKind.CUSTOM)

    def test_custom_rejects_empty_code(self) -> None:
        with pytest.raises(ValidationError):
            ModelOutcome.custom("")

    def test_static_kinds_reject_code(self) -> None:
        with pytest.raises(ValidationError, match="do not carry a code"):
            ModelOutcome(kind=EnumOutcomeKind.DENY, code="REVIEW")

    def test_only_client_error_is_client_error(self) -> None:
        assert ModelOutcome.client_error().is_client_error
        assert not ModelOutcome.deny().is_client_error
        assert not ModelOutcome.custom("clientError").is_client_error

    def test_equality_by_value(self) -> None:
        assert ModelOutcome.custom("REVIEW") == ModelOutcome.custom("REVIEW")
        assert ModelOutcome.permit() != ModelOutcome.deny()

    def test_is_frozen(self) -> None:
        outcome = ModelOutcome.permit()
        with pytest.raises(ValidationError):
            outcome.kind = EnumOutcomeKind.DENY  # type: ignore[misc]
