# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Decision node models.

One model per module. Every pydantic model here is frozen; NodeState is the
only mutable structure and is owned by the host.
"""

from pingauthz.models.model_credential import ModelCredential
from pingauthz.models.model_decision_request import ModelDecisionRequest
from pingauthz.models.model_decision_response import ModelDecisionResponse
from pingauthz.models.model_input_declaration import ModelInputDeclaration
from pingauthz.models.model_node_config import (
    DEFAULT_PINGONE_CONFIG_NAME,
    ModelNodeConfig,
)
from pingauthz.models.model_node_result import ModelNodeResult
from pingauthz.models.model_outcome import ModelOutcome
from pingauthz.models.model_outcome_declaration import ModelOutcomeDeclaration
from pingauthz.models.model_pingone_config import PINGONE_API_BASE, ModelPingOneConfig
from pingauthz.models.model_statement import ModelStatement
from pingauthz.models.model_worker_record import ModelWorkerRecord
from pingauthz.models.node_state import (
    DECISION_KEY,
    EXCEPTION_KEY,
    STACK_TRACE_KEY,
    NodeState,
)

__all__: list[str] = [
    "DECISION_KEY",
    "DEFAULT_PINGONE_CONFIG_NAME",
    "EXCEPTION_KEY",
    "PINGONE_API_BASE",
    "STACK_TRACE_KEY",
    "ModelCredential",
    "ModelDecisionRequest",
    "ModelDecisionResponse",
    "ModelInputDeclaration",
    "ModelNodeConfig",
    "ModelNodeResult",
    "ModelOutcome",
    "ModelOutcomeDeclaration",
    "ModelPingOneConfig",
    "ModelStatement",
    "ModelWorkerRecord",
    "NodeState",
]
