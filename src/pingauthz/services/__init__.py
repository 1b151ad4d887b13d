# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Decision node services: attribute collection, credentials, outcomes."""

from pingauthz.services.service_attribute_collector import (
    ServiceAttributeCollector,
    collect_attributes,
)
from pingauthz.services.service_credential_resolver import (
    GOVERNANCE_ENGINE_PATH,
    SharedConfigCredentialResolver,
    StaticCredentialResolver,
    WorkerCredentialResolver,
    build_credential_resolver,
)
from pingauthz.services.service_outcome_catalog import (
    declare_outcomes,
    declare_outcomes_from_attributes,
    route_to_edge,
)
from pingauthz.services.service_outcome_resolver import (
    ServiceOutcomeResolver,
    resolve_outcome,
)

__all__: list[str] = [
    "GOVERNANCE_ENGINE_PATH",
    "ServiceAttributeCollector",
    "ServiceOutcomeResolver",
    "SharedConfigCredentialResolver",
    "StaticCredentialResolver",
    "WorkerCredentialResolver",
    "build_credential_resolver",
    "collect_attributes",
    "declare_outcomes",
    "declare_outcomes_from_attributes",
    "resolve_outcome",
    "route_to_edge",
]
