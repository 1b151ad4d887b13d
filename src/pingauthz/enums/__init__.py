# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Decision Node Enumerations Module.

Exports:
    EnumAuthorizeErrorCode: Error classification codes
    EnumAuthorizeProvider: PingAuthorize vs PingOne Authorize request variant
    EnumCredentialSource: Token/endpoint source selection (STATIC, WORKER, SHARED_CONFIG)
    EnumDecision: Decision verdicts (PERMIT, DENY, INDETERMINATE)
    EnumOutcomeKind: Outcome union tags
    EnumPingOneRegion: PingOne regions and API domain suffixes
    EnumTransportType: Transport type for error context
"""

from pingauthz.enums.enum_authorize_error_code import EnumAuthorizeErrorCode
from pingauthz.enums.enum_authorize_provider import EnumAuthorizeProvider
from pingauthz.enums.enum_credential_source import EnumCredentialSource
from pingauthz.enums.enum_decision import EnumDecision
from pingauthz.enums.enum_outcome_kind import EnumOutcomeKind
from pingauthz.enums.enum_pingone_region import EnumPingOneRegion
from pingauthz.enums.enum_transport_type import EnumTransportType

__all__: list[str] = [
    "EnumAuthorizeErrorCode",
    "EnumAuthorizeProvider",
    "EnumCredentialSource",
    "EnumDecision",
    "EnumOutcomeKind",
    "EnumPingOneRegion",
    "EnumTransportType",
]
