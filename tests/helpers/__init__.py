# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Test helpers: host collaborator fakes and httpx mock transport builders."""

from tests.helpers.fakes import (
    FakePingOneConfigDirectory,
    FakeTokenIssuer,
    FakeWorkerDirectory,
    HangingTokenIssuer,
    HangingWorkerDirectory,
)
from tests.helpers.http_mocks import RecordingTransport, json_response

__all__ = [
    "FakePingOneConfigDirectory",
    "FakeTokenIssuer",
    "FakeWorkerDirectory",
    "HangingTokenIssuer",
    "HangingWorkerDirectory",
    "RecordingTransport",
    "json_response",
]
