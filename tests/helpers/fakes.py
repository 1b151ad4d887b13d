# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""In-memory fakes for the host collaborators the credential strategies use."""

from __future__ import annotations

import asyncio
from typing import Optional, Union

from pydantic import SecretStr

from pingauthz.models import ModelPingOneConfig, ModelWorkerRecord
from pingauthz.protocols import TokenSubject


class FakeTokenIssuer:
    """Token issuer returning a fixed token (or raising) and recording subjects."""

    def __init__(
        self,
        token: Optional[Union[str, SecretStr]] = "issued-token",
        error: Optional[Exception] = None,
    ) -> None:
        self.token = token
        self.error = error
        self.subjects: list[TokenSubject] = []

    async def get_access_token(
        self, subject: TokenSubject
    ) -> Optional[Union[str, SecretStr]]:
        self.subjects.append(subject)
        if self.error is not None:
            raise self.error
        return self.token


class HangingTokenIssuer:
    """Token issuer that never answers; ``started`` is set once it is awaited."""

    def __init__(self) -> None:
        self.started = asyncio.Event()

    async def get_access_token(
        self, subject: TokenSubject
    ) -> Optional[Union[str, SecretStr]]:
        self.started.set()
        await asyncio.Event().wait()
        raise AssertionError("unreachable")


class FakeWorkerDirectory:
    def __init__(self, *workers: ModelWorkerRecord) -> None:
        self._workers = {worker.worker_id: worker for worker in workers}

    async def get_worker(self, worker_id: str) -> Optional[ModelWorkerRecord]:
        return self._workers.get(worker_id)


class HangingWorkerDirectory:
    """Worker directory that never answers; ``started`` is set once it is awaited."""

    def __init__(self) -> None:
        self.started = asyncio.Event()

    async def get_worker(self, worker_id: str) -> Optional[ModelWorkerRecord]:
        self.started.set()
        await asyncio.Event().wait()
        raise AssertionError("unreachable")


class FakePingOneConfigDirectory:
    def __init__(self, *configs: ModelPingOneConfig) -> None:
        self._configs = {config.name: config for config in configs}

    def get_config(self, name: str) -> Optional[ModelPingOneConfig]:
        return self._configs.get(name)


__all__ = [
    "FakePingOneConfigDirectory",
    "FakeTokenIssuer",
    "FakeWorkerDirectory",
    "HangingTokenIssuer",
    "HangingWorkerDirectory",
]
