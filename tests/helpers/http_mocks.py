# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""httpx.MockTransport builders for decision endpoint tests."""

from __future__ import annotations

import json
from collections.abc import Awaitable, Callable
from typing import Any, Union

import httpx

ResponderResult = Union[httpx.Response, Awaitable[httpx.Response]]
Responder = Callable[[httpx.Request], ResponderResult]


def json_response(
    data: Any,
    status_code: int = 200,
    headers: dict[str, str] | None = None,
) -> httpx.Response:
    """Build an httpx.Response with a JSON body."""
    all_headers = {"content-type": "application/json"}
    if headers:
        all_headers.update(headers)
    return httpx.Response(
        status_code=status_code,
        content=json.dumps(data).encode(),
        headers=all_headers,
    )


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it was handed.

    Example:
        >>> transport = RecordingTransport(lambda request: json_response({"decision": "PERMIT"}))
        >>> await handler.initialize({}, transport=transport)
    """

    def __init__(self, responder: Responder) -> None:
        self.requests: list[httpx.Request] = []

        async def _handle(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            result = responder(request)
            if isinstance(result, httpx.Response):
                return result
            return await result

        super().__init__(_handle)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


__all__ = ["RecordingTransport", "json_response"]
