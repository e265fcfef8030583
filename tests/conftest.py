# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Shared fixtures for compliance harness tests."""

import copy
from collections.abc import Callable
from typing import Any

import httpx
import orjson
import pytest

from responses_compliance.common.config import TestConfig

# -----------------------------------------------------------------------------
# Payload builders
# -----------------------------------------------------------------------------

_VALID_RESPONSE: dict[str, Any] = {
    "id": "resp_123",
    "object": "response",
    "created_at": 1_740_000_000,
    "status": "completed",
    "model": "test-model",
    "output": [
        {
            "type": "message",
            "id": "msg_1",
            "role": "assistant",
            "status": "completed",
            "content": [{"type": "output_text", "text": "Hello there friend", "annotations": []}],
        }
    ],
    "usage": {"input_tokens": 5, "output_tokens": 3, "total_tokens": 8},
}


def build_response_payload(**overrides: Any) -> dict[str, Any]:
    """A schema-valid response resource with top-level fields overridden."""
    payload = copy.deepcopy(_VALID_RESPONSE)
    payload.update(overrides)
    return payload


def build_sse_body(events: list[dict[str, Any]], *, named: bool = True) -> bytes:
    """Encode events as an SSE body, with `event:` lines unless `named` is False."""
    frames = []
    for event in events:
        lines = []
        if named:
            lines.append(f"event: {event['type']}")
        lines.append(f"data: {orjson.dumps(event).decode()}")
        frames.append("\n".join(lines))
    return ("\n\n".join(frames) + "\n\n").encode()


def build_streaming_events(final: dict[str, Any] | None = None) -> list[dict[str, Any]]:
    final = final or build_response_payload()
    in_progress = {**final, "status": "in_progress", "output": []}
    return [
        {"type": "response.created", "response": in_progress},
        {"type": "response.output_text.delta", "item_id": "msg_1", "delta": "Hello"},
        {"type": "response.completed", "response": final},
    ]


# -----------------------------------------------------------------------------
# Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def config() -> TestConfig:
    return TestConfig(
        base_url="https://api.test/v1",
        api_key="sk-test",
        model="test-model",
    )


@pytest.fixture
def response_payload() -> Callable[..., dict[str, Any]]:
    return build_response_payload


@pytest.fixture
def sse_body() -> Callable[..., bytes]:
    return build_sse_body


@pytest.fixture
def stream_events() -> Callable[..., list[dict[str, Any]]]:
    return build_streaming_events


@pytest.fixture
def make_client() -> Callable[[Callable], httpx.AsyncClient]:
    """Build an AsyncClient backed by an httpx.MockTransport handler."""

    def _make(handler: Callable) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def responses_server(
    response_payload, sse_body, stream_events
) -> Callable[[httpx.Request], httpx.Response]:
    """A well-behaved fake `/responses` endpoint handling both modes."""

    def _handler(request: httpx.Request) -> httpx.Response:
        body = orjson.loads(request.content)
        tools = body.get("tools") or []
        if tools:
            payload = response_payload(
                output=[
                    {
                        "type": "function_call",
                        "id": "fc_1",
                        "call_id": "call_1",
                        "name": tools[0]["name"],
                        "arguments": '{"location": "San Francisco, CA"}',
                        "status": "completed",
                    }
                ]
            )
        else:
            payload = response_payload()

        if body.get("stream"):
            return httpx.Response(
                200,
                content=sse_body(stream_events(payload)),
                headers={"content-type": "text/event-stream"},
            )
        return httpx.Response(200, json=payload)

    return _handler
