# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Server-sent event collection for streamed Responses API calls.

The collector turns an SSE body into discrete events, reconstructs the final
response object from the terminal event, and reports protocol problems as
strings instead of raising, so validators can decide how to treat them.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from dataclasses import dataclass, field
from typing import Any

import httpx
import orjson

logger = logging.getLogger(__name__)

__all__ = [
    "DONE_SENTINEL",
    "TERMINAL_EVENT_TYPES",
    "SSEEvent",
    "SSEParseResult",
    "collect_sse_lines",
    "parse_sse_stream",
]

DONE_SENTINEL = "[DONE]"

TERMINAL_EVENT_TYPES = frozenset(
    {"response.completed", "response.failed", "response.incomplete"}
)


@dataclass(frozen=True, slots=True)
class SSEEvent:
    """A single decoded SSE frame.

    Attributes:
        event: Value of the `event:` field, if the frame had one
        data: JSON-decoded `data:` payload, or None when it failed to decode
        raw: The `data:` payload exactly as received
    """

    event: str | None
    data: Any
    raw: str

    @property
    def type(self) -> str | None:
        if isinstance(self.data, dict) and isinstance(self.data.get("type"), str):
            return self.data["type"]
        return None


@dataclass(slots=True)
class SSEParseResult:
    """Aggregated outcome of reading a whole SSE stream."""

    events: list[SSEEvent] = field(default_factory=list)
    final_response: Any = None
    errors: list[str] = field(default_factory=list)


async def parse_sse_stream(response: httpx.Response) -> SSEParseResult:
    """Collect every event from a streaming HTTP response."""
    return await collect_sse_lines(response.aiter_lines())


async def collect_sse_lines(lines: AsyncIterator[str]) -> SSEParseResult:
    """Group SSE lines into frames and decode them.

    Frames are separated by blank lines. Comment lines (starting with `:`)
    and fields other than `event` and `data` are ignored. A `[DONE]`
    payload ends the stream.
    """
    result = SSEParseResult()
    event_name: str | None = None
    data_lines: list[str] = []
    done = False

    async for line in lines:
        line = line.rstrip("\r")
        if not line:
            if data_lines:
                done = _handle_frame(result, event_name, "\n".join(data_lines))
            event_name, data_lines = None, []
            if done:
                break
            continue
        if line.startswith(":"):
            continue

        name, _, value = line.partition(":")
        if value.startswith(" "):
            value = value[1:]
        if name == "event":
            event_name = value
        elif name == "data":
            data_lines.append(value)

    # Trailing frame without a terminating blank line
    if data_lines and not done:
        _handle_frame(result, event_name, "\n".join(data_lines))

    if not any(event.type in TERMINAL_EVENT_TYPES for event in result.events):
        result.errors.append(
            "Stream ended without a terminal event "
            f"({', '.join(sorted(TERMINAL_EVENT_TYPES))})"
        )

    logger.debug(
        f"Collected {len(result.events)} SSE events with {len(result.errors)} errors"
    )
    return result


def _handle_frame(result: SSEParseResult, event_name: str | None, raw: str) -> bool:
    """Decode one frame into `result`. Returns True when the stream is done."""
    if raw.strip() == DONE_SENTINEL:
        return True

    index = len(result.events)
    try:
        data = orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        result.errors.append(f"Event {index}: invalid JSON in data field: {e}")
        result.events.append(SSEEvent(event=event_name, data=None, raw=raw))
        return False

    sse_event = SSEEvent(event=event_name, data=data, raw=raw)
    result.events.append(sse_event)

    if not isinstance(data, dict):
        result.errors.append(
            f"Event {index}: expected a JSON object but got {type(data).__name__}"
        )
        return False

    event_type = sse_event.type
    if event_type is None:
        result.errors.append(f'Event {index}: missing string "type" field')
        return False

    if event_name is not None and event_name != event_type:
        result.errors.append(
            f'Event {index}: event name "{event_name}" does not match type "{event_type}"'
        )

    if event_type in TERMINAL_EVENT_TYPES:
        final = data.get("response")
        if isinstance(final, dict):
            result.final_response = final
        else:
            result.errors.append(
                f'Event {index}: "{event_type}" is missing its "response" object'
            )
    return False
