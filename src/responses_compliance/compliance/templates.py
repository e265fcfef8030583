# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Catalogue of compliance scenarios.

Each TestTemplate pairs a request builder with the validators that judge the
response. The registry is an immutable tuple; the runner takes it as an
argument so tests can substitute their own.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from responses_compliance.common.config import TestConfig
from responses_compliance.common.exceptions import UnknownTemplateError
from responses_compliance.compliance.validators import (
    Validator,
    completed_status,
    has_output,
    has_output_type,
    streaming_events,
    streaming_schema,
)

__all__ = [
    "TEST_TEMPLATES",
    "TestTemplate",
    "select_templates",
]

RequestBuilder = Callable[[TestConfig], dict[str, Any]]


@dataclass(frozen=True, slots=True)
class TestTemplate:
    """A named, declarative compliance scenario.

    Attributes:
        id: Stable identifier, unique within the registry
        name: Human-readable name
        description: What the scenario exercises
        get_request: Builds the request body from the run configuration
        streaming: Whether the request asks for an SSE stream
        validators: Semantic checks run in order on a schema-valid response
    """

    __test__ = False

    id: str
    name: str
    description: str
    get_request: RequestBuilder
    streaming: bool = False
    validators: tuple[Validator, ...] = ()


def _user_message(content: Any) -> dict[str, Any]:
    return {"type": "message", "role": "user", "content": content}


# a red heart icon on a white background
_HEART_IMAGE_URL = (
    "data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAACAAAAAgCAIAAAD8GO2jAAABmklEQVR42tyWAaTyUBzFew/eG4AHz+MBSAHKBiJRGFKwIgQQJKLUIioBIhCAiCAAEizAQIAECaASqFFJq84nudjnaqvuPnxzgP9xfrq5938csPn7PwHTKSoViCIEAYEAMhmoKsU2mUCWEQqB5xEMIp/HaGQG2G6RSuH9HQ7H34rFrtPbdz4jl6PbwmEsl3QA1mt4vcRKk8dz9eg6IpF7tt9fzGY0gCgafFRFo5Blc5vLhf3eCOj1yNhM5GRMVK0aATxPZoz09YXjkQDmczJgquGQAPp9WwCNBgG027YACgUC6HRsAZRKBDAY2AJoNv/ZnwzA6WScznG3p4UAymXGAEkyXrTFAh8fLAGqagQAyGaZpYsi7bHTNPz8MEj//LxuFPo+UBS8vb0KaLXubrRa7aX0RMLCykwmn0z3+XA4WACcTpCkh9MFAZpmuVXo+mO/w+/HZvNgbblcUCxaSo/Hyck80Yu6XXDcvfVZr79cvMZjuN2U9O9vKAqjZrfbIZ0mV4TUi9Xqz6jddNy//7+e3n8Fhf/Llo2kxi8AQyGRoDkmAhAAAAAASUVORK5CYII="
)

_GET_WEATHER_TOOL = {
    "type": "function",
    "name": "get_weather",
    "description": "Get the current weather for a location",
    "parameters": {
        "type": "object",
        "properties": {
            "location": {
                "type": "string",
                "description": "The city and state, e.g. San Francisco, CA",
            },
        },
        "required": ["location"],
    },
}


TEST_TEMPLATES: tuple[TestTemplate, ...] = (
    TestTemplate(
        id="basic-response",
        name="Basic Text Response",
        description="Simple user message, validates ResponseResource schema",
        get_request=lambda config: {
            "model": config.model,
            "input": [_user_message("Say hello in exactly 3 words.")],
        },
        validators=(has_output, completed_status),
    ),
    TestTemplate(
        id="streaming-response",
        name="Streaming Response",
        description="Validates SSE streaming events and final response",
        streaming=True,
        get_request=lambda config: {
            "model": config.model,
            "input": [_user_message("Count from 1 to 5.")],
        },
        validators=(streaming_events, streaming_schema, completed_status),
    ),
    TestTemplate(
        id="system-prompt",
        name="System Prompt",
        description="Include system role message in input",
        get_request=lambda config: {
            "model": config.model,
            "input": [
                {
                    "type": "message",
                    "role": "system",
                    "content": "You are a pirate. Always respond in pirate speak.",
                },
                _user_message("Say hello."),
            ],
        },
        validators=(has_output, completed_status),
    ),
    TestTemplate(
        id="tool-calling",
        name="Tool Calling",
        description="Define a function tool and verify function_call output",
        get_request=lambda config: {
            "model": config.model,
            "input": [_user_message("What's the weather like in San Francisco?")],
            "tools": [_GET_WEATHER_TOOL],
        },
        validators=(has_output, has_output_type("function_call")),
    ),
    TestTemplate(
        id="image-input",
        name="Image Input",
        description="Send image URL in user content",
        get_request=lambda config: {
            "model": config.model,
            "input": [
                _user_message(
                    [
                        {
                            "type": "input_text",
                            "text": "What do you see in this image? Answer in one sentence.",
                        },
                        {"type": "input_image", "image_url": _HEART_IMAGE_URL},
                    ]
                )
            ],
        },
        validators=(has_output, completed_status),
    ),
    TestTemplate(
        id="multi-turn",
        name="Multi-turn Conversation",
        description="Send assistant + user messages as conversation history",
        get_request=lambda config: {
            "model": config.model,
            "input": [
                _user_message("My name is Alice."),
                {
                    "type": "message",
                    "role": "assistant",
                    "content": "Hello Alice! Nice to meet you. How can I help you today?",
                },
                _user_message("What is my name?"),
            ],
        },
        validators=(has_output, completed_status),
    ),
)


def select_templates(
    ids: Iterable[str] | None,
    templates: tuple[TestTemplate, ...] = TEST_TEMPLATES,
) -> tuple[TestTemplate, ...]:
    """Return the templates named by `ids`, in registry order.

    An empty or missing selection returns every template.

    Raises:
        UnknownTemplateError: If an id does not exist in `templates`
    """
    wanted = list(dict.fromkeys(ids or ()))
    if not wanted:
        return templates

    known = [template.id for template in templates]
    unknown = [template_id for template_id in wanted if template_id not in known]
    if unknown:
        raise UnknownTemplateError(unknown, known)
    return tuple(template for template in templates if template.id in wanted)
