# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Semantic validators applied to schema-valid responses.

A validator is a plain function taking the typed response and the
per-scenario context and returning a list of error strings. Validators never
raise, never mutate their inputs, and return an empty list when their check
does not apply.
"""

from collections.abc import Callable, Iterable

from responses_compliance.common.models import ValidatorContext
from responses_compliance.schemas.response_resource import ResponseResource

__all__ = [
    "Validator",
    "completed_status",
    "has_output",
    "has_output_type",
    "run_validators",
    "status_equals",
    "streaming_events",
    "streaming_schema",
]

Validator = Callable[[ResponseResource, ValidatorContext], list[str]]


def run_validators(
    validators: Iterable[Validator],
    response: ResponseResource,
    context: ValidatorContext,
) -> list[str]:
    """Run every validator in order and concatenate their errors."""
    errors: list[str] = []
    for validator in validators:
        errors.extend(validator(response, context))
    return errors


def has_output(response: ResponseResource, context: ValidatorContext) -> list[str]:
    if not response.output:
        return ["Response has no output items"]
    return []


def has_output_type(item_type: str) -> Validator:
    """Require at least one output item whose `type` is `item_type`."""

    def _validator(response: ResponseResource, context: ValidatorContext) -> list[str]:
        if not any(item.type == item_type for item in response.output):
            return [f'Expected output item of type "{item_type}" but none found']
        return []

    _validator.__name__ = f"has_output_type_{item_type}"
    return _validator


def status_equals(status: str) -> Validator:
    """Require the response `status` field to equal `status`."""

    def _validator(response: ResponseResource, context: ValidatorContext) -> list[str]:
        if response.status != status:
            return [f'Expected status "{status}" but got "{response.status}"']
        return []

    _validator.__name__ = f"status_equals_{status}"
    return _validator


completed_status = status_equals("completed")


def streaming_events(
    response: ResponseResource, context: ValidatorContext
) -> list[str]:
    if not context.streaming:
        return []
    if context.sse_result is None or not context.sse_result.events:
        return ["No streaming events received"]
    return []


def streaming_schema(
    response: ResponseResource, context: ValidatorContext
) -> list[str]:
    """Surface protocol errors reported by the stream collector."""
    if not context.streaming or context.sse_result is None:
        return []
    return list(context.sse_result.errors)
