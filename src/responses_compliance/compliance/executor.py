# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Runs a single compliance scenario end to end.

The flow for one template is:

1. Build the request body and send it.
2. Fail immediately on a non-2xx status, keeping the error body.
3. Ingest the body: plain JSON, or an SSE stream handed to the collector.
4. Run the schema gate. Issues fail the scenario and skip the validators.
5. Run the validators and pass iff none reported an error.

Every failure mode, including exceptions, becomes a failed TestResult.
"""

import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any

import httpx
import orjson

from responses_compliance.common.config import TestConfig
from responses_compliance.common.models import TestResult, TestStatus, ValidatorContext
from responses_compliance.compliance.templates import TestTemplate
from responses_compliance.compliance.transport import build_request_body, make_request
from responses_compliance.compliance.validators import run_validators
from responses_compliance.schemas.response_resource import (
    SchemaValidationResult,
    format_issue,
    validate_response_resource,
)
from responses_compliance.streaming.sse_parser import SSEParseResult, parse_sse_stream

logger = logging.getLogger(__name__)

__all__ = [
    "SchemaGate",
    "StreamCollector",
    "run_test",
]

SchemaGate = Callable[[Any], SchemaValidationResult]
StreamCollector = Callable[[httpx.Response], Awaitable[SSEParseResult]]


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


def _finish(
    template: TestTemplate,
    start: float,
    status: TestStatus,
    errors: list[str],
    request: dict[str, Any] | None,
    **kwargs: Any,
) -> TestResult:
    return TestResult(
        id=template.id,
        name=template.name,
        description=template.description,
        status=status,
        duration=_elapsed_ms(start),
        request=request,
        errors=errors,
        **kwargs,
    )


async def run_test(
    template: TestTemplate,
    config: TestConfig,
    client: httpx.AsyncClient,
    *,
    schema_gate: SchemaGate = validate_response_resource,
    collector: StreamCollector = parse_sse_stream,
) -> TestResult:
    """Execute one template and return its terminal result. Never raises."""
    start = time.perf_counter()
    request: dict[str, Any] | None = None

    try:
        body = template.get_request(config)
        request = build_request_body(body, True) if template.streaming else body
        return await _execute(
            template, config, client, body, request, start, schema_gate, collector
        )
    except Exception as e:
        logger.exception(f"Test '{template.id}' raised an error")
        return _finish(
            template,
            start,
            TestStatus.FAILED,
            [str(e) or e.__class__.__name__],
            request,
        )


async def _execute(
    template: TestTemplate,
    config: TestConfig,
    client: httpx.AsyncClient,
    body: dict[str, Any],
    request: dict[str, Any],
    start: float,
    schema_gate: SchemaGate,
    collector: StreamCollector,
) -> TestResult:
    streaming = template.streaming
    response = await make_request(client, config, body, streaming)
    try:
        if not response.is_success:
            await response.aread()
            error_text = response.text
            return _finish(
                template,
                start,
                TestStatus.FAILED,
                [f"HTTP {response.status_code}: {error_text}"],
                request,
                response=error_text,
            )

        sse_result: SSEParseResult | None = None
        if streaming:
            sse_result = await collector(response)
            raw_data = sse_result.final_response
        else:
            content = await response.aread()
            try:
                raw_data = orjson.loads(content)
            except orjson.JSONDecodeError as e:
                return _finish(
                    template,
                    start,
                    TestStatus.FAILED,
                    [f"Response body is not valid JSON: {e}"],
                    request,
                    response=response.text,
                )

        stream_events = len(sse_result.events) if sse_result is not None else None

        validation = schema_gate(raw_data)
        if not validation.success:
            return _finish(
                template,
                start,
                TestStatus.FAILED,
                [format_issue(issue) for issue in validation.issues],
                request,
                response=raw_data,
                stream_events=stream_events,
            )

        context = ValidatorContext(streaming=streaming, sse_result=sse_result)
        errors = run_validators(template.validators, validation.data, context)
        return _finish(
            template,
            start,
            TestStatus.FAILED if errors else TestStatus.PASSED,
            errors,
            request,
            response=validation.data,
            stream_events=stream_events,
        )
    finally:
        await response.aclose()
