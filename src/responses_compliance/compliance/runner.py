# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Concurrent runner over the whole template registry."""

import asyncio
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

import httpx

from responses_compliance.common.config import TestConfig
from responses_compliance.common.models import TestResult, TestStatus
from responses_compliance.compliance.executor import (
    SchemaGate,
    StreamCollector,
    run_test,
)
from responses_compliance.compliance.templates import TEST_TEMPLATES, TestTemplate
from responses_compliance.schemas.response_resource import validate_response_resource
from responses_compliance.streaming.sse_parser import parse_sse_stream

logger = logging.getLogger(__name__)

__all__ = [
    "ProgressCallback",
    "RunSummary",
    "run_all_tests",
    "summarize",
]

ProgressCallback = Callable[[TestResult], None]


@dataclass(frozen=True, slots=True)
class RunSummary:
    total: int
    passed: int
    failed: int

    @property
    def all_passed(self) -> bool:
        return self.failed == 0


def summarize(results: Sequence[TestResult]) -> RunSummary:
    passed = sum(1 for r in results if r.status == TestStatus.PASSED)
    failed = sum(1 for r in results if r.status == TestStatus.FAILED)
    return RunSummary(total=len(results), passed=passed, failed=failed)


def _notify(on_progress: ProgressCallback, result: TestResult) -> None:
    try:
        on_progress(result)
    except Exception:
        logger.exception(
            f"Progress callback failed for test '{result.id}' ({result.status.value})"
        )


async def run_all_tests(
    config: TestConfig,
    on_progress: ProgressCallback,
    *,
    templates: Sequence[TestTemplate] = TEST_TEMPLATES,
    client: httpx.AsyncClient | None = None,
    schema_gate: SchemaGate = validate_response_resource,
    collector: StreamCollector = parse_sse_stream,
) -> list[TestResult]:
    """Run every template concurrently and return results in template order.

    `on_progress` is called twice per template: once with a running
    projection when the scenario is launched and once with its terminal
    result. Completion order across scenarios is not guaranteed; the returned
    list always matches the order of `templates`.

    Args:
        config: Connection and model settings for every request
        on_progress: Called synchronously with running and terminal results
        templates: Scenarios to run
        client: HTTP client to use; a client without timeouts is created
            for the run when omitted
        schema_gate: Structural validator for response bodies
        collector: SSE collector for streaming scenarios

    Returns:
        One terminal TestResult per template, in template order
    """
    if client is None:
        async with httpx.AsyncClient(timeout=None) as owned_client:
            return await run_all_tests(
                config,
                on_progress,
                templates=templates,
                client=owned_client,
                schema_gate=schema_gate,
                collector=collector,
            )

    logger.info(f"Running {len(templates)} compliance tests against {config.base_url}")

    async def _run(template: TestTemplate) -> TestResult:
        result = await run_test(
            template, config, client, schema_gate=schema_gate, collector=collector
        )
        if result.passed:
            logger.debug(f"Test '{template.id}' passed in {result.duration:.0f}ms")
        else:
            logger.warning(
                f"Test '{template.id}' failed with {len(result.errors)} error(s)"
            )
        _notify(on_progress, result)
        return result

    tasks: list[asyncio.Task[TestResult]] = []
    for template in templates:
        _notify(on_progress, TestResult.running(template))
        tasks.append(asyncio.create_task(_run(template)))

    # gather() keeps results positional, independent of completion order
    results = list(await asyncio.gather(*tasks))

    summary = summarize(results)
    logger.info(f"Compliance run complete: {summary.passed}/{summary.total} passed")
    return results
