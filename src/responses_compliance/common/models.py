# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Data models shared by the executor, the runner and the validators."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

from responses_compliance.streaming.sse_parser import SSEParseResult

if TYPE_CHECKING:
    from responses_compliance.compliance.templates import TestTemplate


class TestStatus(str, Enum):
    """Lifecycle of a single scenario: pending -> running -> passed | failed."""

    __test__ = False

    PENDING = "pending"
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (TestStatus.PASSED, TestStatus.FAILED)


class TestResult(BaseModel):
    """Outcome of one scenario, used for both live progress and the final report.

    Attributes:
        id: Template id
        name: Human-readable template name
        description: What the scenario exercises
        status: Current lifecycle status
        duration: Elapsed milliseconds for the whole scenario (None while running)
        request: Request body actually sent, including the stream flag when streaming
        response: Typed response on schema success, raw data or error text otherwise
        errors: Ordered diagnostic messages; empty iff the scenario passed
        stream_events: Number of SSE events observed, for streaming scenarios
    """

    __test__ = False

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    status: TestStatus = TestStatus.PENDING
    duration: float | None = Field(default=None, ge=0)
    request: dict[str, Any] | None = None
    response: Any = None
    errors: tuple[str, ...] = ()
    stream_events: int | None = None

    @classmethod
    def running(cls, template: TestTemplate) -> TestResult:
        """Build the progress projection emitted before a scenario starts."""
        return cls(
            id=template.id,
            name=template.name,
            description=template.description,
            status=TestStatus.RUNNING,
        )

    @property
    def passed(self) -> bool:
        return self.status == TestStatus.PASSED


@dataclass(frozen=True, slots=True)
class ValidatorContext:
    """Per-scenario data handed to every validator alongside the typed response."""

    streaming: bool
    sse_result: SSEParseResult | None = None
