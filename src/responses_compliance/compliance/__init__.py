# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Compliance scenarios, validators, and the executor/runner that drive them."""

from responses_compliance.compliance.executor import (
    SchemaGate,
    StreamCollector,
    run_test,
)
from responses_compliance.compliance.runner import (
    ProgressCallback,
    RunSummary,
    run_all_tests,
    summarize,
)
from responses_compliance.compliance.templates import (
    TEST_TEMPLATES,
    TestTemplate,
    select_templates,
)
from responses_compliance.compliance.transport import (
    build_headers,
    build_request_body,
    make_request,
)
from responses_compliance.compliance.validators import (
    Validator,
    completed_status,
    has_output,
    has_output_type,
    run_validators,
    status_equals,
    streaming_events,
    streaming_schema,
)

__all__ = [
    "ProgressCallback",
    "RunSummary",
    "SchemaGate",
    "StreamCollector",
    "TEST_TEMPLATES",
    "TestTemplate",
    "Validator",
    "build_headers",
    "build_request_body",
    "completed_status",
    "has_output",
    "has_output_type",
    "make_request",
    "run_all_tests",
    "run_test",
    "run_validators",
    "select_templates",
    "status_equals",
    "streaming_events",
    "streaming_schema",
    "summarize",
]
