# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for the rich console exporter."""

import pytest
from rich.console import Console

from responses_compliance.common.models import TestResult, TestStatus
from responses_compliance.compliance.templates import TEST_TEMPLATES
from responses_compliance.exporters.console_exporter import (
    ConsoleProgressExporter,
    print_template_catalogue,
)


@pytest.fixture
def console() -> Console:
    return Console(record=True, width=200, force_terminal=False)


class TestConsoleProgressExporter:
    def test_prints_running_and_terminal_lines(self, console):
        exporter = ConsoleProgressExporter(console)

        exporter(TestResult.running(TEST_TEMPLATES[0]))
        exporter(
            TestResult(
                id="basic-response",
                name="Basic Text Response",
                description="",
                status=TestStatus.PASSED,
                duration=42.4,
            )
        )

        output = console.export_text()
        assert "RUNNING basic-response" in output
        assert "PASSED  basic-response (42ms)" in output

    def test_summary_lists_errors_and_totals(self, console):
        exporter = ConsoleProgressExporter(console)
        results = [
            TestResult(
                id="basic-response",
                name="Basic Text Response",
                description="",
                status=TestStatus.PASSED,
                duration=10.0,
            ),
            TestResult(
                id="streaming-response",
                name="Streaming Response",
                description="",
                status=TestStatus.FAILED,
                duration=20.0,
                errors=["No streaming events received"],
                stream_events=0,
            ),
        ]

        exporter.export_summary(results)

        output = console.export_text()
        assert "Compliance Results" in output
        assert "No streaming events received" in output
        assert "1/2 passed, 1 failed" in output


def test_print_template_catalogue(console):
    print_template_catalogue(TEST_TEMPLATES, console)

    output = console.export_text()
    for template in TEST_TEMPLATES:
        assert template.id in output
