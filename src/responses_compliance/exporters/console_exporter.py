# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Rich console output for compliance runs."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from responses_compliance.common.models import TestResult, TestStatus
from responses_compliance.compliance.runner import summarize
from responses_compliance.compliance.templates import TestTemplate

_STATUS_STYLES = {
    TestStatus.PENDING: "dim",
    TestStatus.RUNNING: "cyan",
    TestStatus.PASSED: "bold green",
    TestStatus.FAILED: "bold red",
}


def _status_text(status: TestStatus, width: int = 0) -> Text:
    return Text(status.value.upper().ljust(width), style=_STATUS_STYLES[status])


class ConsoleProgressExporter:
    """Prints progress events as they arrive and a summary table at the end.

    An instance is used directly as the runner's progress callback.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def __call__(self, result: TestResult) -> None:
        line = Text.assemble(
            _status_text(result.status, width=7),
            " ",
            (result.id, "bold"),
        )
        if result.duration is not None:
            line.append(f" ({result.duration:.0f}ms)", style="dim")
        self.console.print(line)

    def export_summary(self, results: Sequence[TestResult]) -> None:
        table = Table(title="Compliance Results", show_lines=False)
        table.add_column("Test", style="bold")
        table.add_column("Status")
        table.add_column("Duration", justify="right")
        table.add_column("Events", justify="right")
        table.add_column("Errors")

        for result in results:
            table.add_row(
                result.name,
                _status_text(result.status),
                f"{result.duration:.0f}ms" if result.duration is not None else "-",
                str(result.stream_events) if result.stream_events is not None else "-",
                "\n".join(result.errors) if result.errors else "-",
            )

        self.console.print(table)
        summary = summarize(results)
        style = "bold green" if summary.all_passed else "bold red"
        self.console.print(
            f"{summary.passed}/{summary.total} passed, {summary.failed} failed",
            style=style,
        )


def print_template_catalogue(
    templates: Sequence[TestTemplate], console: Console | None = None
) -> None:
    """Print the available scenarios."""
    table = Table(title="Compliance Tests")
    table.add_column("ID", style="bold")
    table.add_column("Name")
    table.add_column("Streaming", justify="center")
    table.add_column("Description")
    for template in templates:
        table.add_row(
            template.id,
            template.name,
            "yes" if template.streaming else "no",
            template.description,
        )
    (console or Console()).print(table)
