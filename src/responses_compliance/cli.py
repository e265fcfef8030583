# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Command line entry point: `responses-compliance`."""

import asyncio
import logging
import sys
from typing import Annotated

import orjson
from cyclopts import App, CycloptsError, Parameter
from pydantic import ValidationError
from rich.console import Console

from responses_compliance import __version__
from responses_compliance.common.config import TestConfig
from responses_compliance.common.exceptions import UnknownTemplateError
from responses_compliance.common.logging import setup_rich_logging
from responses_compliance.compliance.runner import run_all_tests, summarize
from responses_compliance.compliance.templates import TEST_TEMPLATES, select_templates
from responses_compliance.exporters.console_exporter import (
    ConsoleProgressExporter,
    print_template_catalogue,
)

logger = logging.getLogger(__name__)

app = App(
    name="responses-compliance",
    help="Run compliance tests against a Responses API endpoint.",
    version=__version__,
)


@app.default
def run(
    config: Annotated[TestConfig, Parameter(name="*")],
    *,
    only: Annotated[
        list[str] | None,
        Parameter(
            name=("--only", "-t"),
            help="Run only the test with this id. Repeat to select several.",
        ),
    ] = None,
    json_output: Annotated[
        bool,
        Parameter(
            name=("--json",),
            negative=(),
            help="Print results as JSON on stdout instead of the live view.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        Parameter(name=("--verbose", "-v"), negative=(), help="Enable debug logging."),
    ] = False,
) -> None:
    """Run the compliance tests.

    Exits with status 1 when any test fails and 2 when the selection is invalid.
    """
    console = Console(stderr=json_output)
    setup_rich_logging(logging.DEBUG if verbose else logging.WARNING)

    try:
        templates = select_templates(only)
    except UnknownTemplateError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(2)

    if json_output:
        results = asyncio.run(
            run_all_tests(config, lambda _: None, templates=templates)
        )
        print(
            orjson.dumps(
                [result.model_dump(mode="json") for result in results],
                option=orjson.OPT_INDENT_2,
            ).decode("utf-8")
        )
    else:
        exporter = ConsoleProgressExporter(console)
        console.print(
            f"Running {len(templates)} test(s) against [bold]{config.responses_url}[/bold] "
            f"with model [bold]{config.model}[/bold]"
        )
        results = asyncio.run(run_all_tests(config, exporter, templates=templates))
        exporter.export_summary(results)

    if not summarize(results).all_passed:
        sys.exit(1)


@app.command(name="list")
def list_tests() -> None:
    """List the available compliance tests."""
    print_template_catalogue(TEST_TEMPLATES)


def main(tokens: list[str] | None = None) -> None:
    """Console script entry point.

    Invalid configuration exits with status 2 so it cannot be mistaken for a
    failed test run, which exits with status 1.
    """
    try:
        app(tokens, exit_on_error=False)
    except CycloptsError:
        # cyclopts has already printed the error
        sys.exit(2)
    except ValidationError as e:
        Console(stderr=True).print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(2)


if __name__ == "__main__":
    main()
