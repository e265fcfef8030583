# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Rich logging setup for the compliance harness."""

import logging

from rich.console import Console
from rich.logging import RichHandler

_LOGGER_NAME = "responses_compliance"


def setup_rich_logging(level: int | str = logging.INFO, console: Console | None = None) -> None:
    """Install a RichHandler on the package logger.

    Calling this more than once replaces the previously installed handler
    instead of stacking another one.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
