# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Output for compliance runs."""

from responses_compliance.exporters.console_exporter import (
    ConsoleProgressExporter,
    print_template_catalogue,
)

__all__ = [
    "ConsoleProgressExporter",
    "print_template_catalogue",
]
