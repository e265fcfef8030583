# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Exceptions raised by the compliance harness.

Scenario failures are never raised; they are reported as failed TestResults.
These exceptions cover misuse of the harness itself.
"""


class ComplianceError(Exception):
    """Base class for harness errors."""


class UnknownTemplateError(ComplianceError):
    """Raised when a requested test template id is not in the registry."""

    def __init__(self, unknown_ids: list[str], known_ids: list[str]) -> None:
        self.unknown_ids = unknown_ids
        self.known_ids = known_ids
        super().__init__(
            f"Unknown test id(s): {', '.join(unknown_ids)}. "
            f"Available: {', '.join(known_ids)}"
        )
