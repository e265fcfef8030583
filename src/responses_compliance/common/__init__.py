# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Configuration, data models and exceptions shared across the harness."""

from responses_compliance.common.config import TestConfig
from responses_compliance.common.exceptions import (
    ComplianceError,
    UnknownTemplateError,
)
from responses_compliance.common.models import (
    TestResult,
    TestStatus,
    ValidatorContext,
)

__all__ = [
    "ComplianceError",
    "TestConfig",
    "TestResult",
    "TestStatus",
    "UnknownTemplateError",
    "ValidatorContext",
]
