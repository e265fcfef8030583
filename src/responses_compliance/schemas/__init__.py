# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Structural schemas for Responses API resources."""

from responses_compliance.schemas.response_resource import (
    FunctionCallItem,
    MessageOutputItem,
    OutputItem,
    ReasoningItem,
    ResponseResource,
    SchemaIssue,
    SchemaValidationResult,
    UnknownOutputItem,
    format_issue,
    validate_response_resource,
)

__all__ = [
    "FunctionCallItem",
    "MessageOutputItem",
    "OutputItem",
    "ReasoningItem",
    "ResponseResource",
    "SchemaIssue",
    "SchemaValidationResult",
    "UnknownOutputItem",
    "format_issue",
    "validate_response_resource",
]
