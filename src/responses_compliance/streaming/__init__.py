# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""SSE stream collection."""

from responses_compliance.streaming.sse_parser import (
    DONE_SENTINEL,
    TERMINAL_EVENT_TYPES,
    SSEEvent,
    SSEParseResult,
    collect_sse_lines,
    parse_sse_stream,
)

__all__ = [
    "DONE_SENTINEL",
    "SSEEvent",
    "SSEParseResult",
    "TERMINAL_EVENT_TYPES",
    "collect_sse_lines",
    "parse_sse_stream",
]
