# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""HTTP adapter that issues one `POST /responses` call per scenario."""

import logging
from typing import Any

import httpx
import orjson

from responses_compliance.common.config import TestConfig

logger = logging.getLogger(__name__)

__all__ = [
    "build_headers",
    "build_request_body",
    "make_request",
]


def build_headers(config: TestConfig) -> dict[str, str]:
    """Content type plus the configured auth header."""
    auth_value = (
        f"Bearer {config.api_key}" if config.use_bearer_prefix else config.api_key
    )
    return {
        "Content-Type": "application/json",
        config.auth_header_name: auth_value,
    }


def build_request_body(body: dict[str, Any], streaming: bool) -> dict[str, Any]:
    return {**body, "stream": streaming}


async def make_request(
    client: httpx.AsyncClient,
    config: TestConfig,
    body: dict[str, Any],
    streaming: bool = False,
) -> httpx.Response:
    """Send the request and return the response with its body still unread.

    The caller owns the response and must read or close it. No retries and no
    timeouts are applied here.
    """
    request = client.build_request(
        "POST",
        config.responses_url,
        headers=build_headers(config),
        content=orjson.dumps(build_request_body(body, streaming)),
    )
    logger.debug(f"POST {request.url} (stream={streaming})")
    return await client.send(request, stream=True)
