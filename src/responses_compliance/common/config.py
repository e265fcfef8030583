# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Runtime configuration for a compliance run."""

from typing import Annotated

from cyclopts import Parameter
from pydantic import BaseModel, ConfigDict, Field, field_validator

_ENV_PREFIX = "RESPONSES_COMPLIANCE_"


class TestConfig(BaseModel):
    """Connection and model settings shared by every scenario in a run.

    Attributes:
        base_url: API origin; requests go to `{base_url}/responses`
        api_key: Credential sent in the auth header
        auth_header_name: Header that carries the credential
        use_bearer_prefix: Send `Bearer <api_key>` instead of the raw key
        model: Model identifier injected into every request body
    """

    __test__ = False

    model_config = ConfigDict(frozen=True)

    base_url: Annotated[
        str,
        Field(
            min_length=1,
            description="Base URL of the API under test, e.g. https://api.example.com/v1.",
        ),
        Parameter(name=("--base-url", "-u"), env_var=f"{_ENV_PREFIX}BASE_URL"),
    ]

    api_key: Annotated[
        str,
        Field(description="API key used to authenticate every request."),
        Parameter(name=("--api-key", "-k"), env_var=f"{_ENV_PREFIX}API_KEY"),
    ]

    model: Annotated[
        str,
        Field(
            min_length=1,
            description="Model identifier sent in every request body.",
        ),
        Parameter(name=("--model", "-m"), env_var=f"{_ENV_PREFIX}MODEL"),
    ]

    auth_header_name: Annotated[
        str,
        Field(
            min_length=1,
            description="Name of the header that carries the API key.",
        ),
        Parameter(name=("--auth-header",)),
    ] = "Authorization"

    use_bearer_prefix: Annotated[
        bool,
        Field(description="Prefix the API key with 'Bearer ' in the auth header."),
        Parameter(name=("--bearer",), negative=("--no-bearer",)),
    ] = True

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Drop trailing slashes so the endpoint path joins cleanly."""
        return v.rstrip("/")

    @property
    def responses_url(self) -> str:
        return f"{self.base_url}/responses"
