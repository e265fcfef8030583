# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Structural schema for the Responses API `response` resource.

`validate_response_resource` is the schema gate: raw decoded JSON goes in,
either a typed ResponseResource or an ordered list of field issues comes out.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, ValidationError

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

ResponseStatus = Literal[
    "queued", "in_progress", "completed", "failed", "incomplete", "cancelled"
]
ItemStatus = Literal["in_progress", "completed", "incomplete"]


class ResponseSchemaModel(BaseModel):
    """Base for resource models. Unknown keys are kept, not rejected."""

    model_config = ConfigDict(extra="allow")


class OutputTextContent(ResponseSchemaModel):
    type: Literal["output_text"]
    text: str
    annotations: list[dict[str, Any]] = Field(default_factory=list)


class RefusalContent(ResponseSchemaModel):
    type: Literal["refusal"]
    refusal: str


OutputContent = Annotated[
    OutputTextContent | RefusalContent, Field(discriminator="type")
]


class MessageOutputItem(ResponseSchemaModel):
    type: Literal["message"]
    id: str
    role: Literal["assistant"]
    content: list[OutputContent]
    status: ItemStatus | None = None


class FunctionCallItem(ResponseSchemaModel):
    type: Literal["function_call"]
    call_id: str
    name: str
    arguments: str
    id: str | None = None
    status: ItemStatus | None = None


class ReasoningItem(ResponseSchemaModel):
    type: Literal["reasoning"]
    id: str
    summary: list[dict[str, Any]] = Field(default_factory=list)
    content: list[dict[str, Any]] | None = None
    encrypted_content: str | None = None


class UnknownOutputItem(ResponseSchemaModel):
    """Any other item type (web_search_call, mcp_call, ...). Only `type` is checked."""

    type: str


_KNOWN_ITEM_TYPES = frozenset({"message", "function_call", "reasoning"})


def _output_item_tag(value: Any) -> str | None:
    if isinstance(value, dict):
        item_type = value.get("type")
    else:
        item_type = getattr(value, "type", None)
    if not isinstance(item_type, str):
        return None
    return item_type if item_type in _KNOWN_ITEM_TYPES else "unknown"


OutputItem = Annotated[
    Annotated[MessageOutputItem, Tag("message")]
    | Annotated[FunctionCallItem, Tag("function_call")]
    | Annotated[ReasoningItem, Tag("reasoning")]
    | Annotated[UnknownOutputItem, Tag("unknown")],
    Discriminator(_output_item_tag),
]


class ResponseError(ResponseSchemaModel):
    code: str
    message: str


class IncompleteDetails(ResponseSchemaModel):
    reason: str


class Usage(ResponseSchemaModel):
    input_tokens: int = Field(ge=0)
    output_tokens: int = Field(ge=0)
    total_tokens: int = Field(ge=0)


class ResponseResource(ResponseSchemaModel):
    """A completed (or failed) model response as returned by `POST /responses`."""

    id: str
    object: Literal["response"]
    created_at: int
    status: ResponseStatus
    model: str
    output: list[OutputItem]
    completed_at: int | None = None
    error: ResponseError | None = None
    incomplete_details: IncompleteDetails | None = None
    instructions: str | list[dict[str, Any]] | None = None
    tools: list[dict[str, Any]] = Field(default_factory=list)
    usage: Usage | None = None


@dataclass(frozen=True, slots=True)
class SchemaIssue:
    """A single structural problem.

    Attributes:
        path: Keys and indices from the document root to the offending field
        message: Human-readable description of the problem
    """

    path: tuple[str | int, ...]
    message: str


@dataclass(frozen=True, slots=True)
class SchemaValidationResult:
    """Either the typed response or the issues that prevented typing it."""

    data: ResponseResource | None = None
    issues: tuple[SchemaIssue, ...] = ()

    @property
    def success(self) -> bool:
        return self.data is not None


def format_issue(issue: SchemaIssue) -> str:
    """Render an issue as `a.b.0: message`; root-level issues are the bare message."""
    if not issue.path:
        return issue.message
    return f"{'.'.join(str(part) for part in issue.path)}: {issue.message}"


def validate_response_resource(raw: Any) -> SchemaValidationResult:
    """Validate decoded JSON against the response resource schema."""
    try:
        return SchemaValidationResult(data=ResponseResource.model_validate(raw))
    except ValidationError as e:
        return SchemaValidationResult(
            issues=tuple(
                SchemaIssue(path=tuple(error["loc"]), message=error["msg"])
                for error in e.errors(include_url=False)
            )
        )
