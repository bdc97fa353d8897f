"""Request/response types shared by the dispatcher and the open tools."""

from __future__ import annotations

__all__ = ["ErrorKind", "InvocationRequest", "ToolResponse"]

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Structured classification of an error response."""

    UNKNOWN_TOOL = "unknown_tool"
    INVALID_ARGUMENTS = "invalid_arguments"
    PATH_NOT_FOUND = "path_not_found"
    SPAWN_FAILURE = "spawn_failure"
    COMMAND_FAILURE = "command_failure"
    TIMEOUT = "timeout"


@dataclass(frozen=True)
class InvocationRequest:
    """A tool name plus the arguments supplied by the client."""

    tool_name: str
    arguments: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ToolResponse:
    """Single textual result of a tool invocation.

    ``kind`` is set exactly when ``is_error`` is true so callers can branch
    on the failure class without matching message text.
    """

    text: str
    is_error: bool = False
    kind: ErrorKind | None = None

    def __post_init__(self) -> None:
        if self.is_error != (self.kind is not None):
            msg = "kind must be set if and only if is_error is true"
            raise ValueError(msg)

    @classmethod
    def ok(cls, text: str) -> ToolResponse:
        return cls(text=text)

    @classmethod
    def error(cls, kind: ErrorKind, text: str) -> ToolResponse:
        return cls(text=text, is_error=True, kind=kind)

    def to_payload(self) -> dict[str, Any]:
        """Render as an MCP ``CallToolResult``-shaped dict."""
        return {
            "content": [{"type": "text", "text": self.text}],
            "isError": self.is_error,
        }
