"""Static catalog of the tools this server exposes.

The catalog is an immutable module-level tuple built at import time. Order
is part of the contract: ``open_file`` is always listed before
``reveal_in_finder``.
"""

from __future__ import annotations

__all__ = [
    "OPEN_FILE",
    "REVEAL_IN_FINDER",
    "ToolSpec",
    "get_tool",
    "list_tools",
    "tool_names",
]

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

OPEN_FILE = "open_file"
REVEAL_IN_FINDER = "reveal_in_finder"


@dataclass(frozen=True)
class ToolSpec:
    """Name, description, and JSON input schema of one tool."""

    name: str
    description: str
    input_schema: MappingProxyType[str, Any]

    @property
    def required(self) -> tuple[str, ...]:
        return tuple(self.input_schema.get("required", ()))

    def to_dict(self) -> dict[str, Any]:
        """Return a plain, JSON-serializable copy of this spec."""
        properties = {
            key: dict(value)
            for key, value in self.input_schema.get("properties", {}).items()
        }
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": {
                "type": self.input_schema.get("type", "object"),
                "properties": properties,
                "required": list(self.required),
            },
        }


def _schema(properties: dict[str, dict[str, Any]], required: list[str]) -> Any:
    frozen_props = {key: MappingProxyType(value) for key, value in properties.items()}
    return MappingProxyType(
        {
            "type": "object",
            "properties": MappingProxyType(frozen_props),
            "required": tuple(required),
        }
    )


_TOOLS: tuple[ToolSpec, ...] = (
    ToolSpec(
        name=OPEN_FILE,
        description=(
            "Open a file or directory using the system default application "
            "(macOS open command)"
        ),
        input_schema=_schema(
            {
                "path": {
                    "type": "string",
                    "minLength": 1,
                    "description": "Full path to the file or directory to open",
                },
                "application": {
                    "type": "string",
                    "description": (
                        "Optional: specific application to open the file with "
                        '(e.g., "Preview", "TextEdit")'
                    ),
                },
            },
            ["path"],
        ),
    ),
    ToolSpec(
        name=REVEAL_IN_FINDER,
        description="Reveal a file or directory in Finder",
        input_schema=_schema(
            {
                "path": {
                    "type": "string",
                    "minLength": 1,
                    "description": (
                        "Full path to the file or directory to reveal in Finder"
                    ),
                },
            },
            ["path"],
        ),
    ),
)

_TOOLS_BY_NAME: MappingProxyType[str, ToolSpec] = MappingProxyType(
    {spec.name: spec for spec in _TOOLS}
)


def list_tools() -> tuple[ToolSpec, ...]:
    """Return every available tool, in catalog order."""
    return _TOOLS


def tool_names() -> tuple[str, ...]:
    return tuple(spec.name for spec in _TOOLS)


def get_tool(name: str) -> ToolSpec | None:
    """Return the spec registered under *name*, or ``None``."""
    return _TOOLS_BY_NAME.get(name)
