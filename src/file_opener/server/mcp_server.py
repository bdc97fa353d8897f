"""MCP server for file_opener.

Exposes the tool catalog over the Model Context Protocol so AI clients
(Claude Desktop, Cursor, etc.) can open files and reveal them in Finder.

Tools:
  - open_file: Open a path with its default or a named application.
  - reveal_in_finder: Select a path in a Finder window.

Run with:
  uv run file-opener-mcp          (stdio, for Claude Desktop / Cursor)
  uv run file-opener-mcp --http   (streamable-http, for networked clients)
"""

from __future__ import annotations

import logging
import sys
from typing import Annotated, Any

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field

from file_opener.lib.config import Config, configure_logging
from file_opener.lib.dispatch import dispatch
from file_opener.lib.tools.catalog import OPEN_FILE, REVEAL_IN_FINDER, get_tool
from file_opener.lib.tools.types import InvocationRequest, ToolResponse

logger = logging.getLogger(__name__)

mcp = FastMCP(
    "file-opener-server",
    instructions=(
        "file_opener MCP server. Use open_file to open a local path in its "
        "default application (or a named one), and reveal_in_finder to show "
        "it in Finder."
    ),
)


def _spec(name: str) -> Any:
    spec = get_tool(name)
    assert spec is not None
    return spec


def _param_description(tool: str, param: str) -> str:
    return str(_spec(tool).input_schema["properties"][param]["description"])


def _unwrap(response: ToolResponse) -> str:
    """Return the success text, or raise ``ToolError`` so the SDK sets isError."""
    if response.is_error:
        raise ToolError(response.text)
    return response.text


async def _invoke(tool_name: str, arguments: dict[str, Any]) -> str:
    response = await dispatch(
        InvocationRequest(tool_name=tool_name, arguments=arguments),
        config=Config.from_env(),
    )
    return _unwrap(response)


OpenPath = Annotated[
    str, Field(min_length=1, description=_param_description(OPEN_FILE, "path"))
]
ApplicationName = Annotated[
    str | None, Field(description=_param_description(OPEN_FILE, "application"))
]
RevealPath = Annotated[
    str,
    Field(min_length=1, description=_param_description(REVEAL_IN_FINDER, "path")),
]


@mcp.tool(name=OPEN_FILE, description=_spec(OPEN_FILE).description)
async def open_file(path: OpenPath, application: ApplicationName = None) -> str:
    """Open a file or directory, optionally with a specific application."""
    return await _invoke(OPEN_FILE, {"path": path, "application": application})


@mcp.tool(name=REVEAL_IN_FINDER, description=_spec(REVEAL_IN_FINDER).description)
async def reveal_in_finder(path: RevealPath) -> str:
    """Reveal a file or directory in Finder."""
    return await _invoke(REVEAL_IN_FINDER, {"path": path})


def main() -> None:
    """Entry point for the MCP server."""
    config = Config.from_env(overrides={"verbose": "--verbose" in sys.argv or None})
    configure_logging(config.verbose)
    transport = "streamable-http" if "--http" in sys.argv else "stdio"
    logger.info("File Opener MCP server running on %s", transport)
    mcp.run(transport=transport)


if __name__ == "__main__":
    main()
