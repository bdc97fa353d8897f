"""Route invocation requests to the matching tool operation.

``dispatch`` is the error boundary for the tool layer: whatever happens
below it, the caller receives exactly one ``ToolResponse`` and no exception.
"""

from __future__ import annotations

__all__ = ["dispatch"]

import logging
from typing import Any

from file_opener.lib.config import Config
from file_opener.lib.tools import opener
from file_opener.lib.tools.catalog import OPEN_FILE, REVEAL_IN_FINDER, get_tool
from file_opener.lib.tools.command import CommandRunner, run_command
from file_opener.lib.tools.types import ErrorKind, InvocationRequest, ToolResponse
from file_opener.lib.validation import parse_optional_str, parse_required_str

logger = logging.getLogger(__name__)


async def _call(
    request: InvocationRequest,
    *,
    runner: CommandRunner,
    config: Config,
) -> ToolResponse:
    arguments: dict[str, Any] = dict(request.arguments or {})
    try:
        path = parse_required_str(arguments, key="path")
        application = (
            parse_optional_str(arguments, key="application")
            if request.tool_name == OPEN_FILE
            else None
        )
    except ValueError as exc:
        return ToolResponse.error(ErrorKind.INVALID_ARGUMENTS, str(exc))

    if request.tool_name == OPEN_FILE:
        return await opener.open_path(
            path,
            application,
            runner=runner,
            open_command=config.open_command,
            timeout_s=config.timeout_s,
        )
    if request.tool_name == REVEAL_IN_FINDER:
        return await opener.reveal_path(
            path,
            runner=runner,
            open_command=config.open_command,
            timeout_s=config.timeout_s,
        )
    # Cataloged but not routed.
    msg = f"Tool has no handler: {request.tool_name}"
    raise NotImplementedError(msg)


async def dispatch(
    request: InvocationRequest,
    *,
    runner: CommandRunner = run_command,
    config: Config | None = None,
) -> ToolResponse:
    """Run the tool named in *request* and return its response.

    Args:
        request: Tool name and client-supplied arguments.
        runner: Coroutine used to spawn the command; tests pass a fake.
        config: Command name and timeout settings. Defaults to ``Config()``.

    Returns:
        The operation's ``ToolResponse``. Unknown tools, invalid arguments,
        and unexpected failures are returned as error responses.
    """
    if get_tool(request.tool_name) is None:
        logger.info("Rejected call to unknown tool %r", request.tool_name)
        return ToolResponse.error(
            ErrorKind.UNKNOWN_TOOL, f"Unknown tool: {request.tool_name}"
        )

    try:
        response = await _call(request, runner=runner, config=config or Config())
    except Exception as exc:
        logger.exception("Tool %s failed unexpectedly", request.tool_name)
        return ToolResponse.error(
            ErrorKind.SPAWN_FAILURE, f"Failed to execute command: {exc}"
        )

    logger.debug(
        "%s -> is_error=%s: %s", request.tool_name, response.is_error, response.text
    )
    return response
