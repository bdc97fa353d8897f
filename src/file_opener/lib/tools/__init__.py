"""Tool package: catalog, command execution, and the open/reveal operations.

- ``catalog`` declares the tools and their input schemas.
- ``command`` spawns the ``open`` command and captures its outcome.
- ``opener`` validates paths and maps outcomes to ``ToolResponse`` values.
"""

from file_opener.lib.tools.catalog import (
    OPEN_FILE,
    REVEAL_IN_FINDER,
    ToolSpec,
    get_tool,
    list_tools,
    tool_names,
)
from file_opener.lib.tools.command import (
    CommandResult,
    CommandRunner,
    CommandSpawnError,
    build_open_command,
    build_reveal_command,
    run_command,
)
from file_opener.lib.tools.opener import (
    PathNotFoundError,
    open_path,
    reveal_path,
    validate_path,
)
from file_opener.lib.tools.types import ErrorKind, InvocationRequest, ToolResponse

__all__ = [
    "OPEN_FILE",
    "REVEAL_IN_FINDER",
    "CommandResult",
    "CommandRunner",
    "CommandSpawnError",
    "ErrorKind",
    "InvocationRequest",
    "PathNotFoundError",
    "ToolResponse",
    "ToolSpec",
    "build_open_command",
    "build_reveal_command",
    "get_tool",
    "list_tools",
    "open_path",
    "reveal_path",
    "run_command",
    "tool_names",
    "validate_path",
]
