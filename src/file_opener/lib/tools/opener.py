"""The ``open_file`` and ``reveal_in_finder`` operations.

Each operation checks that the target exists, runs one ``open`` command
through a ``CommandRunner``, and maps the outcome to a ``ToolResponse``.
Errors from the lower layers are translated here and never re-raised.
"""

from __future__ import annotations

__all__ = [
    "PathNotFoundError",
    "open_path",
    "reveal_path",
    "validate_path",
]

import logging
from pathlib import Path

from file_opener.lib.tools.command import (
    DEFAULT_OPEN_COMMAND,
    CommandResult,
    CommandRunner,
    CommandSpawnError,
    build_open_command,
    build_reveal_command,
    run_command,
)
from file_opener.lib.tools.types import ErrorKind, ToolResponse

logger = logging.getLogger(__name__)


class PathNotFoundError(FileNotFoundError):
    """Raised when the target path does not exist."""


def validate_path(path: str) -> Path:
    """Return the user-expanded *path*, or raise ``PathNotFoundError``.

    This is a point-in-time check; the path may still disappear before the
    command runs.
    """
    target = Path(path).expanduser()
    if not target.exists():
        msg = f"File or directory does not exist: {path}"
        raise PathNotFoundError(msg)
    return target


async def _execute(
    command: list[str],
    *,
    path: str,
    success_text: str,
    runner: CommandRunner,
    timeout_s: float | None,
) -> ToolResponse:
    try:
        result: CommandResult = await runner(command, timeout_s=timeout_s)
    except CommandSpawnError as exc:
        logger.warning("Could not start %r: %s", command[0], exc)
        return ToolResponse.error(
            ErrorKind.SPAWN_FAILURE, f"Failed to execute command: {exc}"
        )

    if result.timed_out:
        return ToolResponse.error(
            ErrorKind.TIMEOUT, f"Command timed out after {timeout_s}s: {path}"
        )
    if result.exit_code != 0:
        logger.info("%s exited with code %d for %s", command[0], result.exit_code, path)
        return ToolResponse.error(
            ErrorKind.COMMAND_FAILURE,
            f"Command failed with code {result.exit_code}: {result.error_output}",
        )
    return ToolResponse.ok(success_text)


async def open_path(
    path: str,
    application: str | None = None,
    *,
    runner: CommandRunner = run_command,
    open_command: str = DEFAULT_OPEN_COMMAND,
    timeout_s: float | None = None,
) -> ToolResponse:
    """Open *path* with its default handler, or with *application* if given."""
    try:
        target = validate_path(path)
    except PathNotFoundError as exc:
        return ToolResponse.error(ErrorKind.PATH_NOT_FOUND, str(exc))

    command = build_open_command(
        str(target), application, open_command=open_command
    )
    success_text = f"Successfully opened: {path}"
    if application:
        success_text += f" with {application}"
    return await _execute(
        command,
        path=path,
        success_text=success_text,
        runner=runner,
        timeout_s=timeout_s,
    )


async def reveal_path(
    path: str,
    *,
    runner: CommandRunner = run_command,
    open_command: str = DEFAULT_OPEN_COMMAND,
    timeout_s: float | None = None,
) -> ToolResponse:
    """Select *path* in the Finder without opening it."""
    try:
        target = validate_path(path)
    except PathNotFoundError as exc:
        return ToolResponse.error(ErrorKind.PATH_NOT_FOUND, str(exc))

    command = build_reveal_command(str(target), open_command=open_command)
    return await _execute(
        command,
        path=path,
        success_text=f"Successfully revealed in Finder: {path}",
        runner=runner,
        timeout_s=timeout_s,
    )
