"""Subprocess execution for the open/reveal tools.

``run_command`` spawns exactly one child process, waits for it without
blocking the event loop, and either returns a ``CommandResult`` or raises
``CommandSpawnError`` when the OS could not start the program. It never does
both.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_OPEN_COMMAND",
    "CommandResult",
    "CommandRunner",
    "CommandSpawnError",
    "build_open_command",
    "build_reveal_command",
    "run_command",
]

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_OPEN_COMMAND = "open"
TIMEOUT_EXIT_CODE = 124


class CommandSpawnError(RuntimeError):
    """Raised when the child process could not be started at all."""


@dataclass(frozen=True)
class CommandResult:
    """Captured result of a command execution."""

    command: list[str]
    exit_code: int
    stdout: str
    stderr: str
    timed_out: bool = False

    @property
    def success(self) -> bool:
        """Return whether the command completed successfully."""
        return self.exit_code == 0 and not self.timed_out

    @property
    def error_output(self) -> str:
        """Return stderr, falling back to stdout when stderr is empty."""
        return self.stderr or self.stdout


CommandRunner = Callable[..., Awaitable[CommandResult]]


def build_open_command(
    path: str,
    application: str | None = None,
    *,
    open_command: str = DEFAULT_OPEN_COMMAND,
) -> list[str]:
    """Build ``open [-a <application>] <path>``."""
    command = [open_command]
    if application:
        command.extend(["-a", application])
    command.append(path)
    return command


def build_reveal_command(
    path: str,
    *,
    open_command: str = DEFAULT_OPEN_COMMAND,
) -> list[str]:
    """Build ``open -R <path>``."""
    return [open_command, "-R", path]


def _decode(data: bytes | None) -> str:
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")


async def run_command(
    command: Sequence[str],
    *,
    timeout_s: float | None = None,
) -> CommandResult:
    """Execute *command* and capture its exit code and output streams.

    Args:
        command: Program followed by its arguments. No shell is involved.
        timeout_s: Seconds to wait before killing the child. ``None`` waits
            for as long as the child runs.

    Returns:
        The captured ``CommandResult``. A killed child is reported with
        ``timed_out=True`` and exit code 124.

    Raises:
        CommandSpawnError: If the program could not be started.
        ValueError: If *command* is empty or *timeout_s* is not positive.
    """
    argv = list(command)
    if not argv:
        raise ValueError("command must be non-empty")
    if timeout_s is not None and timeout_s <= 0:
        raise ValueError("timeout_s must be > 0")

    logger.debug("Spawning %s", argv)
    try:
        process = await asyncio.create_subprocess_exec(
            *argv,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as exc:
        raise CommandSpawnError(str(exc)) from exc

    try:
        stdout, stderr = await asyncio.wait_for(
            process.communicate(), timeout=timeout_s
        )
    except asyncio.TimeoutError:
        logger.warning("%s timed out after %ss; killing", argv[0], timeout_s)
        process.kill()
        await process.wait()
        return CommandResult(
            command=argv,
            exit_code=TIMEOUT_EXIT_CODE,
            stdout="",
            stderr=f"command timed out after {timeout_s}s",
            timed_out=True,
        )

    exit_code = process.returncode if process.returncode is not None else -1
    logger.debug("%s exited with code %d", argv[0], exit_code)
    return CommandResult(
        command=argv,
        exit_code=exit_code,
        stdout=_decode(stdout),
        stderr=_decode(stderr),
    )
