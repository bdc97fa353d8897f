"""Shared fixtures: a fake command runner that records spawn calls."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from file_opener.lib.tools.command import CommandResult, CommandSpawnError


class FakeRunner:
    """Stand-in for ``run_command`` that never starts a process."""

    def __init__(
        self,
        *,
        exit_code: int = 0,
        stdout: str = "",
        stderr: str = "",
        timed_out: bool = False,
        spawn_error: str | None = None,
    ) -> None:
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr
        self.timed_out = timed_out
        self.spawn_error = spawn_error
        self.calls: list[list[str]] = []
        self.timeouts: list[float | None] = []

    async def __call__(
        self, command: Sequence[str], *, timeout_s: float | None = None
    ) -> CommandResult:
        self.calls.append(list(command))
        self.timeouts.append(timeout_s)
        if self.spawn_error is not None:
            raise CommandSpawnError(self.spawn_error)
        return CommandResult(
            command=list(command),
            exit_code=self.exit_code,
            stdout=self.stdout,
            stderr=self.stderr,
            timed_out=self.timed_out,
        )


@pytest.fixture()
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture()
def existing_file(tmp_path: Path) -> Path:
    target = tmp_path / "report.pdf"
    target.write_text("%PDF-1.4")
    return target


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "FILE_OPENER_OPEN_COMMAND",
        "FILE_OPENER_TIMEOUT_S",
        "FILE_OPENER_VERBOSE",
    ):
        monkeypatch.delenv(name, raising=False)
