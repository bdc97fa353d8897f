"""Configuration loading: CLI flags → env vars → .env file."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

_COMMAND_PATTERN = re.compile(r"^[A-Za-z0-9._/+-]+$")

try:
    from dotenv import load_dotenv
except ImportError:  # pragma: no cover - optional dependency safety
    load_dotenv = None  # type: ignore[assignment]

ConfigValue = str | bool | float | None


def _validate_open_command(open_command: str) -> None:
    """Reject empty or shell-like command names."""
    if not open_command or not _COMMAND_PATTERN.match(open_command):
        msg = (
            f"Invalid open command {open_command!r}: must be a program name "
            "or path without spaces or shell syntax. Example: open"
        )
        raise ValueError(msg)


def _validate_timeout(timeout_s: float | None) -> None:
    if timeout_s is None:
        return
    if timeout_s <= 0:
        msg = f"Invalid timeout {timeout_s!r}: must be > 0 seconds"
        raise ValueError(msg)


def _parse_timeout(raw: str | None) -> float | None:
    """Parse ``FILE_OPENER_TIMEOUT_S``; blank means no timeout."""
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError as exc:
        msg = f"FILE_OPENER_TIMEOUT_S must be a number, got {raw!r}"
        raise ValueError(msg) from exc


def _load_env_files() -> None:
    """Load a dotenv file from the current directory (if available)."""
    if load_dotenv is None:
        return
    load_dotenv(Path.cwd() / ".env", override=False)


@dataclass(frozen=True)
class Config:
    """Immutable application configuration."""

    open_command: str = "open"
    timeout_s: float | None = None
    verbose: bool = False

    def __post_init__(self) -> None:
        """Validate config fields on creation.

        ``open_command`` must be a bare program name or path, and
        ``timeout_s`` must be ``None`` (wait indefinitely) or positive.
        """
        _validate_open_command(self.open_command)
        _validate_timeout(self.timeout_s)
        if self.open_command != "open":
            logger.warning("Using non-default open command: %s", self.open_command)

    @classmethod
    def from_env(cls, overrides: dict[str, ConfigValue] | None = None) -> Config:
        """Build config from environment variables, then apply overrides.

        Priority: overrides (CLI flags) > env vars > defaults.
        """
        _load_env_files()

        env_values: dict[str, ConfigValue] = {
            "open_command": os.environ.get("FILE_OPENER_OPEN_COMMAND"),
            "timeout_s": _parse_timeout(os.environ.get("FILE_OPENER_TIMEOUT_S")),
            "verbose": os.environ.get("FILE_OPENER_VERBOSE", "").lower()
            in ("1", "true", "yes"),
        }

        merged = {k: v for k, v in env_values.items() if v}
        if overrides:
            merged.update({k: v for k, v in overrides.items() if v is not None})

        raw_timeout = merged.get("timeout_s", cls.timeout_s)
        return cls(
            open_command=str(merged.get("open_command", cls.open_command)),
            timeout_s=float(raw_timeout) if raw_timeout is not None else None,
            verbose=bool(merged.get("verbose", cls.verbose)),
        )


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr; stdout may carry the MCP stdio stream."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
