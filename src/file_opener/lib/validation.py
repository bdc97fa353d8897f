"""Tool argument validation helpers.

These functions extract and validate typed values from ``dict`` payloads
(deserialized JSON tool arguments) with clear error messages on type
violations.
"""

from __future__ import annotations

from typing import Any

__all__ = ["parse_optional_str", "parse_required_str"]


def parse_required_str(payload: dict[str, Any], *, key: str) -> str:
    """Extract a non-empty string from *payload* at *key*.

    Args:
        payload: Source dictionary (usually a deserialized JSON object).
        key: Dictionary key to read.

    Returns:
        The string value, unmodified.

    Raises:
        ValueError: If the key is missing, the value is not a string, or the
            value is blank.
    """
    raw = payload.get(key)
    if raw is None:
        raise ValueError(f"{key} is required")
    if not isinstance(raw, str):
        raise ValueError(f"{key} must be a string")
    if not raw.strip():
        raise ValueError(f"{key} must be non-empty")
    return raw


def parse_optional_str(payload: dict[str, Any], *, key: str) -> str | None:
    """Extract an optional trimmed string from *payload*, returning ``None`` if blank.

    Args:
        payload: Source dictionary.
        key: Dictionary key to read.

    Returns:
        The trimmed string value, or ``None`` if the key is missing, the value
        is ``None``, or the trimmed result is empty.

    Raises:
        ValueError: If the value is present but not a string.
    """
    raw = payload.get(key)
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise ValueError(f"{key} must be a string")
    value = raw.strip()
    return value or None
