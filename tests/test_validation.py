"""Tests for file_opener.lib.validation."""

from __future__ import annotations

import pytest

from file_opener.lib.validation import parse_optional_str, parse_required_str


class TestParseRequiredStr:
    """Tests for parse_required_str."""

    def test_returns_value_unmodified(self) -> None:
        assert parse_required_str({"path": "/tmp/a b"}, key="path") == "/tmp/a b"

    def test_keeps_surrounding_whitespace(self) -> None:
        assert parse_required_str({"path": " /tmp/x "}, key="path") == " /tmp/x "

    def test_raises_on_missing_key(self) -> None:
        with pytest.raises(ValueError, match="path is required"):
            parse_required_str({}, key="path")

    def test_raises_on_none_value(self) -> None:
        with pytest.raises(ValueError, match="path is required"):
            parse_required_str({"path": None}, key="path")

    def test_raises_on_empty_string(self) -> None:
        with pytest.raises(ValueError, match="path must be non-empty"):
            parse_required_str({"path": ""}, key="path")

    def test_raises_on_whitespace_only(self) -> None:
        with pytest.raises(ValueError, match="path must be non-empty"):
            parse_required_str({"path": "  "}, key="path")

    def test_raises_on_non_string(self) -> None:
        with pytest.raises(ValueError, match="path must be a string"):
            parse_required_str({"path": ["/tmp"]}, key="path")


class TestParseOptionalStr:
    """Tests for parse_optional_str."""

    def test_returns_trimmed_string(self) -> None:
        assert parse_optional_str({"q": "  Preview  "}, key="q") == "Preview"

    def test_missing_key_returns_none(self) -> None:
        assert parse_optional_str({}, key="q") is None

    def test_none_value_returns_none(self) -> None:
        assert parse_optional_str({"q": None}, key="q") is None

    def test_whitespace_only_returns_none(self) -> None:
        assert parse_optional_str({"q": "   "}, key="q") is None

    def test_raises_on_non_string_int(self) -> None:
        with pytest.raises(ValueError, match="q must be a string"):
            parse_optional_str({"q": 42}, key="q")

    def test_raises_on_bool(self) -> None:
        with pytest.raises(ValueError, match="q must be a string"):
            parse_optional_str({"q": True}, key="q")

    def test_preserves_internal_whitespace(self) -> None:
        assert parse_optional_str({"q": "Visual Studio Code"}, key="q") == (
            "Visual Studio Code"
        )
