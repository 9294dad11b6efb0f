"""Tests for core/progress.py module.

Covers:
- status() function
- pluralize() function
- spinner() context manager
- suppress_console_logs() / is_console_suppressed()
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from modelmapper.core.progress import (
    _STYLES,
    get_console,
    is_console_suppressed,
    pluralize,
    spinner,
    status,
    suppress_console_logs,
)


class TestStyles:
    """Tests for _STYLES constant."""

    def test_has_expected_styles(self) -> None:
        """Contains expected style keys."""
        assert set(_STYLES.keys()) == {"success", "error", "info", "warning", "none"}

    def test_success_style(self) -> None:
        assert "✓" in _STYLES["success"]


class TestStatus:
    """Tests for status function."""

    def test_prints_message(self) -> None:
        with patch("modelmapper.core.progress._console") as mock_console:
            status("Test message")
            mock_console.print.assert_called_once()

    def test_error_style(self) -> None:
        with patch("modelmapper.core.progress._console") as mock_console:
            status("Failed", style="error")
            assert "✗" in mock_console.print.call_args[0][0]

    def test_with_indent(self) -> None:
        with patch("modelmapper.core.progress._console") as mock_console:
            status("Indented", indent=4)
            assert "    Indented" in mock_console.print.call_args[0][0]


class TestPluralize:
    """Tests for pluralize function."""

    @pytest.mark.parametrize(
        ("count", "expected"),
        [(0, "0 targets"), (1, "1 target"), (7, "7 targets")],
    )
    def test_default_plural(self, count: int, expected: str) -> None:
        assert pluralize(count, "target") == expected

    def test_custom_plural(self) -> None:
        assert pluralize(2, "entry", "entries") == "2 entries"


class TestSpinner:
    """Tests for spinner context manager."""

    def test_non_tty_prints_message(self) -> None:
        """Falls back to a single line when stderr is not a terminal."""
        with (
            patch("modelmapper.core.progress._is_tty", return_value=False),
            patch("modelmapper.core.progress._console") as mock_console,
        ):
            with spinner("Generating"):
                pass
            assert "Generating..." in mock_console.print.call_args[0][0]

    def test_tty_mode_suppresses_console_logs(self) -> None:
        """Console logging is muted only while the spinner runs."""
        seen: list[bool] = []
        with (
            patch("modelmapper.core.progress._is_tty", return_value=True),
            patch("modelmapper.core.progress._console"),
        ):
            with spinner("Generating"):
                seen.append(is_console_suppressed())
        assert seen == [True]
        assert is_console_suppressed() is False


class TestSuppressConsoleLogs:
    def test_restores_after_exception(self) -> None:
        with pytest.raises(RuntimeError), suppress_console_logs():
            raise RuntimeError("boom")
        assert is_console_suppressed() is False


def test_get_console_is_shared() -> None:
    assert get_console() is get_console()
