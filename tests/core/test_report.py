"""Tests for diff and mismatch report rendering."""

import io
from pathlib import Path

import pytest
from colorama import Fore

from ohsnap import config
from ohsnap.core.diffing import DiffKind, DiffOp
from ohsnap.core.report import format_diff, mismatch_report, use_color
from ohsnap.models import SourceLocation

SCRIPT = [
    DiffOp(DiffKind.EQUAL, "total: "),
    DiffOp(DiffKind.DELETE, "10"),
    DiffOp(DiffKind.INSERT, "12"),
    DiffOp(DiffKind.EQUAL, " items"),
]


class TestFormatDiff:
    """Test cases for format_diff()."""

    @pytest.mark.unit
    def test_plain_brackets(self) -> None:
        """Test the uncolored rendering."""
        assert format_diff(SCRIPT, color=False) == "total: [-10-]{+12+} items"

    @pytest.mark.unit
    def test_colored_output(self) -> None:
        """Test that deletions are red and insertions green."""
        rendered = format_diff(SCRIPT, color=True)

        assert f"{Fore.RED}" in rendered
        assert f"{Fore.GREEN}" in rendered
        assert "[-" not in rendered

    @pytest.mark.unit
    def test_reconciled_spans_highlighted_only_in_color(self) -> None:
        """Test that reconciled equal chunks are marked when colored."""
        ops = [DiffOp(DiffKind.EQUAL, "id="), DiffOp(DiffKind.EQUAL, "42", True)]

        assert format_diff(ops, color=False) == "id=42"
        assert f"{Fore.CYAN}42" in format_diff(ops, color=True)


class TestMismatchReport:
    """Test cases for mismatch_report()."""

    @pytest.mark.unit
    def test_report_layout(self) -> None:
        """Test header, diff, notes and hint lines."""
        location = SourceLocation(file=Path("tests/test_totals.py"), line=12)

        report = mismatch_report(location, SCRIPT, False, ["something odd"])

        assert report.splitlines() == [
            "Snapshot mismatch at tests/test_totals.py:12:",
            "total: [-10-]{+12+} items",
            "note: something odd",
            "hint: start the snapshot with <!update> to accept the new value",
        ]


class TestUseColor:
    """Test cases for color detection."""

    @pytest.mark.unit
    def test_forced_modes(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the always and never settings."""
        monkeypatch.setattr(config, "COLOR_MODE", "always")
        assert use_color(io.StringIO())

        monkeypatch.setattr(config, "COLOR_MODE", "never")
        assert not use_color(io.StringIO())

    @pytest.mark.unit
    def test_auto_follows_terminal(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that auto mode disables colors for non-terminals."""
        monkeypatch.setattr(config, "COLOR_MODE", "auto")

        assert not use_color(io.StringIO())
