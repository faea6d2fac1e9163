"""Test-facing snapshot API.

Snapshots live in the comment block directly below the call:

    oh = OhSnap()

    def test_point() -> None:
        oh.snap().expect_equal(Point(x=1, y=2))
        #|Point(x=1, y=2)

Start the block with ``#|<!update>`` to accept a new value, and use
``<^pattern$>`` for spans that only need to match a regular expression.
"""

import inspect
import sys
from pathlib import Path
from typing import Any

from ohsnap import config
from ohsnap.core.comparator import Comparator
from ohsnap.core.locator import read_literal
from ohsnap.core.render import FormatRenderer, Renderable
from ohsnap.core.updater import SnapshotUpdater
from ohsnap.errors import SnapshotMismatch, SnapshotUpdated
from ohsnap.models import (
    LiteralSyntax,
    Mismatch,
    RenderOptions,
    Snapshot,
    SourceLocation,
    Updated,
    Verdict,
)


def caller_location(depth: int = 1) -> SourceLocation:
    """Return the file and line ``depth`` frames above the caller."""
    frame = inspect.currentframe()
    try:
        for _ in range(depth + 1):
            if frame is None or frame.f_back is None:
                raise RuntimeError("Call stack is too shallow for a snapshot location")
            frame = frame.f_back
        return SourceLocation(file=Path(frame.f_code.co_filename), line=frame.f_lineno)
    finally:
        del frame


class Snap:
    """A snapshot bound to its call site."""

    def __init__(
        self,
        snapshot: Snapshot,
        comparator: Comparator,
        update: bool = False,
        preview: bool = False,
    ) -> None:
        self.snapshot = snapshot
        self.comparator = comparator
        self.update = update
        self.preview = preview

    @property
    def location(self) -> SourceLocation:
        return self.snapshot.location

    def check(self, value: Any, renderer: Renderable | None = None) -> Verdict:
        """Compare ``value`` and return the verdict without raising."""
        return self.comparator.compare(
            self.snapshot, value, renderer=renderer, update=self.update
        )

    def expect_equal(self, value: Any, renderer: Renderable | None = None) -> None:
        """Assert that ``value`` renders to the snapshot text.

        Raises:
            SnapshotMismatch: If the rendered value differs
            SnapshotUpdated: If the snapshot was rewritten in its source file
        """
        if self.preview:
            self.show(value, renderer)
            return

        verdict = self.check(value, renderer)
        if isinstance(verdict, Mismatch):
            raise SnapshotMismatch(verdict.diff_report)
        if isinstance(verdict, Updated):
            raise SnapshotUpdated(self.location.file, self.location.line)

    def expect_equal_fmt(self, value: Any) -> None:
        """Like ``expect_equal`` but renders the value with its own ``format()``."""
        self.expect_equal(value, renderer=FormatRenderer())

    def diff(self, value: Any, renderer: Renderable | None = None) -> str | None:
        """Return the mismatch report for ``value``, or None when it matches."""
        return self.comparator.preview(self.snapshot, value, renderer)

    def show(self, value: Any, renderer: Renderable | None = None) -> None:
        """Print any difference to stderr; never fails and never updates."""
        report = self.diff(value, renderer)
        if report is not None:
            print(report, file=sys.stderr)


class OhSnap:
    """Factory for snapshots that share syntax, rendering and update settings."""

    def __init__(
        self,
        syntax: LiteralSyntax | None = None,
        render_options: RenderOptions | None = None,
        update: bool = False,
        preview: bool = False,
        color: bool | None = None,
        renderer: Renderable | None = None,
    ) -> None:
        self.syntax = syntax or LiteralSyntax(block_marker=config.BLOCK_MARKER)
        self.render_options = render_options or RenderOptions()
        self.update = update
        self.preview = preview
        self.comparator = Comparator(renderer=renderer, color=color)

    def snap(
        self,
        expected: str | None = None,
        location: SourceLocation | None = None,
        render_options: RenderOptions | None = None,
    ) -> Snap:
        """Create a snapshot for the calling line.

        Args:
            expected: Expected text; read from the literal block below the
                call when omitted
            location: Call site; defaults to the caller's file and line
            render_options: Options overriding this instance's defaults

        Returns:
            Snapshot bound to its call site
        """
        if location is None:
            location = caller_location()

        if expected is None:
            updater = SnapshotUpdater(self.syntax)
            file_text = updater.read_source(Path(location.file))
            call_line = updater.current_line(location) - 1
            expected = read_literal(file_text, call_line, self.syntax)

        snapshot = Snapshot(
            location=location,
            expected_text=expected,
            render_options=render_options or self.render_options,
            syntax=self.syntax,
        )
        return Snap(snapshot, self.comparator, update=self.update, preview=self.preview)
