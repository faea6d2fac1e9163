"""Compare rendered values against snapshots and route updates."""

import logging
from typing import Any

from ohsnap.core.context import ComparisonContext
from ohsnap.core.diffing import DiffEngine, all_equal
from ohsnap.core.reconcile import map_region, reconcile
from ohsnap.core.regions import (
    IgnoreRegion,
    check_region_placement,
    scan_ignore_regions,
)
from ohsnap.core.render import Renderable, StructuralRenderer, render_value
from ohsnap.core.report import mismatch_report, use_color
from ohsnap.core.updater import SnapshotUpdater
from ohsnap.models import Match, Mismatch, Snapshot, Updated, Verdict
from ohsnap.utils.constants import UPDATE_MARKER


def is_update_requested(expected_text: str) -> bool:
    """The update marker only counts at the very start of the snapshot."""
    return expected_text.startswith(UPDATE_MARKER)


def strip_update_marker(expected_text: str) -> str:
    """Remove the update marker and a line break directly after it."""
    if not is_update_requested(expected_text):
        return expected_text
    body = expected_text[len(UPDATE_MARKER) :]
    if body.startswith("\r\n"):
        return body[2:]
    if body.startswith("\n"):
        return body[1:]
    return body


def patch_text(
    body: str,
    got_text: str,
    regions: list[IgnoreRegion],
    context: ComparisonContext,
) -> str:
    """Build an updated snapshot body that keeps the ignore markers live.

    The got text is copied verbatim except that the span mapped to each
    region is replaced by the region's original marker.

    Args:
        body: Expected text without the update marker
        got_text: Rendered value
        regions: Ignore regions of ``body``
        context: Active comparison context

    Returns:
        The snapshot body to write
    """
    ops = context.diff_engine.diff(body, got_text)
    parts = []
    cursor = 0
    for region in regions:
        got_start, got_end = map_region(ops, region)
        got_start = max(got_start, cursor)
        got_end = max(got_end, got_start)
        parts.append(got_text[cursor:got_start])
        parts.append(region.marker_text)
        cursor = got_end
    parts.append(got_text[cursor:])
    return "".join(parts)


class Comparator:
    """Runs one snapshot comparison from rendering to verdict.

    Rendered -> UpdateRequested -> Updated when the snapshot starts with the
    update marker, Rendered -> Comparing -> Match | Mismatch otherwise.
    """

    def __init__(
        self,
        renderer: Renderable | None = None,
        color: bool | None = None,
        diff_timeout: float | None = None,
        max_bytes: int | None = None,
    ) -> None:
        self.renderer = renderer or StructuralRenderer()
        self.color = use_color() if color is None else color
        self.diff_timeout = diff_timeout
        self.max_bytes = max_bytes
        self.logger = logging.getLogger(__name__)

    def render(
        self, snapshot: Snapshot, value: Any, renderer: Renderable | None = None
    ) -> str:
        return render_value(value, renderer or self.renderer, snapshot.render_options)

    def compare(
        self,
        snapshot: Snapshot,
        value: Any,
        renderer: Renderable | None = None,
        update: bool = False,
    ) -> Verdict:
        """Render ``value`` and compare it with ``snapshot``.

        Args:
            snapshot: Expected text and its location
            value: The value under test
            renderer: Renderer overriding the comparator default
            update: Rewrite the snapshot when it does not match

        Returns:
            Match, Mismatch or Updated

        Raises:
            RenderError: If the value cannot be rendered
            TooManyIgnoreRegions: If the snapshot has too many ignore markers
            IgnoreRegionPlacementError: If a marker starts or ends the snapshot
        """
        got_text = self.render(snapshot, value, renderer)
        return self.compare_text(snapshot, got_text, update=update)

    def compare_text(
        self, snapshot: Snapshot, got_text: str, update: bool = False
    ) -> Verdict:
        """Compare already-rendered text with ``snapshot``."""
        expected = snapshot.expected_text
        with ComparisonContext(DiffEngine(self.diff_timeout)) as context:
            if is_update_requested(expected):
                self.logger.debug(f"Update requested at {snapshot.location}")
                body = strip_update_marker(expected)
                return self._update(snapshot, body, got_text, context)

            verdict = self._compare(snapshot, expected, got_text, context)
            if update and isinstance(verdict, Mismatch):
                return self._update(snapshot, expected, got_text, context)
            return verdict

    def preview(
        self, snapshot: Snapshot, value: Any, renderer: Renderable | None = None
    ) -> str | None:
        """Return the mismatch report for ``value`` without updating anything."""
        got_text = self.render(snapshot, value, renderer)
        body = strip_update_marker(snapshot.expected_text)
        with ComparisonContext(DiffEngine(self.diff_timeout)) as context:
            verdict = self._compare(snapshot, body, got_text, context)
        if isinstance(verdict, Mismatch):
            return verdict.diff_report
        return None

    def _compare(
        self,
        snapshot: Snapshot,
        expected: str,
        got_text: str,
        context: ComparisonContext,
    ) -> Match | Mismatch:
        regions = scan_ignore_regions(expected)
        check_region_placement(expected, regions)

        ops = context.diff_engine.diff(expected, got_text)
        if all_equal(ops):
            return Match()

        # Regions are mapped on the raw script; cleanup can merge the short
        # literal text between adjacent regions into their edits
        if regions:
            ops, still_differs = reconcile(ops, regions, expected, got_text, context)
            if not still_differs:
                return Match()
        ops = context.diff_engine.cleanup_semantic(ops)

        notes = [str(error) for error in context.pattern_errors]
        return Mismatch(mismatch_report(snapshot.location, ops, self.color, notes))

    def _update(
        self,
        snapshot: Snapshot,
        body: str,
        got_text: str,
        context: ComparisonContext,
    ) -> Updated:
        regions = scan_ignore_regions(body)
        if regions:
            self.logger.debug(f"Patching {len(regions)} ignore regions into the update")
            new_text = patch_text(body, got_text, regions, context)
        else:
            new_text = got_text

        updater = SnapshotUpdater(snapshot.syntax, self.max_bytes)
        return updater.update(snapshot.location, new_text)
