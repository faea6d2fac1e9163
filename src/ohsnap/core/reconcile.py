"""Reconcile a diff against the ignore regions of the expected text.

Each ignore region is mapped from expected space into got space by walking
the edit script. When the got span satisfies the region's pattern, all diff
chunks covering the region collapse into one equal chunk; otherwise they
collapse into one insert so the area still reads as a difference.
"""

import logging
from dataclasses import dataclass

from ohsnap.core.context import ComparisonContext
from ohsnap.core.diffing import DiffKind, DiffOp, expected_side, has_changes
from ohsnap.core.regions import IgnoreRegion

logger = logging.getLogger(__name__)


def map_offset(ops: list[DiffOp], target: int, absorb_inserts: bool = False) -> int:
    """Translate an offset in expected text into the matching got offset.

    Args:
        ops: Edit script from expected to got
        target: Offset into the expected text
        absorb_inserts: Also step over inserts sitting exactly at ``target``

    Returns:
        The corresponding offset into the got text
    """
    expected_pos = 0
    got_pos = 0
    for op in ops:
        size = len(op.text)
        if op.kind is DiffKind.INSERT:
            if expected_pos < target or (expected_pos == target and absorb_inserts):
                got_pos += size
                continue
            break

        if expected_pos >= target:
            break
        step = min(size, target - expected_pos)
        expected_pos += step
        if op.kind is DiffKind.EQUAL:
            got_pos += step
        if step < size:
            break

    return got_pos


def map_region(ops: list[DiffOp], region: IgnoreRegion) -> tuple[int, int]:
    """Map a region's expected range to ``(got_start, got_end)``."""
    got_start = map_offset(ops, region.expected_range.start)
    got_end = map_offset(ops, region.expected_range.end, absorb_inserts=True)
    return got_start, got_end


@dataclass
class _RegionPlan:
    region: IgnoreRegion
    got_start: int
    got_end: int
    got_span: str
    matched: bool
    placeholder: DiffOp | None = None

    def bounds(self, kind: DiffKind) -> tuple[int, int]:
        if kind is DiffKind.INSERT:
            return self.got_start, self.got_end
        return self.region.expected_range.start, self.region.expected_range.end


def _plan_regions(
    ops: list[DiffOp],
    regions: list[IgnoreRegion],
    got_text: str,
    context: ComparisonContext,
) -> list[_RegionPlan]:
    plans = []
    previous_end = 0
    for region in regions:
        got_start, got_end = map_region(ops, region)
        # Got ranges of successive regions never overlap
        got_start = max(got_start, previous_end)
        got_end = max(got_end, got_start)
        got_span = got_text[got_start:got_end]

        if got_span == region.marker_text:
            logger.debug(f"Output contains marker {region.marker_text!r} verbatim")
            continue

        pattern = context.compile(region.pattern_source)
        if pattern is None:
            continue

        if not got_span or "\n" in got_span:
            logger.warning(
                f"Ignore region {region.marker_text!r} maps to "
                f"{'an empty span' if not got_span else 'a multi-line span'} "
                "in the output"
            )
            matched = False
        else:
            matched = pattern.fullmatch(got_span) is not None

        plans.append(_RegionPlan(region, got_start, got_end, got_span, matched))
        previous_end = got_end

    return plans


def _apply_plans(ops: list[DiffOp], plans: list[_RegionPlan]) -> list[DiffOp]:
    result: list[DiffOp] = []
    expected_pos = 0
    got_pos = 0
    for op in ops:
        size = len(op.text)
        pos = got_pos if op.kind is DiffKind.INSERT else expected_pos
        cursor = 0
        for plan in plans:
            low, high = plan.bounds(op.kind)
            cut_low = min(max(low - pos, cursor), size)
            cut_high = min(max(high - pos, cut_low), size)
            if cut_high == cut_low:
                continue
            if cut_low > cursor:
                result.append(DiffOp(op.kind, op.text[cursor:cut_low]))
            if plan.placeholder is None:
                plan.placeholder = DiffOp(DiffKind.INSERT, "")
                result.append(plan.placeholder)
            cursor = cut_high
        if cursor < size:
            result.append(DiffOp(op.kind, op.text[cursor:]))

        if op.advances_expected:
            expected_pos += size
        if op.advances_got:
            got_pos += size

    for plan in plans:
        if plan.placeholder is None:
            continue
        plan.placeholder.text = plan.got_span
        if plan.matched:
            plan.placeholder.kind = DiffKind.EQUAL
            plan.placeholder.reconciled = True
        else:
            plan.placeholder.kind = DiffKind.INSERT

    return result


def reconcile(
    diff_ops: list[DiffOp],
    regions: list[IgnoreRegion],
    expected_text: str,
    got_text: str,
    context: ComparisonContext,
) -> tuple[list[DiffOp], bool]:
    """Neutralize differences that fall inside satisfied ignore regions.

    Args:
        diff_ops: Edit script from ``expected_text`` to ``got_text``
        regions: Ignore regions scanned from ``expected_text``
        expected_text: Snapshot text, markers included
        got_text: Rendered value
        context: Comparison context used to compile patterns

    Returns:
        Tuple of (new_diff_ops, still_differs)
    """
    if expected_side(diff_ops) != expected_text:
        raise ValueError("Edit script does not start from the expected text")
    if not regions:
        return diff_ops, has_changes(diff_ops)

    plans = _plan_regions(diff_ops, regions, got_text, context)
    new_ops = _apply_plans(diff_ops, plans)
    return new_ops, has_changes(new_ops)
