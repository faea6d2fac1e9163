"""Snapshot location, reconciliation, comparison and update."""

from ohsnap.core.comparator import Comparator, patch_text
from ohsnap.core.context import ComparisonContext
from ohsnap.core.diffing import DiffEngine, DiffKind, DiffOp
from ohsnap.core.locator import locate, read_literal
from ohsnap.core.reconcile import map_offset, reconcile
from ohsnap.core.regions import IgnoreRegion, iter_ignore_regions, scan_ignore_regions
from ohsnap.core.render import FormatRenderer, Renderable, StructuralRenderer
from ohsnap.core.updater import SnapshotUpdater

__all__ = [
    # Comparison
    "Comparator",
    "ComparisonContext",
    "patch_text",
    # Diffing
    "DiffEngine",
    "DiffKind",
    "DiffOp",
    "map_offset",
    "reconcile",
    # Ignore regions
    "IgnoreRegion",
    "iter_ignore_regions",
    "scan_ignore_regions",
    # Source files
    "locate",
    "read_literal",
    "SnapshotUpdater",
    # Rendering
    "Renderable",
    "StructuralRenderer",
    "FormatRenderer",
]
