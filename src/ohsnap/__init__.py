"""Inline snapshot testing.

Compares the rendered form of a value with a literal block stored next to the
test call, and rewrites that block in place when asked to accept a new value.
"""

from ohsnap.core import Comparator, FormatRenderer, StructuralRenderer
from ohsnap.errors import (
    IgnoreRegionPlacementError,
    PatternError,
    RenderError,
    SnapshotError,
    SnapshotFormatError,
    SnapshotIOError,
    SnapshotMismatch,
    SnapshotUpdated,
    TooManyIgnoreRegions,
)
from ohsnap.models import (
    COMMENT_SYNTAX,
    DEFAULT_SYNTAX,
    LiteralSyntax,
    Match,
    Mismatch,
    RenderOptions,
    Snapshot,
    SourceLocation,
    Updated,
    Verdict,
)
from ohsnap.snap import OhSnap, Snap

__version__ = "0.1.0"
__all__ = [
    "OhSnap",
    "Snap",
    "Comparator",
    "StructuralRenderer",
    "FormatRenderer",
    # Models
    "Snapshot",
    "SourceLocation",
    "RenderOptions",
    "LiteralSyntax",
    "DEFAULT_SYNTAX",
    "COMMENT_SYNTAX",
    "Verdict",
    "Match",
    "Mismatch",
    "Updated",
    # Errors
    "SnapshotError",
    "SnapshotFormatError",
    "SnapshotIOError",
    "PatternError",
    "RenderError",
    "TooManyIgnoreRegions",
    "IgnoreRegionPlacementError",
    "SnapshotMismatch",
    "SnapshotUpdated",
]
