"""Exception types raised by the snapshot engine."""

from pathlib import Path


class SnapshotError(Exception):
    """Base class for snapshot engine failures."""


class SnapshotFormatError(SnapshotError):
    """The source file no longer has the expected call-site/literal shape."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        if line is not None:
            message = f"{message} (line {line + 1})"
        super().__init__(message)


class SnapshotIOError(SnapshotError):
    """Reading or writing a snapshot's source file failed."""

    def __init__(self, message: str, path: Path | str | None = None):
        self.path = Path(path) if path is not None else None
        super().__init__(message)


class TooManyIgnoreRegions(SnapshotError):
    """More ignore markers were found than a single comparison may process."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(
            f"Snapshot contains more than {limit} ignore regions; "
            "the snapshot is malformed"
        )


class IgnoreRegionPlacementError(SnapshotError):
    """An ignore marker starts or ends the whole expected text."""


class RenderError(SnapshotError):
    """The value renderer failed, so no verdict is possible."""


class PatternError(SnapshotError):
    """An ignore region's pattern does not compile.

    Recorded on the comparison context rather than raised; the region is
    left as a difference.
    """

    def __init__(self, pattern_source: str, reason: str):
        self.pattern_source = pattern_source
        self.reason = reason
        super().__init__(f"Invalid ignore pattern {pattern_source!r}: {reason}")


class SnapshotMismatch(AssertionError):
    """A snapshot did not match the rendered value."""

    def __init__(self, report: str):
        self.report = report
        super().__init__(report)


class SnapshotUpdated(AssertionError):
    """A snapshot was rewritten; the test still fails so the update is visible."""

    def __init__(self, path: Path | str, line: int):
        self.path = Path(path)
        self.line = line
        super().__init__(
            f"Snapshot at {self.path}:{line} was updated; "
            "re-run the tests to check it"
        )
