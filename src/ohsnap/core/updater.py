"""Rewrite snapshot literal blocks in their source files."""

import logging
from pathlib import Path

from ohsnap import config
from ohsnap.core.locator import locate, split_lines
from ohsnap.errors import SnapshotIOError
from ohsnap.models import DEFAULT_SYNTAX, LiteralSyntax, SourceLocation, Updated


class LineShifts:
    """Line count changes made by snapshot rewrites, per source file.

    Call sites keep the line numbers their code was compiled with. Once a
    literal block above them grows or shrinks, those numbers are stale and
    must be shifted by the recorded changes before locating a block.
    """

    def __init__(self) -> None:
        self._shifts: dict[Path, list[tuple[int, int]]] = {}

    def current_line(self, path: Path, line: int) -> int:
        """Translate a compiled 1-based call line into the file's current line."""
        shifts = self._shifts.get(Path(path).resolve(), [])
        return line + sum(delta for at, delta in shifts if at < line)

    def record(self, path: Path, line: int, delta: int) -> None:
        """Record a block after compiled ``line`` changing by ``delta`` lines."""
        if delta:
            self._shifts.setdefault(Path(path).resolve(), []).append((line, delta))


# Shared by every updater in the process
line_shifts = LineShifts()


class SnapshotUpdater:
    """Replaces the literal block after a snapshot call with new content.

    The file is read whole and written whole without locking. Two processes
    updating snapshots in the same file at once can overwrite each other's
    edits; run update passes serially.
    """

    def __init__(
        self,
        syntax: LiteralSyntax = DEFAULT_SYNTAX,
        max_bytes: int | None = None,
        shifts: LineShifts | None = None,
    ) -> None:
        self.syntax = syntax
        self.max_bytes = config.MAX_SOURCE_BYTES if max_bytes is None else max_bytes
        self.shifts = line_shifts if shifts is None else shifts
        self.logger = logging.getLogger(__name__)

    def read_source(self, path: Path) -> str:
        """Read a source file, refusing files above the size ceiling.

        Args:
            path: Source file holding the snapshot

        Returns:
            The file's text

        Raises:
            SnapshotIOError: If the file is missing, too large or unreadable
        """
        try:
            size = path.stat().st_size
            if size > self.max_bytes:
                raise SnapshotIOError(
                    f"{path} is {size} bytes, over the {self.max_bytes} byte limit",
                    path,
                )
            with open(path, encoding="utf-8", newline="") as f:
                return f.read()
        except OSError as e:
            raise SnapshotIOError(f"Could not read {path}: {e}", path) from e
        except UnicodeDecodeError as e:
            raise SnapshotIOError(f"{path} is not valid UTF-8: {e}", path) from e

    def current_line(self, location: SourceLocation) -> int:
        """The 1-based line of the snapshot call in the file as it is now."""
        return self.shifts.current_line(Path(location.file), location.line)

    def render_block(self, new_text: str, indent: str, newline: str = "\n") -> str:
        """Emit each line of ``new_text`` as an indented literal line."""
        marker = self.syntax.block_marker
        return "".join(
            f"{indent}{marker}{line}{newline}" for line in new_text.split("\n")
        )

    def rewrite(self, file_text: str, call_line: int, new_text: str) -> str:
        """Return ``file_text`` with the literal after ``call_line`` replaced.

        The new lines reuse the indentation and line ending of the block's
        first line.

        Args:
            file_text: Current source text
            call_line: 0-based line of the snapshot call
            new_text: Snapshot body to write

        Returns:
            The new source text
        """
        block = locate(file_text, call_line, self.syntax)
        first_line = split_lines(block.slice(file_text))[0]
        indent = first_line[: len(first_line) - len(first_line.lstrip(" "))]
        newline = "\r\n" if first_line.endswith("\r\n") else "\n"
        return (
            file_text[: block.start]
            + self.render_block(new_text, indent, newline)
            + file_text[block.end :]
        )

    def update(self, location: SourceLocation, new_text: str) -> Updated:
        """Rewrite the snapshot at ``location`` on disk.

        ``location.line`` is the line the call was compiled at; earlier
        rewrites in the same file are accounted for.

        Args:
            location: Snapshot call site
            new_text: Snapshot body to write

        Returns:
            Updated verdict carrying the new file text

        Raises:
            SnapshotIOError: If the file cannot be read or written
            SnapshotFormatError: If the literal block cannot be located
        """
        path = Path(location.file)
        file_text = self.read_source(path)
        call_line = self.current_line(location) - 1
        new_file_text = self.rewrite(file_text, call_line, new_text)

        try:
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(new_file_text)
        except OSError as e:
            raise SnapshotIOError(f"Could not write {path}: {e}", path) from e

        # Only the block changed, so the newline count gives its line delta
        delta = new_file_text.count("\n") - file_text.count("\n")
        self.shifts.record(path, location.line, delta)
        self.logger.info(f"Updated snapshot in {path}")
        return Updated(new_file_text)
