"""Locate snapshot literal blocks inside source text."""

import logging

from ohsnap.errors import SnapshotFormatError
from ohsnap.models import DEFAULT_SYNTAX, ByteRange, LiteralSyntax

logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    """Split text on newlines only, keeping the line endings."""
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def is_block_line(line: str, marker: str) -> bool:
    """Check whether a line belongs to a snapshot literal block.

    The line must consist of spaces followed by the two-character block
    marker at the first non-space position.
    """
    return line.lstrip(" ").startswith(marker)


def locate(
    file_text: str, call_line: int, syntax: LiteralSyntax = DEFAULT_SYNTAX
) -> ByteRange:
    """Find the literal block following a snapshot call.

    Args:
        file_text: Full text of the source file
        call_line: 0-based index of the line holding the snapshot call
        syntax: Markers identifying the call and its literal block

    Returns:
        Range covering exactly the contiguous literal lines

    Raises:
        SnapshotFormatError: If no literal block follows the call line
    """
    lines = split_lines(file_text)
    if call_line < 0 or call_line >= len(lines):
        raise SnapshotFormatError("Snapshot call line is outside the file", call_line)

    if syntax.call_marker not in lines[call_line]:
        # The call may legitimately wrap across lines
        logger.warning(
            f"Line {call_line + 1} does not contain {syntax.call_marker!r}; "
            "assuming the snapshot call wraps"
        )

    offset = sum(len(line) for line in lines[: call_line + 1])
    index = call_line + 1
    if index >= len(lines) or not is_block_line(lines[index], syntax.block_marker):
        raise SnapshotFormatError(
            f"Expected a {syntax.block_marker!r} literal block after the snapshot call",
            index,
        )

    start = offset
    while index < len(lines) and is_block_line(lines[index], syntax.block_marker):
        offset += len(lines[index])
        index += 1

    return ByteRange(start, offset)


def literal_lines(block_text: str, marker: str) -> list[str]:
    """Strip indentation and block marker from each line of a literal block."""
    contents = []
    for line in split_lines(block_text):
        stripped = line.rstrip("\r\n").lstrip(" ")
        contents.append(stripped[len(marker) :])
    return contents


def read_literal(
    file_text: str, call_line: int, syntax: LiteralSyntax = DEFAULT_SYNTAX
) -> str:
    """Return the content of the literal block following a snapshot call."""
    block = locate(file_text, call_line, syntax).slice(file_text)
    return "\n".join(literal_lines(block, syntax.block_marker))
