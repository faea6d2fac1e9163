"""Human-readable rendering of snapshot diffs."""

import sys

from colorama import Fore, Style

from ohsnap import config
from ohsnap.core.diffing import DiffKind, DiffOp
from ohsnap.models import SourceLocation
from ohsnap.utils.constants import UPDATE_MARKER

# Plain-text brackets used when color is off
PLAIN_DELETE = ("[-", "-]")
PLAIN_INSERT = ("{+", "+}")


def use_color(stream: object = None) -> bool:
    """Decide whether diff output should carry ANSI colors."""
    if config.COLOR_MODE == "always":
        return True
    if config.COLOR_MODE == "never":
        return False
    stream = stream if stream is not None else sys.stderr
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def format_diff(ops: list[DiffOp], color: bool) -> str:
    """Render an edit script, marking removed and added spans.

    Args:
        ops: Edit script from expected to got
        color: Use ANSI colors instead of plain-text brackets

    Returns:
        The rendered diff
    """
    parts = []
    for op in ops:
        if op.kind is DiffKind.EQUAL:
            if color and op.reconciled:
                parts.append(f"{Fore.CYAN}{op.text}{Style.RESET_ALL}")
            else:
                parts.append(op.text)
        elif op.kind is DiffKind.DELETE:
            if color:
                parts.append(f"{Fore.RED}{Style.BRIGHT}{op.text}{Style.RESET_ALL}")
            else:
                parts.append(f"{PLAIN_DELETE[0]}{op.text}{PLAIN_DELETE[1]}")
        else:
            if color:
                parts.append(f"{Fore.GREEN}{Style.BRIGHT}{op.text}{Style.RESET_ALL}")
            else:
                parts.append(f"{PLAIN_INSERT[0]}{op.text}{PLAIN_INSERT[1]}")
    return "".join(parts)


def mismatch_report(
    location: SourceLocation,
    ops: list[DiffOp],
    color: bool,
    notes: list[str] | None = None,
) -> str:
    """Build the full report for a failed snapshot."""
    lines = [f"Snapshot mismatch at {location}:", format_diff(ops, color)]
    for note in notes or []:
        lines.append(f"note: {note}")
    lines.append(
        f"hint: start the snapshot with {UPDATE_MARKER} to accept the new value"
    )
    return "\n".join(lines)
