"""Character-level diffs backed by diff-match-patch."""

from dataclasses import dataclass
from enum import Enum

from diff_match_patch import diff_match_patch

from ohsnap import config


class DiffKind(Enum):
    """Edit operation kinds; expected is the delete side, got the insert side."""

    EQUAL = diff_match_patch.DIFF_EQUAL
    INSERT = diff_match_patch.DIFF_INSERT
    DELETE = diff_match_patch.DIFF_DELETE


@dataclass
class DiffOp:
    """One chunk of an edit script."""

    kind: DiffKind
    text: str
    # Set on equal chunks produced by a satisfied ignore region
    reconciled: bool = False

    @property
    def advances_expected(self) -> bool:
        return self.kind is not DiffKind.INSERT

    @property
    def advances_got(self) -> bool:
        return self.kind is not DiffKind.DELETE


class DiffEngine:
    """Thin adapter over ``diff_match_patch`` producing ``DiffOp`` lists."""

    def __init__(self, timeout: float | None = None) -> None:
        self._dmp = diff_match_patch()
        self._dmp.Diff_Timeout = config.DIFF_TIMEOUT if timeout is None else timeout

    def diff(self, expected: str, got: str) -> list[DiffOp]:
        """Compute the edit script turning ``expected`` into ``got``."""
        diffs = self._dmp.diff_main(expected, got)
        return [DiffOp(DiffKind(op), text) for op, text in diffs]

    def cleanup_semantic(self, ops: list[DiffOp]) -> list[DiffOp]:
        """Merge trivial fragments into human-meaningful chunks.

        Reconciled chunks stay where they are; only the runs between them
        are cleaned up.
        """
        result: list[DiffOp] = []
        run: list[DiffOp] = []
        for op in ops:
            if op.reconciled:
                result.extend(self._cleanup_run(run))
                result.append(op)
                run = []
            else:
                run.append(op)
        result.extend(self._cleanup_run(run))
        return result

    def _cleanup_run(self, ops: list[DiffOp]) -> list[DiffOp]:
        diffs = [(op.kind.value, op.text) for op in ops]
        self._dmp.diff_cleanupSemantic(diffs)
        return [DiffOp(DiffKind(op), text) for op, text in diffs]


def all_equal(ops: list[DiffOp]) -> bool:
    return all(op.kind is DiffKind.EQUAL for op in ops)


def has_changes(ops: list[DiffOp]) -> bool:
    """True when any insert or delete remains in the edit script."""
    return any(op.kind is not DiffKind.EQUAL for op in ops)


def expected_side(ops: list[DiffOp]) -> str:
    return "".join(op.text for op in ops if op.advances_expected)


def got_side(ops: list[DiffOp]) -> str:
    return "".join(op.text for op in ops if op.advances_got)
