"""Sample source files holding snapshot literals."""

from collections.abc import Callable
from pathlib import Path

import pytest

from ohsnap.utils.constants import BLOCK_MARKER


def block(*lines: str, indent: str = "    ") -> str:
    """Build a literal block, one marker-prefixed line per argument."""
    return "".join(f"{indent}{BLOCK_MARKER}{line}\n" for line in lines)


SAMPLE_SOURCE = (
    "check point\n"
    "    snap(point,\n"
    + block("Point(x=1, y=2)", "done")
    + "    )\n"
    "end\n"
)

SAMPLE_CALL_LINE = 1


@pytest.fixture
def sample_source() -> str:
    """Source text with one snapshot call on line 2 (index 1)."""
    return SAMPLE_SOURCE


@pytest.fixture
def source_file(tmp_path: Path) -> Callable[[str], Path]:
    """Factory writing source text to a temporary file."""

    def _write(text: str, name: str = "sample_test.src") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8", newline="")
        return path

    return _write
