"""Pydantic models and verdict types for snapshot comparisons."""

from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ohsnap.utils.constants import BLOCK_MARKER, CALL_MARKER, COMMENT_BLOCK_MARKER


class SourceLocation(BaseModel):
    """Where a snapshot call lives in a source file."""

    model_config = ConfigDict(frozen=True)

    file: Path
    line: int = Field(..., ge=1, description="1-based line of the snapshot call")

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"


class RenderOptions(BaseModel):
    """Options handed to the value renderer."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(80, ge=1, description="Preferred line width")
    indent: int = Field(1, ge=0, description="Indent per nesting level")
    depth: int | None = Field(None, ge=1, description="Maximum nesting depth")
    sort_dicts: bool = True
    compact: bool = False
    format_spec: str = Field("", description="Spec passed to format()")


class LiteralSyntax(BaseModel):
    """The markers that identify a snapshot call and its literal block."""

    model_config = ConfigDict(frozen=True)

    call_marker: str = Field(CALL_MARKER, min_length=1)
    block_marker: str = Field(BLOCK_MARKER, min_length=2, max_length=2)


DEFAULT_SYNTAX = LiteralSyntax()
COMMENT_SYNTAX = LiteralSyntax(block_marker=COMMENT_BLOCK_MARKER)


class Snapshot(BaseModel):
    """An expected literal tied to the source location it came from."""

    model_config = ConfigDict(frozen=True)

    location: SourceLocation
    expected_text: str
    render_options: RenderOptions = Field(default_factory=RenderOptions)
    syntax: LiteralSyntax = DEFAULT_SYNTAX


@dataclass(frozen=True)
class ByteRange:
    """Half-open range of offsets into one specific string."""

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def slice(self, text: str) -> str:
        return text[self.start : self.end]


@dataclass(frozen=True)
class Match:
    """The rendered value matches the snapshot."""


@dataclass(frozen=True)
class Mismatch:
    """The rendered value differs outside any reconciled region."""

    diff_report: str


@dataclass(frozen=True)
class Updated:
    """The snapshot literal was rewritten in its source file."""

    new_file_text: str


Verdict = Match | Mismatch | Updated
