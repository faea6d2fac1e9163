"""Scan expected text for `<^pattern$>` ignore regions."""

import re
from collections.abc import Iterator
from dataclasses import dataclass

from ohsnap import config
from ohsnap.errors import IgnoreRegionPlacementError, TooManyIgnoreRegions
from ohsnap.models import ByteRange
from ohsnap.utils.constants import IGNORE_CLOSE, IGNORE_OPEN, IGNORE_REGION_PATTERN

_REGION_RE = re.compile(IGNORE_REGION_PATTERN)


@dataclass(frozen=True)
class IgnoreRegion:
    """A single ignore marker found in expected text."""

    expected_range: ByteRange
    pattern_source: str

    @property
    def marker_text(self) -> str:
        """The marker exactly as written, delimiters included."""
        return f"{IGNORE_OPEN}{self.pattern_source}{IGNORE_CLOSE}"


def iter_ignore_regions(text: str) -> Iterator[IgnoreRegion]:
    """Yield ignore regions from left to right.

    Matches never overlap since each search resumes after the previous span.
    Call again to restart from the beginning.
    """
    for match in _REGION_RE.finditer(text):
        inner = match.group(0)[len(IGNORE_OPEN) : -len(IGNORE_CLOSE)]
        yield IgnoreRegion(ByteRange(match.start(), match.end()), inner)


def scan_ignore_regions(text: str, limit: int | None = None) -> list[IgnoreRegion]:
    """Collect the ignore regions of an expected text.

    Args:
        text: Expected snapshot text
        limit: Maximum number of regions; defaults to the configured cap

    Returns:
        Regions in order of appearance

    Raises:
        TooManyIgnoreRegions: If more than ``limit`` regions are present
    """
    if limit is None:
        limit = config.MAX_IGNORE_REGIONS

    regions: list[IgnoreRegion] = []
    for region in iter_ignore_regions(text):
        if len(regions) == limit:
            raise TooManyIgnoreRegions(limit)
        regions.append(region)
    return regions


def check_region_placement(text: str, regions: list[IgnoreRegion]) -> None:
    """Reject ignore regions that form the prefix or suffix of the text."""
    if not regions:
        return
    if regions[0].expected_range.start == 0:
        raise IgnoreRegionPlacementError(
            f"Snapshot must not begin with an ignore region: {regions[0].marker_text}"
        )
    if regions[-1].expected_range.end == len(text):
        raise IgnoreRegionPlacementError(
            f"Snapshot must not end with an ignore region: {regions[-1].marker_text}"
        )
