"""Global pytest configuration and fixtures."""

from collections.abc import Generator

import pytest

from ohsnap.core.comparator import Comparator
from ohsnap.core.context import ComparisonContext

# Import shared fixtures
from tests.fixtures.sample_sources import sample_source, source_file


@pytest.fixture
def comparator() -> Comparator:
    """Comparator with colors disabled so reports are plain text."""
    return Comparator(color=False)


@pytest.fixture
def context() -> Generator[ComparisonContext, None, None]:
    """An entered comparison context."""
    with ComparisonContext() as ctx:
        yield ctx
