"""pytest integration: command line options and the ``oh`` fixture.

Usage:
    # Default behavior - compare against the snapshots in the source
    pytest

    # Rewrite every mismatching snapshot with the current value
    pytest --update-snapshots

    # Print differences without failing any snapshot assertion
    pytest --preview-snapshots
"""

from typing import Any

import colorama
import pytest

from ohsnap.snap import OhSnap


def pytest_addoption(parser: Any) -> None:
    """Add command line options for inline snapshots."""
    group = parser.getgroup("ohsnap", "inline snapshot testing")
    group.addoption(
        "--update-snapshots",
        action="store_true",
        default=False,
        help="Rewrite mismatching inline snapshots with the current value",
    )
    group.addoption(
        "--preview-snapshots",
        action="store_true",
        default=False,
        help="Print snapshot differences without failing tests",
    )


def pytest_configure(config: Any) -> None:
    """Enable ANSI colors on Windows consoles."""
    colorama.just_fix_windows_console()


def make_ohsnap(pytestconfig: Any) -> OhSnap:
    """Build a snapshot factory from the session's command line options."""
    update = pytestconfig.getoption("--update-snapshots", default=False)
    preview = pytestconfig.getoption("--preview-snapshots", default=False)
    return OhSnap(update=update, preview=preview)


@pytest.fixture
def oh(pytestconfig: Any) -> OhSnap:
    """Snapshot factory honoring the snapshot command line options."""
    return make_ohsnap(pytestconfig)
