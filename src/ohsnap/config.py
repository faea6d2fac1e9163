"""
Configuration for the ohsnap snapshot engine.

Values are read once from the environment at import time so that a test
session can tune limits and output without touching test code.
"""

import os

from ohsnap.utils import constants

MAX_SOURCE_BYTES = int(
    os.getenv("OHSNAP_MAX_SOURCE_BYTES", str(constants.MAX_SOURCE_BYTES))
)
MAX_IGNORE_REGIONS = int(
    os.getenv("OHSNAP_MAX_IGNORE_REGIONS", str(constants.MAX_IGNORE_REGIONS))
)
DIFF_TIMEOUT = float(os.getenv("OHSNAP_DIFF_TIMEOUT", "1.0"))

# "auto", "always" or "never"
COLOR_MODE = os.getenv("OHSNAP_COLOR", "auto").lower()
if os.getenv("NO_COLOR"):
    COLOR_MODE = "never"

# Block marker for snapshots written in Python test files
BLOCK_MARKER = os.getenv(
    "OHSNAP_BLOCK_MARKER", constants.COMMENT_BLOCK_MARKER
)
