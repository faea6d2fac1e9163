"""Per-comparison resource context."""

import logging
import re
from types import TracebackType

from ohsnap.core.diffing import DiffEngine
from ohsnap.errors import PatternError


class ComparisonContext:
    """Resources scoped to a single snapshot comparison.

    Holds the diff engine, a compiled-pattern cache and the pattern errors
    seen while reconciling. Use it as a context manager; everything is
    released on exit.
    """

    def __init__(self, diff_engine: DiffEngine | None = None) -> None:
        self.logger = logging.getLogger(__name__)
        self.diff_engine = diff_engine or DiffEngine()
        self.pattern_errors: list[PatternError] = []
        self._patterns: dict[str, re.Pattern[str]] = {}

    def __enter__(self) -> "ComparisonContext":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._patterns.clear()

    def compile(self, pattern_source: str) -> re.Pattern[str] | None:
        """Compile an ignore-region pattern, recording failures.

        Args:
            pattern_source: Regular expression text without delimiters

        Returns:
            The compiled pattern, or None if it does not compile
        """
        if pattern_source in self._patterns:
            return self._patterns[pattern_source]

        try:
            compiled = re.compile(pattern_source)
        except re.error as e:
            error = PatternError(pattern_source, str(e))
            self.pattern_errors.append(error)
            self.logger.warning(str(error))
            return None

        self._patterns[pattern_source] = compiled
        return compiled
