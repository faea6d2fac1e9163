"""Tests for the per-comparison context."""

import pytest

from ohsnap.core.context import ComparisonContext
from ohsnap.core.diffing import DiffEngine


class TestComparisonContext:
    """Test cases for ComparisonContext."""

    @pytest.mark.unit
    def test_enter_returns_context(self) -> None:
        """Test the with block yields the context itself."""
        context = ComparisonContext()

        with context as ctx:
            assert ctx is context
            assert ctx.pattern_errors == []

    @pytest.mark.unit
    def test_compiled_patterns_are_cached(self, context: ComparisonContext) -> None:
        """Test that the same pattern compiles once per comparison."""
        first = context.compile("[0-9]+")
        second = context.compile("[0-9]+")

        assert first is not None
        assert first is second
        assert first.fullmatch("123")

    @pytest.mark.unit
    def test_invalid_pattern_is_recorded(self, context: ComparisonContext) -> None:
        """Test that compile failures become pattern errors."""
        assert context.compile("(unclosed") is None

        assert len(context.pattern_errors) == 1
        assert "(unclosed" in str(context.pattern_errors[0])

    @pytest.mark.unit
    def test_uses_supplied_diff_engine(self) -> None:
        """Test that an explicit engine is threaded through."""
        engine = DiffEngine(timeout=0)

        with ComparisonContext(engine) as context:
            assert context.diff_engine is engine
