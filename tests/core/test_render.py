"""Tests for value renderers."""

from dataclasses import dataclass
from typing import Any

import pytest
from pydantic import BaseModel

from ohsnap.core.render import FormatRenderer, StructuralRenderer, render_value
from ohsnap.errors import RenderError
from ohsnap.models import RenderOptions


class Point(BaseModel):
    x: int
    y: int


@dataclass
class Pair:
    left: int
    right: int


class Money:
    def __init__(self, cents: int) -> None:
        self.cents = cents

    def __format__(self, spec: str) -> str:
        if spec == "short":
            return f"${self.cents // 100}"
        return f"${self.cents / 100:.2f}"


class Exploding:
    def __format__(self, spec: str) -> str:
        raise ValueError("cannot format")


class TestStructuralRenderer:
    """Test cases for StructuralRenderer."""

    def setup_method(self) -> None:
        """Set up test fixtures."""
        self.renderer = StructuralRenderer()
        self.options = RenderOptions()

    @pytest.mark.unit
    def test_strings_render_verbatim(self) -> None:
        """Test that text values are not quoted."""
        assert self.renderer.render("line 1\nline 2", self.options) == "line 1\nline 2"

    @pytest.mark.unit
    def test_dicts_are_sorted(self) -> None:
        """Test deterministic key order."""
        rendered = self.renderer.render({"b": 2, "a": 1}, self.options)

        assert rendered == "{'a': 1, 'b': 2}"

    @pytest.mark.unit
    def test_insertion_order_when_not_sorting(self) -> None:
        """Test sort_dicts=False keeps insertion order."""
        options = RenderOptions(sort_dicts=False)

        assert self.renderer.render({"b": 2, "a": 1}, options) == "{'b': 2, 'a': 1}"

    @pytest.mark.unit
    def test_width_wraps_long_structures(self) -> None:
        """Test that narrow widths split containers over lines."""
        options = RenderOptions(width=10)

        rendered = self.renderer.render(list(range(5)), options)

        assert rendered == "[0,\n 1,\n 2,\n 3,\n 4]"

    @pytest.mark.unit
    def test_pydantic_models_render_as_data(self) -> None:
        """Test that models are dumped under their class name."""
        rendered = self.renderer.render(Point(x=1, y=2), self.options)

        assert rendered == "{'Point': {'x': 1, 'y': 2}}"

    @pytest.mark.unit
    def test_dataclasses(self) -> None:
        """Test dataclass rendering."""
        assert self.renderer.render(Pair(1, 2), self.options) == "Pair(left=1, right=2)"


class TestFormatRenderer:
    """Test cases for FormatRenderer."""

    @pytest.mark.unit
    def test_uses_value_format(self) -> None:
        """Test that the value formats itself."""
        renderer = FormatRenderer()

        assert renderer.render(Money(1250), RenderOptions()) == "$12.50"
        assert renderer.render(Money(1250), RenderOptions(format_spec="short")) == "$12"


class TestRenderValue:
    """Test cases for render_value()."""

    @pytest.mark.unit
    def test_renderer_failure_becomes_render_error(self) -> None:
        """Test that renderer exceptions are wrapped."""
        with pytest.raises(RenderError) as exc_info:
            render_value(Exploding(), FormatRenderer(), RenderOptions())

        assert isinstance(exc_info.value.__cause__, ValueError)

    @pytest.mark.unit
    def test_non_string_result_is_rejected(self) -> None:
        """Test a renderer returning the wrong type."""

        class BadRenderer:
            def render(self, value: Any, options: RenderOptions) -> Any:
                return 42

        with pytest.raises(RenderError):
            render_value("x", BadRenderer(), RenderOptions())
