"""Value renderers that turn runtime values into snapshot text."""

import pprint
from typing import Any, Protocol

from pydantic import BaseModel

from ohsnap.errors import RenderError
from ohsnap.models import RenderOptions


class Renderable(Protocol):
    """Capability turning a value into canonical text."""

    def render(self, value: Any, options: RenderOptions) -> str: ...


class StructuralRenderer:
    """Default renderer: a stable pretty-printed structure of the value.

    Pydantic models are dumped to plain data first so field order and nested
    models render the same way as dictionaries.
    """

    def render(self, value: Any, options: RenderOptions) -> str:
        if isinstance(value, str):
            return value
        if isinstance(value, BaseModel):
            value = {type(value).__name__: value.model_dump(mode="python")}
        return pprint.pformat(
            value,
            indent=options.indent,
            width=options.width,
            depth=options.depth,
            compact=options.compact,
            sort_dicts=options.sort_dicts,
        )


class FormatRenderer:
    """Renderer that lets the value format itself through ``format()``."""

    def render(self, value: Any, options: RenderOptions) -> str:
        return format(value, options.format_spec)


def render_value(value: Any, renderer: Renderable, options: RenderOptions) -> str:
    """Render a value, wrapping renderer failures in RenderError.

    Args:
        value: The value under test
        renderer: Renderer selected by the caller
        options: Rendering options of the snapshot

    Returns:
        The rendered text

    Raises:
        RenderError: If the renderer raises or returns a non-string
    """
    try:
        text = renderer.render(value, options)
    except Exception as e:
        raise RenderError(f"Could not render {type(value).__name__}: {e}") from e

    if not isinstance(text, str):
        raise RenderError(
            f"Renderer {type(renderer).__name__} returned {type(text).__name__}, "
            "expected str"
        )
    return text
