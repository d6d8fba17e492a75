from __future__ import annotations

from swiftgen.model.ruleset import RuleSet
from swiftgen.renderers.base import Renderer, RendererConfig
from swiftgen.renderers.colorsets import ColorSet, ColorSetTable, ui_color_string
from swiftgen.renderers.dynamic_color import DynamicColorRenderer
from swiftgen.renderers.errors import InvariantViolation, RenderError

BUILTIN_RENDERERS: dict[str, Renderer] = {
    "dynamic_color": DynamicColorRenderer(),
}


def render(
    ruleset: RuleSet,
    config: RendererConfig | None = None,
    renderer: Renderer | None = None,
) -> str:
    """Render *ruleset* with *renderer* (dynamic colors by default)."""
    if config is None:
        config = RendererConfig()
    if renderer is None:
        renderer = BUILTIN_RENDERERS["dynamic_color"]
    return renderer.render(ruleset, config)


__all__ = [
    "BUILTIN_RENDERERS",
    "ColorSet",
    "ColorSetTable",
    "DynamicColorRenderer",
    "InvariantViolation",
    "RenderError",
    "Renderer",
    "RendererConfig",
    "render",
    "ui_color_string",
]
