"""Base protocol and configuration for renderers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from swiftgen.model.ruleset import RuleSet


@dataclass(frozen=True)
class RendererConfig:
    """Formatting policy shared by all renderers."""

    indent_width: int = 2
    indent_char: str = " "

    def __post_init__(self) -> None:
        if self.indent_width < 0:
            raise ValueError("indent_width must be >= 0")

    def indent(self, depth: int) -> str:
        """Return the leading whitespace for a line at *depth*."""
        if depth < 0:
            raise ValueError(f"Invalid indent depth: {depth}")
        return self.indent_char * (self.indent_width * depth)


class Renderer(Protocol):
    """A ruleset-to-source rendering step."""

    def render_into(self, ruleset: RuleSet, out: list[str], config: RendererConfig) -> None: ...

    def render(self, ruleset: RuleSet, config: RendererConfig) -> str: ...
