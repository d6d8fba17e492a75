"""Renderer error types."""

from __future__ import annotations

from typing import Any


class RenderError(Exception):
    """Base error for all renderer failures."""


class InvariantViolation(RenderError):
    """Raised when the render pass asks for a color set that was never registered.

    This means the population and render passes walked different
    declarations. It is a bug in the renderer, not bad input.
    """

    def __init__(
        self,
        message: str,
        *,
        color_set: Any = None,
        identifier: str | None = None,
    ) -> None:
        self.color_set = color_set
        self.identifier = identifier
        super().__init__(message)
