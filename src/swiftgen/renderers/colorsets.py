"""Color set deduplication table and UIColor formatting."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import assert_never

from swiftgen.model.color import Adaptive, Color, Solid
from swiftgen.model.ruleset import Declaration
from swiftgen.renderers.errors import InvariantViolation

logger = logging.getLogger(__name__)


def ui_color_string(color: Color) -> str:
    """Render *color* as a ``UIColor(red:green:blue:alpha:)`` expression.

    Channels are scaled to 0..1 with three decimals; alpha is written as-is
    with two decimals.
    """
    return (
        f"UIColor(red: {color.r / 255.0:.3f}, green: {color.g / 255.0:.3f}, "
        f"blue: {color.b / 255.0:.3f}, alpha: {color.a:.2f})"
    )


@dataclass(frozen=True)
class ColorSet:
    """The light color plus optional dark color a declaration resolves to.

    Equality is structural, so identical colors declared anywhere in the
    tree share one table slot.
    """

    light: Color
    dark: Color | None = None

    @classmethod
    def from_declaration(cls, declaration: Declaration) -> ColorSet:
        value = declaration.value
        if isinstance(value, Solid):
            return cls(light=value.color)
        if isinstance(value, Adaptive):
            return cls(light=value.light, dark=value.dark)
        assert_never(value)

    def swift_literal(self) -> str:
        dark = "nil" if self.dark is None else ui_color_string(self.dark)
        return f"ColorSet({ui_color_string(self.light)}, {dark})"


class ColorSetTable:
    """Append-only registry assigning each distinct ColorSet a stable index.

    Indices follow first-registration order. ``register`` is idempotent;
    ``lookup`` never inserts and raises :class:`InvariantViolation` on a miss.
    """

    def __init__(self) -> None:
        self._entries: list[ColorSet] = []
        self._index_of: dict[ColorSet, int] = {}

    @property
    def entries(self) -> Sequence[ColorSet]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ColorSet]:
        return iter(self._entries)

    def __contains__(self, color_set: object) -> bool:
        return color_set in self._index_of

    def register(self, color_set: ColorSet) -> None:
        if color_set in self._index_of:
            return
        idx = len(self._entries)
        self._entries.append(color_set)
        self._index_of[color_set] = idx
        logger.debug("Registered color set %d: %s", idx, color_set)

    def lookup(self, color_set: ColorSet) -> int:
        try:
            return self._index_of[color_set]
        except KeyError:
            raise InvariantViolation(
                f"Color set was never registered: {color_set}",
                color_set=color_set,
            ) from None

    def register_declaration(self, declaration: Declaration) -> None:
        self.register(ColorSet.from_declaration(declaration))

    def index_for_declaration(self, declaration: Declaration, path: str | None = None) -> int:
        """Return the table index for *declaration*.

        *path* is the dotted name reported if the lookup misses; it defaults
        to the declaration's short name.
        """
        color_set = ColorSet.from_declaration(declaration)
        name = path or declaration.identifier.short
        try:
            return self.lookup(color_set)
        except InvariantViolation:
            raise InvariantViolation(
                f"Could not get index for declaration {name!r}",
                color_set=color_set,
                identifier=name,
            ) from None
