"""Ruleset tree model: Identifier, Declaration, and RuleSet dataclasses."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Union

from swiftgen.model.color import ColorValue


@dataclass(frozen=True)
class Identifier:
    """A short name plus the nesting level it is rendered at."""

    short: str
    depth: int = 0

    def __post_init__(self) -> None:
        if not self.short:
            raise ValueError("Identifier short name must be a non-empty string")

    def child(self, short: str) -> Identifier:
        """Return an identifier nested one level below this one."""
        return Identifier(short=short, depth=self.depth + 1)


@dataclass(frozen=True)
class Declaration:
    """A single named color value."""

    identifier: Identifier
    value: ColorValue


@dataclass(frozen=True)
class RuleSet:
    """A named, ordered group of declarations and nested rulesets."""

    identifier: Identifier
    items: list[RuleSetItem] = field(default_factory=list)

    def declarations(self) -> Iterator[Declaration]:
        """Yield every declaration in the subtree, preorder, left to right."""
        for item in self.items:
            if isinstance(item, Declaration):
                yield item
            else:
                yield from item.declarations()


RuleSetItem = Union[Declaration, RuleSet]
