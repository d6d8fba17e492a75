"""Color model: Color and the two declaration value variants."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Color:
    """An sRGB color with 8-bit channels and a floating alpha.

    Values are stored as given; range checking belongs to whoever built
    the tree.
    """

    r: int
    g: int
    b: int
    a: float = 1.0


@dataclass(frozen=True)
class Solid:
    """One color for every appearance mode."""

    color: Color


@dataclass(frozen=True)
class Adaptive:
    """Distinct colors for light and dark appearance."""

    light: Color
    dark: Color


ColorValue = Union[Solid, Adaptive]
