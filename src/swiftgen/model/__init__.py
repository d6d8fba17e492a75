from swiftgen.model.color import Adaptive, Color, ColorValue, Solid
from swiftgen.model.ruleset import Declaration, Identifier, RuleSet, RuleSetItem

__all__ = [
    "Adaptive",
    "Color",
    "ColorValue",
    "Declaration",
    "Identifier",
    "RuleSet",
    "RuleSetItem",
    "Solid",
]
