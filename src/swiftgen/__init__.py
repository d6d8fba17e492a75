"""swiftgen - render design-token color rulesets as Swift source."""

__version__ = "0.1.0"

from swiftgen.model import Adaptive, Color, Declaration, Identifier, RuleSet, Solid  # noqa: E402
from swiftgen.renderers import DynamicColorRenderer, RendererConfig, render  # noqa: E402

__all__ = [
    "__version__",
    "Adaptive",
    "Color",
    "Declaration",
    "DynamicColorRenderer",
    "Identifier",
    "RendererConfig",
    "RuleSet",
    "Solid",
    "render",
]
