"""Dynamic color renderer: emits UIKit colors that follow the appearance mode.

Rendering takes two full walks of the tree. The first registers every
declaration's color set so the ``ColorSets`` array can be written before
anything refers to it; the second emits nested ``enum`` blocks whose
constants index into that array.
"""

from __future__ import annotations

import logging
from typing import assert_never

from swiftgen.model.ruleset import Declaration, RuleSet
from swiftgen.renderers.base import RendererConfig
from swiftgen.renderers.colorsets import ColorSetTable

logger = logging.getLogger(__name__)

PREAMBLE = """\
// This file is automatically generated. Do not edit, your changes will be erased.

import UIKit

fileprivate struct ColorSet {
  var light: UIColor
  var dark: UIColor?

  init(_ light: UIColor, _ dark: UIColor?) {
    self.light = light
    self.dark = dark
  }
}

fileprivate func dynamicColor(_ colorSet: ColorSet) -> UIColor {
  if #available(iOS 13.0, *) {
    return UIColor { traits -> UIColor in
      switch traits.userInterfaceStyle {
        case .dark:
          return colorSet.dark ?? colorSet.light
        case .light, .unspecified:
          fallthrough
        @unknown default:
          return colorSet.light
      }
    }
  } else {
    return colorSet.light
  }
}
"""


class DynamicColorRenderer:
    """Render a ruleset tree as a ``UIColor`` extension of dynamic colors."""

    def render(self, ruleset: RuleSet, config: RendererConfig) -> str:
        out: list[str] = []
        self.render_into(ruleset, out, config)
        return "".join(out)

    def render_into(self, ruleset: RuleSet, out: list[str], config: RendererConfig) -> None:
        table = ColorSetTable()
        self.populate(ruleset, table)

        out.append(PREAMBLE)
        out.append("\n")
        out.append("fileprivate let ColorSets: [ColorSet] = [\n")
        for color_set in table:
            out.append(f"{config.indent(1)}{color_set.swift_literal()},\n")
        out.append("]\n")
        out.append("\n")
        out.append("extension UIColor {\n")
        count = self.render_ruleset(ruleset, out, table, config)
        out.append("}\n")

        logger.info(
            "Rendered %s: %d declarations, %d color sets",
            ruleset.identifier.short,
            count,
            len(table),
        )

    # --- population pass ----------------------------------------------------

    def populate(self, ruleset: RuleSet, table: ColorSetTable) -> None:
        for item in ruleset.items:
            if isinstance(item, Declaration):
                table.register_declaration(item)
            elif isinstance(item, RuleSet):
                self.populate(item, table)
            else:
                assert_never(item)

    # --- render pass --------------------------------------------------------

    def render_ruleset(
        self,
        ruleset: RuleSet,
        out: list[str],
        table: ColorSetTable,
        config: RendererConfig,
        parent: str = "",
    ) -> int:
        """Append the ``enum`` block for *ruleset*; return the declarations written."""
        indent = config.indent(ruleset.identifier.depth)
        path = f"{parent}.{ruleset.identifier.short}" if parent else ruleset.identifier.short
        out.append(f"{indent}enum {ruleset.identifier.short} {{\n")

        count = 0
        for item in ruleset.items:
            if isinstance(item, Declaration):
                self.render_declaration(item, out, table, config, parent=path)
                count += 1
            elif isinstance(item, RuleSet):
                count += self.render_ruleset(item, out, table, config, parent=path)
            else:
                assert_never(item)

        out.append(f"{indent}}}\n")
        return count

    def render_declaration(
        self,
        declaration: Declaration,
        out: list[str],
        table: ColorSetTable,
        config: RendererConfig,
        parent: str = "",
    ) -> None:
        short = declaration.identifier.short
        idx = table.index_for_declaration(
            declaration, path=f"{parent}.{short}" if parent else short
        )
        out.append(
            f"{config.indent(declaration.identifier.depth)}"
            f"static let {short} = dynamicColor(ColorSets[{idx}])\n"
        )
