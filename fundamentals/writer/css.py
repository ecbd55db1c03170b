"""
CSS text rendering for StyleRules.

render_rule turns one rule into a declaration block followed by one at-rule
block per conditional. render_stylesheet joins many rules with blank lines.
Output is stable: declarations and conditionals keep emission order.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from fundamentals.schemas.rule import StyleRule

INDENT = "  "


def render_block(selector: str, declarations: Mapping[str, str], depth: int = 0) -> str:
    """Render ``selector { prop: value; ... }`` at the given nesting depth."""
    pad = INDENT * depth
    lines = [f"{pad}{selector} {{"]
    lines.extend(f"{pad}{INDENT}{prop}: {value};" for prop, value in declarations.items())
    lines.append(f"{pad}}}")
    return "\n".join(lines)


def render_rule(rule: StyleRule) -> str:
    """Render a rule and its conditional overrides as CSS text."""
    blocks: list[str] = []
    if rule.declarations:
        blocks.append(render_block(rule.selector, rule.declarations))
    for condition, declarations in rule.conditionals.items():
        inner = render_block(rule.selector, declarations, depth=1)
        blocks.append(f"{condition} {{\n{inner}\n}}")
    return "\n".join(blocks)


def render_stylesheet(rules: Iterable[StyleRule]) -> str:
    """Render *rules* in order, separated by blank lines, with a trailing newline."""
    rendered = [text for text in (render_rule(rule) for rule in rules) if text]
    if not rendered:
        return ""
    return "\n\n".join(rendered) + "\n"
