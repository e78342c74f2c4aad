"""Render composed rules to CSS text."""

from __future__ import annotations

from typing import Iterable, Union

from bemforge.model.rule import Rule, Stylesheet

__all__ = ["render_css", "render_rule"]


def render_rule(rule: Rule, indent: str = "  ") -> str:
    """Render a single rule block, ignoring its children."""
    lines = [f"{rule.selector} {{"]
    lines.extend(f"{indent}{declaration}" for declaration in rule.declarations)
    lines.append("}")
    return "\n".join(lines)


def render_css(source: Union[Stylesheet, Rule, Iterable[Rule]], indent: str = "  ") -> str:
    """Render every rule as a flat top-level block, parents before children.

    Rules without declarations produce no output.
    """
    if isinstance(source, (Stylesheet, Rule)):
        rules = list(source.walk())
    else:
        rules = [r for top in source for r in top.walk()]
    blocks = [render_rule(r, indent) for r in rules if r.declarations]
    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"
