"""bemforge model layer -- public type re-exports."""

from bemforge.model.context import SelectorContext
from bemforge.model.rule import Declaration, Rule, RuleItem, Stylesheet

__all__ = [
    # context
    "SelectorContext",
    # rules
    "Declaration",
    "Rule",
    "RuleItem",
    "Stylesheet",
]
