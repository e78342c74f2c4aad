"""Rule model: Declaration, Rule, and Stylesheet."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from bemforge.model.context import SelectorContext


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value;`` pair."""

    property: str
    value: str

    def __str__(self) -> str:
        return f"{self.property}: {self.value};"


@dataclass(eq=False)
class Rule:
    """A composed rule.

    Children always carry absolute selectors, so nesting only records
    output order, never selector combination.
    """

    selector: SelectorContext
    declarations: list[Declaration] = field(default_factory=list)
    children: list[Rule] = field(default_factory=list)

    @property
    def context(self) -> SelectorContext:
        return self.selector

    def declare(self, property: str, value: str) -> Rule:
        """Append a declaration and return self for chaining."""
        self.declarations.append(Declaration(property=property, value=value))
        return self

    def add(self, *items: RuleItem) -> Rule:
        """Append declarations and child rules in the order given."""
        for item in items:
            if isinstance(item, Declaration):
                self.declarations.append(item)
            elif isinstance(item, Rule):
                if item is not self and item not in self.children:
                    self.children.append(item)
            else:
                raise TypeError(f"Cannot add {type(item).__name__} to a rule")
        return self

    def walk(self):
        """Yield this rule and every descendant, parents first."""
        yield self
        for child in self.children:
            yield from child.walk()


RuleItem = Union[Declaration, Rule]


@dataclass(eq=False)
class Stylesheet:
    """Top-level container of composed rules."""

    rules: list[Rule] = field(default_factory=list)

    def add(self, *rules: Rule) -> Stylesheet:
        for rule in rules:
            if rule not in self.rules:
                self.rules.append(rule)
        return self

    def walk(self):
        for rule in self.rules:
            yield from rule.walk()
