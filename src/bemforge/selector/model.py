"""Selector model: SimpleSelector, CompoundSelector and ComplexSelector dataclasses."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SimpleSelector:
    """A single simple selector.

    Kinds and their rendered form:
        type            button
        universal       *
        id              #main
        class           .large
        attribute       [href]          (value keeps the brackets)
        pseudo_class    :hover          (value keeps the colon and arguments)
        pseudo_element  ::before        (value keeps the colons)
    """

    kind: str
    value: str

    @property
    def is_type_like(self) -> bool:
        return self.kind in ("type", "universal")

    def __str__(self) -> str:
        if self.kind == "id":
            return f"#{self.value}"
        if self.kind == "class":
            return f".{self.value}"
        return self.value


@dataclass(frozen=True)
class CompoundSelector:
    """A sequence of simple selectors that all apply to the same element.

    When the source fragment was not recognized, ``simples`` is empty and
    ``raw`` holds the text as given.
    """

    simples: tuple[SimpleSelector, ...] = ()
    raw: str = ""

    @property
    def is_raw(self) -> bool:
        return not self.simples and bool(self.raw)

    @property
    def type_selector(self) -> SimpleSelector | None:
        for simple in self.simples:
            if simple.is_type_like:
                return simple
        return None

    @property
    def pseudo_elements(self) -> tuple[SimpleSelector, ...]:
        return tuple(s for s in self.simples if s.kind == "pseudo_element")

    def split_at_pseudo_element(self) -> tuple[tuple[SimpleSelector, ...], tuple[SimpleSelector, ...]]:
        """Split into the part before the first pseudo-element and the rest.

        The tail keeps any pseudo-classes that follow the pseudo-element
        (``::-webkit-scrollbar-thumb:hover``), which apply to the
        pseudo-element, not to the element itself.
        """
        for idx, simple in enumerate(self.simples):
            if simple.kind == "pseudo_element":
                return self.simples[:idx], self.simples[idx:]
        return self.simples, ()

    def __str__(self) -> str:
        if self.is_raw:
            return self.raw
        return "".join(str(s) for s in self.simples)


@dataclass(frozen=True)
class ComplexSelector:
    """A compound selector with its ancestors and combinators.

    ``ancestors`` is kept verbatim (e.g. ``".nav > "``); only the subject
    compound takes part in unification.
    """

    ancestors: str
    subject: CompoundSelector

    def __str__(self) -> str:
        return f"{self.ancestors}{self.subject}"
