"""Explicit enclosing-selector context threaded through composer calls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from bemforge.selector.parser import split_selector_list


@dataclass(frozen=True)
class SelectorContext:
    """The enclosing selector list a nested composer builds on.

    An empty tuple is the document root.
    """

    selectors: tuple[str, ...] = ()

    @classmethod
    def root(cls) -> SelectorContext:
        return cls()

    @classmethod
    def of(cls, text: str) -> SelectorContext:
        """Build a context from selector-list text such as ``".a, .b"``."""
        return cls(selectors=tuple(split_selector_list(text)))

    @property
    def is_root(self) -> bool:
        return not self.selectors

    def map(self, fn: Callable[[str], str]) -> SelectorContext:
        """Return a new context with *fn* applied to every selector."""
        return SelectorContext(selectors=tuple(fn(s) for s in self.selectors))

    def __str__(self) -> str:
        return ", ".join(self.selectors)
