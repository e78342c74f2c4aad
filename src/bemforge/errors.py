"""Error types raised while composing selectors."""

from __future__ import annotations


class BemforgeError(Exception):
    """Base class for composer errors."""


class SelectorContextError(BemforgeError):
    """Raised when a nested composer is used without an enclosing selector."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}() requires an enclosing selector, got the document root")


class SelectorUnificationError(BemforgeError):
    """Raised when two selectors can never match the same element."""

    def __init__(self, base: str, qualifier: str, reason: str = "") -> None:
        self.base = base
        self.qualifier = qualifier
        message = f"Cannot unify {base!r} with {qualifier!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
