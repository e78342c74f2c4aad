"""Parser for selector fragments.

Selector lists and complex selectors are split with a small scanner; the
subject compound is parsed with the Lark grammar in ``grammar.lark``.

Syntax example:
    a.button:hover, .nav > li[data-open]::before
"""

from __future__ import annotations

from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from bemforge.selector.model import ComplexSelector, CompoundSelector, SimpleSelector

__all__ = ["parse_complex", "parse_compound", "split_selector_list"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

# Single-colon spellings that still denote pseudo-elements.
_LEGACY_PSEUDO_ELEMENTS = {":before", ":after", ":first-line", ":first-letter"}

_WHITESPACE = " \t\n\r\f"
_COMBINATORS = _WHITESPACE + ">+~"
_HEX_DIGITS = "0123456789abcdefABCDEF"


class CompoundTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a compound-selector parse tree into a CompoundSelector."""

    def type_selector(self, items: list[Token]) -> SimpleSelector:
        return SimpleSelector(kind="type", value=str(items[0]))

    def universal(self, items: list[Token]) -> SimpleSelector:
        return SimpleSelector(kind="universal", value="*")

    def id_selector(self, items: list[Token]) -> SimpleSelector:
        return SimpleSelector(kind="id", value=str(items[0]))

    def class_selector(self, items: list[Token]) -> SimpleSelector:
        return SimpleSelector(kind="class", value=str(items[0]))

    def attribute_selector(self, items: list[Token]) -> SimpleSelector:
        return SimpleSelector(kind="attribute", value=str(items[0]))

    def args(self, items: list[object]) -> str:
        return "(" + "".join(str(i) for i in items) + ")"

    def pseudo(self, items: list[object]) -> SimpleSelector:
        name = str(items[0])
        arguments = str(items[1]) if len(items) > 1 else ""
        if name.startswith("::") or name.lower() in _LEGACY_PSEUDO_ELEMENTS:
            return SimpleSelector(kind="pseudo_element", value=name + arguments)
        return SimpleSelector(kind="pseudo_class", value=name + arguments)

    def compound(self, items: list[SimpleSelector]) -> CompoundSelector:
        return CompoundSelector(simples=tuple(items))

    def start(self, items: list[CompoundSelector]) -> CompoundSelector:
        return items[0]


_PARSER = Lark(GRAMMAR_PATH.read_text(encoding="utf-8"), parser="lalr", start="start")


def _escape_end(text: str, start: int) -> int:
    """Return the index just past the escape whose backslash is at *start*.

    A hex escape is up to six hex digits optionally closed by one
    whitespace character (``\\31 0``); anything else escapes one character.
    """
    pos = start + 1
    while pos < len(text) and pos - start <= 6 and text[pos] in _HEX_DIGITS:
        pos += 1
    if pos == start + 1:
        return min(pos + 1, len(text))
    if pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    return pos


def _scan(text: str):
    """Yield (index, char, depth) skipping over quoted strings and escapes."""
    depth = 0
    quote = ""
    idx = 0
    while idx < len(text):
        char = text[idx]
        if char == "\\":
            idx = _escape_end(text, idx)
            continue
        idx += 1
        if quote:
            if char == quote:
                quote = ""
            continue
        if char in "\"'":
            quote = char
            continue
        if char in "([":
            depth += 1
        elif char in ")]":
            depth = max(depth - 1, 0)
        yield idx - 1, char, depth


def split_selector_list(text: str) -> list[str]:
    """Split a selector list on top-level commas, dropping empty entries."""
    parts: list[str] = []
    start = 0
    for idx, char, depth in _scan(text):
        if char == "," and depth == 0:
            parts.append(text[start:idx])
            start = idx + 1
    parts.append(text[start:])
    return [p.strip() for p in parts if p.strip()]


def parse_compound(text: str) -> CompoundSelector:
    """Parse a compound selector such as ``a.button:hover``.

    Fragments the grammar does not recognize come back as a raw compound so
    the caller can fall back to plain concatenation.
    """
    text = text.strip()
    if not text:
        return CompoundSelector()
    try:
        tree = _PARSER.parse(text)
    except LarkError:
        return CompoundSelector(raw=text)
    return CompoundTransformer().transform(tree)


def parse_complex(text: str) -> ComplexSelector:
    """Split a complex selector into its verbatim ancestors and subject compound."""
    text = text.strip()
    subject_start = 0
    for idx, char, depth in _scan(text):
        if depth == 0 and char in _COMBINATORS:
            subject_start = idx + 1
    return ComplexSelector(
        ancestors=text[:subject_start],
        subject=parse_compound(text[subject_start:]),
    )
