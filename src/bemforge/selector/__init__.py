from bemforge.selector.model import ComplexSelector, CompoundSelector, SimpleSelector
from bemforge.selector.parser import parse_complex, parse_compound, split_selector_list
from bemforge.selector.unify import unify, unify_compound

__all__ = [
    "SimpleSelector",
    "CompoundSelector",
    "ComplexSelector",
    "parse_compound",
    "parse_complex",
    "split_selector_list",
    "unify",
    "unify_compound",
]
