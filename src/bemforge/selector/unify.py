"""Selector unification: merge two selectors into one matching both."""

from __future__ import annotations

import logging

from bemforge.errors import SelectorUnificationError
from bemforge.selector.model import CompoundSelector, SimpleSelector
from bemforge.selector.parser import parse_complex, split_selector_list

__all__ = ["unify", "unify_compound"]

logger = logging.getLogger(__name__)


def _dedupe(simples: list[SimpleSelector]) -> list[SimpleSelector]:
    seen: set[SimpleSelector] = set()
    result: list[SimpleSelector] = []
    for simple in simples:
        if simple in seen:
            continue
        seen.add(simple)
        result.append(simple)
    return result


def _type_of(simples: tuple[SimpleSelector, ...]) -> SimpleSelector | None:
    for simple in simples:
        if simple.is_type_like:
            return simple
    return None


def _unify_type(
    base: CompoundSelector,
    qualifier: CompoundSelector,
    base_head: tuple[SimpleSelector, ...],
    qualifier_head: tuple[SimpleSelector, ...],
) -> SimpleSelector | None:
    """Pick the type selector of the unified compound, or None for none/universal."""
    base_type = _type_of(base_head)
    qualifier_type = _type_of(qualifier_head)
    if base_type is not None and base_type.kind == "type":
        if (
            qualifier_type is not None
            and qualifier_type.kind == "type"
            and qualifier_type.value.lower() != base_type.value.lower()
        ):
            raise SelectorUnificationError(
                str(base), str(qualifier), "conflicting type selectors"
            )
        return base_type
    if qualifier_type is not None and qualifier_type.kind == "type":
        return qualifier_type
    if base_type is not None:
        return base_type
    return qualifier_type


def unify_compound(base: CompoundSelector, qualifier: CompoundSelector) -> CompoundSelector:
    """Unify two compound selectors.

    Only the part before the first pseudo-element is merged: the type
    selector goes first, then the base's simple selectors followed by the
    qualifier's (duplicates removed). A universal selector is dropped when
    anything else is left. The pseudo-element tail, with any pseudo-classes
    that follow it, is appended verbatim; two different tails conflict. Raw
    compounds are concatenated as text.
    """
    if base.is_raw or qualifier.is_raw:
        return CompoundSelector(raw=f"{base}{qualifier}")
    if not base.simples:
        return qualifier
    if not qualifier.simples:
        return base

    base_head, base_tail = base.split_at_pseudo_element()
    qualifier_head, qualifier_tail = qualifier.split_at_pseudo_element()
    if base_tail and qualifier_tail and base_tail != qualifier_tail:
        raise SelectorUnificationError(
            str(base), str(qualifier), "conflicting pseudo-elements"
        )

    base_ids = {s.value for s in base_head if s.kind == "id"}
    qualifier_ids = {s.value for s in qualifier_head if s.kind == "id"}
    if base_ids and qualifier_ids and base_ids != qualifier_ids:
        raise SelectorUnificationError(str(base), str(qualifier), "conflicting ids")

    type_selector = _unify_type(base, qualifier, base_head, qualifier_head)
    rest = _dedupe([s for s in base_head + qualifier_head if not s.is_type_like])
    tail = base_tail or qualifier_tail

    simples: list[SimpleSelector] = []
    if type_selector is not None and (type_selector.kind == "type" or not (rest or tail)):
        simples.append(type_selector)
    simples.extend(rest)
    simples.extend(tail)
    return CompoundSelector(simples=tuple(simples))


def unify(base: str, qualifier: str) -> str:
    """Unify two selector lists, pairing every base selector with every qualifier.

    Ancestors of complex selectors are kept verbatim, the base's first.
    An empty side has nothing to match and raises SelectorUnificationError.

    >>> unify("button", ".large")
    'button.large'
    >>> unify(".button", "a")
    'a.button'
    """
    results: list[str] = []
    for base_text in split_selector_list(base):
        base_complex = parse_complex(base_text)
        for qualifier_text in split_selector_list(qualifier):
            qualifier_complex = parse_complex(qualifier_text)
            subject = unify_compound(base_complex.subject, qualifier_complex.subject)
            results.append(
                f"{base_complex.ancestors}{qualifier_complex.ancestors}{subject}"
            )
    if not results:
        raise SelectorUnificationError(base, qualifier, "empty selector")
    unified = ", ".join(results)
    logger.debug("unify %r with %r -> %r", base, qualifier, unified)
    return unified
