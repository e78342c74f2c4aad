"""Selector and custom-property composer.

Every operation is a pure string transformation driven by the current
:class:`ComposerConfig`. Nested composers take the enclosing selector
explicitly (a :class:`Rule`, a :class:`SelectorContext` or selector text)
and always produce an absolute, top-level selector:

    composer = Composer(ComposerConfig(selector_prefix="ui-"))
    card = composer.block("card")
    title = composer.element(card, "title")      # .ui-card__title
    composer.modifier(title, "large")            # .ui-card__title--large
    composer.state(card, "open")                 # .ui-card.is-open
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence, Union

from bemforge.config import ComposerConfig
from bemforge.errors import SelectorContextError
from bemforge.model.context import SelectorContext
from bemforge.model.rule import Declaration, Rule, RuleItem, Stylesheet
from bemforge.selector.unify import unify

__all__ = ["Composer", "ContextLike"]

logger = logging.getLogger(__name__)

ContextLike = Union[Rule, SelectorContext, str, None]


def resolve_context(context: ContextLike) -> SelectorContext:
    """Return the enclosing selector list described by *context*."""
    if context is None:
        return SelectorContext.root()
    if isinstance(context, Rule):
        return context.selector
    if isinstance(context, SelectorContext):
        return context
    return SelectorContext.of(context)


class Composer:
    """Compose prefixed custom properties and BEM class selectors.

    ``config`` may be reassigned between calls; each call reads the
    current value.
    """

    def __init__(self, config: ComposerConfig | None = None) -> None:
        self.config = config or ComposerConfig()

    # --- custom properties ----------------------------------------------------

    def _property_name(self, name: str) -> str:
        return f"--{self.config.selector_prefix}{name}"

    def create_var(self, name: str, value: str) -> Declaration:
        """Return the custom-property declaration ``--<prefix><name>: <value>;``."""
        return Declaration(property=self._property_name(name), value=value)

    def use_var(self, name: str, fallback: str | None = None) -> str:
        """Return the reference ``var(--<prefix><name>)``, with an optional fallback."""
        if fallback is None:
            return f"var({self._property_name(name)})"
        return f"var({self._property_name(name)}, {fallback})"

    # --- selectors ------------------------------------------------------------

    def _emit(
        self, context: ContextLike, selector: SelectorContext, items: Sequence[RuleItem]
    ) -> Rule:
        rule = Rule(selector=selector)
        rule.add(*items)
        if isinstance(context, Rule):
            context.add(rule)
        return rule

    def _enclosing(self, context: ContextLike, operation: str) -> SelectorContext:
        enclosing = resolve_context(context)
        if enclosing.is_root:
            raise SelectorContextError(operation)
        return enclosing

    def block(
        self,
        names: str | Iterable[str],
        *items: RuleItem,
        parent: Rule | Stylesheet | None = None,
    ) -> Rule:
        """Compose ``.<prefix><name>`` for each name as one top-level selector list.

        *parent* only decides where the rule is appended; its selector is
        never combined with the block's.
        """
        names = [names] if isinstance(names, str) else list(names)
        prefix = self.config.selector_prefix
        selector = SelectorContext(selectors=tuple(f".{prefix}{name}" for name in names))
        logger.debug("block %r -> %s", names, selector)
        rule = Rule(selector=selector)
        rule.add(*items)
        if parent is not None:
            parent.add(rule)
        return rule

    def element(self, context: ContextLike, name: str, *items: RuleItem) -> Rule:
        """Compose ``<enclosing><element_separator><name>`` for each enclosing selector."""
        suffix = f"{self.config.element_separator}{name}"
        selector = self._enclosing(context, "element").map(lambda s: f"{s}{suffix}")
        logger.debug("element %r -> %s", name, selector)
        return self._emit(context, selector, items)

    def modifier(self, context: ContextLike, name: str, *items: RuleItem) -> Rule:
        """Compose ``<enclosing><modifier_separator><name>`` for each enclosing selector."""
        suffix = f"{self.config.modifier_separator}{name}"
        selector = self._enclosing(context, "modifier").map(lambda s: f"{s}{suffix}")
        logger.debug("modifier %r -> %s", name, selector)
        return self._emit(context, selector, items)

    def state(
        self,
        context: ContextLike,
        state_name: str,
        *items: RuleItem,
        prefix: str | None = None,
        qualify: bool | None = None,
    ) -> Rule:
        """Compose a state rule.

        Qualified states intersect the enclosing selector with
        ``.<prefix>-<state>`` (``.tab.is-open``); unqualified ones append
        ``<modifier_separator><prefix>-<state>`` (``.tab--is-open``).
        """
        if prefix is None:
            prefix = self.config.state_prefix
        if qualify is None:
            qualify = self.config.qualify_state
        enclosing = self._enclosing(context, "state")
        token = f"{prefix}-{state_name}"
        if qualify:
            selector = enclosing.map(lambda s: unify(s, f".{token}"))
        else:
            suffix = f"{self.config.modifier_separator}{token}"
            selector = enclosing.map(lambda s: f"{s}{suffix}")
        logger.debug("state %r (qualify=%s) -> %s", state_name, qualify, selector)
        return self._emit(context, selector, items)

    def qualify_with(self, context: ContextLike, qualifier: str, *items: RuleItem) -> Rule:
        """Unify the enclosing selector with *qualifier* (``button`` + ``.large``)."""
        enclosing = self._enclosing(context, "qualify_with")
        selector = SelectorContext.of(unify(str(enclosing), qualifier))
        logger.debug("qualify_with %r -> %s", qualifier, selector)
        return self._emit(context, selector, items)

    # Short aliases.
    b = block
    e = element
    m = modifier
    s = state
    q = qualify_with
