"""CLI command: bemforge selector -- print a composed BEM selector."""

from __future__ import annotations

import click

from bemforge.composer import Composer
from bemforge.config import ComposerConfig


@click.command()
@click.argument("block")
@click.option("-e", "--element", "elements", multiple=True, help="Element name (repeatable)")
@click.option("-m", "--modifier", "modifiers", multiple=True, help="Modifier name (repeatable)")
@click.option("--state", default=None, help="State name")
@click.option("--prefix", default="", help="Selector prefix")
@click.option("--element-separator", default="__", show_default=True)
@click.option("--modifier-separator", default="--", show_default=True)
@click.option("--state-prefix", default="is", show_default=True)
@click.option("--qualify/--no-qualify", default=True, help="Qualified (.x.is-open) or suffixed (.x--is-open) states")
def selector(
    block: str,
    elements: tuple[str, ...],
    modifiers: tuple[str, ...],
    state: str | None,
    prefix: str,
    element_separator: str,
    modifier_separator: str,
    state_prefix: str,
    qualify: bool,
) -> None:
    """Print the selector for BLOCK with its elements, modifiers and state.

    Elements are applied in order, then modifiers, then the state.
    """
    composer = Composer(
        ComposerConfig(
            selector_prefix=prefix,
            element_separator=element_separator,
            modifier_separator=modifier_separator,
            state_prefix=state_prefix,
            qualify_state=qualify,
        )
    )
    rule = composer.block(block)
    for name in elements:
        rule = composer.element(rule, name)
    for name in modifiers:
        rule = composer.modifier(rule, name)
    if state is not None:
        rule = composer.state(rule, state)
    click.echo(str(rule.selector))
