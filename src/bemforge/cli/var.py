"""CLI command: bemforge var -- print a custom-property declaration or reference."""

from __future__ import annotations

import sys

import click

from bemforge.composer import Composer
from bemforge.config import ComposerConfig


@click.command()
@click.argument("name")
@click.argument("value", required=False)
@click.option("--prefix", default="", help="Selector prefix")
@click.option("--fallback", default=None, help="Fallback for the var() reference")
def var(name: str, value: str | None, prefix: str, fallback: str | None) -> None:
    """Print the declaration for NAME when VALUE is given, else its var() reference.

    --fallback only applies to the reference; combining it with VALUE exits
    with code 1.
    """
    if value is not None and fallback is not None:
        click.echo("Error: --fallback cannot be used with VALUE", err=True)
        sys.exit(1)
    composer = Composer(ComposerConfig(selector_prefix=prefix))
    if value is not None:
        click.echo(str(composer.create_var(name, value)))
    else:
        click.echo(composer.use_var(name, fallback=fallback))
