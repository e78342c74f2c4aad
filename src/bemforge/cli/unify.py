"""CLI command: bemforge unify -- unify two selectors."""

from __future__ import annotations

import sys

import click

from bemforge.errors import SelectorUnificationError
from bemforge.selector.unify import unify as unify_selectors


@click.command()
@click.argument("base")
@click.argument("qualifier")
def unify(base: str, qualifier: str) -> None:
    """Print the selector matching both BASE and QUALIFIER.

    Exits with code 1 when the selectors can never match the same element.
    """
    try:
        click.echo(unify_selectors(base, qualifier))
    except SelectorUnificationError as exc:
        click.echo(f"Unification error: {exc}", err=True)
        sys.exit(1)
