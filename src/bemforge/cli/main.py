"""bemforge CLI entry point: Click group with subcommands."""

import logging

import click

from bemforge import __version__


@click.group()
@click.version_option(version=__version__, prog_name="bemforge")
@click.option("--verbose", is_flag=True, default=False, help="Log each composition step")
def cli(verbose: bool) -> None:
    """bemforge - compose prefixed BEM selectors and custom properties."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Import and register subcommands
from bemforge.cli.selector import selector  # noqa: E402
from bemforge.cli.unify import unify  # noqa: E402
from bemforge.cli.var import var  # noqa: E402

cli.add_command(selector)
cli.add_command(var)
cli.add_command(unify)
