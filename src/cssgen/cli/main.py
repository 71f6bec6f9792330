"""cssgen CLI entry point: Click group with subcommands."""

import logging

import click

from cssgen import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cssgen")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """cssgen - render structured stylesheets and media queries to CSS."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Import and register subcommands
from cssgen.cli.media import media  # noqa: E402
from cssgen.cli.render import render  # noqa: E402

cli.add_command(render)
cli.add_command(media)
