"""CLI command: cssgen render -- render a stylesheet document to CSS."""

from __future__ import annotations

import sys

import click

from cssgen.config import RenderConfig
from cssgen.errors import CSSGenError
from cssgen.loader import load_stylesheet_file
from cssgen.serialize import render as render_stylesheet


@click.command()
@click.argument("document", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=4,
    show_default=True,
    help="Spaces per indentation level.",
)
def render(document: str, indent: int) -> None:
    """Render a JSON or TOML stylesheet document to CSS on stdout."""
    try:
        stylesheet = load_stylesheet_file(document)
        css = render_stylesheet(stylesheet, RenderConfig.with_indent(indent))
    except CSSGenError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if css:
        click.echo(css)
