"""CLI command: cssgen media -- normalize media query expressions."""

from __future__ import annotations

import sys

import click

from cssgen.errors import MediaQueryParseError
from cssgen.media import and_, connect_with, not_, or_, parse_media_query, render_media_query


@click.command()
@click.argument("expressions", nargs=-1, required=True)
@click.option(
    "--join",
    "join",
    type=click.Choice(["and", "or"]),
    default="or",
    show_default=True,
    help="How to combine several expressions.",
)
@click.option("--negate", is_flag=True, help="Negate the combined query.")
def media(expressions: tuple[str, ...], join: str, negate: bool) -> None:
    """Parse media query EXPRESSIONS and print their canonical form.

    Several expressions are folded into one query, right to left.
    """
    try:
        queries = [parse_media_query(expr) for expr in expressions]
    except MediaQueryParseError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    query = connect_with(and_ if join == "and" else or_, queries)
    if negate:
        query = not_(query)
    click.echo(render_media_query(query))
