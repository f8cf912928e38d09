"""CLI command: stylec fmt -- print directives in canonical form."""

from __future__ import annotations

import sys

import click

from stylec.config import ExportConfig
from stylec.errors import StyleError
from stylec.exporter import export_style
from stylec.importer import parse_style


@click.command()
@click.argument("text", required=False)
@click.option("-a", "--all", "include_defaults", is_flag=True,
              help="Also print properties left at their default value.")
@click.option("-s", "--separator", default=" ", show_default=True, envvar="STYLEC_SEPARATOR",
              help="Text written between directives.")
@click.option("-l", "--lines", is_flag=True, help="Put each directive on its own line.")
def fmt(text: str | None, include_defaults: bool, separator: str, lines: bool) -> None:
    """Parse style directives and print them back in canonical order.

    TEXT defaults to standard input. Exits with code 1 if the directives
    cannot be parsed.
    """
    if text is None:
        text = click.get_text_stream("stdin").read()

    try:
        style = parse_style(text)
    except StyleError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    config = ExportConfig(
        separator="\n" if lines else separator,
        include_defaults=include_defaults,
    )
    click.echo(export_style(style, config=config))
