"""CLI command: stylec check -- validate files of style directives."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from stylec.errors import StyleError
from stylec.importer import parse_style


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
def check(files: tuple[str, ...]) -> None:
    """Check that each FILE holds valid style directives.

    Prints one line per file and exits with code 1 if any file fails.
    """
    failed = 0
    for name in files:
        path = Path(name)
        try:
            parse_style(path.read_text(encoding="utf-8"))
        except StyleError as exc:
            failed += 1
            click.echo(f"{path}: {exc}")
            continue
        click.echo(f"OK: {path}")

    if failed:
        click.echo()
        click.echo(f"Summary: {failed} of {len(files)} file(s) failed")
        sys.exit(1)
