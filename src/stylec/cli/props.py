"""CLI command: stylec props -- list the known properties."""

from __future__ import annotations

import click

from stylec.properties import default_registry


@click.command()
def props() -> None:
    """List every property with its argument shape.

    Properties marked with * accept the value 'unset'.
    """
    names = default_registry.names()
    width = max(len(n) for n in names)
    for name in names:
        prop = default_registry.resolve(name)
        marker = "*" if prop.can_unset else " "
        click.echo(f"{marker} {name.ljust(width)}  {prop.shape}")
