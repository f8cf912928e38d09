"""stylec CLI entry point: Click group with subcommands."""

import logging

import click

from stylec import __version__


@click.group()
@click.version_option(version=__version__, prog_name="stylec")
@click.option("-v", "--verbose", is_flag=True, help="Log each directive as it is applied.")
def cli(verbose: bool) -> None:
    """stylec - read, normalize and check terminal style directives."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Import and register subcommands
from stylec.cli.check import check  # noqa: E402
from stylec.cli.fmt import fmt  # noqa: E402
from stylec.cli.props import props  # noqa: E402

cli.add_command(fmt)
cli.add_command(check)
cli.add_command(props)
