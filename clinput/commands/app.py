"""
Defines the main Click command group for clinput.

This module provides:
- The root `cli` command group.
- Registration of subcommands from other modules.
"""

import click
from clinput import __version__
from clinput.commands.base import RichGroup
from clinput.commands.inspect import inspect


@click.group(
    cls=RichGroup,
    help="""
    clinput

    Classify command line tokens into flags, options and parameters.
    """,
)
@click.version_option(__version__, "-V", "--version", prog_name="clinput")
def cli() -> None:
    """
    The root Click command group for clinput.
    """
    pass


cli: click.Group = cli

cli.add_command(inspect)
