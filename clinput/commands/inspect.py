"""
Inspect CLI Command

Parses an arbitrary token sequence with a chosen set of registered flags
and options and shows how every token was classified.

Command:
- clinput inspect -f v -o sugars -- makecoffee -v --sugars=2 viennois
"""

import sys
from rich.console import Console
from rich.table import Table
from rich.text import Text
import click
from clinput.commands.base import RichCommand, rich_help
from clinput.lib.parser import CommandLineInput, CollectingSink
from clinput.models.dataModel import ParsedInput

console: Console = Console()

PROGRAM_NAME: str = "inspect"


def table_registry(title: str, values: dict) -> Table:
    """Two column table of registered names and their parsed values."""
    table = Table(title=title, title_justify="left")
    table.add_column("Name", style="cyan")
    table.add_column("Value", style="green")
    for name, value in values.items():
        table.add_row(Text(name), Text(repr(value)))
    return table


def parsed_render(parsed: ParsedInput) -> None:
    """Print the flags, options, parameters and diagnostics of a parse."""
    if parsed.flags:
        console.print(table_registry("Flags", parsed.flags))
    if parsed.options:
        console.print(table_registry("Options", parsed.options))

    if parsed.parameters:
        table = Table(title="Parameters", title_justify="left")
        table.add_column("Index", style="cyan", justify="right")
        table.add_column("Value", style="green")
        for index, value in enumerate(parsed.parameters, start=1):
            table.add_row(str(index), Text(value))
        console.print(table)

    if parsed.diagnostics:
        table = Table(title="Diagnostics", title_justify="left")
        table.add_column("Kind", style="yellow")
        table.add_column("Message", style="red")
        for diagnostic in parsed.diagnostics:
            table.add_row(diagnostic.kind.value, Text(diagnostic.message))
        console.print(table)
    else:
        console.print("[bold green]All tokens classified.[/bold green]")


@click.command(
    cls=RichCommand,
    short_help="classify a token sequence",
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
    help=rich_help(
        command="inspect",
        description="Show how a token sequence is classified",
        usage="clinput inspect [-f NAME]... [-o NAME]... [--strict] -- TOKENS...",
        args={
            "-f, --flag NAME": "register a flag (repeatable)",
            "-o, --option NAME": "register an option (repeatable)",
            "--strict": "exit with status 1 if any token was not recognized",
            "TOKENS": "arguments to classify",
        },
    ),
)
@click.option("-f", "--flag", "flags", multiple=True, help="Register a flag")
@click.option("-o", "--option", "options", multiple=True, help="Register an option")
@click.option("--strict", is_flag=True, help="Fail on unrecognized tokens")
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
def inspect(
    flags: tuple[str, ...], options: tuple[str, ...], strict: bool, tokens: tuple[str, ...]
) -> None:
    """
    Register names, parse TOKENS and render the result.
    """
    cli_input = CommandLineInput([PROGRAM_NAME, *tokens], sink=CollectingSink())
    for name in flags:
        cli_input.flag_add(name)
    for name in options:
        cli_input.option_add(name)

    parsed: ParsedInput = cli_input.parse()
    parsed_render(parsed)

    if strict and not parsed.ok:
        sys.exit(1)
