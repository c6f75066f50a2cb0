"""
Base classes for Rich-enhanced Click commands and groups.

This module defines:
- `RichGroup`: A Click group with Rich-rendered help.
- `RichCommand`: A Click command with Rich-rendered help.
- `rich_help`: Builder for the markup used as command help text.
"""

from rich.console import Console
from rich.panel import Panel
import click

console: Console = Console()


def rich_help(command: str, description: str, usage: str, args: dict) -> str:
    """
    Generate Rich-enhanced help text for commands.

    :param command: The command name.
    :param description: Description of the command.
    :param usage: Usage syntax for the command.
    :param args: Dictionary of arguments and their descriptions.
    :return: Formatted Rich help string.
    """
    help_text = f"[bold cyan]{command}: {description}[/bold cyan]\n\n"
    help_text += f"[bold yellow]Usage:[/bold yellow]\n    [green]{usage}[/green]\n\n"
    help_text += "[bold yellow]Arguments:[/bold yellow]\n"
    for arg, desc in args.items():
        help_text += f"    [green]{arg}[/green]: {desc}\n"
    return help_text


class RichGroup(click.Group):
    """
    A Click Group that renders its help with Rich.
    """

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """
        Render the group-level help message.

        :param ctx: The Click context for the command group.
        :param formatter: The Click help formatter (unused).
        """
        info_name: str = ctx.info_name or ""
        console.print(
            f"[bold yellow]Usage:[/bold yellow] [cyan]{info_name}[/cyan] "
            f"[magenta][OPTIONS] COMMAND [ARGS]...[/magenta]\n",
            highlight=False,
        )

        if self.help:
            console.print(f"[bold cyan]{self.help.strip()}[/bold cyan]\n")

        if self.commands:
            console.print("[bold green]Available Commands:[/bold green]")
            for name, command in self.commands.items():
                console.print(
                    f"- [cyan]{name}[/cyan]: [white]{command.short_help or 'No description available.'}[/white]"
                )
            console.print()

        params = self.get_params(ctx)
        if params:
            console.print("[bold yellow]Options:[/bold yellow]")
            for param in params:
                console.print(
                    f"- [cyan]{', '.join(param.opts)}[/cyan]: {getattr(param, 'help', None) or 'No description'}"
                )


class RichCommand(click.Command):
    """
    A Click Command that renders its help inside a Rich panel.
    """

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        help_text = self.help or "No help text available."
        panel_width = max(len(line) for line in help_text.splitlines()) + 10
        panel_width = min(panel_width, 80)  # Cap the width
        console.print(
            Panel(help_text, expand=False, width=panel_width, border_style="cyan")
        )
