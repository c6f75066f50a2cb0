"""
Diagnostic sinks for clinput.

A sink receives every Diagnostic as it is produced during a parse.
Which sink to use is the caller's choice:
- ConsoleSink: red line on standard error via Rich
- LogSink: application logger
- CollectingSink: in-memory list
- NullSink: discard
"""

from typing import Final, Protocol, Self, runtime_checkable
from rich.console import Console
from rich.markup import escape
from clinput.config.settings import appsettings
from clinput.lib.log import LOG
from clinput.models.dataModel import Diagnostic

console: Final[Console] = Console(stderr=True)


@runtime_checkable
class DiagnosticSink(Protocol):
    """Protocol for diagnostic receivers.

    Sinks must not raise; a bad token is never a reason to stop parsing.
    """

    def emit(self: Self, diagnostic: Diagnostic) -> None:
        """Receive one diagnostic.

        Args:
            diagnostic: The classification failure just detected
        """
        ...


class ConsoleSink:
    """Print diagnostics to standard error."""

    def emit(self: Self, diagnostic: Diagnostic) -> None:
        console.print(f"[bold red]{escape(diagnostic.message)}[/bold red]", highlight=False)


class LogSink:
    """Forward diagnostics to LOG at WARNING level.

    Records are only shown once `logger.enable("clinput")` has been called.
    """

    def emit(self: Self, diagnostic: Diagnostic) -> None:
        LOG(diagnostic.message, level="WARNING")


class CollectingSink:
    """Keep diagnostics in memory."""

    def __init__(self: Self) -> None:
        self.diagnostics: list[Diagnostic] = []

    def emit(self: Self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    @property
    def messages(self: Self) -> list[str]:
        return [d.message for d in self.diagnostics]


class NullSink:
    def emit(self: Self, diagnostic: Diagnostic) -> None:
        pass


def sink_fromSettings() -> DiagnosticSink:
    """Build the default sink described by `appsettings`.

    Returns:
        NullSink if `noComplain` is set, otherwise the sink named by
        `diagnosticSink`
    """
    if appsettings.noComplain:
        return NullSink()
    match appsettings.diagnosticSink:
        case "log":
            return LogSink()
        case "silent":
            return NullSink()
        case _:
            return ConsoleSink()
