"""
clinput: command line input classification.

Given the raw tokens of a program invocation, sorts each one into a
flag, an option with a value, or a positional parameter.

Example:
    from clinput import CommandLineInput

    cli = CommandLineInput.create(sys.argv).flag_add("v").option_add("sugars")
    if cli.flag_get("v"):
        ...
"""

from typing import Final

__version__: Final[str] = "0.1.0"

from clinput.lib.parser import (  # noqa: E402
    CommandLineInput,
    DiagnosticSink,
    ConsoleSink,
    LogSink,
    CollectingSink,
    NullSink,
)
from clinput.models.dataModel import (  # noqa: E402
    Diagnostic,
    DiagnosticKind,
    ParsedInput,
)

__all__ = [
    "__version__",
    "CommandLineInput",
    "DiagnosticSink",
    "ConsoleSink",
    "LogSink",
    "CollectingSink",
    "NullSink",
    "Diagnostic",
    "DiagnosticKind",
    "ParsedInput",
]
