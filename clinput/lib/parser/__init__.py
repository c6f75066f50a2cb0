"""
Parser package for clinput.

Classifies command line tokens into flags, options and positional
parameters, reporting unrecognized tokens through pluggable sinks.
"""

from .base import CommandLineInput
from .sinks import (
    DiagnosticSink,
    ConsoleSink,
    LogSink,
    CollectingSink,
    NullSink,
    sink_fromSettings,
)
from .tokens import TokenClassifier, token_split, tokens_classify

__all__ = [
    "CommandLineInput",
    "DiagnosticSink",
    "ConsoleSink",
    "LogSink",
    "CollectingSink",
    "NullSink",
    "sink_fromSettings",
    "TokenClassifier",
    "token_split",
    "tokens_classify",
]
