r"""
Command line registry and parser.

Holds the recognized flag and option names, consumes the raw token
sequence exactly once and hands out a read-only ParsedInput.

Notation:
    -x                 short flag x
    -xyz               combined short flags x, y, z
    -x=value           short option x
    --name             long flag
    --name=value       long option
    anything else      next positional parameter (1-based)

Example:
    cli = CommandLineInput(["prog", "makecoffee", "-v", "--sugars=2", "viennois"])
    cli.flag_add("v").option_add("sugars")
    cli.parameter_get(1)       # "makecoffee"
    cli.option_get("sugars")   # "2"
"""

import threading
from typing import Any, Optional, Self, Sequence
from clinput.lib.log import LOG
from clinput.lib.parser.sinks import DiagnosticSink, sink_fromSettings
from clinput.lib.parser.tokens import tokens_classify
from clinput.models.dataModel import (
    ClassifyResult,
    Diagnostic,
    OptionValue,
    ParsedInput,
)


class CommandLineInput:
    """Registry of flags and options over one program invocation.

    Registration (`flag_add`, `option_add`) happens first. The first call
    to `parse()` or any accessor classifies the tokens; from then on the
    result is fixed.

    Attributes:
        argv: The full invocation, element 0 being the program identifier
        sink: Receiver of diagnostics produced during the parse
    """

    def __init__(
        self: Self, argv: Sequence[str], sink: Optional[DiagnosticSink] = None
    ) -> None:
        """Initialize the registry.

        Args:
            argv: Full invocation tokens; element 0 is discarded on parse
            sink: Diagnostic receiver, defaults to the configured one
        """
        self.argv: tuple[str, ...] = tuple(argv)
        self.sink: DiagnosticSink = sink if sink is not None else sink_fromSettings()
        self._flags: dict[str, bool] = {}
        self._options: dict[str, OptionValue] = {}
        self._parsed: Optional[ParsedInput] = None
        self._lock: threading.Lock = threading.Lock()

    @classmethod
    def create(
        cls: type[Self], argv: Sequence[str], sink: Optional[DiagnosticSink] = None
    ) -> Self:
        """Build a registry, for chaining straight into `flag_add`."""
        return cls(argv, sink)

    def _register(self: Self, registry: dict, name: str, kind: str) -> Self:
        if not isinstance(name, str):
            raise TypeError(f"{kind} name must be a string, not {type(name).__name__}")
        if self._parsed is not None:
            LOG(f"{kind} '{name}' registered after parse; ignored", level="WARNING")
            return self
        registry[name] = False
        return self

    def flag_add(self: Self, name: str) -> Self:
        """Register a flag, default False."""
        return self._register(self._flags, name, "Flag")

    def option_add(self: Self, name: str) -> Self:
        """Register an option, default False."""
        return self._register(self._options, name, "Option")

    @property
    def is_parsed(self: Self) -> bool:
        return self._parsed is not None

    def parse(self: Self) -> ParsedInput:
        """Classify the tokens once and return the result.

        Subsequent calls return the same ParsedInput.

        Returns:
            ParsedInput with flags, options, parameters and diagnostics
        """
        with self._lock:
            if self._parsed is None:
                self._parsed = self._tokens_consume()
            return self._parsed

    def _tokens_consume(self: Self) -> ParsedInput:
        result: ClassifyResult = tokens_classify(
            self.argv[1:], self._flags, self._options
        )
        for diagnostic in result.diagnostics:
            self.sink.emit(diagnostic)
        parsed: ParsedInput = result.parsedInput_build()
        LOG(
            f"Parsed {len(self.argv[1:])} token(s): "
            f"{parsed.parameter_count} parameter(s), "
            f"{len(parsed.diagnostics)} diagnostic(s)"
        )
        return parsed

    @property
    def diagnostics(self: Self) -> tuple[Diagnostic, ...]:
        return self.parse().diagnostics

    def flag_get(self: Self, name: str, default: Any = None) -> Any:
        """Return the flag value, or `default` if the flag was not registered."""
        return self.parse().flag_get(name, default)

    def option_get(self: Self, name: str, default: Any = None) -> Any:
        """Return the option value, or `default` if the option was not registered.

        False is returned if the option is registered but absent.
        """
        return self.parse().option_get(name, default)

    def parameter_get(self: Self, index: int, default: Any = None) -> Any:
        """Return the parameter at the 1-based `index`, or `default`."""
        return self.parse().parameter_get(index, default)
