"""
dataModel.py

This module defines the data models used throughout the clinput package.
The models leverage Pydantic for validation and immutability.

Features:
- Enum of the diagnostic kinds produced while classifying tokens.
- Structured diagnostic records with the human-readable rendering.
- The read-only parse result with its typed accessors.
- The mutable accumulator used during a single classification pass.

Usage:
Import these models to inspect the outcome of a parse.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

OptionValue = Union[str, Literal[False]]


class DiagnosticKind(Enum):
    """
    Enum of classification failures.

    Every member names an unregistered (or empty) name met while
    classifying a dash-prefixed token.
    """

    FLAG_NOT_FOUND = "flagNotFound"
    COMBINED_FLAG_NOT_FOUND = "combinedFlagNotFound"
    UNKNOWN_SHORT_OPTION_TYPE = "unknownShortOptionType"
    LONG_OPTION_NOT_FOUND = "longOptionNotFound"
    SHORT_OPTION_NOT_FOUND = "shortOptionNotFound"
    LONG_FLAG_NOT_FOUND = "longFlagNotFound"


class Diagnostic(BaseModel):
    """A single non-fatal classification failure.

    Attributes:
        kind: Which failure occurred
        token: The offending name (or character, for combined flags)
        combined: The full combined-flags body the character came from
    """

    model_config = ConfigDict(frozen=True)

    kind: DiagnosticKind
    token: str
    combined: Optional[str] = Field(
        default=None, description="Combined short-flag body, if any."
    )

    @property
    def message(self) -> str:
        """Human-readable line, '<Reason>: <offending token>'."""
        match self.kind:
            case DiagnosticKind.FLAG_NOT_FOUND:
                return f"Flag not found: {self.token}"
            case DiagnosticKind.COMBINED_FLAG_NOT_FOUND:
                return f"Flag not found: {self.token} (in combined flags -{self.combined})"
            case DiagnosticKind.UNKNOWN_SHORT_OPTION_TYPE:
                return f"Unknown short option type: -{self.token}"
            case DiagnosticKind.LONG_OPTION_NOT_FOUND:
                return f"Long option not found: {self.token}"
            case DiagnosticKind.SHORT_OPTION_NOT_FOUND:
                return f"Short option not found: {self.token}"
            case DiagnosticKind.LONG_FLAG_NOT_FOUND:
                return f"Long flag not found: {self.token}"
            case _:
                return f"{self.kind.value}: {self.token}"

    def __str__(self) -> str:
        return self.message


class ParsedInput(BaseModel):
    """Read-only outcome of parsing a token sequence.

    Attributes:
        flags: Registered flag name -> whether it was present
        options: Registered option name -> supplied value, or False
        parameters: Positional tokens in encounter order
        diagnostics: Every classification failure, in encounter order
    """

    model_config = ConfigDict(frozen=True)

    flags: dict[str, bool] = Field(default_factory=dict)
    options: dict[str, OptionValue] = Field(default_factory=dict)
    parameters: tuple[str, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    def flag_get(self, name: str, default: Any = None) -> Any:
        """Return the flag value, or `default` if `name` was never registered."""
        if name in self.flags:
            return self.flags[name]
        return default

    def option_get(self, name: str, default: Any = None) -> Any:
        """Return the option value (False when registered but absent),
        or `default` if `name` was never registered.
        """
        if name in self.options:
            return self.options[name]
        return default

    def parameter_get(self, index: int, default: Any = None) -> Any:
        """Return the parameter at the 1-based `index`, or `default`."""
        if isinstance(index, bool) or not isinstance(index, int):
            return default
        if 1 <= index <= len(self.parameters):
            return self.parameters[index - 1]
        return default

    @property
    def parameter_count(self) -> int:
        """Number of positional parameters."""
        return len(self.parameters)

    @property
    def ok(self) -> bool:
        """True when no token failed classification."""
        return not self.diagnostics


@dataclass
class ClassifyResult:
    """Accumulator filled during one left-to-right classification pass.

    Attributes:
        flags: Working copy of the registered flags
        options: Working copy of the registered options
        parameters: Positional tokens collected so far
        diagnostics: Failures collected so far
    """

    flags: dict[str, bool]
    options: dict[str, OptionValue]
    parameters: list[str] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def parsedInput_build(self) -> ParsedInput:
        """Freeze the accumulator into a ParsedInput."""
        return ParsedInput(
            flags=dict(self.flags),
            options=dict(self.options),
            parameters=tuple(self.parameters),
            diagnostics=tuple(self.diagnostics),
        )
