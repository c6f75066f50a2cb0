"""
Token classification for clinput.

A single left-to-right pass over the raw tokens (program identifier
already dropped) that sorts each token into one of:

- positional parameter: any token not starting with '-'
- long flag / long option: '--name' / '--name=value'
- short flag / short option: '-x' / '-x=value'
- combined short flags: '-xyz', equivalent to '-x -y -z'

Unregistered names never abort the pass. Each one yields a Diagnostic
and leaves the registries untouched.
"""

from typing import Iterable, Optional, Self
from clinput.models.dataModel import (
    ClassifyResult,
    Diagnostic,
    DiagnosticKind,
    OptionValue,
)


def token_split(body: str) -> tuple[str, Optional[str]]:
    """Split a dash-stripped token on its first '='.

    Args:
        body: Token with its leading dashes removed

    Returns:
        (name, value), where value is None when no '=' is present
    """
    name, sep, value = body.partition("=")
    if not sep:
        return body, None
    return name, value


class TokenClassifier:
    """Classifies tokens against registered flag and option names.

    Attributes:
        result: Accumulator holding working registries, parameters and
            diagnostics for the current pass
    """

    def __init__(
        self: Self, flags: dict[str, bool], options: dict[str, OptionValue]
    ) -> None:
        self.result: ClassifyResult = ClassifyResult(
            flags=dict(flags), options=dict(options)
        )

    def _complain(
        self: Self, kind: DiagnosticKind, token: str, combined: str | None = None
    ) -> None:
        self.result.diagnostics.append(
            Diagnostic(kind=kind, token=token, combined=combined)
        )

    def _option_set(
        self: Self, name: str, value: str, missing: DiagnosticKind
    ) -> None:
        if name in self.result.options:
            self.result.options[name] = value
        else:
            self._complain(missing, name)

    def _flag_set(self: Self, name: str, missing: DiagnosticKind) -> None:
        if name in self.result.flags:
            self.result.flags[name] = True
        else:
            self._complain(missing, name)

    def long_classify(self: Self, token: str) -> None:
        """Handle a '--' prefixed token: long option or long flag."""
        name, value = token_split(token.lstrip("-"))
        if value is not None:
            self._option_set(name, value, DiagnosticKind.LONG_OPTION_NOT_FOUND)
        else:
            self._flag_set(name, DiagnosticKind.LONG_FLAG_NOT_FOUND)

    def short_classify(self: Self, token: str) -> None:
        """Handle a '-' prefixed token: short option, short flag or
        combined short flags.
        """
        body: str = token.lstrip("-")
        name, value = token_split(body)
        if value is not None:
            self._option_set(name, value, DiagnosticKind.SHORT_OPTION_NOT_FOUND)
            return

        if len(body) == 1:
            self._flag_set(body, DiagnosticKind.FLAG_NOT_FOUND)
        elif len(body) > 1:
            for char in body:
                if char in self.result.flags:
                    self.result.flags[char] = True
                else:
                    self._complain(
                        DiagnosticKind.COMBINED_FLAG_NOT_FOUND, char, combined=body
                    )
        else:
            self._complain(DiagnosticKind.UNKNOWN_SHORT_OPTION_TYPE, body)

    def token_classify(self: Self, token: str) -> None:
        """Route one raw token to its handler."""
        if token.startswith("--"):
            self.long_classify(token)
        elif token.startswith("-"):
            self.short_classify(token)
        else:
            self.result.parameters.append(token)

    def tokens_classify(self: Self, tokens: Iterable[str]) -> ClassifyResult:
        """Classify every token in order and return the accumulator."""
        for token in tokens:
            self.token_classify(token)
        return self.result


def tokens_classify(
    tokens: Iterable[str],
    flags: dict[str, bool],
    options: dict[str, OptionValue],
) -> ClassifyResult:
    """Classify `tokens` against copies of the given registries.

    Args:
        tokens: Raw tokens, program identifier already removed
        flags: Registered flags (not mutated)
        options: Registered options (not mutated)

    Returns:
        ClassifyResult with the populated registries, parameters in
        encounter order and every diagnostic raised along the way
    """
    return TokenClassifier(flags, options).tokens_classify(tokens)
