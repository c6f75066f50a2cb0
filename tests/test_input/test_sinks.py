"""Tests for diagnostic sinks."""

import io
import pytest
from unittest.mock import patch
from rich.console import Console
from clinput.config.settings import appsettings
from clinput.lib.parser import (
    CommandLineInput,
    CollectingSink,
    ConsoleSink,
    DiagnosticSink,
    LogSink,
    NullSink,
    sink_fromSettings,
)
from clinput.models.dataModel import Diagnostic, DiagnosticKind


@pytest.fixture
def captured_output() -> io.StringIO:
    """Capture console output."""
    output = io.StringIO()
    console = Console(file=output)
    with patch("clinput.lib.parser.sinks.console", console):
        yield output


@pytest.mark.parametrize("sink_cls", [ConsoleSink, LogSink, CollectingSink, NullSink])
def test_sinks_satisfy_protocol(sink_cls):
    assert isinstance(sink_cls(), DiagnosticSink)


def test_console_sink_prints_message(captured_output):
    cli = CommandLineInput(["prog", "-vq"], sink=ConsoleSink()).flag_add("v")
    cli.parse()
    assert "Flag not found: q (in combined flags -vq)" in captured_output.getvalue()


def test_log_sink_uses_warning_level():
    diagnostic = Diagnostic(kind=DiagnosticKind.LONG_FLAG_NOT_FOUND, token="verbose")
    with patch("clinput.lib.parser.sinks.LOG") as mock_log:
        LogSink().emit(diagnostic)
    mock_log.assert_called_once_with("Long flag not found: verbose", level="WARNING")


def test_collecting_sink_keeps_order():
    sink = CollectingSink()
    CommandLineInput(["prog", "--a", "-b", "--c=1"], sink=sink).parse()
    assert sink.messages == [
        "Long flag not found: a",
        "Flag not found: b",
        "Long option not found: c",
    ]


def test_sink_from_settings(monkeypatch):
    monkeypatch.setattr(appsettings, "noComplain", False)
    monkeypatch.setattr(appsettings, "diagnosticSink", "console")
    assert isinstance(sink_fromSettings(), ConsoleSink)
    monkeypatch.setattr(appsettings, "diagnosticSink", "log")
    assert isinstance(sink_fromSettings(), LogSink)
    monkeypatch.setattr(appsettings, "diagnosticSink", "silent")
    assert isinstance(sink_fromSettings(), NullSink)


def test_no_complain_silences(monkeypatch):
    monkeypatch.setattr(appsettings, "noComplain", True)
    monkeypatch.setattr(appsettings, "diagnosticSink", "console")
    assert isinstance(sink_fromSettings(), NullSink)
