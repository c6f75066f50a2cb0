"""Tests for package logging inside a host program."""

import importlib
import io
import pytest
from loguru import logger
import clinput.lib.log
from clinput.lib.parser import CommandLineInput, NullSink


@pytest.fixture
def host_output() -> io.StringIO:
    """A handler owned by the host program."""
    output = io.StringIO()
    handler_id = logger.add(output, format="{message}")
    yield output
    logger.remove(handler_id)


def test_host_handlers_survive_import(host_output):
    importlib.reload(clinput.lib.log)
    logger.info("host app message")
    assert "host app message" in host_output.getvalue()


def test_parse_is_silent_while_package_disabled(host_output):
    logger.disable("clinput")
    CommandLineInput(["prog", "-x"], sink=NullSink()).parse()
    assert "Parsed" not in host_output.getvalue()


def test_enabled_package_reaches_host_handlers(host_output, monkeypatch):
    from clinput.config.settings import appsettings

    monkeypatch.setattr(appsettings, "beQuiet", False)
    logger.enable("clinput")
    try:
        CommandLineInput(["prog", "a"], sink=NullSink()).parse()
    finally:
        logger.disable("clinput")
    assert "Parsed 1 token(s)" in host_output.getvalue()
