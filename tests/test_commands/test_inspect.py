"""Tests for the inspect command and root group."""

import sys
import pytest
from click.testing import CliRunner
from clinput import __version__
from clinput.commands.app import cli
from clinput.main import main


@pytest.fixture
def runner():
    return CliRunner()


def test_version_output(runner):
    result = runner.invoke(cli, ["-V"])
    assert result.exit_code == 0
    assert "clinput" in result.output
    assert __version__ in result.output


def test_inspect_end_to_end(runner):
    result = runner.invoke(
        cli,
        ["inspect", "-f", "v", "-o", "sugars", "--", "makecoffee", "-v", "--sugars=2", "viennois"],
    )
    assert result.exit_code == 0
    assert "makecoffee" in result.output
    assert "viennois" in result.output
    assert "'2'" in result.output
    assert "All tokens classified" in result.output


def test_inspect_reports_diagnostics(runner):
    result = runner.invoke(cli, ["inspect", "-f", "v", "--", "-vq"])
    assert result.exit_code == 0
    assert "combinedFlagNotFound" in result.output


def test_inspect_strict_fails_on_diagnostics(runner):
    result = runner.invoke(cli, ["inspect", "--strict", "--", "--verbose"])
    assert result.exit_code == 1
    assert "longFlagNotFound" in result.output


def test_inspect_strict_passes_when_clean(runner):
    result = runner.invoke(cli, ["inspect", "--strict", "-f", "verbose", "--", "--verbose"])
    assert result.exit_code == 0


def test_invalid_command(runner):
    result = runner.invoke(cli, ["nope"])
    assert result.exit_code != 0


def test_main_entry(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["clinput", "-V"])
    with pytest.raises(SystemExit) as exit_info:
        main()
    assert exit_info.value.code == 0
    assert __version__ in capsys.readouterr().out
