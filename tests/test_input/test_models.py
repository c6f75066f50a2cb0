"""Tests for parse result models."""

from types import SimpleNamespace
import pytest
from pydantic import ValidationError
from clinput.lib.parser.tokens import TokenClassifier
from clinput.models.dataModel import Diagnostic, DiagnosticKind, ParsedInput


@pytest.fixture
def parsed() -> ParsedInput:
    return ParsedInput(
        flags={"v": True, "f": False},
        options={"sugars": "2", "milk": False},
        parameters=("makecoffee", "viennois"),
    )


def test_accessors(parsed):
    assert parsed.flag_get("v") is True
    assert parsed.flag_get("f") is False
    assert parsed.flag_get("x", "dflt") == "dflt"
    assert parsed.option_get("sugars") == "2"
    assert parsed.option_get("milk", "dflt") is False
    assert parsed.option_get("x", "dflt") == "dflt"
    assert parsed.parameter_get(2) == "viennois"
    assert parsed.parameter_get(3, "dflt") == "dflt"
    assert parsed.parameter_get("1", "dflt") == "dflt"
    assert parsed.parameter_count == 2
    assert parsed.ok


def test_result_is_frozen(parsed):
    with pytest.raises(ValidationError):
        parsed.parameters = ()


def test_diagnostic_kind_values():
    assert {kind.value for kind in DiagnosticKind} == {
        "flagNotFound",
        "combinedFlagNotFound",
        "unknownShortOptionType",
        "longOptionNotFound",
        "shortOptionNotFound",
        "longFlagNotFound",
    }


def test_diagnostic_str_is_message():
    diagnostic = Diagnostic(kind=DiagnosticKind.SHORT_OPTION_NOT_FOUND, token="c")
    assert str(diagnostic) == "Short option not found: c"
    assert diagnostic.combined is None


def test_diagnostic_message_falls_back_for_unlisted_kind():
    diagnostic = Diagnostic.model_construct(
        kind=SimpleNamespace(value="newKind"), token="x", combined=None
    )
    assert diagnostic.message == "newKind: x"


def test_public_members_documented():
    assert ParsedInput.parameter_count.__doc__
    assert TokenClassifier.tokens_classify.__doc__
