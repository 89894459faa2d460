from __future__ import annotations

import pytest

from deepl_bindings.exceptions import UnknownLanguageError
from deepl_bindings.models.language_models import DocumentStatus, Formality, Language


@pytest.mark.parametrize("language", list(Language))
def test_parse_round_trips_every_language(language: Language) -> None:
    assert Language.parse(language.wire) is language
    assert Language.parse(str(language)) is language


@pytest.mark.parametrize("code", ["", "XX", "de", "EN-GB"])
def test_parse_rejects_unsupported_codes(code: str) -> None:
    with pytest.raises(UnknownLanguageError) as excinfo:
        Language.parse(code)

    assert excinfo.value.code == code


def test_unknown_language_error_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="could not find API language"):
        Language.parse("XX")


def test_wire_string_is_the_two_letter_code() -> None:
    assert Language.DE.wire == "DE"
    assert f"{Language.JA}" == "JA"


def test_formality_wire_values_are_distinct() -> None:
    assert Formality.DEFAULT.value == "default"
    assert Formality.MORE.value == "more"
    assert Formality.LESS.value == "less"
    assert len({member.value for member in Formality}) == 3


def test_document_status_terminal_states() -> None:
    assert DocumentStatus.DONE.is_terminal
    assert DocumentStatus.ERROR.is_terminal
    assert not DocumentStatus.QUEUED.is_terminal
    assert not DocumentStatus.TRANSLATING.is_terminal
