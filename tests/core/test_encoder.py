"""Unit tests for the request encoders."""

from __future__ import annotations

from urllib.parse import parse_qsl

import pytest

from deepl_bindings.core import encoder
from deepl_bindings.exceptions import BodySizeExceededError, InvalidRequestError, UnknownLanguageError
from deepl_bindings.models import (
    DocumentHandle,
    DocumentTranslationStartRequest,
    Formality,
    Language,
    TranslationRequest,
)


def _pairs(form: encoder.EncodedForm) -> list[tuple[str, str]]:
    return parse_qsl(form.body.decode("ascii"), keep_blank_values=True)


def _multipart_fields(form) -> dict[str, object]:
    # FormData keeps (type_options, headers, value) tuples
    return {opts["name"]: value for opts, _headers, value in form._fields}


def test_minimal_translation_request() -> None:
    form = encoder.encode_translation(TranslationRequest(text="Hallo Welt!", target_lang=Language.EN))

    assert _pairs(form) == [("text", "Hallo Welt!"), ("target_lang", "EN")]
    assert form.content_type == "application/x-www-form-urlencoded"


def test_full_translation_request_field_order() -> None:
    request = TranslationRequest(
        text="<p>Hallo</p>",
        source_lang=Language.DE,
        target_lang="EN",
        tag_handling=["xml"],
        non_splitting_tags=["b", "i"],
        ignore_tags=["code", "pre"],
        do_not_split_sentences=True,
        preserve_formatting=True,
        formality=Formality.LESS,
        glossary_id="gl-1",
    )

    assert _pairs(encoder.encode_translation(request)) == [
        ("text", "<p>Hallo</p>"),
        ("source_lang", "DE"),
        ("target_lang", "EN"),
        ("tag_handling", "xml"),
        ("non_splitting_tags", "b,i"),
        ("ignore_tags", "code,pre"),
        ("split_sentences", "0"),
        ("preserve_formatting", "1"),
        ("formality", "less"),
        ("glossary_id", "gl-1"),
    ]


def test_default_flags_are_omitted() -> None:
    request = TranslationRequest(text="x", target_lang=Language.FR, formality=Formality.DEFAULT)
    keys = [key for key, _ in _pairs(encoder.encode_translation(request))]

    assert "split_sentences" not in keys
    assert "preserve_formatting" not in keys
    assert "source_lang" not in keys
    assert keys[-1] == "formality"


def test_empty_text_is_rejected_before_target() -> None:
    with pytest.raises(InvalidRequestError) as excinfo:
        encoder.encode_translation(TranslationRequest(text=""))

    assert excinfo.value.field == "text"
    assert "cannot be empty" in str(excinfo.value)


@pytest.mark.parametrize("target", [None, ""])
def test_missing_target_lang_is_rejected(target) -> None:
    with pytest.raises(InvalidRequestError) as excinfo:
        encoder.encode_translation(TranslationRequest(text="x", target_lang=target))

    assert excinfo.value.field == "target_lang"


def test_unknown_language_string_is_rejected() -> None:
    with pytest.raises(UnknownLanguageError):
        encoder.encode_translation(TranslationRequest(text="x", target_lang="XX"))


def test_unknown_formality_is_rejected() -> None:
    with pytest.raises(InvalidRequestError) as excinfo:
        encoder.encode_translation(TranslationRequest(text="x", target_lang=Language.DE, formality="polite"))

    assert excinfo.value.field == "formality"


def test_body_at_limit_is_accepted() -> None:
    # 'text=' plus the payload fills the body exactly
    form = encoder.encode_form([("text", "a" * (encoder.MAX_BODY_SIZE - len("text=")))])

    assert len(form.body) == encoder.MAX_BODY_SIZE


def test_body_above_limit_is_rejected() -> None:
    with pytest.raises(BodySizeExceededError) as excinfo:
        encoder.encode_translation(TranslationRequest(text="a" * encoder.MAX_BODY_SIZE, target_lang=Language.DE))

    assert excinfo.value.limit == 128 * 1024
    assert excinfo.value.size > excinfo.value.limit
    assert "should not exceed maximum of 131072" in str(excinfo.value)


def test_document_upload_fields() -> None:
    request = DocumentTranslationStartRequest(
        file=b"Hallo Welt",
        filename="hello.txt",
        target_lang=Language.EN,
        source_lang="DE",
        formality=Formality.MORE,
        glossary_id="gl-2",
    )

    fields = _multipart_fields(encoder.encode_document_upload(request))

    assert fields == {
        "file": b"Hallo Welt",
        "source_lang": "DE",
        "target_lang": "EN",
        "formality": "more",
        "glossary_id": "gl-2",
    }


def test_document_upload_file_part_carries_filename() -> None:
    form = encoder.encode_document_upload(
        DocumentTranslationStartRequest(file=b"data", filename="report.docx", target_lang=Language.DE)
    )

    file_opts = next(opts for opts, _headers, _value in form._fields if opts["name"] == "file")
    assert file_opts["filename"] == "report.docx"


@pytest.mark.parametrize(
    ("file", "filename", "target", "field"),
    [
        (b"", "a.txt", Language.DE, "file"),
        (b"x", "", Language.DE, "filename"),
        (b"x", "a.txt", None, "target_lang"),
    ],
)
def test_document_upload_validation(file: bytes, filename: str, target, field: str) -> None:
    request = DocumentTranslationStartRequest(file=file, filename=filename, target_lang=target)

    with pytest.raises(InvalidRequestError) as excinfo:
        encoder.encode_document_upload(request)

    assert excinfo.value.field == field


def test_document_handle_form() -> None:
    form = encoder.encode_document_handle(DocumentHandle(document_id="id-1", document_key="key&1"))

    assert _pairs(form) == [("document_key", "key&1")]


@pytest.mark.parametrize(("doc_id", "doc_key", "field"), [(" ", "k", "document_id"), ("d", "", "document_key")])
def test_blank_document_handle_is_rejected(doc_id: str, doc_key: str, field: str) -> None:
    with pytest.raises(InvalidRequestError) as excinfo:
        encoder.encode_document_handle(DocumentHandle(document_id=doc_id, document_key=doc_key))

    assert excinfo.value.field == field
