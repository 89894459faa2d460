"""Request validation and serialization.

Every encoder validates its request before producing anything, so an invalid request never
reaches the transport. Text translation and the document status/download calls are sent as
url-encoded forms; the document upload is sent as multipart form data because it carries the file.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final
from urllib.parse import urlencode

import aiohttp

from deepl_bindings.exceptions import BodySizeExceededError, InvalidRequestError
from deepl_bindings.models.language_models import Formality, Language

if TYPE_CHECKING:
    from deepl_bindings.models.document_models import DocumentHandle, DocumentTranslationStartRequest
    from deepl_bindings.models.translation_models import TranslationRequest

__all__: list[str] = [
    "FORM_CONTENT_TYPE",
    "MAX_BODY_SIZE",
    "EncodedForm",
    "encode_document_handle",
    "encode_document_upload",
    "encode_form",
    "encode_translation",
]

# See https://www.deepl.com/docs-api/accessing-the-api/limits/
MAX_BODY_SIZE: Final[int] = 128 * 1024
FORM_CONTENT_TYPE: Final[str] = "application/x-www-form-urlencoded"


@dataclass(frozen=True)
class EncodedForm:
    """A url-encoded request body ready to be sent."""

    body: bytes
    content_type: str = FORM_CONTENT_TYPE


def _language(value: Language | str | None, field: str, *, required: bool) -> str | None:
    if value is None or value == "":
        if required:
            msg: str = f"'{field}' field of the request cannot be omitted"
            raise InvalidRequestError(field, msg)
        return None
    if isinstance(value, Language):
        return value.wire
    return Language.parse(value).wire


def _formality(value: Formality | str | None) -> str | None:
    if value is None or value == "":
        return None
    try:
        return Formality(value).value
    except ValueError:
        msg = f"unknown formality: {value!r}"
        raise InvalidRequestError("formality", msg) from None


def encode_form(values: list[tuple[str, str]]) -> EncodedForm:
    """Url-encode form values, enforcing MAX_BODY_SIZE.

    Raises:
        BodySizeExceededError: If the encoded body is larger than MAX_BODY_SIZE.
    """
    body: bytes = urlencode(values).encode("ascii")
    if len(body) > MAX_BODY_SIZE:
        raise BodySizeExceededError(len(body), MAX_BODY_SIZE)
    return EncodedForm(body=body)


def encode_translation(request: TranslationRequest) -> EncodedForm:
    """Validate a TranslationRequest and encode it for POST /translate.

    Raises:
        InvalidRequestError: If 'text' is empty or 'target_lang' is missing.
        UnknownLanguageError: If a language string is not supported.
        BodySizeExceededError: If the encoded body is too large.
    """
    if not request.text:
        raise InvalidRequestError("text", "'text' field of translation request cannot be empty")
    target_lang: str | None = _language(request.target_lang, "target_lang", required=True)
    source_lang: str | None = _language(request.source_lang, "source_lang", required=False)

    values: list[tuple[str, str]] = [("text", request.text)]
    if source_lang:
        values.append(("source_lang", source_lang))
    values.append(("target_lang", str(target_lang)))
    if request.tag_handling:
        values.append(("tag_handling", ",".join(request.tag_handling)))
    if request.non_splitting_tags:
        values.append(("non_splitting_tags", ",".join(request.non_splitting_tags)))
    if request.ignore_tags:
        values.append(("ignore_tags", ",".join(request.ignore_tags)))
    # The wire flag is affirmative, the request flag is its negation.
    if request.do_not_split_sentences:
        values.append(("split_sentences", "0"))
    if request.preserve_formatting:
        values.append(("preserve_formatting", "1"))
    formality: str | None = _formality(request.formality)
    if formality:
        values.append(("formality", formality))
    if request.glossary_id:
        values.append(("glossary_id", request.glossary_id))
    return encode_form(values)


def encode_document_upload(request: DocumentTranslationStartRequest) -> aiohttp.FormData:
    """Validate a DocumentTranslationStartRequest and build the multipart body for POST /document.

    Raises:
        InvalidRequestError: If 'file' or 'filename' is empty or 'target_lang' is missing.
        UnknownLanguageError: If a language string is not supported.
    """
    if not request.file:
        raise InvalidRequestError("file", "'file' field must not be empty")
    if not request.filename:
        raise InvalidRequestError("filename", "'filename' field must not be empty")
    target_lang: str | None = _language(request.target_lang, "target_lang", required=True)
    source_lang: str | None = _language(request.source_lang, "source_lang", required=False)
    formality: str | None = _formality(request.formality)

    form = aiohttp.FormData()
    form.add_field("file", request.file, filename=request.filename, content_type="application/octet-stream")
    if source_lang:
        form.add_field("source_lang", source_lang)
    form.add_field("target_lang", str(target_lang))
    if formality:
        form.add_field("formality", formality)
    if request.glossary_id:
        form.add_field("glossary_id", request.glossary_id)
    return form


def encode_document_handle(handle: DocumentHandle) -> EncodedForm:
    """Validate a DocumentHandle and encode its key for the status and download calls.

    Raises:
        InvalidRequestError: If 'document_id' or 'document_key' is blank.
    """
    if not handle.document_id.strip():
        raise InvalidRequestError("document_id", "'document_id' must not be empty")
    if not handle.document_key.strip():
        raise InvalidRequestError("document_key", "'document_key' must not be empty")
    return encode_form([("document_key", handle.document_key)])
