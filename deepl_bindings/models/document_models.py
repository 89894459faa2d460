"""Models for the document translation workflow.

A document job is started by an upload which yields a DocumentHandle. The handle is the only link
between the upload, the status checks and the download; the client does not keep it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from dataclasses_json import DataClassJsonMixin, dataclass_json

from deepl_bindings.models.language_models import DocumentStatus, Formality, Language

__all__: list[str] = ["DocumentHandle", "DocumentTranslationStartRequest", "DocumentTranslationStatus"]


@dataclass
class DocumentTranslationStartRequest:
    """Payload of a document upload.

    Attributes:
        file (bytes): Content of the document (.docx, .pptx, .pdf, .htm(l) or .txt).
        filename (str): Name of the document. The server derives the file type from its extension.
        target_lang (Language | str | None): Language to translate into. Required.
        source_lang (Language | str | None): Language of the document. None lets the API detect it.
        formality (Formality | None): Formal or informal register.
        glossary_id (str | None): Glossary to use.
    """

    file: bytes = field(repr=False)
    filename: str
    target_lang: Language | str | None = None
    source_lang: Language | str | None = None
    formality: Formality | None = None
    glossary_id: str | None = None


@dataclass_json
@dataclass(frozen=True)
class DocumentHandle(DataClassJsonMixin):
    """Identifies an uploaded document job.

    Attributes:
        document_id (str): Unique id of the document job.
        document_key (str): Secret needed to query and download the document. Not shown in repr.
    """

    document_id: str
    document_key: str = field(repr=False)


@dataclass_json
@dataclass
class DocumentTranslationStatus(DataClassJsonMixin):
    """Snapshot of a document job as reported by the server.

    Attributes:
        document_id (str): Unique id of the document job.
        status (DocumentStatus): Current state.
        seconds_remaining (int | None): Estimated seconds until the translation is done.
        billed_characters (int | None): Characters billed for the document.
        error_message (str | None): Description of the failure when status is 'error'.
    """

    document_id: str
    status: DocumentStatus
    seconds_remaining: int | None = None
    billed_characters: int | None = None
    error_message: str | None = None

    @property
    def ok(self) -> bool:
        return self.status != DocumentStatus.ERROR

    @property
    def done(self) -> bool:
        return self.status == DocumentStatus.DONE
