"""Models for text translation and usage data.

Defines the TranslationRequest payload and the dataclasses the /translate and /usage
JSON responses are decoded into.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from dataclasses_json import DataClassJsonMixin, dataclass_json

from deepl_bindings.models.language_models import Formality, Language

__all__: list[str] = ["TextResult", "TranslationRequest", "TranslationResponse", "UsageResponse"]


@dataclass
class TranslationRequest:
    """Payload of a text translation request.

    Attributes:
        text (str): Text to be translated. Must not be empty.
        target_lang (Language | str | None): Language to translate into. Required.
        source_lang (Language | str | None): Language of the text. None lets the API detect it.
        tag_handling (list[str]): Kinds of tags to handle, sent comma-separated.
        non_splitting_tags (list[str]): XML tags which never split sentences.
        ignore_tags (list[str]): XML tags whose content is never translated.
        do_not_split_sentences (bool): Ask the engine not to split the input into sentences.
            Advisable when every request carries exactly one sentence.
        preserve_formatting (bool): Keep punctuation and casing at sentence boundaries as given.
        formality (Formality | None): Formal or informal register, for target languages that support it.
        glossary_id (str | None): Glossary to use. Requires source_lang to be set.
    """

    text: str
    target_lang: Language | str | None = None
    source_lang: Language | str | None = None
    tag_handling: list[str] = field(default_factory=list)
    non_splitting_tags: list[str] = field(default_factory=list)
    ignore_tags: list[str] = field(default_factory=list)
    do_not_split_sentences: bool = False
    preserve_formatting: bool = False
    formality: Formality | None = None
    glossary_id: str | None = None


@dataclass_json
@dataclass
class TextResult(DataClassJsonMixin):
    """One translated text segment.

    Attributes:
        detected_source_language (str): Source language detected (or confirmed) by the API.
        text (str): Translated text.
    """

    detected_source_language: str
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass_json
@dataclass
class TranslationResponse(DataClassJsonMixin):
    """Decoded /translate response. Translations keep the order of the request texts."""

    translations: list[TextResult]


@dataclass_json
@dataclass
class UsageResponse(DataClassJsonMixin):
    """Character usage of the current billing period.

    Attributes:
        character_count (int): Characters translated so far in the current billing period.
        character_limit (int): Maximum number of characters for the current billing period.
    """

    character_count: int
    character_limit: int

    @property
    def limit_reached(self) -> bool:
        return self.character_limit > 0 and self.character_count >= self.character_limit
