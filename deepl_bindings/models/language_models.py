"""Closed value sets used in requests and responses.

Defines the supported languages, the formality setting and the document translation states.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Self

from deepl_bindings.exceptions import UnknownLanguageError

__all__: list[str] = ["DocumentStatus", "Formality", "Language"]


class Language(StrEnum):
    """Languages supported by the translation functions, valued by their wire code."""

    BG = "BG"  # Bulgarian
    CS = "CS"  # Czech
    DA = "DA"  # Danish
    DE = "DE"  # German
    EL = "EL"  # Greek
    EN = "EN"  # English
    ES = "ES"  # Spanish
    ET = "ET"  # Estonian
    FI = "FI"  # Finnish
    FR = "FR"  # French
    HU = "HU"  # Hungarian
    ID = "ID"  # Indonesian
    IT = "IT"  # Italian
    JA = "JA"  # Japanese
    LT = "LT"  # Lithuanian
    LV = "LV"  # Latvian
    NL = "NL"  # Dutch
    PL = "PL"  # Polish
    PT = "PT"  # Portuguese (all varieties mixed)
    RO = "RO"  # Romanian
    RU = "RU"  # Russian
    SK = "SK"  # Slovak
    SL = "SL"  # Slovenian
    SV = "SV"  # Swedish
    TR = "TR"  # Turkish
    UK = "UK"  # Ukrainian
    ZH = "ZH"  # Chinese

    @classmethod
    def parse(cls, code: str) -> Self:
        """Find the language matching a wire code.

        Args:
            code (str): Wire code such as "DE".

        Returns:
            Language: The matching member.

        Raises:
            UnknownLanguageError: If the code is empty or not supported.
        """
        try:
            return cls(code)
        except ValueError:
            raise UnknownLanguageError(code) from None

    @property
    def wire(self) -> str:
        return self.value


class Formality(StrEnum):
    """Whether the translation should lean towards formal or informal language."""

    DEFAULT = "default"
    MORE = "more"
    LESS = "less"


class DocumentStatus(StrEnum):
    """Server-side state of a document translation job.

    queued -> translating -> done | error. Both 'done' and 'error' are terminal.
    """

    QUEUED = "queued"
    TRANSLATING = "translating"
    DONE = "done"
    ERROR = "error"

    @property
    def is_terminal(self) -> bool:
        return self in (DocumentStatus.DONE, DocumentStatus.ERROR)
