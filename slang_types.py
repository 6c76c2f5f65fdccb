from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

LOCAL_LABEL = "Local Dictionary"
EXTERNAL_LABEL = "External Dictionary"
GENERATIVE_LABEL = "Generative AI"
ERROR_LABEL = "Error"


class Source(str, Enum):
    LOCAL = "local"
    EXTERNAL = "external"
    GENERATIVE = "generative"


@dataclass(frozen=True)
class SlangEntry:
    """A single known slang mapping."""
    term: str
    translation: str
    context: str = "casual"
    example: str = ""
    source: Source = Source.LOCAL


@dataclass(frozen=True)
class GenerativeResult:
    translation: str
    context: str
    example: str = ""


@dataclass(frozen=True)
class TranslationOutcome:
    """What a translate call hands back to the caller."""
    translated_text: str
    tone_label: str
    source_label: str
    matched_entries: Tuple[SlangEntry, ...] = field(default_factory=tuple)
    example_text: str = ""

    @property
    def is_error(self) -> bool:
        return self.source_label == ERROR_LABEL


@dataclass(frozen=True)
class BatchLookup:
    term: str
    entry: Optional[SlangEntry]
    success: bool
    error: Optional[str] = None
