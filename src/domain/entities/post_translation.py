"""
Domain entities for the post translation pipeline.
Zero external dependencies, pure Python dataclasses only.
"""

from dataclasses import dataclass
from typing import Optional

SUPPORTED_LANGUAGES: dict[str, str] = {
    "it": "Italian",
    "es": "Spanish",
    "de": "German",
}


@dataclass(frozen=True)
class PublishEvent:
    post_id: int
    post_type: str
    title: str
    content: str


@dataclass(frozen=True)
class Document:
    title: str
    body: str
    language: str


@dataclass(frozen=True)
class Chunk:
    index: int
    text: str


@dataclass(frozen=True)
class TranslationResult:
    """Either a translated chunk or a failure marker, never both."""

    text: Optional[str]

    @property
    def ok(self) -> bool:
        return self.text is not None

    @classmethod
    def success(cls, text: str) -> "TranslationResult":
        return cls(text=text)

    @classmethod
    def failure(cls) -> "TranslationResult":
        return cls(text=None)


@dataclass(frozen=True)
class TranslatedDocument:
    title: str
    body: str
    language: str


def decorate_title(title: str, language: str) -> str:
    """Append the uppercased language code, e.g. ("Hello", "es") -> "Hello (ES)"."""
    return f"{title} ({language.upper()})"
