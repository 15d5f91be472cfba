from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator

DEFAULT_ELIGIBLE_TAGS: frozenset[str] = frozenset({"p", "div", "span"})


class ContentMode(str, Enum):
    STRIPPED_TEXT = "stripped-text"
    RAW_MARKUP = "raw-markup"


class ParseOptions(BaseModel):
    eligible_tags: set[str] = Field(default_factory=lambda: set(DEFAULT_ELIGIBLE_TAGS))
    content_mode: ContentMode = ContentMode.STRIPPED_TEXT

    @field_validator("eligible_tags")
    @classmethod
    def _normalize_tags(cls, tags: set[str]) -> set[str]:
        return {t.strip().lower() for t in tags if t.strip()}


class MarkupRequest(BaseModel):
    markup: str
    options: ParseOptions | None = None


class UrlRequest(BaseModel):
    url: str
    options: ParseOptions | None = None


class ParsedItem(BaseModel):
    tag_name: str = ""
    content: str
    indent_level: int = Field(default=0, ge=0)
    children: list[ParsedItem] = []


class ParseResult(BaseModel):
    items: list[ParsedItem]
    total_items: int
    max_depth: int = 0
    content_mode: ContentMode = ContentMode.STRIPPED_TEXT
    source_url: str | None = None
