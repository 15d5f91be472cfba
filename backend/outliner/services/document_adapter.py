"""Read-only view over a parsed HTML document.

TreeBuilder only talks to ``DocumentAdapter``; ``SoupDocument`` is the
BeautifulSoup/lxml implementation used in production.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Sequence

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.builder import ParserRejectedMarkup
from bs4.element import PreformattedString

logger = logging.getLogger(__name__)

_PARSER = "lxml"


class ParseError(ValueError):
    """Raised when markup cannot be tokenized into a document at all."""


class DocumentAdapter(ABC):
    """Traversal primitives over a DOM-like tree, independent of the engine."""

    @property
    @abstractmethod
    def root(self) -> Any:
        """The implicit body container parsing starts from."""
        ...

    @abstractmethod
    def children(self, node: Any) -> Sequence[Any]:
        ...

    @abstractmethod
    def tag_name(self, node: Any) -> str:
        """Lowercase tag name, or "" for text nodes."""
        ...

    @abstractmethod
    def is_text(self, node: Any) -> bool:
        ...

    @abstractmethod
    def text_content(self, node: Any) -> str:
        ...

    @abstractmethod
    def own_text(self, node: Any) -> str:
        """Text of ``node`` with descendant-element text removed."""
        ...

    @abstractmethod
    def inner_markup(self, node: Any) -> str:
        ...

    def has_element_children(self, node: Any) -> bool:
        return any(not self.is_text(child) for child in self.children(node))


def _is_text_node(node: Any) -> bool:
    # Comments, CDATA, doctypes and processing instructions are
    # PreformattedString subclasses and never count as content.
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


class SoupDocument(DocumentAdapter):
    def __init__(self, soup: BeautifulSoup):
        self._soup = soup

    @property
    def root(self) -> Tag:
        return self._soup.body if self._soup.body is not None else self._soup

    def children(self, node: Any) -> list[Any]:
        if not isinstance(node, Tag):
            return []
        return [c for c in node.children if isinstance(c, Tag) or _is_text_node(c)]

    def tag_name(self, node: Any) -> str:
        if isinstance(node, Tag):
            return node.name.lower()
        return ""

    def is_text(self, node: Any) -> bool:
        return _is_text_node(node)

    def text_content(self, node: Any) -> str:
        if isinstance(node, Tag):
            return node.get_text()
        return str(node)

    def own_text(self, node: Any) -> str:
        if isinstance(node, Tag):
            return "".join(str(c) for c in node.children if _is_text_node(c))
        return str(node)

    def inner_markup(self, node: Any) -> str:
        if isinstance(node, Tag):
            return node.decode_contents()
        return str(node)


def parse_document(markup: str) -> SoupDocument:
    """Parse markup into a traversable document.

    Unbalanced or unknown tags are repaired by the HTML parser; only input
    that is not text, or that the parser rejects outright, raises ParseError.
    """
    if not isinstance(markup, str):
        raise ParseError(f"Markup must be a string, got {type(markup).__name__}")
    try:
        soup = BeautifulSoup(markup, _PARSER)
    except ParserRejectedMarkup as e:
        logger.warning("Parser rejected markup (%d chars): %s", len(markup), e)
        raise ParseError(f"Unable to parse markup: {e}") from e
    return SoupDocument(soup)
