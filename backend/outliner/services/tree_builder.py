"""Build an indent-leveled forest of ParsedItem from an HTML document.

Each sibling scope owns a fresh IndentStack seeded at the scope's base
level. Eligible elements open a new scope for their children; ineligible
elements are transparent and their children are walked in the enclosing
scope, as if the wrapper were not there.
"""

from __future__ import annotations

import logging
from typing import Any

from outliner.models.parse_models import ContentMode, ParsedItem, ParseOptions, ParseResult
from outliner.services.document_adapter import DocumentAdapter, parse_document
from outliner.services.indent_stack import IndentStack
from outliner.services.outline_export import count_items, max_indent
from outliner.services.outline_markers import MarkerKind, match_marker

logger = logging.getLogger(__name__)


class TreeBuilder:
    def __init__(self, options: ParseOptions | None = None):
        options = options or ParseOptions()
        self.eligible_tags: frozenset[str] = frozenset(options.eligible_tags)
        self.content_mode: ContentMode = options.content_mode

    def is_eligible(self, tag_name: str) -> bool:
        return tag_name in self.eligible_tags

    def extract_content(self, document: DocumentAdapter, node: Any) -> str:
        if self.content_mode is ContentMode.RAW_MARKUP:
            return document.inner_markup(node)
        return document.own_text(node).strip()

    def build(self, document: DocumentAdapter, node: Any, level: int = 0) -> list[ParsedItem]:
        """Return the items for ``node``'s children, rooted at ``level``."""
        if not self.eligible_tags:
            return []
        return self._walk(document, node, level, IndentStack(level))

    def _walk(
        self,
        document: DocumentAdapter,
        node: Any,
        level: int,
        stack: IndentStack,
    ) -> list[ParsedItem]:
        items: list[ParsedItem] = []
        for child in document.children(node):
            if document.is_text(child):
                text = document.text_content(child).strip()
                if text:
                    items.append(ParsedItem(tag_name="", content=text, indent_level=level))
                continue

            tag_name = document.tag_name(child)
            if not self.is_eligible(tag_name):
                # Pass-through: splice the wrapper's payload into this scope.
                items.extend(self._walk(document, child, level, stack))
                continue

            content = self.extract_content(document, child)
            new_level = self._resolve_level(content, level, stack)

            # Text-only items are leaves; their text is already the content.
            children: list[ParsedItem] = []
            if document.has_element_children(child):
                children = self._walk(document, child, new_level, IndentStack(new_level))

            items.append(
                ParsedItem(
                    tag_name=tag_name,
                    content=content,
                    indent_level=new_level,
                    children=children,
                )
            )
        return items

    @staticmethod
    def _resolve_level(content: str, level: int, stack: IndentStack) -> int:
        marker = match_marker(content)
        if marker is None:
            return level
        if marker.kind.descends:
            new_level = stack.descend()
        else:
            new_level = stack.return_()
        logger.debug("Marker %r (%s) -> level %d", marker.raw, marker.kind.value, new_level)
        return new_level


def parse_markup(
    markup: str,
    options: ParseOptions | None = None,
    source_url: str | None = None,
) -> ParseResult:
    """Parse raw markup into a ParseResult.

    Raises ParseError if the markup cannot be tokenized. Empty or
    whitespace-only markup yields an empty forest.
    """
    options = options or ParseOptions()
    items: list[ParsedItem] = []
    if not isinstance(markup, str) or markup.strip():
        document = parse_document(markup)
        items = TreeBuilder(options).build(document, document.root, 0)
    total = count_items(items)
    logger.debug(
        "Parsed %d chars into %d items (%d roots, mode=%s)",
        len(markup), total, len(items), options.content_mode.value,
    )
    return ParseResult(
        items=items,
        total_items=total,
        max_depth=max_indent(items),
        content_mode=options.content_mode,
        source_url=source_url,
    )
