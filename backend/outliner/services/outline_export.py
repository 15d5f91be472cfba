from __future__ import annotations

from collections.abc import Iterator

from outliner.models.parse_models import ParsedItem


def iter_items(items: list[ParsedItem]) -> Iterator[ParsedItem]:
    """Yield every item in the forest in pre-order (document order)."""
    for item in items:
        yield item
        if item.children:
            yield from iter_items(item.children)


def count_items(items: list[ParsedItem]) -> int:
    return sum(1 for _ in iter_items(items))


def max_indent(items: list[ParsedItem]) -> int:
    return max((item.indent_level for item in iter_items(items)), default=0)


def to_outline_text(items: list[ParsedItem], indent: str = "  ") -> str:
    """Render the forest as indented plain text, one item per line.

    Each line is indented by the item's computed indent level, not its depth
    in the forest. Multi-line content is collapsed onto a single line.
    """
    lines = []
    for item in iter_items(items):
        text = " ".join(item.content.split())
        lines.append(f"{indent * item.indent_level}{text}")
    return "\n".join(lines)
