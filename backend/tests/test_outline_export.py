from outliner.models.parse_models import ParsedItem
from outliner.services.outline_export import count_items, iter_items, max_indent, to_outline_text


def _forest() -> list[ParsedItem]:
    return [
        ParsedItem(
            tag_name="div",
            content="(1) Scope",
            indent_level=1,
            children=[
                ParsedItem(tag_name="p", content="(a) Detail\n  continued", indent_level=2),
            ],
        ),
        ParsedItem(tag_name="p", content="Closing", indent_level=0),
    ]


def test_iter_items_preorder():
    assert [i.content for i in iter_items(_forest())] == [
        "(1) Scope",
        "(a) Detail\n  continued",
        "Closing",
    ]


def test_count_and_max_indent():
    assert count_items(_forest()) == 3
    assert max_indent(_forest()) == 2


def test_empty_forest():
    assert count_items([]) == 0
    assert max_indent([]) == 0
    assert to_outline_text([]) == ""


def test_outline_text_uses_indent_level():
    text = to_outline_text(_forest())
    assert text.splitlines() == [
        "  (1) Scope",
        "    (a) Detail continued",
        "Closing",
    ]


def test_outline_text_custom_indent():
    text = to_outline_text(_forest(), indent="\t")
    assert text.splitlines()[1] == "\t\t(a) Detail continued"
