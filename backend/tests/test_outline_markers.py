import pytest

from outliner.services.outline_markers import MarkerKind, match_marker


@pytest.mark.parametrize(
    "text, kind, raw",
    [
        ("(1) intro", MarkerKind.NUMERIC_DESCEND, "(1)"),
        ("(12) long number", MarkerKind.NUMERIC_DESCEND, "(12)"),
        ("(a) sub", MarkerKind.LOWER_ALPHA_DESCEND, "(a)"),
        ("(B) upper", MarkerKind.UPPER_ALPHA_DESCEND, "(B)"),
        ("12. back out", MarkerKind.NUMERIC_RETURN, "12."),
        ("3.", MarkerKind.NUMERIC_RETURN, "3."),
    ],
)
def test_marker_kinds(text, kind, raw):
    marker = match_marker(text)
    assert marker is not None
    assert marker.kind is kind
    assert marker.raw == raw


def test_leading_whitespace_ignored():
    marker = match_marker("   \n (c) indented")
    assert marker is not None
    assert marker.kind is MarkerKind.LOWER_ALPHA_DESCEND


def test_no_marker():
    assert match_marker("Plain paragraph") is None
    assert match_marker("") is None


def test_multi_letter_parenthesized_not_a_marker():
    assert match_marker("(ab) nope") is None
    assert match_marker("(ii) roman") is None


def test_decimal_number_is_not_a_return():
    """'1.2' is a decimal, not a dedent marker."""
    assert match_marker("1.2 million") is None


def test_marker_must_be_at_start():
    assert match_marker("see (1) above") is None
    assert match_marker("Section 12. text") is None


def test_only_first_prefix_consumed():
    marker = match_marker("(1)(a) both")
    assert marker.kind is MarkerKind.NUMERIC_DESCEND
    assert marker.raw == "(1)"


def test_markup_prefix_does_not_match():
    """In raw-markup mode a leading tag hides the marker."""
    assert match_marker("<em>(a)</em> heading") is None


def test_descends_property():
    assert MarkerKind.NUMERIC_DESCEND.descends
    assert MarkerKind.UPPER_ALPHA_DESCEND.descends
    assert not MarkerKind.NUMERIC_RETURN.descends
