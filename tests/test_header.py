import pytest

from pointer_csv.header import HeaderStyle, format_header
from pointer_csv.pointer import parse

POINTERS = [parse("/foo/bar/0/baz"), parse("/id")]


@pytest.mark.parametrize(
    "style, expected",
    [
        (HeaderStyle.POINTER, ["/foo/bar/0/baz", "/id"]),
        (HeaderStyle.SLASH, ["foo/bar/0/baz", "id"]),
        (HeaderStyle.DOT, ["foo.bar.0.baz", "id"]),
        (HeaderStyle.DOT_BRACKET, ["foo.bar[0].baz", "id"]),
    ],
)
def test_format_header(style, expected):
    assert format_header(POINTERS, style) == expected


def test_style_parse_accepts_labels_and_names():
    assert HeaderStyle.parse("dot-bracket") is HeaderStyle.DOT_BRACKET
    assert HeaderStyle.parse("DOT_BRACKET") is HeaderStyle.DOT_BRACKET
    assert HeaderStyle.parse(" Slash ") is HeaderStyle.SLASH
    assert HeaderStyle.parse(HeaderStyle.DOT) is HeaderStyle.DOT


def test_style_parse_rejects_unknown():
    with pytest.raises(ValueError):
        HeaderStyle.parse("brackets")
