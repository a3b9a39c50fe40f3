# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : test_writer.py
#   file_relpath : tests/tree/test_writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markup writer: attribute quoting, attribute wrapping and node serialization."""

from __future__ import annotations

from prettymarkup.tree.nodes import AnnotationTable, Comment, Doctype, Element, Root, Text
from prettymarkup.tree.writer import MarkupWriter, format_attributes, quote_attribute, serialize
from tests.conftest import make_config, parametrize, reformat


@parametrize(
    ("value", "single_quote", "expected"),
    [
        ("a", False, '"a"'),
        ("a", True, "'a'"),
        ('say "hi"', False, "'say \"hi\"'"),
        ("it's", True, '"it\'s"'),
        ("it's \"x\"", False, '"it\'s &quot;x&quot;"'),
        ("it's \"x\"", True, "'it&#39;s \"x\"'"),
        ("a&b", False, '"a&b"'),
        ("&copy;", False, '"&amp;copy;"'),
        ("?q=1&amp=2", False, '"?q=1&amp=2"'),
    ],
)
def test_quote_attribute(value: str, single_quote: bool, expected: str) -> None:
    assert quote_attribute(value, single_quote=single_quote) == expected


def test_format_attributes_keeps_order_and_bare_names() -> None:
    element = Element("input", {"type": "checkbox", "checked": None, "name": "x"})
    assert format_attributes(element, single_quote=False) == [
        'type="checkbox"',
        "checked",
        'name="x"',
    ]


def test_serializes_every_node_kind() -> None:
    root = Root(
        [
            Doctype("html"),
            Comment(" c "),
            Element("p", {"class": "x"}, [Text("a &amp; b")]),
            Element("br"),
        ]
    )
    out: str = serialize(root, AnnotationTable(), make_config())
    assert out == '<!DOCTYPE html><!-- c --><p class="x">a &amp; b</p><br>'


def test_void_elements_have_no_end_tag() -> None:
    writer = MarkupWriter(make_config())
    assert writer.serialize(Root([Element("IMG", {"src": "a"})]), AnnotationTable()) == (
        '<IMG src="a">'
    )


def test_long_start_tags_wrap_attributes() -> None:
    element = Element("a", {"href": "https://example.com/" + "x" * 40, "title": "y" * 30})
    root = Root([Element("div", children=[element])])
    annotations = AnnotationTable()
    annotations.record(element, 1)

    out: str = MarkupWriter(make_config()).serialize(root, annotations)

    assert out == (
        "<div><a\n"
        f'    href="https://example.com/{"x" * 40}"\n'
        f'    title="{"y" * 30}"\n'
        "  ></a></div>"
    )


def test_single_attribute_never_wraps() -> None:
    element = Element("a", {"href": "x" * 200})
    out: str = MarkupWriter(make_config()).serialize(Root([element]), AnnotationTable())
    assert out == f'<a href="{"x" * 200}"></a>'


def test_print_width_is_configurable() -> None:
    element = Element("img", {"src": "a.png", "alt": "b"})
    annotations = AnnotationTable()
    annotations.record(element, 0)
    narrow = MarkupWriter(make_config(print_width=10))
    assert narrow.serialize(Root([element]), annotations) == (
        '<img\n  src="a.png"\n  alt="b"\n>'
    )


def test_tab_indented_wrapping_counts_tab_width() -> None:
    writer = MarkupWriter(make_config(use_tabs=True, tab_width=8))
    assert writer.column_width(2) == 16
    assert MarkupWriter(make_config(tab_width=3)).column_width(2) == 6


def test_first_linefeed_of_pre_is_restored() -> None:
    pre = Element("pre", children=[Text("\nx")])
    writer = MarkupWriter(make_config(ignore_first_lf=True))
    assert writer.serialize(Root([pre]), AnnotationTable()) == "<pre>\n\nx</pre>"


def test_pre_content_round_trips_in_both_modes() -> None:
    source: str = "<pre>\n\n  x\n</pre>\n"
    assert reformat(source) == source
    assert reformat(source, ignore_first_lf=True) == source


def test_single_quote_style_end_to_end() -> None:
    assert reformat('<a href="x" title="it\'s">y</a>', single_quote=True) == (
        "<a href='x' title=\"it's\">y</a>\n"
    )


@parametrize(
    "source",
    [
        "<textarea><p>hi</textarea>\n",
        "<title>a <b> c</title>\n",
        "<textarea>x &amp; y <br></textarea>\n",
    ],
)
def test_raw_text_content_round_trips(source: str) -> None:
    assert reformat(source) == source


_LONG_ATTRIBUTES: str = f'data-first="{"a" * 40}" data-second="{"b" * 40}"'


def test_ignored_subtree_is_never_wrapped() -> None:
    protected: str = f"<section><span {_LONG_ATTRIBUTES}>x</span></section>"
    out: str = reformat(f"<div><!-- prettymarkup-ignore -->{protected}</div>")
    assert protected in out


def test_elements_inside_pre_are_never_wrapped() -> None:
    content: str = f"<pre><b {_LONG_ATTRIBUTES}>x</b></pre>"
    out: str = reformat(f"<div>{content}</div>")
    assert content in out


def test_formatted_elements_still_wrap() -> None:
    out: str = reformat(f"<div><span {_LONG_ATTRIBUTES}>x</span></div>")
    assert "<span\n" in out
    assert f'\n    data-second="{"b" * 40}"\n' in out


def test_ignored_element_start_tag_is_kept_inline() -> None:
    protected: str = f"<span {_LONG_ATTRIBUTES}>x</span>"
    out: str = reformat(f"<div><!-- prettymarkup-ignore -->{protected}</div>")
    assert protected in out
