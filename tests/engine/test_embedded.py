# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : test_embedded.py
#   file_relpath : tests/engine/test_embedded.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Embedded ``<script>``/``<style>`` helpers: dialect guessing and the default formatter."""

from __future__ import annotations

import json

import pytest

from prettymarkup.engine.embedded import (
    DefaultEmbeddedFormatter,
    EmbeddedFormatter,
    escape_script_end_tags,
    guess_dialect,
    indent_formatted,
)
from prettymarkup.tree.nodes import Element
from tests.conftest import parametrize


@parametrize(
    ("attributes", "expected"),
    [
        ({}, "babel"),
        ({"type": "text/javascript"}, "babel"),
        ({"type": "module"}, "babel"),
        ({"type": " Text/JavaScript "}, "babel"),
        ({"type": "application/json"}, "json"),
        ({"type": "application/ld+json"}, "json"),
        ({"type": "importmap+json"}, "json"),
        ({"type": "application/x-typescript"}, "typescript"),
        ({"lang": "ts"}, "typescript"),
        ({"lang": "tsx"}, "typescript"),
        ({"type": "text/x-template"}, None),
        ({"type": "text/html"}, None),
    ],
)
def test_script_dialects(attributes: dict[str, str | None], expected: str | None) -> None:
    assert guess_dialect(Element("script", attributes)) == expected


@parametrize(
    ("attributes", "expected"),
    [
        ({}, "css"),
        ({"type": "text/css"}, "css"),
        ({"type": "text/x-scss"}, "scss"),
        ({"type": "text/less"}, "less"),
        ({"lang": "scss"}, "scss"),
        ({"lang": "less"}, "less"),
        ({"lang": "stylus"}, "css"),
    ],
)
def test_style_dialects(attributes: dict[str, str | None], expected: str) -> None:
    assert guess_dialect(Element("style", attributes)) == expected


def test_other_elements_have_no_dialect() -> None:
    assert guess_dialect(Element("pre")) is None
    assert guess_dialect(Element("div", {"type": "application/json"})) is None


def test_bare_type_attribute_is_javascript() -> None:
    assert guess_dialect(Element("script", {"type": None})) == "babel"


def test_default_formatter_matches_protocol() -> None:
    assert isinstance(DefaultEmbeddedFormatter(), EmbeddedFormatter)


def test_default_formatter_pretty_prints_json() -> None:
    out: str = DefaultEmbeddedFormatter()('{"a":1,"b":[1,2]}', "json", {"indent_unit": "  "})
    assert out == '{\n  "a": 1,\n  "b": [\n    1,\n    2\n  ]\n}\n'
    assert json.loads(out) == {"a": 1, "b": [1, 2]}


def test_default_formatter_uses_tab_indent_unit() -> None:
    out: str = DefaultEmbeddedFormatter()('{"a":1}', "json", {"indent_unit": "\t"})
    assert out == '{\n\t"a": 1\n}\n'


def test_default_formatter_rejects_invalid_json() -> None:
    with pytest.raises(json.JSONDecodeError):
        DefaultEmbeddedFormatter()("{not json", "json", {})


def test_default_formatter_dedents_code() -> None:
    source: str = "\n\n      var a = 1;   \n      if (a) {\n        go();\n      }\n\n"
    out: str = DefaultEmbeddedFormatter()(source, "babel", {})
    assert out == "var a = 1;\nif (a) {\n  go();\n}\n"


def test_default_formatter_blank_input() -> None:
    assert DefaultEmbeddedFormatter()("  \n \n", "css", {}) == ""


def test_indent_formatted_skips_blank_lines() -> None:
    assert indent_formatted("a\n\nb\n", 2, "  ") == "    a\n\n    b\n"
    assert indent_formatted("a", -1, "  ") == "a"


@parametrize(
    ("text", "expected"),
    [
        ("x = '</script>';", "x = '<\\/script>';"),
        ("x = '</SCRIPT >';", "x = '<\\/script>';"),
        ("x = '</scripts>';", "x = '</scripts>';"),
    ],
)
def test_escape_script_end_tags(text: str, expected: str) -> None:
    assert escape_script_end_tags(text) == expected
